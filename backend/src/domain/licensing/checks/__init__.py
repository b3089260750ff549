"""License check implementations.

Each module contains one LicenseCheck whose evaluate() returns a CheckResult.
"""

from .interval_check import IntervalOverlapCheck
from .exclusivity_check import ExclusivityCheck
from .scope_check import ScopeConflictCheck
from .budget_check import BudgetCheck
from .ownership_check import OwnershipCheck
from .approval_check import ApprovalRequirementCheck

__all__ = [
    "IntervalOverlapCheck",
    "ExclusivityCheck",
    "ScopeConflictCheck",
    "BudgetCheck",
    "OwnershipCheck",
    "ApprovalRequirementCheck",
]
