"""Licensing domain module for LicenseFlow.

This module implements the license validation and conflict detection engine:
six checks (date overlap, exclusivity, scope conflict, budget, ownership,
approval requirements) run against a pre-fetched snapshot and aggregated
into one ValidationReport.
"""

from .models import (
    AssetStatus,
    Approver,
    ApproverType,
    AttributionTerms,
    Brand,
    CheckResult,
    Conflict,
    ConflictReason,
    CutdownTerms,
    ExclusivityTerms,
    ExistingLicense,
    IPAsset,
    LicenseCandidate,
    LicenseScope,
    LicenseStatus,
    LicenseType,
    MediaScope,
    OwnershipRecord,
    OwnershipType,
    PlacementScope,
    TerritoryScope,
    ValidationContext,
    ValidationReport,
)
from .exceptions import LicenseValidationError, ValidationContextError
from .port import LicenseCheck, LicenseValidatorPort
from .engine import LicenseValidationEngine, default_checks

__all__ = [
    "AssetStatus",
    "Approver",
    "ApproverType",
    "AttributionTerms",
    "Brand",
    "CheckResult",
    "Conflict",
    "ConflictReason",
    "CutdownTerms",
    "ExclusivityTerms",
    "ExistingLicense",
    "IPAsset",
    "LicenseCandidate",
    "LicenseScope",
    "LicenseStatus",
    "LicenseType",
    "MediaScope",
    "OwnershipRecord",
    "OwnershipType",
    "PlacementScope",
    "TerritoryScope",
    "ValidationContext",
    "ValidationReport",
    "LicenseValidationError",
    "ValidationContextError",
    "LicenseCheck",
    "LicenseValidatorPort",
    "LicenseValidationEngine",
    "default_checks",
]
