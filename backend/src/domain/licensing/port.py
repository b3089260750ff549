"""Port interfaces for the license validation engine (hexagonal architecture)"""

from abc import ABC, abstractmethod

from .models import CheckResult, LicenseCandidate, ValidationContext, ValidationReport


class LicenseCheck(ABC):
    """A single independently evaluable validation rule set.

    Implementations must be pure: they read the candidate and the context
    and return a CheckResult without mutating either.
    """

    name: str = ""

    @abstractmethod
    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        """Evaluate the candidate against the pre-fetched context.

        Args:
            candidate: Proposed license
            context: Snapshot of asset, brand and existing licenses

        Returns:
            CheckResult with errors, warnings and structured details
        """
        pass


class LicenseValidatorPort(ABC):
    """Port interface for license validation services."""

    @abstractmethod
    def validate(self, candidate: LicenseCandidate, context: ValidationContext) -> ValidationReport:
        """Run every check and aggregate the results into one report."""
        pass
