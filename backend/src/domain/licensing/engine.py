"""LicenseValidationEngine - orchestrates the license checks"""

from typing import Optional, Sequence
import logging

from .checks import (
    ApprovalRequirementCheck,
    BudgetCheck,
    ExclusivityCheck,
    IntervalOverlapCheck,
    OwnershipCheck,
    ScopeConflictCheck,
)
from .exceptions import ValidationContextError
from .models import CheckResult, LicenseCandidate, ValidationContext, ValidationReport
from .port import LicenseCheck, LicenseValidatorPort


logger = logging.getLogger(__name__)


def default_checks() -> list[LicenseCheck]:
    """The standard check pipeline, in reporting order."""
    return [
        IntervalOverlapCheck(),
        ExclusivityCheck(),
        ScopeConflictCheck(),
        BudgetCheck(),
        OwnershipCheck(),
        ApprovalRequirementCheck(),
    ]


class LicenseValidationEngine(LicenseValidatorPort):
    """Concrete implementation of LicenseValidatorPort.

    Runs every check against the same immutable context and aggregates the
    results. The engine holds no per-call state, so one instance can be
    shared and invoked concurrently.

    A passing report is advisory: the caller must still serialize license
    creation per asset and re-assert exclusivity and share-sum invariants
    when committing.
    """

    def __init__(self, checks: Optional[Sequence[LicenseCheck]] = None):
        self._checks = list(checks) if checks is not None else default_checks()

        names = [check.name for check in self._checks]
        if len(set(names)) != len(names):
            raise ValueError(f"Check names must be unique: {names}")

    @property
    def checks(self) -> list[LicenseCheck]:
        return list(self._checks)

    def validate(self, candidate: LicenseCandidate, context: ValidationContext) -> ValidationReport:
        """Run all checks for a candidate license.

        Business-rule violations never raise; they are returned as errors
        and warnings on the per-check results. Only an unusable context
        raises.

        Args:
            candidate: Proposed license
            context: Pre-fetched asset, brand and existing licenses

        Returns:
            ValidationReport with per-check results and overall_passed

        Raises:
            ValidationContextError: If the context is missing required data
        """
        self._ensure_context(candidate, context)

        results: dict[str, CheckResult] = {}
        for check in self._checks:
            result = check.evaluate(candidate, context)
            results[check.name] = result
            logger.debug(
                f"License check '{check.name}' for asset {candidate.ip_asset_id}: "
                f"{len(result.errors)} errors, {len(result.warnings)} warnings"
            )

        overall_passed = all(result.passed for result in results.values() if result.blocking)

        report = ValidationReport(
            checks=results,
            overall_passed=overall_passed,
            evaluated_at=context.evaluated_at,
        )

        logger.info(
            f"License validation for asset {candidate.ip_asset_id} and brand {candidate.brand_id}: "
            f"passed={overall_passed}, errors={len(report.all_errors)}, "
            f"warnings={len(report.all_warnings)}",
            extra={"asset_id": candidate.ip_asset_id, "brand_id": candidate.brand_id}
        )

        return report

    def _ensure_context(self, candidate: LicenseCandidate, context: ValidationContext) -> None:
        if context is None:
            raise ValidationContextError("Validation context is required")
        if context.asset is None:
            raise ValidationContextError(f"IP asset {candidate.ip_asset_id} was not loaded")
        if context.brand is None:
            raise ValidationContextError(f"Brand {candidate.brand_id} was not loaded")
        if context.evaluated_at is None:
            raise ValidationContextError("Validation context has no evaluation time")
        if context.asset.id != candidate.ip_asset_id:
            raise ValidationContextError(
                f"Context asset {context.asset.id} does not match candidate asset "
                f"{candidate.ip_asset_id}"
            )
        if context.brand.id != candidate.brand_id:
            raise ValidationContextError(
                f"Context brand {context.brand.id} does not match candidate brand "
                f"{candidate.brand_id}"
            )
