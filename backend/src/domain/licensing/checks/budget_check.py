"""Budget check with a two-tier policy.

Unverified brands have a hard ceiling on total committed fees; verified
brands have no ceiling but very large single fees are flagged for approval.
"""

from domain.licensing.models import CheckResult, LicenseCandidate, ValidationContext
from domain.licensing.policy import (
    UNVERIFIED_BRAND_LIMIT_CENTS,
    VERIFIED_HIGH_AMOUNT_CENTS,
    format_cents,
)
from domain.licensing.port import LicenseCheck


class BudgetCheck(LicenseCheck):
    """Validates the proposed fee against the brand's budget tier."""

    name = "budget"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name)
        brand = context.brand

        if candidate.fee_cents <= 0:
            result.warnings.append(
                f"License fee is {format_cents(candidate.fee_cents)} - budget validation skipped"
            )
            result.details = {"skipped": True, "requested_fee_cents": candidate.fee_cents}
            return result

        committed = brand.committed_budget_cents
        total = committed + candidate.fee_cents

        if not brand.is_verified:
            if total > UNVERIFIED_BRAND_LIMIT_CENTS:
                result.errors.append(
                    f"Budget limit exceeded: Unverified brands are limited to "
                    f"{format_cents(UNVERIFIED_BRAND_LIMIT_CENTS)} in total license fees. "
                    f"Current committed: {format_cents(committed)}, "
                    f"Requested: {format_cents(candidate.fee_cents)}"
                )
        elif candidate.fee_cents > VERIFIED_HIGH_AMOUNT_CENTS:
            result.warnings.append(
                f"High license fee: {format_cents(candidate.fee_cents)} requires additional approval"
            )

        result.details = {
            "skipped": False,
            "brand_id": brand.id,
            "brand_name": brand.name,
            "is_verified": brand.is_verified,
            "committed_budget_cents": committed,
            "requested_fee_cents": candidate.fee_cents,
            "total_with_new_license_cents": total,
            "limit_cents": None if brand.is_verified else UNVERIFIED_BRAND_LIMIT_CENTS,
        }
        return result
