"""Approval requirement check.

Informational only: derives who must sign off before activation and never
produces errors. All rules are additive.
"""

from domain.licensing.checks.ownership_check import effective_ownerships
from domain.licensing.models import (
    Approver,
    ApproverType,
    CheckResult,
    LicenseCandidate,
    LicenseType,
    ValidationContext,
)
from domain.licensing.policy import HIGH_VALUE_APPROVAL_CENTS, LONG_DURATION_DAYS, format_cents
from domain.licensing.port import LicenseCheck


HIGH_VALUE_REVIEW = "high_value_review"
EXCLUSIVITY_REVIEW = "exclusivity_review"
BRAND_VERIFICATION_REVIEW = "brand_verification_review"

EXCLUSIVE_TYPES = frozenset({LicenseType.EXCLUSIVE, LicenseType.EXCLUSIVE_TERRITORY})


class ApprovalRequirementCheck(LicenseCheck):
    """Routes a license to the approvers it needs."""

    name = "approval_requirements"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name, blocking=False)
        approvers: list[Approver] = []
        reasons: list[str] = []

        # Creators approve every license
        reasons.append("Creator approval required for all licenses")
        for ownership in effective_ownerships(candidate, context.asset.ownerships):
            approvers.append(Approver(
                type=ApproverType.CREATOR,
                identity=ownership.creator_id,
                name=ownership.creator_name,
                reason="asset owner",
            ))

        if candidate.fee_cents >= HIGH_VALUE_APPROVAL_CENTS:
            reason = (
                f"High-value license ({format_cents(candidate.fee_cents)}) requires admin approval"
            )
            reasons.append(reason)
            approvers.append(Approver(ApproverType.ADMIN, HIGH_VALUE_REVIEW, reason=reason))

        if candidate.license_type in EXCLUSIVE_TYPES:
            reason = "Exclusive licenses require creator and admin approval"
            reasons.append(reason)
            approvers.append(Approver(ApproverType.ADMIN, EXCLUSIVITY_REVIEW, reason=reason))

        if not context.brand.is_verified:
            reason = "Unverified brands require admin approval for all licenses"
            reasons.append(reason)
            approvers.append(Approver(ApproverType.ADMIN, BRAND_VERIFICATION_REVIEW, reason=reason))

        if (candidate.scope.territory.is_global
                and candidate.license_type == LicenseType.EXCLUSIVE):
            result.warnings.append("Global exclusive license requires admin review")

        duration_days = (candidate.end_date - candidate.start_date).total_seconds() / 86400
        if duration_days > LONG_DURATION_DAYS:
            result.warnings.append(
                f"Long-duration license ({round(duration_days)} days) may require additional approval"
            )

        if candidate.fee_cents > 0 and candidate.rev_share_bps > 0:
            result.warnings.append(
                "Hybrid pricing model (fixed fee + revenue share) requires careful review"
            )

        unique_approvers = _deduplicate(approvers)

        result.details = {
            "approval_required": True,
            "reasons": reasons,
            "approvers": [a.to_dict() for a in unique_approvers],
            "brand_verified": context.brand.is_verified,
            "license_type": candidate.license_type.value,
            "fee_cents": candidate.fee_cents,
            "duration_days": round(duration_days),
        }
        return result


def _deduplicate(approvers: list[Approver]) -> list[Approver]:
    """Keep the first approver per (type, identity), preserving order."""
    seen = set()
    unique = []
    for approver in approvers:
        if approver.key in seen:
            continue
        seen.add(approver.key)
        unique.append(approver)
    return unique
