"""Date overlap check.

Rules:
- end must be after start (short-circuits everything else)
- a start in the past is a warning
- overlap with an EXCLUSIVE license on either side is an error
- overlap between two NON_EXCLUSIVE licenses is a warning
- EXCLUSIVE_TERRITORY overlaps are resolved by the exclusivity check
"""

from domain.licensing.models import (
    CheckResult,
    Conflict,
    ConflictReason,
    LicenseCandidate,
    LicenseType,
    ValidationContext,
)
from domain.licensing.overlap import format_period, overlapping_licenses, relevant_licenses
from domain.licensing.port import LicenseCheck


class IntervalOverlapCheck(LicenseCheck):
    """Checks the candidate's term against existing license terms."""

    name = "date_overlap"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name)

        if candidate.end_date <= candidate.start_date:
            result.errors.append("End date must be after start date")
            result.details = {"overlapping_licenses": 0, "overlapping_license_ids": []}
            return result

        if candidate.start_date < context.evaluated_at:
            result.warnings.append("License start date is in the past")

        overlapping = overlapping_licenses(candidate, relevant_licenses(candidate, context))

        for existing in overlapping:
            period = format_period(existing.start_date, existing.end_date)

            if (candidate.license_type == LicenseType.EXCLUSIVE
                    or existing.license_type == LicenseType.EXCLUSIVE):
                result.errors.append(
                    f"Date overlap conflict: {existing.license_type.value.lower()} license "
                    f"exists for {existing.brand_name} from {period}"
                )
                result.conflicts.append(Conflict(
                    license_id=existing.id,
                    brand_id=existing.brand_id,
                    brand_name=existing.brand_name,
                    reason=ConflictReason.DATE_OVERLAP,
                    details=(
                        f"License dates overlap with existing {existing.license_type.value.lower()} "
                        f"license for {existing.brand_name} ({period})"
                    )
                ))
            elif (candidate.license_type == LicenseType.NON_EXCLUSIVE
                    and existing.license_type == LicenseType.NON_EXCLUSIVE):
                result.warnings.append(
                    f"Non-exclusive license overlap detected with {existing.brand_name} "
                    f"({existing.id}). Verify scope compatibility."
                )
            # EXCLUSIVE_TERRITORY pairs depend on territory math

        result.details = {
            "overlapping_licenses": len(overlapping),
            "overlapping_license_ids": [existing.id for existing in overlapping],
        }
        return result
