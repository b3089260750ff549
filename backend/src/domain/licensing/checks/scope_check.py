"""Usage scope check.

Plain media or placement overlap between licenses is expected and only
warned about; an exact duplicate of an existing scope is an error because it
amounts to granting the same usage twice.
"""

from domain.licensing.models import (
    CheckResult,
    Conflict,
    ConflictReason,
    LicenseCandidate,
    LicenseScope,
    ValidationContext,
)
from domain.licensing.overlap import (
    is_identical_scope,
    media_overlap,
    overlapping_licenses,
    placement_overlap,
    relevant_licenses,
)
from domain.licensing.policy import VALID_ASPECT_RATIOS
from domain.licensing.port import LicenseCheck


class ScopeConflictCheck(LicenseCheck):
    """Validates scope structure and collisions with existing grants."""

    name = "scope_conflict"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name)
        scope = candidate.scope

        if not scope.media.selected():
            result.errors.append("At least one media type must be selected")
        if not scope.placement.selected():
            result.errors.append("At least one placement must be selected")

        self._check_cutdowns(scope, result)

        overlapping = overlapping_licenses(candidate, relevant_licenses(candidate, context))
        scope_overlaps = []

        for existing in overlapping:
            media = media_overlap(scope, existing.scope)
            placements = placement_overlap(scope, existing.scope)

            if media:
                result.warnings.append(
                    f"Media overlap with {existing.brand_name}: {', '.join(media)}"
                )
            if placements:
                result.warnings.append(
                    f"Placement overlap with {existing.brand_name}: {', '.join(placements)}"
                )
            if media or placements:
                scope_overlaps.append({
                    "license_id": existing.id,
                    "media": media,
                    "placements": placements,
                })

            if is_identical_scope(scope, existing.scope):
                result.errors.append(
                    f"Complete scope conflict: Identical usage scope already licensed to "
                    f"{existing.brand_name}"
                )
                result.conflicts.append(Conflict(
                    license_id=existing.id,
                    brand_id=existing.brand_id,
                    brand_name=existing.brand_name,
                    reason=ConflictReason.SCOPE_DUPLICATE,
                    details=f"Identical scope already licensed to {existing.brand_name}"
                ))

            ours, theirs = scope.attribution, existing.scope.attribution
            if (ours.required and theirs.required
                    and ours.format and theirs.format
                    and ours.format != theirs.format):
                result.warnings.append(
                    f"Different attribution requirements exist with {existing.brand_name}'s license"
                )

        result.details = {
            "media": scope.media.selected(),
            "placements": scope.placement.selected(),
            "territories": scope.territory.names(),
            "scope_overlaps": scope_overlaps,
        }
        return result

    def _check_cutdowns(self, scope: LicenseScope, result: CheckResult) -> None:
        cutdowns = scope.cutdowns
        if not cutdowns.allow_edits:
            return

        invalid = [r for r in cutdowns.aspect_ratios if r not in VALID_ASPECT_RATIOS]
        if invalid:
            result.warnings.append(f"Invalid aspect ratios specified: {', '.join(invalid)}")

        if cutdowns.max_duration_seconds is not None and cutdowns.max_duration_seconds <= 0:
            result.errors.append("Maximum duration must be greater than 0 seconds")
