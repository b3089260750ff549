"""Exclusivity check.

Exclusivity is checked on four independent axes and every violation is
collected, so a single run gives the caller the complete conflict picture:

- temporal: a candidate EXCLUSIVE license cannot coexist with anything, and
  an existing EXCLUSIVE license blocks everything during its term
- territorial: EXCLUSIVE_TERRITORY licenses block overlapping territories
- categorical: two licenses may not claim the same exclusivity category
- competitor: an existing license may block specific brands outright,
  independent of dates and license type
"""

from domain.licensing.models import (
    CheckResult,
    Conflict,
    ConflictReason,
    LicenseCandidate,
    LicenseType,
    ValidationContext,
)
from domain.licensing.overlap import overlapping_licenses, relevant_licenses, territory_overlap
from domain.licensing.port import LicenseCheck


class ExclusivityCheck(LicenseCheck):
    """Enforces exclusivity semantics beyond plain date overlap."""

    name = "exclusivity"

    def evaluate(self, candidate: LicenseCandidate, context: ValidationContext) -> CheckResult:
        result = CheckResult(name=self.name)

        relevant = relevant_licenses(candidate, context)
        # An inverted term was already reported by the date check; nothing overlaps it
        overlapping = overlapping_licenses(candidate, relevant)

        self._check_full_exclusivity(candidate, overlapping, result)
        territory_conflicts = self._check_territories(candidate, overlapping, result)
        self._check_categories(candidate, overlapping, result)
        self._check_competitors(candidate, relevant, result)

        result.details = {
            "overlapping_licenses": len(overlapping),
            "territory_conflicts": territory_conflicts,
        }
        return result

    def _check_full_exclusivity(self, candidate, overlapping, result: CheckResult) -> None:
        if candidate.license_type == LicenseType.EXCLUSIVE and overlapping:
            brands = ", ".join(sorted({existing.brand_name for existing in overlapping}))
            result.errors.append(
                f"Cannot grant exclusive license: {len(overlapping)} active/pending "
                f"license(s) exist during this period ({brands})"
            )
            for existing in overlapping:
                result.conflicts.append(Conflict(
                    license_id=existing.id,
                    brand_id=existing.brand_id,
                    brand_name=existing.brand_name,
                    reason=ConflictReason.EXCLUSIVE_OVERLAP,
                    details=(
                        f"Cannot grant exclusive license: {existing.license_type.value.lower()} "
                        f"license already exists for {existing.brand_name} during this period"
                    )
                ))

        for existing in overlapping:
            if existing.license_type != LicenseType.EXCLUSIVE:
                continue
            result.errors.append(
                f"Exclusive license conflict: {existing.brand_name} holds exclusive rights "
                f"during this period"
            )
            result.conflicts.append(Conflict(
                license_id=existing.id,
                brand_id=existing.brand_id,
                brand_name=existing.brand_name,
                reason=ConflictReason.EXCLUSIVE_OVERLAP,
                details=f"Exclusive license already exists for {existing.brand_name} during this period"
            ))

    def _check_territories(self, candidate, overlapping, result: CheckResult) -> list[dict]:
        territory_conflicts = []

        for existing in overlapping:
            if LicenseType.EXCLUSIVE_TERRITORY not in (candidate.license_type, existing.license_type):
                continue

            shared = territory_overlap(candidate.scope.territory, existing.scope.territory)
            if shared.is_empty:
                continue

            territories = shared.names()
            joined = ", ".join(territories)
            result.errors.append(
                f"Territory exclusivity conflict: Overlapping territories with "
                f"{existing.brand_name} ({joined})"
            )
            result.conflicts.append(Conflict(
                license_id=existing.id,
                brand_id=existing.brand_id,
                brand_name=existing.brand_name,
                reason=ConflictReason.TERRITORY_OVERLAP,
                details=f"Exclusive territory conflict with {existing.brand_name}: {joined}"
            ))
            territory_conflicts.append({"license_id": existing.id, "territories": territories})

        return territory_conflicts

    def _check_categories(self, candidate, overlapping, result: CheckResult) -> None:
        category = candidate.scope.exclusivity.category
        if not category:
            return

        for existing in overlapping:
            if existing.scope.exclusivity.category != category:
                continue
            result.errors.append(
                f"Category exclusivity conflict: {existing.brand_name} already has exclusive "
                f"rights in {category} category"
            )
            result.conflicts.append(Conflict(
                license_id=existing.id,
                brand_id=existing.brand_id,
                brand_name=existing.brand_name,
                reason=ConflictReason.CATEGORY_OVERLAP,
                details=f"Both licenses claim exclusivity in {category} category"
            ))

    def _check_competitors(self, candidate, relevant, result: CheckResult) -> None:
        for existing in relevant:
            if candidate.brand_id not in existing.scope.exclusivity.competitors:
                continue
            result.errors.append(
                f"Competitor exclusivity conflict: brand {candidate.brand_id} is blocked by "
                f"{existing.brand_name}'s license terms"
            )
            result.conflicts.append(Conflict(
                license_id=existing.id,
                brand_id=existing.brand_id,
                brand_name=existing.brand_name,
                reason=ConflictReason.COMPETITOR_BLOCKED,
                details=f"Brand is blocked as a competitor by existing license for {existing.brand_name}"
            ))
