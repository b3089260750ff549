"""Unit tests for the exclusivity check

Tests cover:
- Full exclusivity (candidate and existing side)
- Territorial exclusivity with set intersection and GLOBAL
- Category exclusivity
- Competitor blocking independent of dates
- Collection of violations across axes
"""

import pytest

from domain.licensing import ConflictReason, LicenseType
from domain.licensing.checks import ExclusivityCheck
from fixtures.licensing import dt, make_candidate, make_context, make_existing, make_scope


class TestFullExclusivity:
    """Test EXCLUSIVE license semantics"""

    def test_exclusive_candidate_counts_overlapping_licenses(self):
        candidate = make_candidate(license_type=LicenseType.EXCLUSIVE)
        context = make_context(existing=[
            make_existing(id="l1", brand_name="Acme Apparel"),
            make_existing(id="l2", brand_name="Initech"),
        ])

        result = ExclusivityCheck().evaluate(candidate, context)

        assert not result.passed
        assert result.errors[0].startswith("Cannot grant exclusive license: 2 active/pending license(s) exist")
        assert "Acme Apparel" in result.errors[0]
        assert "Initech" in result.errors[0]
        assert [c.license_id for c in result.conflicts] == ["l1", "l2"]

    @pytest.mark.parametrize("candidate_type", list(LicenseType))
    def test_existing_exclusive_blocks_every_kind(self, candidate_type):
        candidate = make_candidate(license_type=candidate_type, scope=make_scope(territories=("DE",)))
        existing = make_existing(
            license_type=LicenseType.EXCLUSIVE,
            brand_name="Globex",
            scope=make_scope(territories=("US",)),
        )

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        assert any("Globex holds exclusive rights" in e for e in result.errors)

    def test_exclusive_candidate_without_overlap_passes(self):
        candidate = make_candidate(
            license_type=LicenseType.EXCLUSIVE,
            start_date=dt(2027, 1, 1),
            end_date=dt(2027, 12, 31),
        )
        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[make_existing()]))
        assert result.passed

    def test_moving_intervals_apart_removes_the_error(self):
        existing = make_existing(license_type=LicenseType.EXCLUSIVE)
        overlapping = make_candidate(start_date=dt(2025, 6, 1), end_date=dt(2025, 9, 1))
        apart = make_candidate(start_date=dt(2026, 6, 1), end_date=dt(2026, 9, 1))
        context = make_context(existing=[existing])

        assert not ExclusivityCheck().evaluate(overlapping, context).passed
        assert ExclusivityCheck().evaluate(apart, context).passed


class TestTerritorialExclusivity:
    """Test EXCLUSIVE_TERRITORY overlap handling"""

    def test_overlapping_territories_name_the_shared_codes(self):
        candidate = make_candidate(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            scope=make_scope(territories=("CA", "MX")),
        )
        existing = make_existing(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            brand_name="Acme Apparel",
            scope=make_scope(territories=("US", "CA")),
        )

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        assert len(result.errors) == 1
        assert "(CA)" in result.errors[0]
        assert "Acme Apparel" in result.errors[0]
        assert result.conflicts[0].reason == ConflictReason.TERRITORY_OVERLAP
        assert result.details["territory_conflicts"] == [{"license_id": "license-1", "territories": ["CA"]}]

    def test_disjoint_territories_pass(self):
        candidate = make_candidate(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            scope=make_scope(territories=("DE",)),
        )
        existing = make_existing(scope=make_scope(territories=("US", "CA")))

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        assert result.passed

    def test_global_existing_conflicts_with_any_territory(self):
        candidate = make_candidate(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            scope=make_scope(territories=("DE", "FR")),
        )
        existing = make_existing(scope=make_scope(territories=("GLOBAL",)))

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        assert len(result.errors) == 1
        assert "(DE, FR)" in result.errors[0]

    def test_existing_territory_exclusive_blocks_non_exclusive_in_same_territory(self):
        existing = make_existing(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            scope=make_scope(territories=("US",)),
        )
        result = ExclusivityCheck().evaluate(make_candidate(), make_context(existing=[existing]))

        assert not result.passed
        assert "(US)" in result.errors[0]

    def test_non_exclusive_pair_skips_territory_math(self):
        result = ExclusivityCheck().evaluate(make_candidate(), make_context(existing=[make_existing()]))
        assert result.passed


class TestCategoryAndCompetitors:
    """Test category exclusivity and competitor blocking"""

    def test_same_category_conflicts(self):
        candidate = make_candidate(scope=make_scope(category="Fashion"))
        existing = make_existing(brand_name="Acme Apparel", scope=make_scope(category="Fashion"))

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        assert result.errors == [
            "Category exclusivity conflict: Acme Apparel already has exclusive rights in Fashion category"
        ]

    def test_different_or_missing_category_passes(self):
        context = make_context(existing=[
            make_existing(id="l1", scope=make_scope(category="Beauty")),
            make_existing(id="l2", scope=make_scope(category=None)),
        ])
        candidate = make_candidate(scope=make_scope(category="Fashion"))
        assert ExclusivityCheck().evaluate(candidate, context).passed

    def test_competitor_block_applies_regardless_of_dates(self):
        existing = make_existing(
            brand_name="Globex",
            start_date=dt(2030, 1, 1),
            end_date=dt(2031, 1, 1),
            scope=make_scope(competitors=("brand-1",)),
        )

        result = ExclusivityCheck().evaluate(make_candidate(), make_context(existing=[existing]))

        assert len(result.errors) == 1
        assert "Globex" in result.errors[0]
        assert result.conflicts[0].reason == ConflictReason.COMPETITOR_BLOCKED

    def test_violations_on_several_axes_are_all_collected(self):
        candidate = make_candidate(
            license_type=LicenseType.EXCLUSIVE,
            scope=make_scope(category="Fashion"),
        )
        existing = make_existing(
            license_type=LicenseType.EXCLUSIVE_TERRITORY,
            scope=make_scope(category="Fashion", competitors=("brand-1",)),
        )

        result = ExclusivityCheck().evaluate(candidate, make_context(existing=[existing]))

        reasons = {c.reason for c in result.conflicts}
        assert reasons == {
            ConflictReason.EXCLUSIVE_OVERLAP,
            ConflictReason.TERRITORY_OVERLAP,
            ConflictReason.CATEGORY_OVERLAP,
            ConflictReason.COMPETITOR_BLOCKED,
        }
        assert len(result.errors) == 4
