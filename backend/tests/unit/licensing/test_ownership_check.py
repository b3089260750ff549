"""Unit tests for the ownership check

Tests cover:
- Asset lifecycle status and soft deletion
- Share sum and primary owner invariants
- Creator account state
- Disputes and documentation gaps
- Effective ownership window filtering
"""

import pytest

from domain.licensing import AssetStatus, OwnershipType
from domain.licensing.checks import OwnershipCheck
from domain.licensing.checks.ownership_check import effective_ownerships
from fixtures.licensing import dt, make_asset, make_candidate, make_context, make_ownership


def _check(ownerships=None, candidate=None, **asset_kwargs):
    asset = make_asset(ownerships=ownerships, **asset_kwargs)
    return OwnershipCheck().evaluate(candidate or make_candidate(), make_context(asset=asset))


class TestAssetStatus:
    """Test asset lifecycle rules"""

    @pytest.mark.parametrize("status", [AssetStatus.PUBLISHED, AssetStatus.APPROVED])
    def test_licensable_statuses_pass(self, status):
        assert _check(status=status).passed

    @pytest.mark.parametrize("status", [AssetStatus.DRAFT, AssetStatus.REVIEW, AssetStatus.ARCHIVED])
    def test_other_statuses_error(self, status):
        result = _check(status=status)

        assert result.errors == [
            f"IP asset must be in PUBLISHED or APPROVED status (current: {status.value})"
        ]

    def test_deleted_asset_errors(self):
        result = _check(deleted_at=dt(2024, 6, 1))
        assert result.errors == ["Cannot license a deleted IP asset (asset-1)"]


class TestOwnershipStructure:
    """Test share sum and primary owner invariants"""

    @pytest.mark.parametrize("shares,valid", [
        ((10_000,), True),
        ((6_000, 4_000), True),
        ((3_334, 3_333, 3_333), True),
        ((5_000, 3_000), False),
        ((6_000, 5_000), False),
        ((9_999,), False),
    ])
    def test_shares_must_sum_to_full_ownership(self, shares, valid):
        ownerships = [
            make_ownership(creator_id=f"creator-{i}", creator_name=f"Creator {i}", share_bps=bps)
            for i, bps in enumerate(shares)
        ]

        result = _check(ownerships=ownerships)

        assert result.passed is valid
        assert result.details["total_share_bps"] == sum(shares)

    def test_share_sum_message_shows_percentage(self):
        result = _check(ownerships=[make_ownership(share_bps=8_000)])
        assert result.errors == [
            "Invalid ownership structure: Total shares must equal 100% (current: 80%)"
        ]

    def test_no_records_reports_every_structural_error(self):
        result = _check(ownerships=[])

        assert result.errors == [
            "IP asset asset-1 has no ownership records - cannot license",
            "Invalid ownership structure: Total shares must equal 100% (current: 0%)",
            "IP asset must have at least one primary owner",
        ]

    def test_missing_primary_owner_errors(self):
        ownerships = [
            make_ownership(share_bps=5_000, ownership_type=OwnershipType.SECONDARY),
            make_ownership(creator_id="creator-2", share_bps=5_000, ownership_type=OwnershipType.DERIVATIVE),
        ]

        result = _check(ownerships=ownerships)

        assert result.errors == ["IP asset must have at least one primary owner"]
        assert result.details["primary_owners"] == 0


class TestCreatorsAndDisputes:
    """Test creator account state, disputes and documentation"""

    def test_deleted_creator_errors(self):
        result = _check(ownerships=[make_ownership(creator_deleted=True, creator_active=False)])
        assert result.errors == ["Creator Maya Chen has been deleted - cannot license"]
        assert result.warnings == []

    def test_inactive_creator_warns(self):
        result = _check(ownerships=[make_ownership(creator_active=False)])

        assert result.passed
        assert result.warnings == ["Creator Maya Chen account is inactive"]
        assert result.details["owners"][0]["is_active"] is False

    def test_disputes_reported_once(self):
        ownerships = [
            make_ownership(share_bps=5_000, disputed=True),
            make_ownership(creator_id="creator-2", share_bps=5_000, disputed=True),
        ]

        result = _check(ownerships=ownerships)

        assert len(result.errors) == 1
        assert "(2 disputed ownership record(s))" in result.errors[0]
        assert result.details["has_disputes"] is True

    def test_missing_documentation_warns_for_high_value(self):
        ownerships = [
            make_ownership(share_bps=5_000),
            make_ownership(creator_id="creator-2", share_bps=5_000, contract_reference=None),
        ]

        result = _check(ownerships=ownerships, candidate=make_candidate(fee_cents=500_000))

        assert result.passed
        assert result.warnings == [
            "High-value license: 1 ownership record(s) missing legal documentation"
        ]

    def test_missing_documentation_ignored_below_threshold(self):
        ownerships = [make_ownership(contract_reference=None)]
        result = _check(ownerships=ownerships, candidate=make_candidate(fee_cents=499_999))
        assert result.warnings == []

    def test_derivative_work_warns(self):
        result = _check(parent_asset_id="asset-0")
        assert result.passed
        assert any("derivative work of asset-0" in w for w in result.warnings)


class TestEffectiveOwnerships:
    """Test filtering of ownership records by term and deletion"""

    def test_deleted_and_out_of_window_records_are_dropped(self):
        current = make_ownership(creator_id="current")
        ended = make_ownership(creator_id="ended", end_date=dt(2025, 1, 1))
        future = make_ownership(creator_id="future", start_date=dt(2025, 12, 31))
        deleted = make_ownership(creator_id="deleted", deleted_at=dt(2024, 1, 1))
        partial = make_ownership(creator_id="partial", start_date=dt(2025, 6, 1))

        records = effective_ownerships(make_candidate(), (current, ended, future, deleted, partial))

        assert [r.creator_id for r in records] == ["current", "partial"]

    def test_transferred_share_counts_only_in_its_window(self):
        ownerships = [
            make_ownership(creator_id="seller", end_date=dt(2024, 6, 1)),
            make_ownership(
                creator_id="buyer",
                ownership_type=OwnershipType.PRIMARY,
                start_date=dt(2024, 6, 1),
            ),
        ]

        result = _check(ownerships=ownerships)

        assert result.passed
        assert result.details["total_owners"] == 1
        assert result.details["owners"][0]["creator_id"] == "buyer"
