"""Unit tests for the budget check

Tests cover:
- Zero and negative fees skip validation
- Unverified brand hard ceiling, including the boundary
- Verified brand high-fee warning
"""

import pytest

from domain.licensing.checks import BudgetCheck
from domain.licensing.policy import format_cents
from fixtures.licensing import make_brand, make_candidate, make_context


class TestFormatCents:
    """Test dollar formatting of cent amounts"""

    @pytest.mark.parametrize("cents,expected", [
        (0, "$0.00"),
        (250_000, "$2,500.00"),
        (1_050_000, "$10,500.00"),
        (-1_500, "-$15.00"),
    ])
    def test_format(self, cents, expected):
        assert format_cents(cents) == expected


class TestBudgetCheck:
    """Test BudgetCheck tiers"""

    @pytest.mark.parametrize("fee", [0, -100])
    def test_non_positive_fee_skips(self, fee):
        context = make_context(brand=make_brand(is_verified=False, committed_budget_cents=5_000_000))

        result = BudgetCheck().evaluate(make_candidate(fee_cents=fee), context)

        assert result.passed
        assert result.details["skipped"] is True
        assert len(result.warnings) == 1
        assert result.warnings[0].endswith("budget validation skipped")

    def test_unverified_brand_over_limit_errors(self):
        context = make_context(brand=make_brand(is_verified=False, committed_budget_cents=800_000))

        result = BudgetCheck().evaluate(make_candidate(fee_cents=250_000), context)

        assert not result.passed
        assert len(result.errors) == 1
        assert "$10,000.00" in result.errors[0]
        assert "Current committed: $8,000.00" in result.errors[0]
        assert "Requested: $2,500.00" in result.errors[0]
        assert result.details["total_with_new_license_cents"] == 1_050_000
        assert result.details["limit_cents"] == 1_000_000

    def test_unverified_brand_exactly_at_limit_passes(self):
        context = make_context(brand=make_brand(is_verified=False, committed_budget_cents=900_000))

        result = BudgetCheck().evaluate(make_candidate(fee_cents=100_000), context)

        assert result.passed
        assert result.details["total_with_new_license_cents"] == 1_000_000

    def test_unverified_brand_one_cent_over_limit_fails(self):
        context = make_context(brand=make_brand(is_verified=False, committed_budget_cents=900_001))

        result = BudgetCheck().evaluate(make_candidate(fee_cents=100_000), context)

        assert not result.passed

    def test_verified_brand_high_fee_warns(self):
        result = BudgetCheck().evaluate(make_candidate(fee_cents=15_000_000), make_context())

        assert result.passed
        assert result.warnings == ["High license fee: $150,000.00 requires additional approval"]
        assert result.details["limit_cents"] is None

    def test_verified_brand_has_no_ceiling(self):
        context = make_context(brand=make_brand(committed_budget_cents=500_000_000))

        result = BudgetCheck().evaluate(make_candidate(fee_cents=5_000_000), context)

        assert result.passed
        assert result.warnings == []
