"""Tests for the tier accrual engine"""

import pytest
from decimal import Decimal

from eenheden_app.accrual.tiers import (
    TIER_SCHEDULE,
    classify_tier,
    compute_revenue,
    next_tier_target_pct,
    progress_to_next_tier,
    tier_progress_pct,
)
from eenheden_app.errors import InputValidationError, NegativeUnitsError
from eenheden_app.models.finance import TierBand


class TestComputeRevenue:
    """Test compute_revenue function"""

    def test_zero_units(self):
        result = compute_revenue(0)
        assert result.total == 0
        assert (result.breakdown.ft1, result.breakdown.ft2, result.breakdown.ft3) == (0, 0, 0)

    def test_top_of_ft1(self):
        result = compute_revenue(1000)
        assert result.total == 1500
        assert result.breakdown.ft1 == 1500
        assert result.breakdown.ft2 == 0
        assert result.breakdown.ft3 == 0

    def test_top_of_ft2(self):
        result = compute_revenue(3000)
        assert result.total == 5500
        assert result.breakdown.ft1 == 1500
        assert result.breakdown.ft2 == 4000
        assert result.breakdown.ft3 == 0

    def test_into_ft3(self):
        result = compute_revenue(3500)
        assert result.total == 6750
        assert result.breakdown.ft3 == 1250

    def test_marginal_rate_inside_ft2(self):
        """Units below 1000 keep earning 1.5 even when the total is higher"""
        result = compute_revenue(1500)
        assert result.breakdown.ft1 == 1500
        assert result.breakdown.ft2 == 1000
        assert result.total == 2500

    def test_fractional_units(self):
        result = compute_revenue(Decimal("515.83"))
        assert result.total == Decimal("773.745")

    def test_total_is_sum_of_breakdown(self):
        for units in (0, 1, 999, 1000, 1001, 2999, 3000, 3001, 10000):
            result = compute_revenue(units)
            breakdown = result.breakdown
            assert result.total == breakdown.ft1 + breakdown.ft2 + breakdown.ft3

    def test_breakdown_components_monotonic(self):
        """Each component is non-negative and non-decreasing in units"""
        previous = compute_revenue(0)
        for units in range(0, 4001, 50):
            current = compute_revenue(units)
            for band in ("ft1", "ft2", "ft3"):
                value = getattr(current.breakdown, band)
                assert value >= 0
                assert value >= getattr(previous.breakdown, band)
            assert current.total >= previous.total
            previous = current

    def test_continuous_at_band_edges(self):
        """No jump discontinuities at the band boundaries"""
        epsilon = Decimal("0.0001")
        for edge in (TIER_SCHEDULE.ft1_capacity, TIER_SCHEDULE.ft3_start):
            below = compute_revenue(edge - epsilon).total
            at = compute_revenue(edge).total
            above = compute_revenue(edge + epsilon).total
            assert at - below < Decimal("0.001")
            assert above - at < Decimal("0.001")

    def test_negative_units_rejected(self):
        with pytest.raises(NegativeUnitsError):
            compute_revenue(-1)

    def test_non_numeric_units_rejected(self):
        with pytest.raises(InputValidationError):
            compute_revenue("lots")


class TestClassifyTier:
    """Test classify_tier function"""

    @pytest.mark.parametrize("units,expected", [
        (0, TierBand.FT1),
        (1000, TierBand.FT1),
        (Decimal("1000.5"), TierBand.FT1),
        (1001, TierBand.FT2),
        (2999, TierBand.FT2),
        (Decimal("2999.99"), TierBand.FT2),
        (3000, TierBand.FT3),
        (50000, TierBand.FT3),
    ])
    def test_boundaries(self, units, expected):
        assert classify_tier(units) is expected

    def test_negative_units_rejected(self):
        with pytest.raises(NegativeUnitsError):
            classify_tier(-0.01)


class TestProgressToNextTier:
    """Test progress_to_next_tier function"""

    def test_toward_ft2(self):
        info = progress_to_next_tier(500)
        assert info.next_tier is TierBand.FT2
        assert info.units_needed == 500
        assert info.target == 1000

    def test_at_1000_targets_ft3(self):
        info = progress_to_next_tier(1000)
        assert info.next_tier is TierBand.FT3
        assert info.units_needed == 2000

    def test_toward_ft3(self):
        info = progress_to_next_tier(Decimal("2500.5"))
        assert info.next_tier is TierBand.FT3
        assert info.units_needed == Decimal("499.5")

    def test_terminal_tier(self):
        assert progress_to_next_tier(3000) is None
        assert progress_to_next_tier(9999) is None


class TestTierProgressPct:
    """Test tier_progress_pct function"""

    def test_ft1_progress(self):
        assert tier_progress_pct(0) == 0.0
        assert tier_progress_pct(500) == 50.0
        assert tier_progress_pct(1000) == 100.0

    def test_ft2_progress_starts_at_1001(self):
        assert tier_progress_pct(1001) == 0.0
        assert tier_progress_pct(3000 - 1) == pytest.approx(1998 / 1999 * 100)

    def test_between_1000_and_1001_uses_ft1_formula_clamped(self):
        """1000.5 is still FT1; its raw progress exceeds 100 and is clamped"""
        assert tier_progress_pct(Decimal("1000.5")) == 100.0

    def test_ft3_is_complete(self):
        assert tier_progress_pct(3000) == 100.0
        assert tier_progress_pct(12000) == 100.0

    def test_always_within_bounds(self):
        for units in range(0, 4000, 37):
            assert 0.0 <= tier_progress_pct(units) <= 100.0


class TestNextTierTargetPct:
    """Test next_tier_target_pct function"""

    def test_share_of_ft2_target(self):
        assert next_tier_target_pct(250) == 25.0

    def test_share_of_ft3_target(self):
        assert next_tier_target_pct(1500) == 50.0

    def test_none_at_ft3(self):
        assert next_tier_target_pct(3000) is None
