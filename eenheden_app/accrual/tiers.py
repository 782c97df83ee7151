"""
Tier accrual engine.

Revenue is a progressive marginal schedule: the first 1000 units earn 1.5
each, the next 2000 earn 2.0 each, and everything past 3000 earns 2.5.

Classification uses its own thresholds. FT2 starts at 1001 units while the
FT1 revenue band ends at 1000, and the progress bar measures FT2 progress
from 1001 over a 1999-unit span. Displayed progress depends on these exact
values.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..errors import InputValidationError, NegativeUnitsError
from ..models.finance import NextTierInfo, RevenueBreakdown, RevenueResult, TierBand
from ..utils.numbers import ZERO, to_decimal


@dataclass(frozen=True)
class TierSchedule:
    """Fixed tier capacities, rates and classification thresholds."""
    # Revenue bands
    ft1_capacity: Decimal = Decimal("1000")
    ft2_capacity: Decimal = Decimal("2000")      # FT3 is unbounded
    ft1_rate: Decimal = Decimal("1.5")
    ft2_rate: Decimal = Decimal("2.0")
    ft3_rate: Decimal = Decimal("2.5")

    # Classification thresholds
    ft2_from: Decimal = Decimal("1001")
    ft3_from: Decimal = Decimal("3000")

    # Progress bar span within FT2
    ft2_progress_span: Decimal = Decimal("1999")

    @property
    def ft3_start(self) -> Decimal:
        """Units after which the FT3 rate applies."""
        return self.ft1_capacity + self.ft2_capacity


TIER_SCHEDULE = TierSchedule()

HUNDRED = Decimal("100")


def coerce_units(units: Any) -> Decimal:
    """
    Validate a unit quantity for the tier engine.

    Raises:
        InputValidationError: If units is not a finite number
        NegativeUnitsError: If units is below zero
    """
    try:
        value = to_decimal(units)
    except ValueError as e:
        raise InputValidationError(str(e), context={"units": units}) from e

    if value < 0:
        raise NegativeUnitsError(f"Units cannot be negative, got: {value}", units=units)

    return value


def classify_tier(units: Any) -> TierBand:
    """Current tier for a unit total: ≥3000 FT3, ≥1001 FT2, otherwise FT1."""
    value = coerce_units(units)

    if value >= TIER_SCHEDULE.ft3_from:
        return TierBand.FT3
    if value >= TIER_SCHEDULE.ft2_from:
        return TierBand.FT2
    return TierBand.FT1


def compute_revenue(units: Any) -> RevenueResult:
    """
    Compute revenue over the progressive tier ladder.

    Args:
        units: Total unit quantity (non-negative)

    Returns:
        RevenueResult with total and per-tier breakdown
    """
    value = coerce_units(units)
    schedule = TIER_SCHEDULE

    ft1 = ft2 = ft3 = ZERO

    if value > 0:
        ft1 = min(value, schedule.ft1_capacity) * schedule.ft1_rate

    if value > schedule.ft1_capacity:
        ft2 = min(value - schedule.ft1_capacity, schedule.ft2_capacity) * schedule.ft2_rate

    if value > schedule.ft3_start:
        ft3 = (value - schedule.ft3_start) * schedule.ft3_rate

    return RevenueResult(
        total=ft1 + ft2 + ft3,
        breakdown=RevenueBreakdown(ft1=ft1, ft2=ft2, ft3=ft3)
    )


def progress_to_next_tier(units: Any) -> Optional[NextTierInfo]:
    """
    Units still needed to reach the next tier.

    Returns:
        NextTierInfo toward FT2 below 1000 units, toward FT3 below 3000,
        None once FT3 is reached
    """
    value = coerce_units(units)
    schedule = TIER_SCHEDULE

    if value < schedule.ft1_capacity:
        return NextTierInfo(
            next_tier=TierBand.FT2,
            units_needed=schedule.ft1_capacity - value,
            target=schedule.ft1_capacity
        )

    if value < schedule.ft3_start:
        return NextTierInfo(
            next_tier=TierBand.FT3,
            units_needed=schedule.ft3_start - value,
            target=schedule.ft3_start
        )

    return None


def tier_progress_pct(units: Any) -> float:
    """
    Progress through the current tier for display, clamped to [0, 100].

    FT3 is always 100. FT2 progress runs from 1001 over 1999 units.
    FT1 progress is units / 1000.
    """
    value = coerce_units(units)
    schedule = TIER_SCHEDULE

    if value >= schedule.ft3_from:
        pct = HUNDRED
    elif value >= schedule.ft2_from:
        pct = (value - schedule.ft2_from) / schedule.ft2_progress_span * HUNDRED
    else:
        pct = value / schedule.ft1_capacity * HUNDRED

    return _clamp_pct(pct)


def next_tier_target_pct(units: Any) -> Optional[float]:
    """Units as a share of the next tier target, capped at 100; None at FT3."""
    info = progress_to_next_tier(units)
    if info is None:
        return None

    value = coerce_units(units)
    return _clamp_pct(value / info.target * HUNDRED)


def _clamp_pct(pct: Decimal) -> float:
    return float(max(ZERO, min(pct, HUNDRED)))
