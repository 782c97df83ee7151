"""Goal comparison and trailing growth projections"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from ..config.defaults import DEFAULT_BASELINE_MULTIPLIERS
from ..errors import InputValidationError
from ..models.finance import AggregateStats, GoalComparison, GrowthReport, MetricGrowth
from ..utils.numbers import round_half_up, to_decimal
from .tiers import classify_tier, coerce_units, compute_revenue


class Timeframe(str, Enum):
    """Lookback windows for growth reporting."""
    ONE_YEAR = "1year"
    SIX_MONTHS = "6months"
    THREE_MONTHS = "3months"
    ONE_MONTH = "1month"
    ONE_WEEK = "1week"
    THREE_DAYS = "3days"
    ONE_DAY = "1day"


def compare_goal(current_units: Any, target_units: Any) -> GoalComparison:
    """
    Compare revenue and tier at the current and a target unit total.

    Args:
        current_units: Units accrued so far
        target_units: Goal unit total

    Returns:
        GoalComparison with unit and revenue differences (target - current)
    """
    current = coerce_units(current_units)
    target = coerce_units(target_units)

    current_revenue = compute_revenue(current)
    target_revenue = compute_revenue(target)

    return GoalComparison(
        current_units=current,
        target_units=target,
        current_revenue=current_revenue,
        target_revenue=target_revenue,
        current_tier=classify_tier(current),
        target_tier=classify_tier(target),
        units_difference=target - current,
        revenue_difference=target_revenue.total - current_revenue.total,
    )


def resolve_timeframe(value: Union[Timeframe, str]) -> Timeframe:
    """Resolve a timeframe given as enum member or string."""
    if isinstance(value, Timeframe):
        return value
    try:
        return Timeframe(value)
    except ValueError:
        raise InputValidationError(
            f"Unknown timeframe: {value!r}",
            context={"allowed": [t.value for t in Timeframe]}
        )


def growth_pct(current: Any, baseline: Any) -> Optional[float]:
    """
    Percentage change from baseline to current, rounded to one decimal.

    Returns:
        Growth percentage, or None when the baseline is zero
    """
    current_value = to_decimal(current)
    baseline_value = to_decimal(baseline)

    if baseline_value == 0:
        return None

    pct = (current_value - baseline_value) / baseline_value * Decimal("100")
    return float(round_half_up(pct, 1))


def estimate_baseline(
    stats: AggregateStats,
    timeframe: Union[Timeframe, str],
    multipliers: Optional[dict[str, float]] = None
) -> dict[str, Decimal]:
    """
    Estimate each metric's value at the start of a timeframe.

    The baseline is the current value scaled by the timeframe multiplier
    and rounded half up to a whole number.

    Args:
        stats: Current portfolio statistics
        timeframe: Lookback window
        multipliers: Timeframe → multiplier mapping, defaults when omitted
    """
    resolved = resolve_timeframe(timeframe)
    table = dict(DEFAULT_BASELINE_MULTIPLIERS)
    if multipliers:
        table.update(multipliers)
    multiplier = to_decimal(table[resolved.value])

    return {
        "units": round_half_up(stats.total_units * multiplier),
        "revenue": round_half_up(stats.total_revenue * multiplier),
        "clients": round_half_up(Decimal(stats.total_clients) * multiplier),
        "contracts": round_half_up(Decimal(stats.total_contracts) * multiplier),
    }


def growth_report(
    stats: AggregateStats,
    timeframe: Union[Timeframe, str],
    multipliers: Optional[dict[str, float]] = None
) -> GrowthReport:
    """Growth of units, revenue, clients and contracts over a timeframe."""
    resolved = resolve_timeframe(timeframe)
    baseline = estimate_baseline(stats, resolved, multipliers)

    current = {
        "units": stats.total_units,
        "revenue": stats.total_revenue,
        "clients": Decimal(stats.total_clients),
        "contracts": Decimal(stats.total_contracts),
    }

    metrics = {
        name: MetricGrowth(
            current=current[name],
            baseline=baseline[name],
            growth_pct=growth_pct(current[name], baseline[name]),
        )
        for name in current
    }

    return GrowthReport(timeframe=resolved.value, **metrics)
