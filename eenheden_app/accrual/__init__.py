"""Unit conversion, tier accrual and portfolio aggregation"""

from .aggregate import aggregate, client_units
from .projections import Timeframe, compare_goal, growth_pct, growth_report
from .tiers import (
    TIER_SCHEDULE,
    classify_tier,
    compute_revenue,
    next_tier_target_pct,
    progress_to_next_tier,
    tier_progress_pct,
)
from .units import CONVERSION_RULES, convert_to_units, normalize_contract_amount

__all__ = [
    "CONVERSION_RULES",
    "TIER_SCHEDULE",
    "Timeframe",
    "aggregate",
    "classify_tier",
    "client_units",
    "compare_goal",
    "compute_revenue",
    "convert_to_units",
    "growth_pct",
    "growth_report",
    "next_tier_target_pct",
    "normalize_contract_amount",
    "progress_to_next_tier",
    "tier_progress_pct",
]
