"""Domain models for contracts, clients and tier accrual results"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class ContractType(str, Enum):
    """Contract types, each with its own unit conversion rule."""
    PS = "PS"
    LS = "LS"
    DELA = "DELA"
    BL = "BL"


class TierBand(str, Enum):
    """Progressive revenue tiers."""
    FT1 = "FT1"
    FT2 = "FT2"
    FT3 = "FT3"


@dataclass(frozen=True)
class Contract:
    """A single contract with its units fixed at creation."""
    id: str
    type: ContractType
    amount: Decimal            # Always 0 for DELA
    units: Decimal             # Eenheden derived from type and amount
    start_date: date


@dataclass(frozen=True)
class Client:
    """A client and its ordered contracts."""
    id: str
    name: str
    description: str
    created_at: datetime
    pinned: bool = False
    contracts: tuple[Contract, ...] = ()

    def find_contract(self, contract_id: str) -> Optional[Contract]:
        """Contract with the given id, None if absent."""
        for contract in self.contracts:
            if contract.id == contract_id:
                return contract
        return None


@dataclass(frozen=True)
class RevenueBreakdown:
    """Revenue earned inside each tier band."""
    ft1: Decimal = Decimal("0")
    ft2: Decimal = Decimal("0")
    ft3: Decimal = Decimal("0")


@dataclass(frozen=True)
class RevenueResult:
    """Total revenue with its per-tier decomposition."""
    total: Decimal
    breakdown: RevenueBreakdown = field(default_factory=RevenueBreakdown)


@dataclass(frozen=True)
class NextTierInfo:
    """Distance from the current unit total to the next tier threshold."""
    next_tier: TierBand
    units_needed: Decimal
    target: Decimal


@dataclass(frozen=True)
class AggregateStats:
    """Portfolio statistics derived from the full client collection"""
    total_clients: int
    total_contracts: int
    total_units: Decimal
    total_revenue: Decimal
    current_tier: TierBand


@dataclass(frozen=True)
class GoalComparison:
    """Current position compared against a target unit total."""
    current_units: Decimal
    target_units: Decimal
    current_revenue: RevenueResult
    target_revenue: RevenueResult
    current_tier: TierBand
    target_tier: TierBand
    units_difference: Decimal
    revenue_difference: Decimal

    @property
    def goal_reached(self) -> bool:
        """True once the current units meet or exceed the target."""
        return self.units_difference <= 0


@dataclass(frozen=True)
class MetricGrowth:
    """A metric's current value against its trailing baseline."""
    current: Decimal
    baseline: Decimal
    growth_pct: Optional[float]  # None when the baseline is zero


@dataclass(frozen=True)
class GrowthReport:
    """Growth of every portfolio metric over one timeframe."""
    timeframe: str
    units: MetricGrowth
    revenue: MetricGrowth
    clients: MetricGrowth
    contracts: MetricGrowth
