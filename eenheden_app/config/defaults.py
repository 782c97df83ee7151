"""Default configuration parameters for the accrual engine."""

from dataclasses import dataclass, field


DEFAULT_BASELINE_MULTIPLIERS: dict[str, float] = {
    "1year": 0.2,
    "6months": 0.4,
    "3months": 0.6,
    "1month": 0.8,
    "1week": 0.9,
    "3days": 0.95,
    "1day": 0.98,
}


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DashboardParams:
    """Client list and dashboard parameters."""
    recent_limit: int = 5                  # Clients shown under recent activity
    default_sort: str = "name-asc"         # name-asc, name-desc or pinned


@dataclass(frozen=True)
class HistoryParams:
    """Trailing baseline estimation parameters."""
    # Share of the current value assumed to exist at the start of each timeframe
    baseline_multipliers: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_BASELINE_MULTIPLIERS)
    )


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    dashboard: DashboardParams
    history: HistoryParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        dashboard=DashboardParams(),
        history=HistoryParams(),
    )
