"""
Main portfolio engine coordinator.

Ties the client registry to the accrual functions: mutations go through the
registry, and every statistic is derived again from the registry's current
snapshot when it is read.
"""

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .accrual.aggregate import aggregate, client_units
from .accrual.projections import Timeframe, compare_goal, growth_report
from .accrual.tiers import (
    compute_revenue,
    next_tier_target_pct,
    progress_to_next_tier,
    tier_progress_pct,
)
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .errors import (
    CalculationError,
    InputValidationError,
    RegistryError,
)
from .logging.config import configure_from_params, get_accrual_logger, log_tier_change
from .models.finance import (
    AggregateStats,
    Client,
    Contract,
    ContractType,
    GoalComparison,
    GrowthReport,
)
from .registry.clients import ClientRegistry
from .registry.queries import SortMode, filter_and_sort, pinned_clients, recent_clients

logger = structlog.get_logger(__name__)
accrual_logger = get_accrual_logger(__name__)


class PortfolioEngine:
    """
    Coordinator for the client portfolio and its tier accrual.

    Manages the flow:
    Client/Contract input → Registry → Aggregation → Tier & Revenue views
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        config_overrides: Optional[dict[str, Any]] = None,
        clients: Optional[list[Client]] = None
    ) -> None:
        """Initialize the engine with validated configuration and an optional seed."""
        self.logger = logger
        self.accrual_logger = accrual_logger

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config: DefaultConfig = self.config_loader.load(config_overrides)

        self.registry = ClientRegistry(clients)

        self.logger.info(
            "Portfolio engine initialized",
            seeded_clients=len(self.registry)
        )

    def configure_logging(self, include_caller: bool = False) -> None:
        """
        Apply the `logging` section of the loaded configuration.

        Call once from the process entry point. Library use of the engine
        leaves logging setup to the host application.
        """
        configure_from_params(self.config.logging, include_caller=include_caller)
        self.logger.info(
            "Logging configured",
            level=self.config.logging.level,
            format_json=self.config.logging.format_json
        )

    # Registry operations

    def add_client(self, name: str, description: str = "") -> Client:
        """Register a new client."""
        return self._mutate("add_client", self.registry.add_client, name, description)

    def update_client(
        self,
        client_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        pinned: Optional[bool] = None
    ) -> Client:
        """Update a client's editable fields."""
        return self._mutate(
            "update_client", self.registry.update_client,
            client_id, name=name, description=description, pinned=pinned
        )

    def toggle_pin(self, client_id: str) -> Client:
        """Flip a client's pinned flag."""
        return self._mutate("toggle_pin", self.registry.toggle_pin, client_id)

    def delete_client(self, client_id: str) -> Client:
        """Remove a client with all of its contracts."""
        return self._mutate("delete_client", self.registry.delete_client, client_id)

    def add_contract(
        self,
        client_id: str,
        contract_type: Union[ContractType, str],
        amount: Any = None,
        start_date: Optional[Union[date, datetime, str]] = None
    ) -> Contract:
        """Create a contract for a client."""
        return self._mutate(
            "add_contract", self.registry.add_contract,
            client_id, contract_type, amount, start_date
        )

    def delete_contract(self, client_id: str, contract_id: str) -> Contract:
        """Remove one contract from a client."""
        return self._mutate(
            "delete_contract", self.registry.delete_contract, client_id, contract_id
        )

    # Derived views

    def stats(self) -> AggregateStats:
        """Portfolio statistics computed from the current client collection."""
        try:
            return aggregate(self.registry.clients())
        except (InputValidationError, RegistryError):
            raise
        except Exception as e:
            raise CalculationError(
                f"Unexpected error in portfolio aggregation: {str(e)}",
                operation="aggregate",
                calculation_input={"client_count": len(self.registry)}
            ) from e

    def client_units(self, client_id: str) -> Decimal:
        """Units accrued by a single client."""
        return client_units(self.registry.get_client(client_id))

    def tier_progress(self) -> dict[str, Any]:
        """Tier, revenue breakdown and progress figures for the current portfolio."""
        stats = self.stats()
        units = stats.total_units

        return {
            "total_units": units,
            "current_tier": stats.current_tier,
            "revenue": compute_revenue(units),
            "next_tier": progress_to_next_tier(units),
            "progress_pct": tier_progress_pct(units),
            "next_tier_target_pct": next_tier_target_pct(units),
        }

    def compare_goal(self, target_units: Any) -> GoalComparison:
        """Compare the current portfolio against a target unit total."""
        return compare_goal(self.stats().total_units, target_units)

    def growth(self, timeframe: Union[Timeframe, str] = Timeframe.ONE_YEAR) -> GrowthReport:
        """Growth of portfolio metrics against the timeframe's trailing baseline."""
        return growth_report(
            self.stats(),
            timeframe,
            self.config.history.baseline_multipliers
        )

    def list_clients(
        self,
        term: str = "",
        mode: Optional[Union[SortMode, str]] = None
    ) -> list[Client]:
        """Clients filtered by a search term and ordered by sort mode."""
        return filter_and_sort(
            self.registry.clients(),
            term,
            mode or self.config.dashboard.default_sort
        )

    def dashboard(self) -> dict[str, Any]:
        """Pinned clients, recently added clients and current statistics."""
        clients = self.registry.clients()
        return {
            "stats": self.stats(),
            "pinned": pinned_clients(clients),
            "recent": recent_clients(clients, self.config.dashboard.recent_limit),
        }

    def get_runtime_stats(self) -> dict[str, Any]:
        """Get runtime statistics."""
        stats = self.stats()
        return {
            'clients': stats.total_clients,
            'contracts': stats.total_contracts,
            'total_units': str(stats.total_units),
            'current_tier': stats.current_tier.value,
        }

    def _mutate(self, action: str, operation: Any, *args: Any, **kwargs: Any) -> Any:
        """Run a registry mutation, logging failures and any tier movement."""
        tier_before = self.stats().current_tier

        try:
            result = operation(*args, **kwargs)
        except InputValidationError as e:
            self.logger.warning(
                "Rejected registry input",
                action=action,
                error=str(e),
                error_type=type(e).__name__,
                context=getattr(e, 'context', {})
            )
            raise
        except RegistryError as e:
            self.logger.error(
                "Registry operation failed",
                action=action,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        stats = self.stats()
        if stats.current_tier is not tier_before:
            log_tier_change(
                self.accrual_logger,
                from_tier=tier_before.value,
                to_tier=stats.current_tier.value,
                total_units=stats.total_units,
                trigger=action
            )

        return result
