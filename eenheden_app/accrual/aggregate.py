"""Portfolio aggregation over the full client collection"""

from decimal import Decimal
from typing import Iterable

from ..models.finance import AggregateStats, Client
from ..utils.numbers import ZERO
from .tiers import classify_tier, compute_revenue


def client_units(client: Client) -> Decimal:
    """Sum of units over one client's contracts."""
    return sum((contract.units for contract in client.contracts), ZERO)


def aggregate(clients: Iterable[Client]) -> AggregateStats:
    """
    Fold a client collection into portfolio statistics.

    Recomputed from scratch on every call; nothing is cached between calls.

    Args:
        clients: Current client collection

    Returns:
        AggregateStats with revenue and tier derived from the total units
    """
    total_clients = 0
    total_contracts = 0
    total_units = ZERO

    for client in clients:
        total_clients += 1
        total_contracts += len(client.contracts)
        total_units += client_units(client)

    return AggregateStats(
        total_clients=total_clients,
        total_contracts=total_contracts,
        total_units=total_units,
        total_revenue=compute_revenue(total_units).total,
        current_tier=classify_tier(total_units),
    )
