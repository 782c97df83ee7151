"""Search, sort and dashboard selections over a client collection"""

from enum import Enum
from typing import Iterable, Union

from ..errors import InputValidationError
from ..models.finance import Client


class SortMode(str, Enum):
    """Client list orderings."""
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PINNED = "pinned"


def resolve_sort_mode(value: Union[SortMode, str]) -> SortMode:
    """Resolve a sort mode given as enum member or string."""
    if isinstance(value, SortMode):
        return value
    try:
        return SortMode(value)
    except ValueError:
        raise InputValidationError(
            f"Unknown sort mode: {value!r}",
            context={"allowed": [m.value for m in SortMode]}
        )


def search_clients(clients: Iterable[Client], term: str = "") -> list[Client]:
    """Clients whose name or description contains term, case-insensitively."""
    needle = (term or "").casefold()
    if not needle:
        return list(clients)

    return [
        client for client in clients
        if needle in client.name.casefold() or needle in client.description.casefold()
    ]


def sort_clients(clients: Iterable[Client], mode: Union[SortMode, str] = SortMode.NAME_ASC) -> list[Client]:
    """
    Order clients by name, or pinned first then by name.

    Args:
        clients: Clients to order
        mode: name-asc, name-desc or pinned
    """
    resolved = resolve_sort_mode(mode)

    def name_key(client: Client) -> str:
        return client.name.casefold()

    if resolved is SortMode.NAME_DESC:
        return sorted(clients, key=name_key, reverse=True)

    if resolved is SortMode.PINNED:
        return sorted(clients, key=lambda c: (not c.pinned, name_key(c)))

    return sorted(clients, key=name_key)


def filter_and_sort(
    clients: Iterable[Client],
    term: str = "",
    mode: Union[SortMode, str] = SortMode.NAME_ASC
) -> list[Client]:
    """Search then sort, as the client list view presents them."""
    return sort_clients(search_clients(clients, term), mode)


def pinned_clients(clients: Iterable[Client]) -> list[Client]:
    """Pinned clients in collection order."""
    return [client for client in clients if client.pinned]


def recent_clients(clients: Iterable[Client], limit: int = 5) -> list[Client]:
    """Most recently created clients, newest first."""
    ordered = sorted(clients, key=lambda c: c.created_at, reverse=True)
    return ordered[:limit]
