"""
In-memory client registry and client list queries.
"""
from .clients import ClientRegistry
from .queries import (
    SortMode,
    filter_and_sort,
    pinned_clients,
    recent_clients,
    search_clients,
    sort_clients,
)

__all__ = [
    "ClientRegistry",
    "SortMode",
    "filter_and_sort",
    "pinned_clients",
    "recent_clients",
    "search_clients",
    "sort_clients",
]
