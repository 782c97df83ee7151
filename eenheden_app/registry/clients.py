"""
In-memory client registry.

The registry owns an insertion-ordered map of client id to Client. Clients
and contracts are immutable values; every mutation stores a replacement
Client, so snapshots handed out earlier never change underneath a caller.
"""

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Iterator, Optional, Union

from ..accrual.units import convert_to_units, normalize_contract_amount, resolve_contract_type
from ..errors import (
    ClientNotFoundError,
    ContractNotFoundError,
    DuplicateClientError,
    InvalidDateError,
    MissingFieldError,
)
from ..logging.config import get_registry_logger, log_registry_change
from ..models.finance import Client, Contract, ContractType
from ..utils.identifiers import new_id
from ..utils.time import ensure_date, ensure_utc, utc_now

logger = get_registry_logger(__name__)


class ClientRegistry:
    """Owns the client collection and applies every mutation to it."""

    def __init__(self, clients: Optional[list[Client]] = None):
        """
        Seed the registry with existing clients.

        Raises:
            DuplicateClientError: If two seeded clients share an id
            InvalidDateError: If a created_at is not a datetime
        """
        self.logger = logger
        self._clients: dict[str, Client] = {}

        for client in clients or []:
            if client.id in self._clients:
                raise DuplicateClientError(
                    f"Duplicate client id: {client.id}",
                    client_id=client.id,
                    context={"client_id": client.id}
                )
            created_at = self._normalize_created_at(client.created_at)
            if created_at is not client.created_at:
                client = replace(client, created_at=created_at)
            self._clients[client.id] = client

    def __len__(self) -> int:
        return len(self._clients)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._clients

    def __iter__(self) -> Iterator[Client]:
        return iter(self.clients())

    def clients(self) -> tuple[Client, ...]:
        """Snapshot of all clients in insertion order."""
        return tuple(self._clients.values())

    def get_client(self, client_id: str) -> Client:
        """
        Look up a client by id.

        Raises:
            ClientNotFoundError: If no client has this id
        """
        client = self._clients.get(client_id)
        if client is None:
            raise ClientNotFoundError(
                f"Client not found: {client_id}",
                client_id=client_id
            )
        return client

    def add_client(
        self,
        name: str,
        description: str = "",
        created_at: Optional[datetime] = None
    ) -> Client:
        """
        Register a new client with no contracts.

        Raises:
            MissingFieldError: If the name is empty after trimming
            InvalidDateError: If created_at is not a datetime
        """
        clean_name = self._require_name(name)
        stamp = utc_now() if created_at is None else self._normalize_created_at(created_at)

        client = Client(
            id=new_id("cl-"),
            name=clean_name,
            description=(description or "").strip(),
            created_at=stamp,
        )
        self._clients[client.id] = client

        log_registry_change(self.logger, "add_client", client.id, {"name": client.name})
        return client

    def update_client(
        self,
        client_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        pinned: Optional[bool] = None
    ) -> Client:
        """Replace a client's name, description or pinned flag."""
        client = self.get_client(client_id)

        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = self._require_name(name)
        if description is not None:
            changes["description"] = description.strip()
        if pinned is not None:
            changes["pinned"] = bool(pinned)

        if not changes:
            return client

        updated = replace(client, **changes)
        self._clients[client_id] = updated

        log_registry_change(self.logger, "update_client", client_id, {"fields": sorted(changes)})
        return updated

    def toggle_pin(self, client_id: str) -> Client:
        """Flip a client's pinned flag."""
        client = self.get_client(client_id)
        return self.update_client(client_id, pinned=not client.pinned)

    def delete_client(self, client_id: str) -> Client:
        """Remove a client and its contracts; returns the removed client."""
        client = self.get_client(client_id)
        del self._clients[client_id]

        log_registry_change(
            self.logger, "delete_client", client_id,
            {"contracts_removed": len(client.contracts)}
        )
        return client

    def add_contract(
        self,
        client_id: str,
        contract_type: Union[ContractType, str],
        amount: Any = None,
        start_date: Optional[Union[date, datetime, str]] = None
    ) -> Contract:
        """
        Create a contract for a client with its units computed once.

        Raises:
            ClientNotFoundError: If the client does not exist
            InvalidContractTypeError: If the type is unknown
            InvalidAmountError: If a non-DELA amount is missing or not positive
            InvalidDateError: If start_date cannot be parsed
        """
        client = self.get_client(client_id)
        resolved = resolve_contract_type(contract_type, strict=True)
        clean_amount = normalize_contract_amount(resolved, amount)

        try:
            contract_start = ensure_date(start_date)
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid start date: {start_date!r}",
                field_name="start_date",
                value=start_date,
                context={"start_date": start_date}
            ) from e

        contract = Contract(
            id=new_id("ct-"),
            type=resolved,
            amount=clean_amount,
            units=convert_to_units(resolved, clean_amount),
            start_date=contract_start,
        )

        self._clients[client_id] = replace(client, contracts=client.contracts + (contract,))

        log_registry_change(
            self.logger, "add_contract", client_id,
            {
                "contract_id": contract.id,
                "contract_type": contract.type.value,
                "amount": str(contract.amount),
                "units": str(contract.units),
            }
        )
        return contract

    def delete_contract(self, client_id: str, contract_id: str) -> Contract:
        """
        Remove one contract from a client; returns the removed contract.

        Raises:
            ClientNotFoundError: If the client does not exist
            ContractNotFoundError: If the client has no such contract
        """
        client = self.get_client(client_id)
        contract = client.find_contract(contract_id)
        if contract is None:
            raise ContractNotFoundError(
                f"Contract {contract_id} not found for client {client_id}",
                client_id=client_id,
                contract_id=contract_id
            )

        remaining = tuple(c for c in client.contracts if c.id != contract_id)
        self._clients[client_id] = replace(client, contracts=remaining)

        log_registry_change(
            self.logger, "delete_contract", client_id,
            {"contract_id": contract_id, "units": str(contract.units)}
        )
        return contract

    @staticmethod
    def _normalize_created_at(value: datetime) -> datetime:
        try:
            return ensure_utc(value)
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid creation timestamp: {value!r}",
                field_name="created_at",
                value=value,
                context={"created_at": value}
            ) from e

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        clean = (name or "").strip()
        if not clean:
            raise MissingFieldError("Client name is required", field_name="name")
        return clean
