"""Pytest configuration and shared fixtures."""

import logging
import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List

from eenheden_app.accrual.units import convert_to_units
from eenheden_app.engine import PortfolioEngine
from eenheden_app.models.finance import Client, Contract, ContractType
from eenheden_app.registry.clients import ClientRegistry


def make_contract(contract_id: str, contract_type: ContractType, amount: str, start: date) -> Contract:
    """Build a contract the way the registry does, with units fixed at creation."""
    amount_value = Decimal("0") if contract_type is ContractType.DELA else Decimal(amount)
    return Contract(
        id=contract_id,
        type=contract_type,
        amount=amount_value,
        units=convert_to_units(contract_type, amount_value),
        start_date=start,
    )


@pytest.fixture
def sample_clients() -> List[Client]:
    """Four clients with a mix of every contract type."""
    return [
        Client(
            id="1",
            name="Acme Corporation",
            description="Leading technology company specializing in enterprise software solutions.",
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            pinned=True,
            contracts=(
                make_contract("c1", ContractType.PS, "100", date(2024, 1, 15)),
                make_contract("c2", ContractType.DELA, "0", date(2024, 2, 1)),
            ),
        ),
        Client(
            id="2",
            name="Global Innovations Ltd",
            description="International consulting firm providing strategic business solutions.",
            created_at=datetime(2024, 2, 15, tzinfo=timezone.utc),
            contracts=(
                make_contract("c3", ContractType.BL, "150", date(2024, 3, 10)),
            ),
        ),
        Client(
            id="3",
            name="TechStart Solutions",
            description="Innovative startup focused on digital transformation and cloud services.",
            created_at=datetime(2024, 3, 1, tzinfo=timezone.utc),
            pinned=True,
            contracts=(
                make_contract("c4", ContractType.LS, "200", date(2024, 4, 5)),
                make_contract("c5", ContractType.PS, "75", date(2024, 4, 20)),
            ),
        ),
        Client(
            id="4",
            name="Enterprise Systems Inc",
            description="Large-scale system integrator specializing in financial software implementations.",
            created_at=datetime(2024, 4, 10, tzinfo=timezone.utc),
            contracts=(
                make_contract("c6", ContractType.BL, "300", date(2024, 5, 1)),
                make_contract("c7", ContractType.DELA, "0", date(2024, 5, 15)),
                make_contract("c8", ContractType.PS, "120", date(2024, 6, 1)),
            ),
        ),
    ]


@pytest.fixture
def registry(sample_clients) -> ClientRegistry:
    """Registry seeded with the sample clients."""
    return ClientRegistry(sample_clients)


@pytest.fixture
def engine(tmp_path) -> PortfolioEngine:
    """Empty engine using defaults only (no settings.yaml)."""
    return PortfolioEngine(config_dir=tmp_path)


@pytest.fixture
def seeded_engine(tmp_path, sample_clients) -> PortfolioEngine:
    """Engine seeded with the sample clients, defaults only."""
    return PortfolioEngine(config_dir=tmp_path, clients=sample_clients)


@pytest.fixture
def root_logger():
    """Root logger whose level and handlers are restored after the test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.setLevel(level)
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
