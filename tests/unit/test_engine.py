"""Unit tests for the portfolio engine."""

import logging
import pytest
from decimal import Decimal
from unittest.mock import patch

import structlog

from eenheden_app.engine import PortfolioEngine
from eenheden_app.errors import (
    ClientNotFoundError,
    ConfigurationError,
    InvalidAmountError,
)
from eenheden_app.models.finance import TierBand


class TestEngineInitialization:
    """Test engine construction and configuration"""

    def test_empty_engine(self, engine):
        stats = engine.stats()
        assert stats.total_clients == 0
        assert stats.total_contracts == 0
        assert stats.total_units == 0
        assert stats.current_tier is TierBand.FT1

    def test_seeded_engine(self, seeded_engine):
        assert len(seeded_engine.registry) == 4

    def test_config_overrides_applied(self, tmp_path):
        engine = PortfolioEngine(
            config_dir=tmp_path,
            config_overrides={"dashboard": {"recent_limit": 2}}
        )
        assert engine.config.dashboard.recent_limit == 2

    def test_invalid_config_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError):
            PortfolioEngine(
                config_dir=tmp_path,
                config_overrides={"history": {"baseline_multipliers": {"1year": 2}}}
            )

    def test_configure_logging_applies_settings(self, tmp_path, root_logger):
        (tmp_path / "settings.yaml").write_text(
            "logging:\n  level: ERROR\n  include_timestamp: false\n"
        )
        engine = PortfolioEngine(
            config_dir=tmp_path,
            config_overrides={"logging": {"format_json": True}}
        )

        with patch('eenheden_app.logging.config.structlog.configure') as mock_configure:
            engine.configure_logging()

        assert root_logger.level == logging.ERROR
        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_construction_leaves_logging_untouched(self, tmp_path, root_logger):
        level = root_logger.level
        with patch('eenheden_app.logging.config.structlog.configure') as mock_configure:
            PortfolioEngine(config_dir=tmp_path, config_overrides={"logging": {"level": "ERROR"}})

        mock_configure.assert_not_called()
        assert root_logger.level == level


class TestDerivedViews:
    """Statistics are derived from the current registry contents"""

    def test_stats(self, seeded_engine):
        stats = seeded_engine.stats()
        assert stats.total_clients == 4
        assert stats.total_contracts == 8
        assert stats.total_units == Decimal("887.50")
        assert stats.total_revenue == Decimal("1331.25")
        assert stats.current_tier is TierBand.FT1

    def test_client_units(self, seeded_engine):
        assert seeded_engine.client_units("1") == Decimal("147.50")

    def test_client_units_unknown_client(self, seeded_engine):
        with pytest.raises(ClientNotFoundError):
            seeded_engine.client_units("missing")

    def test_tier_progress(self, seeded_engine):
        progress = seeded_engine.tier_progress()

        assert progress["total_units"] == Decimal("887.50")
        assert progress["current_tier"] is TierBand.FT1
        assert progress["revenue"].total == Decimal("1331.25")
        assert progress["next_tier"].next_tier is TierBand.FT2
        assert progress["next_tier"].units_needed == Decimal("112.50")
        assert progress["progress_pct"] == pytest.approx(88.75)
        assert progress["next_tier_target_pct"] == pytest.approx(88.75)

    def test_stats_follow_mutations(self, seeded_engine):
        seeded_engine.delete_client("4")
        stats = seeded_engine.stats()
        assert stats.total_clients == 3
        assert stats.total_contracts == 5
        assert stats.total_units == Decimal("521.00")

    def test_compare_goal(self, seeded_engine):
        comparison = seeded_engine.compare_goal(1500)
        assert comparison.current_units == Decimal("887.50")
        assert comparison.target_tier is TierBand.FT2
        assert comparison.units_difference == Decimal("612.50")
        assert comparison.revenue_difference == Decimal("2500") - Decimal("1331.25")
        assert comparison.goal_reached is False

    def test_growth_uses_configured_multipliers(self, tmp_path, sample_clients):
        engine = PortfolioEngine(
            config_dir=tmp_path,
            config_overrides={"history": {"baseline_multipliers": {"1month": 0.5}}},
            clients=sample_clients
        )
        report = engine.growth("1month")
        # 887.50 * 0.5 rounds half up to 444
        assert report.units.baseline == Decimal("444")

    def test_growth_default_timeframe(self, seeded_engine):
        report = seeded_engine.growth()
        assert report.timeframe == "1year"
        assert report.units.baseline == Decimal("178")

    def test_list_clients_default_sort(self, seeded_engine):
        names = [c.name for c in seeded_engine.list_clients()]
        assert names[0] == "Acme Corporation"
        assert names[-1] == "TechStart Solutions"

    def test_list_clients_configured_sort(self, tmp_path, sample_clients):
        engine = PortfolioEngine(
            config_dir=tmp_path,
            config_overrides={"dashboard": {"default_sort": "name-desc"}},
            clients=sample_clients
        )
        assert engine.list_clients()[0].name == "TechStart Solutions"

    def test_list_clients_with_search(self, seeded_engine):
        result = seeded_engine.list_clients("tech", "pinned")
        assert [c.name for c in result] == ["Acme Corporation", "TechStart Solutions"]

    def test_dashboard(self, tmp_path, sample_clients):
        engine = PortfolioEngine(
            config_dir=tmp_path,
            config_overrides={"dashboard": {"recent_limit": 2}},
            clients=sample_clients
        )
        view = engine.dashboard()

        assert view["stats"].total_clients == 4
        assert [c.id for c in view["pinned"]] == ["1", "3"]
        assert [c.id for c in view["recent"]] == ["4", "3"]

    def test_runtime_stats(self, seeded_engine):
        assert seeded_engine.get_runtime_stats() == {
            'clients': 4,
            'contracts': 8,
            'total_units': "887.50",
            'current_tier': "FT1",
        }


class TestMutations:
    """Test mutations routed through the engine"""

    def test_add_client_and_contract(self, engine):
        client = engine.add_client("Acme", "Software")
        engine.add_contract(client.id, "LS", 500)

        assert engine.client_units(client.id) == Decimal("210.83")

    def test_update_and_toggle(self, seeded_engine):
        seeded_engine.update_client("2", description="Updated")
        assert seeded_engine.toggle_pin("2").pinned is True
        assert seeded_engine.registry.get_client("2").description == "Updated"

    def test_delete_contract(self, seeded_engine):
        seeded_engine.delete_contract("1", "c2")
        assert seeded_engine.client_units("1") == Decimal("87.50")

    def test_rejected_input_propagates(self, seeded_engine):
        with pytest.raises(InvalidAmountError):
            seeded_engine.add_contract("1", "PS", -10)
        assert seeded_engine.stats().total_contracts == 8

    def test_registry_error_propagates(self, seeded_engine):
        with pytest.raises(ClientNotFoundError):
            seeded_engine.delete_client("missing")

    @patch('eenheden_app.engine.log_tier_change')
    def test_tier_change_logged(self, mock_log, seeded_engine):
        # 200 * 0.73 = 146 units takes 887.50 past 1001
        seeded_engine.add_contract("2", "BL", 200)

        mock_log.assert_called_once()
        kwargs = mock_log.call_args.kwargs
        assert kwargs["from_tier"] == "FT1"
        assert kwargs["to_tier"] == "FT2"
        assert kwargs["total_units"] == Decimal("1033.50")
        assert kwargs["trigger"] == "add_contract"

    @patch('eenheden_app.engine.log_tier_change')
    def test_no_tier_change_not_logged(self, mock_log, seeded_engine):
        seeded_engine.add_contract("2", "PS", 10)
        mock_log.assert_not_called()

    @patch('eenheden_app.engine.log_tier_change')
    def test_tier_drop_logged(self, mock_log, seeded_engine):
        seeded_engine.add_contract("2", "BL", 200)
        seeded_engine.delete_client("2")

        last = mock_log.call_args.kwargs
        assert last["from_tier"] == "FT2"
        assert last["to_tier"] == "FT1"
        assert last["trigger"] == "delete_client"
