# tests/unit/application/services/test_resolution_service.py

"""Tests for the resolution service configuration handling"""

# Standard library imports
from datetime import date

# Local imports
from holdings_engine.application.services import HoldingsResolutionService
from holdings_engine.application.services import resolve_holdings
from holdings_engine.infrastructure.config import ConfigLoader
from holdings_engine.infrastructure.config import HoldingsConfig
from tests.fixtures.records import RecordBuilder
from tests.fixtures.records import StaticBackend

TODAY = date(2024, 6, 1)


class TestServiceConfiguration:
    """Test the configuration forms the service accepts"""

    def test_holdings_config(self) -> None:
        config = HoldingsConfig(group_by_location=True)
        assert HoldingsResolutionService(config).config is config

    def test_config_loader(self) -> None:
        loader = ConfigLoader.from_dict({"holdings": {"group_by_location": True}})
        assert HoldingsResolutionService(loader).config.group_by_location is True

    def test_default_config(self) -> None:
        service = HoldingsResolutionService()
        assert isinstance(service.config, HoldingsConfig)

    def test_grouped_location_names(self) -> None:
        backend = StaticBackend(
            items=[RecordBuilder.item(location_code="REF", location_description="Reference")]
        )
        loader = ConfigLoader.from_dict(
            {"holdings": {"group_by_location": True, "library_names": {"A": "Main"}}}
        )
        result = resolve_holdings("1", backend, loader, today=TODAY)

        assert result.entries[0].location == "Main, Reference"
        assert result.entries[0].callnumber == ""

    def test_service_is_reusable(self) -> None:
        """Holding caches do not leak between resolutions"""
        service = HoldingsResolutionService(HoldingsConfig(use_holding_records=True))
        first = StaticBackend(holdings=[RecordBuilder.holding(holding_id="1", callnumber="X")])
        second = StaticBackend(holdings=[RecordBuilder.holding(holding_id="1", library_id="B")])

        assert service.resolve("1", first, today=TODAY).entries[0].library_id == "A"
        assert service.resolve("1", second, today=TODAY).entries[0].library_id == "B"
