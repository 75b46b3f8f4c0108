# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from datetime import date
from logging import getLogger

# Third party imports
import pytest

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.holding_details import HoldingDetailsReader
from holdings_engine.application.processing.status_resolver import StatusResolver
from holdings_engine.infrastructure.config import HoldingsConfig


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - just reset logging"""
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(30)  # WARNING level

    yield

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def today() -> date:
    """Fixed date for overdue detection and serial year filters"""
    return date(2024, 6, 1)


@pytest.fixture
def config() -> HoldingsConfig:
    """Default holdings configuration"""
    return HoldingsConfig()


@pytest.fixture
def resolver(config: HoldingsConfig) -> StatusResolver:
    return StatusResolver(config)


@pytest.fixture
def formatter(config: HoldingsConfig) -> EntryFormatter:
    return EntryFormatter(config)


@pytest.fixture
def details(config: HoldingsConfig) -> HoldingDetailsReader:
    return HoldingDetailsReader(config)
