# holdings_engine/infrastructure/config/__init__.py

"""Configuration infrastructure for the holdings engine.

This module manages configuration loading, validation, and models.
"""

# Local imports
from holdings_engine.infrastructure.config._loader import ConfigLoader
from holdings_engine.infrastructure.config._loader import get_config
from holdings_engine.infrastructure.config._models import AppConfig
from holdings_engine.infrastructure.config._models import HoldingsConfig
from holdings_engine.infrastructure.config._models import LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "HoldingsConfig",
    "LoggingConfig",
]
