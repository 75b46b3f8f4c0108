# holdings_engine/__init__.py

"""Holdings & Availability Resolution Engine

Turns item availability, holding records and serial subscriptions retrieved
from a library circulation backend into ordered holdings entries, electronic
holdings and availability statistics.
"""

# Local imports
# High-level API
from holdings_engine.adapters.backend import PayloadBackend
from holdings_engine.application.services import HoldingsResolutionService
from holdings_engine.application.services import resolve_holdings

# Data models
from holdings_engine.core.domain import EntryKind
from holdings_engine.core.domain import HoldingRecord
from holdings_engine.core.domain import HoldingsEntry
from holdings_engine.core.domain import HoldingsResult
from holdings_engine.core.domain import ItemAvailability
from holdings_engine.core.domain import SerialFilterPolicy
from holdings_engine.core.domain import SerialIssue
from holdings_engine.core.domain import SerialSubscription
from holdings_engine.core.domain import SummaryEntry
from holdings_engine.core.types.protocols import CirculationBackendProtocol

# Configuration and logging
from holdings_engine.infrastructure.config import ConfigLoader
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.infrastructure.config import get_config
from holdings_engine.infrastructure.logging import setup_logging

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "HoldingsResolutionService",
    "resolve_holdings",
    "PayloadBackend",
    "CirculationBackendProtocol",
    # Data models
    "EntryKind",
    "HoldingRecord",
    "HoldingsEntry",
    "HoldingsResult",
    "ItemAvailability",
    "SerialFilterPolicy",
    "SerialIssue",
    "SerialSubscription",
    "SummaryEntry",
    # Configuration and logging
    "ConfigLoader",
    "HoldingsConfig",
    "get_config",
    "setup_logging",
    # Version
    "__version__",
]
