# holdings_engine/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from holdings_engine.infrastructure.config import ConfigLoader

__all__ = ["ConfigLoader"]
