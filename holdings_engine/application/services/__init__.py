# holdings_engine/application/services/__init__.py

"""Application services"""

# Local imports
from holdings_engine.application.services._resolution_service import (
    HoldingsResolutionService,
)
from holdings_engine.application.services._resolution_service import resolve_holdings

__all__ = ["HoldingsResolutionService", "resolve_holdings"]
