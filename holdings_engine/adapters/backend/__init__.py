# holdings_engine/adapters/backend/__init__.py

"""Backend payload normalization and collaborators"""

# Local imports
from holdings_engine.adapters.backend._normalizer import normalize_availability_response
from holdings_engine.adapters.backend._normalizer import normalize_holding
from holdings_engine.adapters.backend._normalizer import normalize_holdings_response
from holdings_engine.adapters.backend._normalizer import normalize_item
from holdings_engine.adapters.backend._normalizer import normalize_subscription
from holdings_engine.adapters.backend._normalizer import normalize_subscriptions_response
from holdings_engine.adapters.backend._payload_backend import PayloadBackend

__all__ = [
    "PayloadBackend",
    "normalize_availability_response",
    "normalize_holding",
    "normalize_holdings_response",
    "normalize_item",
    "normalize_subscription",
    "normalize_subscriptions_response",
]
