# holdings_engine/adapters/backend/_payload_backend.py

"""Backend collaborator serving payloads that were fetched by the caller"""

# Standard library imports
from logging import getLogger

# Local imports
from holdings_engine.adapters.backend._normalizer import normalize_availability_response
from holdings_engine.adapters.backend._normalizer import normalize_holdings_response
from holdings_engine.adapters.backend._normalizer import normalize_subscriptions_response
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.domain.records import SerialSubscription
from holdings_engine.core.types.json import JSONDict

logger = getLogger(__name__)


class PayloadBackend:
    """Serves raw backend responses, keyed by bibliographic id

    A missing response means the backend reported the record as not found.
    Responses are normalized on every fetch, so the same backend can serve
    concurrent resolutions.
    """

    def __init__(
        self,
        availability: dict[str, JSONDict] | None = None,
        holdings: dict[str, JSONDict] | None = None,
        subscriptions: dict[str, JSONDict] | None = None,
    ):
        """Initialize with raw responses

        Args:
            availability: Availability search responses by bib id
            holdings: Holdings responses by bib id
            subscriptions: Serial subscription responses by bib id
        """
        self.availability = availability or {}
        self.holdings = holdings or {}
        self.subscriptions = subscriptions or {}

    def fetch_item_availability(self, bib_id: str) -> list[ItemAvailability]:
        if bib_id not in self.availability:
            logger.debug(f"No availability response for {bib_id}")
            return []
        return normalize_availability_response(self.availability[bib_id])

    def fetch_holding_records(self, bib_id: str) -> list[HoldingRecord]:
        if bib_id not in self.holdings:
            logger.debug(f"No holdings response for {bib_id}")
            return []
        return normalize_holdings_response(self.holdings[bib_id])

    def fetch_serial_subscriptions(self, bib_id: str) -> list[SerialSubscription]:
        if bib_id not in self.subscriptions:
            logger.debug(f"No subscriptions response for {bib_id}")
            return []
        return normalize_subscriptions_response(self.subscriptions[bib_id])
