# holdings_engine/core/types/protocols.py

"""Protocol definitions for the collaborators of the holdings engine."""

# Standard library imports
from typing import Protocol

# Local imports
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.domain.records import SerialSubscription

# ============================================================================
# Backend Protocols
# ============================================================================


class CirculationBackendProtocol(Protocol):
    """Supplier of normalized circulation data for one bibliographic record

    A record that does not exist is reported as an empty list. Transport or
    protocol failures are raised as exceptions.
    """

    def fetch_item_availability(self, bib_id: str) -> list[ItemAvailability]: ...
    def fetch_holding_records(self, bib_id: str) -> list[HoldingRecord]: ...
    def fetch_serial_subscriptions(self, bib_id: str) -> list[SerialSubscription]: ...


__all__ = ["CirculationBackendProtocol"]
