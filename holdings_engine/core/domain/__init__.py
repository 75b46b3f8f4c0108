# holdings_engine/core/domain/__init__.py

"""Core domain models for holdings resolution"""

# Local imports
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.entries import HoldingsResult
from holdings_engine.core.domain.entries import SummaryEntry
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import ItemStatus
from holdings_engine.core.domain.enums import SUMMARY_LOCATION
from holdings_engine.core.domain.enums import SerialFilterPolicy
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.domain.records import SerialIssue
from holdings_engine.core.domain.records import SerialSubscription

__all__ = [
    "EntryKind",
    "HoldingRecord",
    "HoldingsEntry",
    "HoldingsResult",
    "ItemAvailability",
    "ItemStatus",
    "SUMMARY_LOCATION",
    "SerialFilterPolicy",
    "SerialIssue",
    "SerialSubscription",
    "SummaryEntry",
]
