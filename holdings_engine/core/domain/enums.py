# holdings_engine/core/domain/enums.py

"""Domain enumerations and display constants for holdings resolution"""

# Standard library imports
from enum import Enum


class EntryKind(Enum):
    """Origin of a holdings entry"""

    ITEM = "item"  # Built from an item availability record
    HOLDING = "holding"  # Synthesized for a holding record without items
    SERIAL = "serial"  # Synthesized for an unmatched serial subscription
    ELECTRONIC = "electronic"  # One link found in holding metadata


class SerialFilterPolicy(Enum):
    """Which received serial issues are listed in the purchase history"""

    NONE = "none"
    CURRENT_AND_PREVIOUS_YEAR = "current+1"
    LAST_YEAR = "last year"


class ItemStatus(Enum):
    """Display status labels produced by the status resolver

    Backend reason codes without a dedicated label are displayed using the
    reason's own code, so the set of possible statuses is open ended.
    """

    ON_SHELF = "On Shelf"
    NOT_AVAILABLE = "Not Available"
    CHARGED = "Charged"
    OVERDUE = "Overdue"
    LOST = "Lost--Library Applied"
    ON_REFERENCE_DESK = "On Reference Desk"
    IN_TRANSIT = "In Transit"
    IN_TRANSIT_ON_HOLD = "In Transit On Hold"
    ON_HOLD = "On Hold"
    ON_HOLDSHELF = "On Holdshelf"


# Backend unavailability reason codes
REASON_CHECKED_OUT = "Item::CheckedOut"
REASON_LOST = "Item::Lost"
REASON_NOT_FOR_LOAN = "Item::NotForLoan"
REASON_HELD = "Item::Held"
ITEM_REASON_PREFIX = "Item::"

# Location marker of the synthetic summary entry
SUMMARY_LOCATION = "__HOLDINGSSUMMARYLOCATION__"

# Prefixes of synthesized item ids
HOLDING_ITEM_PREFIX = "HLD_"
SERIAL_ITEM_PREFIX = "SERIAL_"
LINK_ITEM_PREFIX = "LINK_"
