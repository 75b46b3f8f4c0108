# holdings_engine/application/processing/summary.py

"""Availability statistics over the physical holdings entries"""

# Local imports
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.entries import SummaryEntry
from holdings_engine.core.domain.enums import EntryKind


def summarize(entries: list[HoldingsEntry], include_reservations: bool = False) -> SummaryEntry:
    """Aggregate item counts, availability, locations and hold queue depth

    Only item entries count toward total, ordered and available; entries
    synthesized for holdings and subscriptions only add their locations. Items
    on order are never counted as available. The hold queue is shared by all
    items of a record, so the deepest queue is reported rather than a sum.

    Args:
        entries: Physical entries, in any order
        include_reservations: Whether to report the hold queue depth

    Returns:
        Summary entry with the sentinel summary location
    """
    total = 0
    ordered = 0
    available = 0
    reservations = 0
    locations: set[str] = set()

    for entry in entries:
        locations.add(entry.location)
        if entry.kind is not EntryKind.ITEM:
            continue
        if entry.on_order:
            ordered += 1
        else:
            total += 1
            if entry.availability:
                available += 1
        reservations = max(reservations, entry.requests_placed or 0)

    return SummaryEntry(
        available=available,
        total=total,
        ordered=ordered,
        locations=len(locations),
        reservations=reservations if include_reservations else None,
    )
