# holdings_engine/application/processing/ordering.py

"""Total ordering of holdings entries by configured library and location priority"""

# Standard library imports
from collections.abc import Callable
from functools import cmp_to_key

# Local imports
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.shared.utils.text_utils import natural_compare

# A lookup strategy returns (rank, found) for an entry
type RankLookup = Callable[[HoldingsEntry], tuple[int, bool]]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class EntryOrdering:
    """Comparator for holdings entries

    Entries are ordered by, in turn:

    1. library rank (library/location pair first, then library alone)
    2. location rank
    3. location display string
    4. serial issue label, newest first (only when enabled)
    5. sort key, i.e. the order in which entries were first seen

    Sort keys are unique within a resolution run, so the order is total.
    """

    def __init__(self, config: HoldingsConfig):
        self.config = config
        self.library_lookups: list[RankLookup] = [
            self.library_location_rank,
            self.library_rank,
        ]
        self.location_lookups: list[RankLookup] = [self.location_rank]

    def library_location_rank(self, entry: HoldingsEntry) -> tuple[int, bool]:
        """Rank of the entry's library/location pair"""
        key = f"{entry.library_id}/{entry.location_id}"
        if key in self.config.library_order:
            return self.config.library_order[key], True
        return self.config.default_sort_rank, False

    def library_rank(self, entry: HoldingsEntry) -> tuple[int, bool]:
        """Rank of the entry's library"""
        if entry.library_id in self.config.library_order:
            return self.config.library_order[entry.library_id], True
        return self.config.default_sort_rank, False

    def location_rank(self, entry: HoldingsEntry) -> tuple[int, bool]:
        """Rank of the entry's location"""
        if entry.location_id in self.config.location_order:
            return self.config.location_order[entry.location_id], True
        return self.config.default_sort_rank, False

    def resolve_rank(self, entry: HoldingsEntry, lookups: list[RankLookup]) -> int:
        """First rank found by the lookups, or the default sort rank"""
        for lookup in lookups:
            rank, found = lookup(entry)
            if found:
                return rank
        return self.config.default_sort_rank

    def compare(self, a: HoldingsEntry, b: HoldingsEntry) -> int:
        """Compare two entries

        Returns:
            -1 if a sorts first, 1 if b sorts first, 0 only for the same entry
        """
        result = self.resolve_rank(a, self.library_lookups) - self.resolve_rank(
            b, self.library_lookups
        )
        if result == 0:
            result = self.resolve_rank(a, self.location_lookups) - self.resolve_rank(
                b, self.location_lookups
            )
        if result == 0:
            result = (a.location > b.location) - (a.location < b.location)
        if result == 0 and self.config.sort_items_by_serial_issue:
            # Reverse chronological order
            result = natural_compare(b.number, a.number)
        if result == 0:
            result = a.sort_key - b.sort_key
        return _sign(result)

    def sort(self, entries: list[HoldingsEntry]) -> list[HoldingsEntry]:
        """Entries in display order"""
        return sorted(entries, key=cmp_to_key(self.compare))
