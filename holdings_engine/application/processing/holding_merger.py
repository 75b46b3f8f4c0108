# holdings_engine/application/processing/holding_merger.py

"""Merging item availability with holding records"""

# Standard library imports
from collections.abc import Iterator
from collections.abc import Mapping
from datetime import date
from logging import getLogger

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.holding_details import HoldingDetailsReader
from holdings_engine.application.processing.status_resolver import StatusResolver
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import HOLDING_ITEM_PREFIX
from holdings_engine.core.domain.enums import REASON_NOT_FOR_LOAN
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.infrastructure.config import HoldingsConfig

logger = getLogger(__name__)


class HoldingMerger:
    """Builds item entries and synthesizes entries for holdings without items

    Holdings referenced by items are found in a first pass over the items, so
    holding records are never marked or otherwise modified.
    """

    def __init__(
        self,
        config: HoldingsConfig,
        resolver: StatusResolver,
        formatter: EntryFormatter,
        details: HoldingDetailsReader,
    ):
        self.config = config
        self.resolver = resolver
        self.formatter = formatter
        self.details = details

    def referenced_holding_ids(
        self, items: list[ItemAvailability], holdings: Mapping[str, HoldingRecord]
    ) -> set[str]:
        """Ids of the holdings that at least one item belongs to"""
        return {
            item.holding_id
            for item in items
            if item.holding_id is not None and item.holding_id in holdings
        }

    def merge(
        self,
        bib_id: str,
        items: list[ItemAvailability],
        holdings: Mapping[str, HoldingRecord],
        sort_keys: Iterator[int],
        today: date,
    ) -> list[HoldingsEntry]:
        """Build entries for items and for holdings that have no items

        Args:
            bib_id: Bibliographic record id
            items: Item availability records in backend order
            holdings: Holding records by holding id, in backend order
            sort_keys: Sort keys for synthesized entries; items use their index
            today: Date used for overdue detection

        Returns:
            Item entries followed by holding-only entries
        """
        referenced = self.referenced_holding_ids(items, holdings)

        entries: list[HoldingsEntry] = []
        for index, item in enumerate(items):
            holding = holdings.get(item.holding_id) if item.holding_id else None
            if holding is not None and holding.suppressed:
                logger.debug(f"Skipping item {item.item_id} of suppressed holding")
                continue
            entries.append(self.item_entry(bib_id, item, index, holding, today))

        for holding in holdings.values():
            if holding.suppressed or holding.holding_id in referenced:
                continue
            entry = self.holding_entry(bib_id, holding, next(sort_keys))
            entries.append(entry.model_copy(update=self.details.details(holding)))

        logger.debug(
            f"Merged {len(items)} items and {len(holdings)} holdings "
            f"into {len(entries)} entries for {bib_id}"
        )
        return entries

    def item_entry(
        self,
        bib_id: str,
        item: ItemAvailability,
        sort_key: int,
        holding: HoldingRecord | None,
        today: date,
    ) -> HoldingsEntry:
        """Build the entry of one item"""
        resolution = self.resolver.resolve(item, today)

        if not self.config.use_home_library and item.holding_library_id is not None:
            library_id = item.holding_library_id
        else:
            library_id = item.library_id

        not_for_loan = item.unavailability_reasons.get(REASON_NOT_FOR_LOAN, {})
        on_order = not_for_loan.get("status") == self.config.on_order_status

        entry = HoldingsEntry(
            id=bib_id,
            item_id=item.item_id,
            kind=EntryKind.ITEM,
            library_id=library_id,
            location_id=item.location_code,
            location=self.formatter.location_name(
                library_id, item.location_code, item.location_description
            ),
            availability=resolution.available,
            status=resolution.status,
            status_codes=resolution.status_codes,
            callnumber=self.formatter.call_number(
                item.location_code,
                item.location_description,
                item.callnumber,
                item.collection_code,
                item.collection_code_description,
            ),
            due_date=resolution.due_date,
            barcode=item.barcode,
            requests_placed=item.hold_queue_length,
            sort_key=sort_key,
            number=self.formatter.issue_number(item),
            on_order=on_order,
            item_notes=[item.public_notes] if item.public_notes else [],
        )
        if holding is not None:
            entry = entry.model_copy(update=self.details.details(holding))
        return entry

    def holding_entry(self, bib_id: str, holding: HoldingRecord, sort_key: int) -> HoldingsEntry:
        """Build a zero-availability entry for a holding record"""
        return HoldingsEntry(
            id=bib_id,
            item_id=f"{HOLDING_ITEM_PREFIX}{holding.holding_id}",
            kind=EntryKind.HOLDING,
            library_id=holding.library_id,
            location_id=holding.location_code,
            location=self.formatter.location_name(
                holding.library_id, holding.location_code, holding.location_description
            ),
            availability=False,
            status="",
            callnumber=self.formatter.call_number(
                holding.location_code,
                holding.location_description,
                holding.callnumber,
                holding.collection_code,
                holding.collection_code_description,
            ),
            requests_placed=0,
            sort_key=sort_key,
            use_unknown_message=True,
        )
