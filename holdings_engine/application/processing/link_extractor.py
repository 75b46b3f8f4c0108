# holdings_engine/application/processing/link_extractor.py

"""Electronic holdings from links embedded in holding records"""

# Standard library imports
from collections.abc import Iterator
from collections.abc import Mapping
from logging import getLogger

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.holding_details import HoldingDetailsReader
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import LINK_ITEM_PREFIX
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.shared.utils.marc_utilities import iter_data_fields

logger = getLogger(__name__)

LINK_TAG = "856"
URL_CODE = "u"
PART_CODE = "3"
DESCRIPTION_CODES = ("y", "z")
LINK_TEXT_SEPARATOR = ". "


class LinkExtractor:
    """Emits one electronic entry per URL found in holding metadata"""

    def __init__(self, formatter: EntryFormatter, details: HoldingDetailsReader):
        self.formatter = formatter
        self.details = details

    def extract(
        self, bib_id: str, holdings: Mapping[str, HoldingRecord], sort_keys: Iterator[int]
    ) -> list[HoldingsEntry]:
        """Electronic entries of all non-suppressed holdings

        Args:
            bib_id: Bibliographic record id
            holdings: Holding records by holding id, in backend order
            sort_keys: Sort key allocator shared with the other stages

        Returns:
            Entries in holding order, then link order within a holding
        """
        electronic: list[HoldingsEntry] = []
        for holding in holdings.values():
            if holding.suppressed:
                continue
            record = self.details.marc_record(holding)
            if record is None:
                continue

            notes = self.details.notes(holding)
            for subfields in iter_data_fields(record, LINK_TAG):
                urls = [value for code, value in subfields if code == URL_CODE and value]
                parts = [value for code, value in subfields if code == PART_CODE and value]
                descriptions = [
                    value for code, value in subfields if code in DESCRIPTION_CODES and value
                ]
                for url in urls:
                    electronic.append(
                        self.link_entry(
                            bib_id, holding, url, descriptions, parts, notes, next(sort_keys)
                        )
                    )

        logger.debug(f"Found {len(electronic)} electronic holdings for {bib_id}")
        return electronic

    def link_entry(
        self,
        bib_id: str,
        holding: HoldingRecord,
        url: str,
        descriptions: list[str],
        parts: list[str],
        notes: list[str],
        sort_key: int,
    ) -> HoldingsEntry:
        """Build the entry of one link"""
        return HoldingsEntry(
            id=bib_id,
            item_id=f"{LINK_ITEM_PREFIX}{sort_key}",
            kind=EntryKind.ELECTRONIC,
            library_id=holding.library_id,
            location_id=holding.location_code,
            location=LINK_TEXT_SEPARATOR.join(parts),
            availability=True,
            status=LINK_TEXT_SEPARATOR.join(descriptions),
            callnumber=self.formatter.call_number(
                holding.location_code,
                holding.location_description,
                holding.callnumber,
                holding.collection_code,
                holding.collection_code_description,
            ),
            requests_placed=0,
            sort_key=sort_key,
            use_unknown_message=False,
            location_href=url,
            notes=notes or None,
            holdings_id=holding.holding_id,
        )
