# holdings_engine/application/processing/holding_details.py

"""Details derived from the MARC metadata of holding records"""

# Standard library imports
from logging import getLogger

# Third party imports
from pymarc import Record

# Local imports
from holdings_engine.core.domain.entries import DetailValue
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.shared.utils.marc_utilities import get_marc_data
from holdings_engine.shared.utils.marc_utilities import parse_marcxml

logger = getLogger(__name__)

DETAIL_FIELDS = ("notes", "summary", "supplements", "indexes", "links")


class HoldingDetailsReader:
    """Parses holding MARC metadata once per holding and extracts display details

    One reader is created per resolution run, so the caches never outlive the
    input collections they were built from.
    """

    def __init__(self, config: HoldingsConfig):
        self.config = config
        self._records: dict[str, Record | None] = {}
        self._details: dict[str, dict[str, DetailValue]] = {}

    def marc_record(self, holding: HoldingRecord) -> Record | None:
        """Parsed MARC record of a holding, None when it has no usable metadata"""
        if holding.holding_id not in self._records:
            record = parse_marcxml(holding.marcxml)
            if record is None and holding.marcxml:
                logger.warning(f"Holding {holding.holding_id} has unreadable MARC metadata")
            self._records[holding.holding_id] = record
        return self._records[holding.holding_id]

    def details(self, holding: HoldingRecord) -> dict[str, DetailValue]:
        """Configured details of a holding as entry field values

        Returns:
            Mapping of entry field name to value, including holdings_id when
            any detail was found; empty when nothing is available
        """
        if holding.holding_id in self._details:
            return self._details[holding.holding_id]

        details: dict[str, DetailValue] = {}
        record = self.marc_record(holding)
        if record is not None:
            for field_name in DETAIL_FIELDS:
                field_specs = getattr(self.config, field_name)
                if not field_specs:
                    continue
                value = get_marc_data(record, field_specs)
                if value:
                    details[field_name] = value
            if details:
                details["holdings_id"] = holding.holding_id

        self._details[holding.holding_id] = details
        return details

    def notes(self, holding: HoldingRecord) -> list[str]:
        """Public notes ($z) of the holding's 852 fields"""
        record = self.marc_record(holding)
        if record is None:
            return []
        value = get_marc_data(record, "852z")
        if value is None:
            return []
        return [value] if isinstance(value, str) else value
