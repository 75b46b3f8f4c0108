# tests/fixtures/records.py

"""Shared record builders for tests"""

# Standard library imports
from xml.sax.saxutils import escape

# Local imports
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.domain.records import SerialIssue
from holdings_engine.core.domain.records import SerialSubscription
from holdings_engine.infrastructure.config import HoldingsConfig

BIB_ID = "1000"
MARC_NS = "http://www.loc.gov/MARC21/slim"


def marcxml(*fields: tuple[str, list[tuple[str, str]]]) -> str:
    """Build a MARCXML holdings record from (tag, [(code, value), ...]) fields"""
    lines = [f'<record xmlns="{MARC_NS}">', "<leader>00000nx  a2200000un 4500</leader>"]
    for tag, subfields in fields:
        lines.append(f'<datafield tag="{tag}" ind1=" " ind2=" ">')
        for code, value in subfields:
            lines.append(f'<subfield code="{code}">{escape(value)}</subfield>')
        lines.append("</datafield>")
    lines.append("</record>")
    return "\n".join(lines)


class RecordBuilder:
    """Builder for test records with sensible defaults"""

    @staticmethod
    def item(**kwargs) -> ItemAvailability:
        """Create an available item at library A

        Args:
            **kwargs: Override any default values

        Returns:
            ItemAvailability instance
        """
        defaults = {
            "item_id": "1",
            "library_id": "A",
            "location_code": "GEN",
            "available": True,
            "callnumber": "84.2",
        }
        defaults.update(kwargs)
        return ItemAvailability(**defaults)

    @staticmethod
    def checked_out_item(due_date: str = "2030-01-15", **kwargs) -> ItemAvailability:
        """Create an item that is checked out"""
        kwargs.setdefault(
            "unavailability_reasons", {"Item::CheckedOut": {"due_date": due_date}}
        )
        kwargs.setdefault("available", False)
        return RecordBuilder.item(**kwargs)

    @staticmethod
    def holding(**kwargs) -> HoldingRecord:
        """Create a non-suppressed holding at library A without metadata"""
        defaults = {
            "holding_id": "10",
            "library_id": "A",
            "location_code": "GEN",
        }
        defaults.update(kwargs)
        return HoldingRecord(**defaults)

    @staticmethod
    def issue(label: str, published_date: str, received: bool = True, **kwargs) -> SerialIssue:
        """Create a serial issue"""
        return SerialIssue(
            sequence_label=label, published_date=published_date, received=received, **kwargs
        )

    @staticmethod
    def subscription(**kwargs) -> SerialSubscription:
        """Create a subscription at library A without issues"""
        defaults = {"library_id": "A", "location_code": "GEN"}
        defaults.update(kwargs)
        return SerialSubscription(**defaults)


def holdings_config(**kwargs) -> HoldingsConfig:
    """Holdings configuration with overrides"""
    return HoldingsConfig(**kwargs)


class StaticBackend:
    """In-memory backend serving typed records"""

    def __init__(self, items=None, holdings=None, subscriptions=None):
        self.items = items or []
        self.holdings = holdings or []
        self.subscriptions = subscriptions or []
        self.calls: list[tuple[str, str]] = []

    def fetch_item_availability(self, bib_id):
        self.calls.append(("items", bib_id))
        return list(self.items)

    def fetch_holding_records(self, bib_id):
        self.calls.append(("holdings", bib_id))
        return list(self.holdings)

    def fetch_serial_subscriptions(self, bib_id):
        self.calls.append(("subscriptions", bib_id))
        return list(self.subscriptions)
