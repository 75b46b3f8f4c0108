# holdings_engine/adapters/backend/_normalizer.py

"""Conversion of raw backend payloads into typed records

Payloads follow the shape of the Koha REST availability, holdings and serial
subscription endpoints. Nothing outside this module looks at raw payloads.
"""

# Standard library imports
from logging import getLogger

# Local imports
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.domain.records import SerialIssue
from holdings_engine.core.domain.records import SerialSubscription
from holdings_engine.core.types.json import JSONDict
from holdings_engine.core.types.json import JSONType

logger = getLogger(__name__)


def _text(value: JSONType) -> str | None:
    """Stringify an id or text value, empty values become None"""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return str(int(value))
    text = str(value)
    return text if text else None


def _int(value: JSONType) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return 0


def _dict(value: JSONType) -> JSONDict:
    # Empty objects may arrive serialized as empty arrays
    return value if isinstance(value, dict) else {}


def _list(value: JSONType) -> list[JSONType]:
    return value if isinstance(value, list) else []


def _reasons(value: JSONType) -> dict[str, JSONDict]:
    """Reason code -> metadata mapping, keeping backend order"""
    return {str(code): _dict(metadata) for code, metadata in _dict(value).items()}


def normalize_item(raw: JSONDict, biblio_hold_queue_length: int = 0) -> ItemAvailability:
    """Convert one item availability payload

    Args:
        raw: Item availability object
        biblio_hold_queue_length: Record level hold queue length; the queue
            of an item is never reported shorter than the record's queue

    Returns:
        Typed item availability
    """
    availability = _dict(raw.get("availability"))
    return ItemAvailability(
        item_id=_text(raw.get("item_id")) or "",
        holding_id=_text(raw.get("holding_id")),
        library_id=_text(raw.get("home_library_id")) or "",
        holding_library_id=_text(raw.get("holding_library_id")),
        location_code=_text(raw.get("location")) or "",
        location_description=_text(raw.get("location_description")),
        unavailability_reasons=_reasons(availability.get("unavailabilities")),
        availability_notes=_reasons(availability.get("notes")),
        available=bool(availability.get("available")),
        hold_queue_length=max(_int(raw.get("hold_queue_length")), biblio_hold_queue_length, 0),
        callnumber=_text(raw.get("callnumber")) or "",
        serial_issue_number=_text(raw.get("serial_issue_number")),
        barcode=_text(raw.get("external_id")),
        collection_code=_text(raw.get("collection_code")),
        collection_code_description=_text(raw.get("collection_code_description")),
        sub_location=_text(raw.get("sub_location")),
        public_notes=_text(raw.get("public_notes")),
    )


def normalize_availability_response(raw: JSONDict) -> list[ItemAvailability]:
    """Convert an availability search response into item records"""
    biblio_queue = _int(raw.get("hold_queue_length"))
    items = []
    for item in _list(raw.get("item_availabilities")):
        if not isinstance(item, dict):
            continue
        if _text(item.get("item_id")) is None:
            logger.warning("Skipping item availability without an item id")
            continue
        items.append(normalize_item(item, biblio_queue))
    return items


def select_marcxml(raw: JSONDict) -> str | None:
    """MARC21 MARCXML metadata of a holding payload, if any"""
    metadata_list = raw.get("holdings_metadata")
    if not isinstance(metadata_list, list):
        metadata_list = [raw.get("metadata")]
    for metadata in metadata_list:
        metadata = _dict(metadata)
        if metadata.get("format") == "marcxml" and metadata.get("schema") == "MARC21":
            return _text(metadata.get("metadata"))
    return None


def normalize_holding(raw: JSONDict) -> HoldingRecord:
    """Convert one holding payload"""
    library_id = _text(raw.get("holding_library_id")) or _text(raw.get("library_id")) or ""
    return HoldingRecord(
        holding_id=_text(raw.get("holding_id")) or "",
        library_id=library_id,
        location_code=_text(raw.get("location")) or "",
        location_description=_text(raw.get("location_description")),
        callnumber=_text(raw.get("callnumber")),
        collection_code=_text(raw.get("collection_code")),
        collection_code_description=_text(raw.get("collection_code_description")),
        suppressed=bool(raw.get("suppressed")),
        marcxml=select_marcxml(raw),
    )


def normalize_holdings_response(raw: JSONDict) -> list[HoldingRecord]:
    """Convert a holdings response into holding records"""
    holdings = []
    for holding in _list(raw.get("holdings")):
        if not isinstance(holding, dict):
            continue
        if _text(holding.get("holding_id")) is None:
            logger.warning("Skipping holding without a holding id")
            continue
        holdings.append(normalize_holding(holding))
    return holdings


def normalize_issue(raw: JSONDict) -> SerialIssue:
    """Convert one serial issue payload"""
    return SerialIssue(
        sequence_label=_text(raw.get("serialseq")) or "",
        published_date=_text(raw.get("publisheddate")) or "",
        received=bool(raw.get("received")),
        notes=_text(raw.get("notes")),
    )


def normalize_subscription(raw: JSONDict) -> SerialSubscription:
    """Convert one serial subscription payload"""
    return SerialSubscription(
        library_id=_text(raw.get("library_id")) or "",
        location_code=_text(raw.get("location")) or "",
        location_description=_text(raw.get("location_description")),
        callnumber=_text(raw.get("callnumber")),
        issues=[
            normalize_issue(issue) for issue in _list(raw.get("issues")) if isinstance(issue, dict)
        ],
    )


def normalize_subscriptions_response(raw: JSONDict) -> list[SerialSubscription]:
    """Convert a serial subscriptions response into subscriptions"""
    return [
        normalize_subscription(subscription)
        for subscription in _list(raw.get("subscriptions"))
        if isinstance(subscription, dict)
    ]
