# holdings_engine/shared/utils/marc_utilities.py

"""MARC holdings record parsing and field extraction"""

# Standard library imports
from io import BytesIO
from logging import getLogger
from xml.sax import SAXException

# Third party imports
from pymarc import Record
from pymarc import parse_xml_to_array

logger = getLogger(__name__)


def parse_marcxml(marcxml: str | None) -> Record | None:
    """Parse a MARCXML document into its first record

    Args:
        marcxml: MARCXML text containing a record or a collection

    Returns:
        The first record, or None if the document is empty or malformed
    """
    if not marcxml or not marcxml.strip():
        return None

    try:
        records = parse_xml_to_array(BytesIO(marcxml.encode("utf-8")), strict=False)
    except (SAXException, ValueError) as e:
        logger.warning(f"Could not parse holding MARCXML: {e}")
        return None

    records = [record for record in records if record is not None]
    return records[0] if records else None


def iter_data_fields(record: Record, tag: str) -> list[list[tuple[str, str]]]:
    """Get the subfields of every data field with the given tag

    Args:
        record: MARC record
        tag: Three character field tag

    Returns:
        One list of (code, value) pairs per field, in record order
    """
    fields = []
    for field in record.get_fields(tag):
        if field.is_control_field():
            continue
        fields.append([(subfield.code, subfield.value) for subfield in field.subfields])
    return fields


def split_field_specs(field_specs: str | list[str]) -> list[tuple[str, str]]:
    """Split field specifications such as "866az:867a" into (tag, subfield codes)"""
    if isinstance(field_specs, str):
        field_specs = field_specs.split(":")
    return [(spec[:3], spec[3:]) for spec in field_specs if len(spec) >= 3]


def get_marc_data(record: Record, field_specs: str | list[str]) -> str | list[str] | None:
    """Collect subfield data selected by field specifications

    Each matching field contributes one line: its selected subfields joined
    with spaces, in field order.

    Args:
        record: MARC record
        field_specs: Colon-separated string or list of specs, each a tag
            followed by subfield codes (e.g. "852z" or "866az")

    Returns:
        A single line as a string, several lines as a list, or None
    """
    lines: list[str] = []
    for tag, codes in split_field_specs(field_specs):
        for subfields in iter_data_fields(record, tag):
            line = " ".join(value for code, value in subfields if code in codes and value)
            if line:
                lines.append(line)

    if not lines:
        return None
    if len(lines) == 1:
        return lines[0]
    return lines
