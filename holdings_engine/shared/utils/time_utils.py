# holdings_engine/shared/utils/time_utils.py

"""Date parsing for backend timestamps"""

# Standard library imports
from datetime import date
from datetime import datetime
from logging import getLogger

logger = getLogger(__name__)


def parse_backend_date(value: str | None) -> date | None:
    """Parse a backend date or timestamp into a date

    Accepts plain ISO dates ("2024-05-31") and ISO timestamps with or without
    an offset ("2024-05-31T23:59:00+03:00"). The calendar date is taken as
    reported, without converting between time zones.

    Args:
        value: Date string from the backend

    Returns:
        The date, or None if the value is empty or unparsable
    """
    if not value:
        return None

    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        logger.warning(f"Unparsable backend date: {value!r}")
        return None
