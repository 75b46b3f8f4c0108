# tests/integration/conftest.py

"""Integration test fixtures and configuration"""

# Third party imports
import pytest

# Local imports
from holdings_engine.adapters.backend import PayloadBackend
from holdings_engine.infrastructure.config import ConfigLoader
from tests.fixtures.records import BIB_ID
from tests.fixtures.records import marcxml


@pytest.fixture
def availability_payload() -> dict:
    """Availability search response with a loan, a shelf copy and an order"""
    return {
        "hold_queue_length": 1,
        "item_availabilities": [
            {
                "item_id": 1,
                "holding_id": 10,
                "home_library_id": "A",
                "holding_library_id": "A",
                "location": "GEN",
                "callnumber": "84.2",
                "external_id": "B0001",
                "availability": {
                    "available": False,
                    "unavailabilities": {"Item::CheckedOut": {"due_date": "2030-01-15"}},
                    "notes": [],
                },
            },
            {
                "item_id": 2,
                "home_library_id": "B",
                "holding_library_id": "B",
                "location": "GEN",
                "callnumber": "84.2",
                "availability": {"available": True, "unavailabilities": [], "notes": []},
            },
            {
                "item_id": 3,
                "home_library_id": "A",
                "holding_library_id": "A",
                "location": "GEN",
                "callnumber": "84.2",
                "availability": {
                    "available": False,
                    "unavailabilities": {"Item::NotForLoan": {"status": -1, "code": "On order"}},
                    "notes": [],
                },
            },
        ],
    }


@pytest.fixture
def holdings_payload() -> dict:
    """Holdings response: one holding with items, one without, one suppressed"""

    def metadata(document: str) -> list[dict]:
        return [{"format": "marcxml", "schema": "MARC21", "metadata": document}]

    return {
        "holdings": [
            {
                "holding_id": 10,
                "holding_library_id": "A",
                "location": "GEN",
                "holdings_metadata": metadata(
                    marcxml(
                        ("852", [("b", "A"), ("z", "Reading room only")]),
                        ("866", [("a", "1990-")]),
                    )
                ),
            },
            {
                "holding_id": 11,
                "holding_library_id": "B",
                "location": "REF",
                "holdings_metadata": metadata(
                    marcxml(("856", [("u", "http://example.org/ejournal"), ("y", "Online")]))
                ),
            },
            {
                "holding_id": 12,
                "holding_library_id": "C",
                "location": "GEN",
                "suppressed": True,
                "holdings_metadata": metadata(
                    marcxml(("856", [("u", "http://example.org/hidden")]))
                ),
            },
        ]
    }


@pytest.fixture
def subscriptions_payload() -> dict:
    """Subscription matching the holding of library B"""
    return {
        "subscriptions": [
            {
                "library_id": "B",
                "location": "REF",
                "issues": [
                    {"serialseq": "2022:12", "publisheddate": "2022-12-01", "received": True},
                    {"serialseq": "2023:9", "publisheddate": "2023-09-01", "received": True},
                    {"serialseq": "2023:10", "publisheddate": "2023-10-01", "received": True},
                    {"serialseq": "2023:11", "publisheddate": "2023-11-01", "received": False},
                ],
            }
        ]
    }


@pytest.fixture
def backend(availability_payload, holdings_payload, subscriptions_payload) -> PayloadBackend:
    return PayloadBackend(
        availability={BIB_ID: availability_payload},
        holdings={BIB_ID: holdings_payload},
        subscriptions={BIB_ID: subscriptions_payload},
    )


@pytest.fixture
def loader() -> ConfigLoader:
    """Configuration using every data source"""
    return ConfigLoader.from_dict(
        {
            "holdings": {
                "library_order": "A:B",
                "use_holding_records": True,
                "use_serial_subscriptions": True,
                "serial_subscription_filter": "last year",
                "display_total_hold_count": True,
            }
        }
    )
