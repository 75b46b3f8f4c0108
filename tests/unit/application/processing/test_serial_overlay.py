# tests/unit/application/processing/test_serial_overlay.py

"""Tests for serial subscription purchase histories"""

# Standard library imports
from itertools import count

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.serial_overlay import SerialOverlay
from holdings_engine.application.processing.serial_overlay import filter_issues
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import SerialFilterPolicy
from holdings_engine.infrastructure.config import HoldingsConfig
from tests.fixtures.records import RecordBuilder


def three_years_of_issues():
    return [
        RecordBuilder.issue("2021:1", "2021-01-15"),
        RecordBuilder.issue("2022:1", "2022-01-15"),
        RecordBuilder.issue("2022:2", "2022-02-15"),
        RecordBuilder.issue("2023:9", "2023-09-15"),
        RecordBuilder.issue("2023:10", "2023-10-15"),
        RecordBuilder.issue("2023:10", "2023-10-15"),
        RecordBuilder.issue("2023:11", "2023-11-15", received=False),
    ]


class TestFilterIssues:
    """Test filter_issues policies"""

    def test_no_filter_keeps_all_received(self) -> None:
        labels = filter_issues(three_years_of_issues(), SerialFilterPolicy.NONE, 2024)
        assert labels == ["2023:10", "2023:9", "2022:2", "2022:1", "2021:1"]

    def test_last_year(self) -> None:
        """Only the latest year with received issues is kept, newest first"""
        labels = filter_issues(three_years_of_issues(), SerialFilterPolicy.LAST_YEAR, 2024)
        assert labels == ["2023:10", "2023:9"]

    def test_current_and_previous_year(self) -> None:
        labels = filter_issues(
            three_years_of_issues(), SerialFilterPolicy.CURRENT_AND_PREVIOUS_YEAR, 2023
        )
        assert labels == ["2023:10", "2023:9", "2022:2", "2022:1"]

    def test_undated_issues(self) -> None:
        """Undated issues pass the current year filter but not the last year filter"""
        issues = [RecordBuilder.issue("Special", ""), RecordBuilder.issue("2023:1", "2023-01-01")]

        assert filter_issues(issues, SerialFilterPolicy.CURRENT_AND_PREVIOUS_YEAR, 2023) == [
            "Special",
            "2023:1",
        ]
        assert filter_issues(issues, SerialFilterPolicy.LAST_YEAR, 2023) == ["2023:1"]

    def test_issue_notes_in_label(self) -> None:
        issues = [RecordBuilder.issue("2023:1", "2023-01-01", notes="with supplement")]
        assert filter_issues(issues, SerialFilterPolicy.NONE, 2023) == [
            "2023:1 with supplement"
        ]

    def test_nothing_received(self) -> None:
        issues = [RecordBuilder.issue("2023:1", "2023-01-01", received=False)]
        assert filter_issues(issues, SerialFilterPolicy.LAST_YEAR, 2023) == []


class TestSerialOverlay:
    """Test SerialOverlay.overlay matching"""

    def make_entry(self, **kwargs) -> HoldingsEntry:
        defaults = {
            "id": "bib1",
            "item_id": "1",
            "library_id": "A",
            "location_id": "GEN",
            "location": "A",
            "callnumber": "GEN",
            "sort_key": 0,
        }
        defaults.update(kwargs)
        return HoldingsEntry(**defaults)

    def overlay(self, entries, subscriptions, config=None, first_key=1):
        config = config or HoldingsConfig()
        overlay = SerialOverlay(config, EntryFormatter(config))
        return overlay.overlay("bib1", entries, subscriptions, 2024, count(first_key))

    def test_matching_subscription_is_attached(self) -> None:
        subscription = RecordBuilder.subscription(
            issues=[RecordBuilder.issue("2023:1", "2023-01-01")]
        )
        entries = self.overlay([self.make_entry()], [subscription])

        assert len(entries) == 1
        assert entries[0].item_id == "1"
        assert entries[0].purchase_history == ["2023:1"]

    def test_last_matching_subscription_wins(self) -> None:
        """Two subscriptions on one entry leave the second history in place"""
        config = HoldingsConfig(serial_subscription_filter="last year")
        first = RecordBuilder.subscription(
            issues=[RecordBuilder.issue("2021:1", "2021-01-01")]
        )
        second = RecordBuilder.subscription(
            issues=[
                RecordBuilder.issue("2021:5", "2021-05-01"),
                RecordBuilder.issue("2022:1", "2022-01-01"),
                RecordBuilder.issue("2023:2", "2023-02-01"),
                RecordBuilder.issue("2023:10", "2023-10-01"),
                RecordBuilder.issue("2023:2", "2023-02-01"),
            ]
        )
        entries = self.overlay([self.make_entry()], [first, second], config)

        assert len(entries) == 1
        assert entries[0].purchase_history == ["2023:10", "2023:2"]

    def test_unmatched_subscription_gets_entry(self) -> None:
        subscription = RecordBuilder.subscription(
            library_id="B", issues=[RecordBuilder.issue("2023:1", "2023-01-01")]
        )
        entries = self.overlay([self.make_entry()], [subscription], first_key=4)

        assert len(entries) == 2
        serial = entries[1]
        assert serial.item_id == "SERIAL_4"
        assert serial.kind is EntryKind.SERIAL
        assert serial.sort_key == 4
        assert serial.library_id == "B"
        assert serial.availability is False
        assert serial.status == ""
        assert serial.use_unknown_message is True
        assert serial.purchase_history == ["2023:1"]
        assert entries[0].purchase_history is None

    def test_each_subscription_consumes_a_sort_key(self) -> None:
        subscriptions = [
            RecordBuilder.subscription(),
            RecordBuilder.subscription(library_id="B"),
        ]
        entries = self.overlay([self.make_entry()], subscriptions, first_key=1)

        assert [entry.item_id for entry in entries] == ["1", "SERIAL_2"]

    def test_later_subscription_matches_synthesized_entry(self) -> None:
        subscriptions = [
            RecordBuilder.subscription(
                library_id="B", issues=[RecordBuilder.issue("2023:1", "2023-01-01")]
            ),
            RecordBuilder.subscription(
                library_id="B", issues=[RecordBuilder.issue("2023:2", "2023-02-01")]
            ),
        ]
        entries = self.overlay([], subscriptions)

        assert len(entries) == 1
        assert entries[0].purchase_history == ["2023:2"]

    def test_no_subscriptions(self) -> None:
        entry = self.make_entry()
        assert self.overlay([entry], []) == [entry]
