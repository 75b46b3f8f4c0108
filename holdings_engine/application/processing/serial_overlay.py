# holdings_engine/application/processing/serial_overlay.py

"""Serial subscription purchase history attached to holdings entries"""

# Standard library imports
from collections.abc import Iterator
from logging import getLogger

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import SERIAL_ITEM_PREFIX
from holdings_engine.core.domain.enums import SerialFilterPolicy
from holdings_engine.core.domain.records import SerialIssue
from holdings_engine.core.domain.records import SerialSubscription
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.shared.utils.text_utils import natural_key
from holdings_engine.shared.utils.text_utils import unique_in_order

logger = getLogger(__name__)


def filter_issues(
    issues: list[SerialIssue], policy: SerialFilterPolicy, current_year: int
) -> list[str]:
    """Labels of the received issues kept by the filter policy, newest first

    Args:
        issues: Subscription issues in backend order
        policy: Which years of received issues to keep
        current_year: Year the "current+1" policy counts from

    Returns:
        De-duplicated issue labels in descending natural order
    """
    received = [issue for issue in issues if issue.received]

    latest_year = None
    if policy is SerialFilterPolicy.LAST_YEAR:
        years = [issue.published_year for issue in received if issue.published_year]
        latest_year = max(years) if years else None

    labels = []
    for issue in received:
        year = issue.published_year
        if policy is SerialFilterPolicy.CURRENT_AND_PREVIOUS_YEAR:
            if year and year not in (current_year, current_year - 1):
                continue
        elif latest_year and year != latest_year:
            continue
        labels.append(issue.label)

    return list(reversed(sorted(unique_in_order(labels), key=natural_key)))


class SerialOverlay:
    """Matches subscriptions onto entries by call number and location"""

    def __init__(self, config: HoldingsConfig, formatter: EntryFormatter):
        self.config = config
        self.formatter = formatter

    def overlay(
        self,
        bib_id: str,
        entries: list[HoldingsEntry],
        subscriptions: list[SerialSubscription],
        current_year: int,
        sort_keys: Iterator[int],
    ) -> list[HoldingsEntry]:
        """Attach purchase histories, adding entries for unmatched subscriptions

        Args:
            bib_id: Bibliographic record id
            entries: Entries built by the holding merger
            subscriptions: Subscriptions in backend order
            current_year: Year used by the "current+1" filter
            sort_keys: Sort key allocator shared with the other stages

        Returns:
            The entries with purchase histories attached, followed by new
            entries for subscriptions that matched no entry
        """
        policy = self.config.serial_subscription_filter
        result = list(entries)
        attached = 0

        for subscription in subscriptions:
            sort_key = next(sort_keys)
            history = filter_issues(subscription.issues, policy, current_year)
            serial_entry = self.serial_entry(bib_id, subscription, sort_key)

            for index, entry in enumerate(result):
                if (
                    entry.callnumber == serial_entry.callnumber
                    and entry.location == serial_entry.location
                ):
                    result[index] = entry.model_copy(update={"purchase_history": history})
                    attached += 1
                    break
            else:
                result.append(serial_entry.model_copy(update={"purchase_history": history}))

        logger.debug(
            f"Overlaid {len(subscriptions)} subscriptions for {bib_id}, "
            f"{attached} attached to existing entries"
        )
        return result

    def serial_entry(
        self, bib_id: str, subscription: SerialSubscription, sort_key: int
    ) -> HoldingsEntry:
        """Build a zero-availability entry for a subscription"""
        return HoldingsEntry(
            id=bib_id,
            item_id=f"{SERIAL_ITEM_PREFIX}{sort_key}",
            kind=EntryKind.SERIAL,
            library_id=subscription.library_id,
            location_id=subscription.location_code,
            location=self.formatter.location_name(
                subscription.library_id,
                subscription.location_code,
                subscription.location_description,
            ),
            availability=False,
            status="",
            callnumber=self.formatter.call_number(
                subscription.location_code,
                subscription.location_description,
                subscription.callnumber,
            ),
            requests_placed=0,
            sort_key=sort_key,
            use_unknown_message=True,
        )
