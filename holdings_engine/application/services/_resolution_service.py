# holdings_engine/application/services/_resolution_service.py

"""Holdings resolution service"""

# Standard library imports
from datetime import date
from itertools import count
from logging import getLogger

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.holding_details import HoldingDetailsReader
from holdings_engine.application.processing.holding_merger import HoldingMerger
from holdings_engine.application.processing.link_extractor import LinkExtractor
from holdings_engine.application.processing.ordering import EntryOrdering
from holdings_engine.application.processing.serial_overlay import SerialOverlay
from holdings_engine.application.processing.status_resolver import StatusResolver
from holdings_engine.application.processing.summary import summarize
from holdings_engine.core.domain.entries import HoldingsEntry
from holdings_engine.core.domain.entries import HoldingsResult
from holdings_engine.core.domain.records import HoldingRecord
from holdings_engine.core.types.protocols import CirculationBackendProtocol
from holdings_engine.infrastructure.config import ConfigLoader
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.infrastructure.config import get_config

logger = getLogger(__name__)


class HoldingsResolutionService:
    """Resolves the holdings of bibliographic records

    The service holds configuration only. Every resolution builds its own
    metadata caches and sort key allocator and never modifies the records it
    receives, so one service can serve concurrent resolutions.
    """

    def __init__(self, config: ConfigLoader | HoldingsConfig | None = None):
        """Initialize with configuration

        Args:
            config: Configuration loader or holdings configuration, None for
                the default configuration
        """
        if config is None:
            config = get_config()
        if isinstance(config, ConfigLoader):
            config = config.holdings
        self.config: HoldingsConfig = config
        self.resolver = StatusResolver(config)
        self.formatter = EntryFormatter(config)
        self.ordering = EntryOrdering(config)

    def resolve(
        self,
        bib_id: str,
        backend: CirculationBackendProtocol,
        brief: bool = False,
        today: date | None = None,
    ) -> HoldingsResult:
        """Resolve the holdings of one bibliographic record

        Args:
            bib_id: Bibliographic record id
            backend: Supplier of item, holding and subscription records
            brief: Skip serial subscriptions (status-only lookups)
            today: Date for overdue detection and serial year filters

        Returns:
            Ordered physical entries with the summary appended, and ordered
            electronic entries

        Raises:
            Whatever the backend raises for transport or protocol failures
        """
        if today is None:
            today = date.today()

        holdings: dict[str, HoldingRecord] = {}
        if self.config.use_holding_records:
            for holding in backend.fetch_holding_records(bib_id):
                holdings[holding.holding_id] = holding
        items = backend.fetch_item_availability(bib_id)

        details = HoldingDetailsReader(self.config)
        merger = HoldingMerger(self.config, self.resolver, self.formatter, details)
        sort_keys = count(len(items))

        entries = merger.merge(bib_id, items, holdings, sort_keys, today)

        if self.config.use_serial_subscriptions and not brief:
            subscriptions = backend.fetch_serial_subscriptions(bib_id)
            overlay = SerialOverlay(self.config, self.formatter)
            entries = overlay.overlay(bib_id, entries, subscriptions, today.year, sort_keys)

        electronic = LinkExtractor(self.formatter, details).extract(bib_id, holdings, sort_keys)

        entries = self.ordering.sort(entries)
        electronic = self.ordering.sort(electronic)

        summary = summarize(entries, self.config.display_total_hold_count)

        if not self.config.display_item_hold_counts:
            entries = [entry.model_copy(update={"requests_placed": None}) for entry in entries]

        logger.debug(
            f"Resolved {bib_id}: {len(entries)} holdings, {len(electronic)} electronic, "
            f"{summary.available}/{summary.total} available"
        )
        return HoldingsResult(holdings=[*entries, summary], electronic=electronic)

    def resolve_statuses(
        self,
        bib_ids: list[str],
        backend: CirculationBackendProtocol,
        today: date | None = None,
    ) -> dict[str, list[HoldingsEntry]]:
        """Physical and electronic entries of several records, without subscriptions

        Args:
            bib_ids: Bibliographic record ids
            backend: Supplier of item and holding records
            today: Date for overdue detection

        Returns:
            Entries by bib id: ordered physical entries, then ordered electronic
            entries; summaries are left out
        """
        statuses = {}
        for bib_id in bib_ids:
            result = self.resolve(bib_id, backend, brief=True, today=today)
            statuses[bib_id] = [*result.entries, *result.electronic]
        return statuses


def resolve_holdings(
    bib_id: str,
    backend: CirculationBackendProtocol,
    config: ConfigLoader | HoldingsConfig | None = None,
    *,
    brief: bool = False,
    today: date | None = None,
) -> HoldingsResult:
    """Resolve the holdings of one bibliographic record

    Convenience wrapper around HoldingsResolutionService.resolve().
    """
    return HoldingsResolutionService(config).resolve(bib_id, backend, brief=brief, today=today)
