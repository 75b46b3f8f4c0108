# holdings_engine/application/processing/__init__.py

"""Resolution stages: status, merge, serial overlay, links, ordering, summary"""

# Local imports
from holdings_engine.application.processing.display import EntryFormatter
from holdings_engine.application.processing.holding_details import HoldingDetailsReader
from holdings_engine.application.processing.holding_merger import HoldingMerger
from holdings_engine.application.processing.link_extractor import LinkExtractor
from holdings_engine.application.processing.ordering import EntryOrdering
from holdings_engine.application.processing.serial_overlay import SerialOverlay
from holdings_engine.application.processing.serial_overlay import filter_issues
from holdings_engine.application.processing.status_resolver import StatusResolution
from holdings_engine.application.processing.status_resolver import StatusResolver
from holdings_engine.application.processing.summary import summarize

__all__ = [
    "EntryFormatter",
    "EntryOrdering",
    "HoldingDetailsReader",
    "HoldingMerger",
    "LinkExtractor",
    "SerialOverlay",
    "StatusResolution",
    "StatusResolver",
    "filter_issues",
    "summarize",
]
