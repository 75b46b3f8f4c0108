# holdings_engine/application/processing/status_resolver.py

"""Item status resolution from backend unavailability reasons"""

# Standard library imports
from datetime import date
from logging import getLogger
from typing import NamedTuple

# Local imports
from holdings_engine.core.domain.enums import ITEM_REASON_PREFIX
from holdings_engine.core.domain.enums import ItemStatus
from holdings_engine.core.domain.enums import REASON_CHECKED_OUT
from holdings_engine.core.domain.enums import REASON_HELD
from holdings_engine.core.domain.enums import REASON_LOST
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.core.types.json import JSONDict
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.shared.utils.time_utils import parse_backend_date

logger = getLogger(__name__)


class StatusResolution(NamedTuple):
    """Display status of one item"""

    status: str
    status_codes: list[str]
    available: bool
    due_date: date | None


class StatusResolver:
    """Picks one display status per item using the configured ranking"""

    def __init__(self, config: HoldingsConfig):
        """Initialize with holdings configuration

        Args:
            config: Holdings configuration with rankings and status mappings
        """
        self.config = config
        # Unranked statuses always sort after every configured rank
        self.unranked_rank = max(
            config.default_status_rank, max(config.status_rankings.values(), default=0) + 1
        )

    def rank(self, label: str, reason_code: str | None = None) -> int:
        """Rank of a status label, falling back to the raw reason code"""
        rankings = self.config.status_rankings
        if label in rankings:
            return rankings[label]
        if reason_code is not None and reason_code in rankings:
            return rankings[reason_code]
        return self.unranked_rank

    def label_for(
        self, item: ItemAvailability, reason_code: str, reason: JSONDict, today: date
    ) -> str | None:
        """Map one unavailability reason to a display status

        Returns:
            The display status, or None for reasons that are not about the item
        """
        if reason_code in self.config.status_mappings:
            return self.config.status_mappings[reason_code]
        if not reason_code.startswith(ITEM_REASON_PREFIX):
            logger.debug(f"Ignoring unavailability reason {reason_code} of item {item.item_id}")
            return None

        code = reason.get("code")
        code = code if isinstance(code, str) and code else None

        match reason_code:
            case "Item::CheckedOut":
                due_date = self._due_date(reason)
                if due_date is not None and due_date < today:
                    return ItemStatus.OVERDUE.value
                return ItemStatus.CHARGED.value
            case "Item::Lost":
                return ItemStatus.LOST.value
            case "Item::NotForLoan" | "Item::DamagedNotForLoan":
                if code is None or code == "Not For Loan":
                    return ItemStatus.ON_REFERENCE_DESK.value
                return code
            case "Item::Transfer":
                if REASON_HELD in item.availability_notes:
                    return ItemStatus.IN_TRANSIT_ON_HOLD.value
                return ItemStatus.IN_TRANSIT.value
            case "Item::Held":
                return ItemStatus.ON_HOLD.value
            case "Item::Waiting":
                return ItemStatus.ON_HOLDSHELF.value
            case _:
                return code or reason_code[len(ITEM_REASON_PREFIX) :]

    def resolve(
        self, item: ItemAvailability, today: date, use_home_library: bool | None = None
    ) -> StatusResolution:
        """Resolve the display status of an item

        Args:
            item: Item availability record
            today: Date used for overdue detection
            use_home_library: Override of the configured home library preference

        Returns:
            Display status, all status labels in backend order, availability
            after overrides, and the due date if the item is checked out
        """
        if use_home_library is None:
            use_home_library = self.config.use_home_library

        available = item.available
        reasons = item.unavailability_reasons
        winner_code: str | None = None

        if not reasons:
            # A backend "not available" without any reason keeps the shelf status
            status = ItemStatus.ON_SHELF.value
            status_codes: list[str] = []
        else:
            status_codes = []
            status = ""
            best_rank = 0
            for reason_code, reason in reasons.items():
                label = self.label_for(item, reason_code, reason, today)
                if label is None:
                    continue
                if label not in status_codes:
                    status_codes.append(label)
                label_rank = self.rank(label, reason_code)
                # Strict comparison keeps the first seen reason on equal rank
                if winner_code is None or label_rank < best_rank:
                    status = label
                    best_rank = label_rank
                    winner_code = reason_code
            if winner_code is None:
                status = ItemStatus.NOT_AVAILABLE.value
                status_codes = [status]

        if (
            use_home_library
            and item.holding_library_id is not None
            and item.holding_library_id != item.library_id
            and status == ItemStatus.ON_SHELF.value
        ):
            available = False
            status = ItemStatus.NOT_AVAILABLE.value
            status_codes = [status, *status_codes]

        due_date = None
        if winner_code == REASON_CHECKED_OUT and REASON_LOST not in reasons:
            due_date = self._due_date(reasons[REASON_CHECKED_OUT])

        return StatusResolution(status, status_codes, available, due_date)

    @staticmethod
    def _due_date(reason: JSONDict) -> date | None:
        due_date = reason.get("due_date")
        return parse_backend_date(due_date) if isinstance(due_date, str) else None

