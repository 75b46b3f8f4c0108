# holdings_engine/core/domain/entries.py

"""Holdings entries, the summary entry and the resolution result"""

# Standard library imports
from datetime import date

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from holdings_engine.core.domain.enums import EntryKind
from holdings_engine.core.domain.enums import SUMMARY_LOCATION

# Entries are rebuilt with model_copy() instead of being mutated
ENTRY_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid", validate_default=True)

# A MARC-derived detail is a single line or several lines
type DetailValue = str | list[str]


class HoldingsEntry(BaseModel):
    """One displayable line of holdings information"""

    model_config = ENTRY_MODEL_CONFIG

    id: str = Field(description="Bibliographic record id")
    item_id: str
    kind: EntryKind = EntryKind.ITEM
    library_id: str
    location_id: str = ""
    location: str = ""
    availability: bool = False
    status: str = ""
    status_codes: list[str] = Field(default_factory=list)
    callnumber: str = ""
    due_date: date | None = None
    barcode: str | None = None
    requests_placed: int | None = Field(
        default=0, description="Hold queue length, None when hold counts are hidden"
    )
    sort_key: int = Field(ge=0)
    number: str = Field(default="", description="Serial issue label used for ordering")
    on_order: bool = False
    use_unknown_message: bool = False
    location_href: str | None = None
    item_notes: list[str] = Field(default_factory=list)
    purchase_history: list[str] | None = None

    # Holding record details
    holdings_id: str | None = None
    notes: DetailValue | None = None
    summary: DetailValue | None = None
    supplements: DetailValue | None = None
    indexes: DetailValue | None = None
    links: DetailValue | None = None


class SummaryEntry(BaseModel):
    """Aggregate availability statistics appended to the physical holdings"""

    model_config = ENTRY_MODEL_CONFIG

    available: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    ordered: int = Field(default=0, ge=0)
    locations: int = Field(default=0, ge=0, description="Distinct location count")
    reservations: int | None = None
    location: str = SUMMARY_LOCATION


class HoldingsResult(BaseModel):
    """Resolved holdings of one bibliographic record"""

    model_config = ConfigDict(frozen=True)

    holdings: list[HoldingsEntry | SummaryEntry] = Field(
        default_factory=lambda: [SummaryEntry()],
        description="Ordered physical entries followed by the summary entry",
    )
    electronic: list[HoldingsEntry] = Field(default_factory=list)

    @property
    def summary(self) -> SummaryEntry:
        """The summary entry appended to the physical holdings"""
        summary = self.holdings[-1]
        if not isinstance(summary, SummaryEntry):
            raise ValueError("Physical holdings must end with a summary entry")
        return summary

    @property
    def entries(self) -> list[HoldingsEntry]:
        """Physical entries without the trailing summary"""
        return [entry for entry in self.holdings if isinstance(entry, HoldingsEntry)]
