# holdings_engine/core/domain/records.py

"""Typed input records produced by the backend normalizer"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from holdings_engine.core.types.json import JSONDict

# Input records are never mutated by the engine
RECORD_MODEL_CONFIG = ConfigDict(frozen=True, extra="forbid")


class ItemAvailability(BaseModel):
    """Availability of one physical or electronic copy"""

    model_config = RECORD_MODEL_CONFIG

    item_id: str = Field(min_length=1)
    holding_id: str | None = None
    library_id: str = Field(description="Home (owning) library")
    holding_library_id: str | None = Field(
        default=None, description="Library currently holding the item"
    )
    location_code: str = ""
    location_description: str | None = None
    unavailability_reasons: dict[str, JSONDict] = Field(
        default_factory=dict, description="Reason code -> metadata, in backend order"
    )
    availability_notes: dict[str, JSONDict] = Field(default_factory=dict)
    available: bool = False
    hold_queue_length: int = Field(default=0, ge=0)
    callnumber: str = ""
    serial_issue_number: str | None = None
    barcode: str | None = None
    collection_code: str | None = None
    collection_code_description: str | None = None
    sub_location: str | None = None
    public_notes: str | None = None


class HoldingRecord(BaseModel):
    """A holdings statement of one library/location for a bibliographic record"""

    model_config = RECORD_MODEL_CONFIG

    holding_id: str = Field(min_length=1)
    library_id: str
    location_code: str = ""
    location_description: str | None = None
    callnumber: str | None = None
    collection_code: str | None = None
    collection_code_description: str | None = None
    suppressed: bool = False
    marcxml: str | None = Field(default=None, description="MARC21 holdings record as MARCXML")


class SerialIssue(BaseModel):
    """One issue of a serial subscription"""

    model_config = RECORD_MODEL_CONFIG

    sequence_label: str
    published_date: str = ""
    received: bool = False
    notes: str | None = None

    @property
    def published_year(self) -> int | None:
        """Year part of the publication date, None if missing or unparsable"""
        year = self.published_date.split("-")[0].strip()
        return int(year) if year.isdigit() else None

    @property
    def label(self) -> str:
        """Issue label shown in the purchase history"""
        if self.notes:
            return f"{self.sequence_label} {self.notes}"
        return self.sequence_label


class SerialSubscription(BaseModel):
    """Serial subscription with its issue receipt history"""

    model_config = RECORD_MODEL_CONFIG

    library_id: str
    location_code: str = ""
    location_description: str | None = None
    callnumber: str | None = None
    issues: list[SerialIssue] = Field(default_factory=list)
