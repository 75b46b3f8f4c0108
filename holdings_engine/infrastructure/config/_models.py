# holdings_engine/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

# Local imports
from holdings_engine.core.domain.enums import ItemStatus
from holdings_engine.core.domain.enums import SerialFilterPolicy
from holdings_engine.core.types.json import JSONDict

DEFAULT_STATUS_RANKINGS = {
    ItemStatus.LOST.value: 1,
    ItemStatus.CHARGED.value: 2,
    ItemStatus.OVERDUE.value: 2,
    ItemStatus.ON_HOLD.value: 3,
}

ITEM_LOCATION_FIELDS = {"collection_code", "location", "sub_location", "callnumber"}


class HoldingsConfig(BaseModel):
    """Holdings display, status and ordering configuration"""

    # Status resolution
    status_rankings: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_STATUS_RANKINGS),
        description="Status label or reason code -> rank, lower is more important",
    )
    default_status_rank: int = Field(
        99, description="Minimum rank of statuses missing from rankings, always after ranked ones"
    )
    status_mappings: dict[str, str] = Field(
        default_factory=dict, description="Reason code -> display status override"
    )
    use_home_library: bool = Field(
        False, description="Treat items held outside their home library as not available"
    )
    on_order_status: int = Field(-1, description="Not-for-loan status of items on order")

    # Ordering
    library_order: dict[str, int] = Field(
        default_factory=dict, description="Library or library/location -> sort rank"
    )
    location_order: dict[str, int] = Field(
        default_factory=dict, description="Location code -> sort rank"
    )
    default_sort_rank: int = Field(999, description="Rank of unconfigured libraries/locations")
    sort_items_by_serial_issue: bool = Field(
        False, description="Order equal locations by serial issue, newest first"
    )

    # Display
    group_by_location: bool = Field(False, description="Include location in location name")
    display_item_hold_counts: bool = True
    display_total_hold_count: bool = False
    display_ccode: bool = Field(False, description="Include collection in call number")
    display_full_call_number: bool = Field(False, description="Include call number text")
    display_location_per_item: list[str] = Field(default_factory=list)
    library_names: dict[str, str] = Field(default_factory=dict)
    sub_location_names: dict[str, str] = Field(default_factory=dict)

    # Data sources
    use_holding_records: bool = False
    use_serial_subscriptions: bool = False
    serial_subscription_filter: SerialFilterPolicy = SerialFilterPolicy.NONE

    # Holding record MARC field specifications
    notes: str = "852z"
    summary: str = "866a"
    supplements: str | None = None
    indexes: str | None = None
    links: str | None = None

    @field_validator("library_order", mode="before")
    @classmethod
    def parse_library_order(cls, v: object) -> object:
        """Accept "A:B=5:C" where each entry ranks by position unless given"""
        if isinstance(v, str):
            order: dict[str, int] = {}
            for position, value in enumerate(part for part in v.split(":") if part):
                key, _, rank = value.partition("=")
                order[key] = int(rank) if rank else position
            return order
        if isinstance(v, list):
            return {key: position for position, key in enumerate(v)}
        return v

    @field_validator("location_order", mode="before")
    @classmethod
    def parse_location_order(cls, v: object) -> object:
        """Accept "x:y" or a list, ranking locations by position"""
        if isinstance(v, str):
            v = [part for part in v.split(":") if part]
        if isinstance(v, list):
            return {key: position for position, key in enumerate(v)}
        return v

    @field_validator("display_location_per_item", mode="before")
    @classmethod
    def parse_item_location_fields(cls, v: object) -> object:
        """Accept a comma-separated string of field names"""
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("display_location_per_item")
    @classmethod
    def validate_item_location_fields(cls, v: list[str]) -> list[str]:
        """Ensure only known item fields are listed"""
        unknown = [field for field in v if field not in ITEM_LOCATION_FIELDS]
        if unknown:
            raise ValueError(f"Unknown item location fields: {', '.join(unknown)}")
        return v

    @field_validator("serial_subscription_filter", mode="before")
    @classmethod
    def parse_serial_filter(cls, v: object) -> object:
        """Treat an empty filter as no filtering"""
        if v is None or v == "":
            return SerialFilterPolicy.NONE
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    holdings: HoldingsConfig = Field(default_factory=HoldingsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return cls.model_validate(data)
            except Exception as e:
                # Standard library imports
                import logging

                logging.getLogger(__name__).warning(
                    f"Failed to load config from {config_path}: {e}. Using defaults."
                )
                return cls()

        return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump(mode="json")
