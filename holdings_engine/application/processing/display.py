# holdings_engine/application/processing/display.py

"""Display strings for holdings entries: location names, call numbers, issue labels"""

# Local imports
from holdings_engine.core.domain.records import ItemAvailability
from holdings_engine.infrastructure.config import HoldingsConfig
from holdings_engine.shared.utils.text_utils import join_nonempty


class EntryFormatter:
    """Builds the location and call number strings shown for an entry"""

    def __init__(self, config: HoldingsConfig):
        self.config = config

    def library_name(self, library_id: str) -> str:
        """Display name of a library, the id itself when unknown"""
        return self.config.library_names.get(library_id, library_id)

    def location_name(
        self, library_id: str, location_code: str, location_description: str | None = None
    ) -> str:
        """Location string used for grouping and ordering entries

        Args:
            library_id: Library the entry is displayed under
            location_code: Shelving location code
            location_description: Backend description of the location

        Returns:
            Library name, followed by the location when grouping by location
        """
        name = self.library_name(library_id)
        if self.config.group_by_location:
            location = location_description or location_code
            if location:
                name = join_nonempty([name, location], ", ")
        return name

    def call_number(
        self,
        location_code: str,
        location_description: str | None = None,
        callnumber: str | None = None,
        collection_code: str | None = None,
        collection_code_description: str | None = None,
    ) -> str:
        """Call number string: collection, location and call number as configured"""
        parts: list[str | None] = []
        if collection_code and self.config.display_ccode:
            parts.append(collection_code_description or collection_code)
        if not self.config.group_by_location:
            parts.append(location_description or location_code)
        if callnumber and self.config.display_full_call_number:
            parts.append(callnumber)
        return join_nonempty(parts, ", ")

    def item_specific_location(self, item: ItemAvailability) -> str:
        """Item level location details listed in display_location_per_item"""
        parts: list[str | None] = []
        for field in self.config.display_location_per_item:
            match field:
                case "collection_code":
                    if item.collection_code:
                        parts.append(item.collection_code_description or item.collection_code)
                case "location":
                    if item.location_code:
                        parts.append(item.location_description or item.location_code)
                case "sub_location":
                    if item.sub_location:
                        parts.append(
                            self.config.sub_location_names.get(item.sub_location, item.sub_location)
                        )
                case "callnumber":
                    parts.append(item.callnumber)
        return join_nonempty(parts, ", ")

    def issue_number(self, item: ItemAvailability) -> str:
        """Serial issue label of an item, followed by its item-specific location"""
        return join_nonempty([item.serial_issue_number, self.item_specific_location(item)], " ")
