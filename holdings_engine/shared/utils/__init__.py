# holdings_engine/shared/utils/__init__.py

"""Shared utility functions for text, dates and MARC data"""

# Local imports
# MARC utilities
from holdings_engine.shared.utils.marc_utilities import get_marc_data
from holdings_engine.shared.utils.marc_utilities import iter_data_fields
from holdings_engine.shared.utils.marc_utilities import parse_marcxml

# Text utilities
from holdings_engine.shared.utils.text_utils import join_nonempty
from holdings_engine.shared.utils.text_utils import natural_compare
from holdings_engine.shared.utils.text_utils import natural_key
from holdings_engine.shared.utils.text_utils import unique_in_order

# Time utilities
from holdings_engine.shared.utils.time_utils import parse_backend_date

__all__ = [
    # Text utilities
    "join_nonempty",
    "natural_compare",
    "natural_key",
    "unique_in_order",
    # Time utilities
    "parse_backend_date",
    # MARC utilities
    "get_marc_data",
    "iter_data_fields",
    "parse_marcxml",
]
