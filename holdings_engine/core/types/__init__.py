# holdings_engine/core/types/__init__.py

"""Type definitions shared across the holdings engine

Protocols live in holdings_engine.core.types.protocols and are imported from
there directly, since they depend on the domain records.
"""

# Local imports
from holdings_engine.core.types.json import JSONDict
from holdings_engine.core.types.json import JSONList
from holdings_engine.core.types.json import JSONPrimitive
from holdings_engine.core.types.json import JSONType

__all__ = ["JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
