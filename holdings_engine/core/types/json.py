# holdings_engine/core/types/json.py

"""JSON type definitions for backend payloads and configuration data."""

# JSON Type Usage Guide:
# - JSONDict: a payload object with string keys (availability, holdings, subscriptions)
# - JSONList: a payload array
# - JSONType: anything nested inside a payload
# - NEVER use Any - payload shapes are narrowed at the normalizer boundary

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
