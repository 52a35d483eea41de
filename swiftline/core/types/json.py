# swiftline/core/types/json.py

"""JSON type definitions for type-safe JSON handling using Python 3.13 features."""

# JSON Type Usage Guide:
# - JSONDict: an object; key order is the order the keys appeared in the text
# - JSONList: an array
# - JSONType: any parsed value, including the result of a path lookup

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

# Header name -> one or more values, in the order they were given
type HeaderMultiMap = dict[str, list[str]]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList", "HeaderMultiMap"]
