# swiftline/core/types/__init__.py

"""Type definitions shared across the swiftline package"""

# Local imports
from swiftline.core.types.json import HeaderMultiMap
from swiftline.core.types.json import JSONDict
from swiftline.core.types.json import JSONList
from swiftline.core.types.json import JSONPrimitive
from swiftline.core.types.json import JSONType

__all__ = ["HeaderMultiMap", "JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
