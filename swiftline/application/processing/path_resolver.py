# swiftline/application/processing/path_resolver.py

"""Path expression resolver for JSON values

A path is split on ``.`` into segments. Each segment is a field name,
optionally followed by one bracketed array index (``items[0]``), or just an
index (``[0]``) applied to the current value. Resolution walks the segments
left to right and stops at the first step that cannot be taken.

Only one index per segment is understood: ``a[0][1]`` is not found rather
than two lookups.
"""

# Standard library imports
from re import ASCII
from re import compile
from typing import Final

# Local imports
from swiftline.core.types.json import JSONType

_INDEX_PATTERN = compile(r"\+?[0-9]+", ASCII)


class _NotFound:
    """Marker for a path that addresses nothing, distinct from JSON null"""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()

type Resolution = JSONType | _NotFound


def _lookup_field(value: JSONType, name: str) -> Resolution:
    if isinstance(value, dict) and name in value:
        return value[name]
    return NOT_FOUND


def _lookup_index(value: JSONType, index: int) -> Resolution:
    if isinstance(value, list) and index < len(value):
        return value[index]
    return NOT_FOUND


def parse_index(text: str) -> int | None:
    """Parse the inside of ``[...]`` as a non-negative index, None if it isn't one"""
    if _INDEX_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def resolve_path(value: JSONType, path: str) -> Resolution:
    """Resolve a path expression against a JSON value

    Never raises for an odd path; anything that cannot be followed
    resolves to NOT_FOUND.

    Args:
        value: Parsed JSON document
        path: Expression such as ``a.b[2].c``

    Returns:
        The addressed value (not a copy), or NOT_FOUND
    """
    current: Resolution = value

    for segment in path.split("."):
        if not segment:
            return NOT_FOUND

        name, bracket, rest = segment.partition("[")
        if not bracket:
            current = _lookup_field(current, segment)
        else:
            if name:
                current = _lookup_field(current, name)
                if current is NOT_FOUND:
                    return NOT_FOUND

            if not rest.endswith("]"):
                return NOT_FOUND
            index = parse_index(rest[:-1])
            if index is None:
                return NOT_FOUND
            current = _lookup_index(current, index)

        if current is NOT_FOUND:
            return NOT_FOUND

    return current
