# swiftline/infrastructure/http/_headers.py

"""Parsing of raw ``key:value`` header arguments"""

# Standard library imports
from collections.abc import Iterable
from re import compile

# Local imports
from swiftline.core.domain.errors import InvalidHeader
from swiftline.core.types.json import HeaderMultiMap

# RFC 7230 token characters
_TOKEN_PATTERN = compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def _is_valid_value(value: str) -> bool:
    for char in value:
        code = ord(char)
        if (code < 0x20 and char != "\t") or code == 0x7F or code > 0xFF:
            return False
    return True


def parse_headers(items: Iterable[str]) -> HeaderMultiMap:
    """Turn repeated ``key:value`` strings into a header multimap

    Only the first colon separates key from value; both sides are trimmed.
    A repeated name (compared case-insensitively) adds a value instead of
    replacing the earlier one. The first spelling of a name is kept.

    Raises:
        InvalidHeader: If an entry has no colon, a bad name or a bad value
    """
    headers: HeaderMultiMap = {}
    spellings: dict[str, str] = {}

    for item in items:
        key, colon, value = item.partition(":")
        if not colon:
            raise InvalidHeader(f"Header must be key:value, got: {item}", item)

        key = key.strip()
        value = value.strip()
        if _TOKEN_PATTERN.fullmatch(key) is None:
            raise InvalidHeader(f"Invalid header key: {key!r} in {item!r}", item)
        if not _is_valid_value(value):
            raise InvalidHeader(f"Invalid header value for {key}: {item!r}", item)

        name = spellings.setdefault(key.lower(), key)
        headers.setdefault(name, []).append(value)

    return headers


def flatten_headers(headers: HeaderMultiMap) -> dict[str, str]:
    """Join repeated values with ``", "`` for a single-valued header mapping"""
    return {name: ", ".join(values) for name, values in headers.items()}
