# swiftline/application/processing/json_parser.py

"""JSON parsing with an optional relaxed-grammar fallback

Strict JSON is always tried first. The relaxed (JSON5) grammar is a separate
strategy that only runs when asked for, so every error message names the
grammar that produced it.
"""

# Standard library imports
import json
from logging import getLogger
from typing import Protocol

# Third party imports
import json5

# Local imports
from swiftline.core.domain.errors import ParseError
from swiftline.core.types.json import JSONType

logger = getLogger(__name__)

PROGRAM_NAME = "swiftline"
NESTING_TOO_DEEP = "nesting too deep"


class JsonParseStrategy(Protocol):
    """A grammar that turns text into a JSON value or raises ValueError"""

    name: str

    def parse(self, text: str) -> JSONType: ...


def _reject_constant(token: str) -> JSONType:
    raise ValueError(f"{token} is not valid JSON")


class StrictJsonStrategy:
    """Standard JSON: double-quoted keys and strings, no trailing commas, no comments"""

    name = "JSON"

    def parse(self, text: str) -> JSONType:
        try:
            # NaN and Infinity are Python extensions, not JSON
            return json.loads(text, parse_constant=_reject_constant)
        except RecursionError as e:
            raise ValueError(NESTING_TOO_DEEP) from e


class RelaxedJsonStrategy:
    """JSON5: unquoted keys, trailing commas, single-quoted strings, comments"""

    name = "JSON5"

    def parse(self, text: str) -> JSONType:
        try:
            return json5.loads(text)
        except RecursionError as e:
            raise ValueError(NESTING_TOO_DEEP) from e


def describe_strict_failure(text: str, error: Exception) -> str:
    """Build the diagnostic shown when strict parsing fails without --json5

    A hint is chosen from simple checks on the raw text, followed by quoting
    examples, the alternative input options, and the parser's own error.
    """
    lines = ["Invalid JSON format"]

    if "'{" in text or "}'" in text:
        lines[0] += " - avoid single quotes around the entire JSON"
    elif ": '" in text:
        lines[0] += " - string values must use double quotes, not single quotes"
    elif any(c.isalpha() for c in text) and '"' not in text:
        lines[0] += " - keys must be in double quotes"

    lines.extend(
        [
            "",
            "Examples of valid JSON:",
            """  PowerShell: --text '{"a":{"b":[1,2,3]}}'""",
            """  CMD:        --text "{\\"a\\":{\\"b\\":[1,2,3]}}\"""",
            "",
            "Alternative options:",
            "  Use --json5 for relaxed parsing: --json5 --text '{a:{b:[1,2,3]}}'",
            f"""  Use stdin: echo '{{"a":{{"b":[1,2,3]}}}}' | {PROGRAM_NAME} json select --path a.b[2]""",
            f"  Use file: {PROGRAM_NAME} json select --file data.json --path a.b[2]",
            "",
            f"Original error: {error}",
        ]
    )
    return "\n".join(lines)


def parse_json(
    text: str,
    relaxed: bool = False,
    strict: JsonParseStrategy | None = None,
    fallback: JsonParseStrategy | None = None,
) -> JSONType:
    """Parse JSON text, falling back to the relaxed grammar when enabled

    Args:
        text: Raw input; surrounding whitespace is ignored
        relaxed: Retry with the relaxed grammar when strict parsing fails
        strict: Strict grammar, StrictJsonStrategy if None
        fallback: Relaxed grammar, RelaxedJsonStrategy if None

    Returns:
        The parsed value

    Raises:
        ParseError: If no enabled grammar accepts the text
    """
    text = text.strip()
    strict = strict or StrictJsonStrategy()

    try:
        value = strict.parse(text)
        logger.debug(f"Parsed input as {strict.name}")
        return value
    except ValueError as strict_error:
        if not relaxed:
            raise ParseError(describe_strict_failure(text, strict_error)) from strict_error

        fallback = fallback or RelaxedJsonStrategy()
        logger.info(f"Strict {strict.name} parsing failed, retrying as {fallback.name}")
        try:
            value = fallback.parse(text)
        except ValueError as relaxed_error:
            raise ParseError(
                f"Failed to parse as {strict.name} or {fallback.name}\n\n"
                f"Strict {strict.name} error: {strict_error}\n"
                f"{fallback.name} error: {relaxed_error}"
            ) from relaxed_error

        logger.debug(f"Parsed input as {fallback.name}")
        return value
