# swiftline/application/processing/input_resolver.py

"""Locate and read the JSON input text

Priority is fixed: file, then inline text, then standard input. The first
available source is used exclusively, even when reading it fails.
"""

# Standard library imports
import sys
from logging import getLogger
from pathlib import Path
from typing import TextIO

# Local imports
from swiftline.core.domain.errors import IoError

logger = getLogger(__name__)


def resolve_input(
    text: str | None = None,
    file: str | Path | None = None,
    stdin: TextIO | None = None,
) -> str:
    """Return the JSON input text from exactly one source

    Args:
        text: Inline JSON text, returned verbatim
        file: Path of a file to read
        stdin: Stream read to completion when neither file nor text is given

    Returns:
        The raw input text

    Raises:
        IoError: If the file or stdin cannot be read
    """
    if file is not None:
        path = Path(file)
        logger.debug(f"Reading JSON input from file: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise IoError(f"Failed to read file: {path}: {reason}", path=str(path)) from e

    if text is not None:
        logger.debug("Using JSON input from --text")
        return text

    logger.debug("Reading JSON input from stdin")
    stream = stdin if stdin is not None else sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"Failed to read standard input: {e}") from e
