# swiftline/application/services/_json_select_service.py

"""JSON select service: read input, parse it, resolve a path, print the result"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import TextIO

# Third party imports
from rich.console import Console

# Local imports
from swiftline.application.processing.input_resolver import resolve_input
from swiftline.application.processing.json_parser import parse_json
from swiftline.application.processing.path_resolver import NOT_FOUND
from swiftline.application.processing.path_resolver import Resolution
from swiftline.application.processing.path_resolver import resolve_path
from swiftline.infrastructure.config import ConfigLoader
from swiftline.infrastructure.config import get_config
from swiftline.shared.utils.style import print_json
from swiftline.shared.utils.style import print_text
from swiftline.shared.utils.style import stdout_console
from swiftline.shared.utils.style import title

logger = getLogger(__name__)


class JsonSelectService:
    """Select a value from a JSON document by a dot/bracket path

    A path that addresses nothing is not an error: the configured sentinel
    is printed and the command still succeeds.
    """

    __slots__ = ("_config", "_console", "_stdin")

    def __init__(
        self,
        config: ConfigLoader | None = None,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Configuration loader, uses default if None
            console: Output console, current stdout if None
            stdin: Input stream used when no file or text is given
        """
        self._config = config or get_config()
        self._console = console
        self._stdin = stdin

    def select(
        self,
        path: str,
        text: str | None = None,
        file: str | Path | None = None,
        relaxed: bool = False,
    ) -> Resolution:
        """Resolve path against the JSON input without printing anything

        Raises:
            IoError: If the input cannot be read
            ParseError: If the input is not valid under the enabled grammars
        """
        raw = resolve_input(text=text, file=file, stdin=self._stdin)
        document = parse_json(raw, relaxed=relaxed)
        result = resolve_path(document, path)
        if result is NOT_FOUND:
            logger.info(f"Path '{path}' not found")
        return result

    def run(
        self,
        path: str,
        text: str | None = None,
        file: str | Path | None = None,
        relaxed: bool = False,
    ) -> Resolution:
        """Select and print: pretty JSON when found, the sentinel otherwise"""
        console = self._console or stdout_console()
        json_config = self._config.json_select

        title("JSON Select", console=console)
        result = self.select(path, text=text, file=file, relaxed=relaxed)

        if result is NOT_FOUND:
            print_text(json_config.not_found_sentinel, console=console)
        else:
            print_json(result, indent=json_config.indent, console=console)
        return result
