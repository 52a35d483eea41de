# swiftline/infrastructure/logging/_progress.py

"""Progress display for CLI output

Progress is drawn on stderr and cleared when finished, so it never mixes with
data written to stdout.
"""

# Standard library imports
from collections.abc import Callable
from contextlib import contextmanager
from logging import getLogger
from typing import Iterator

# Third party imports
from rich.console import Console
from rich.progress import BarColumn
from rich.progress import DownloadColumn
from rich.progress import Progress
from rich.progress import ProgressColumn
from rich.progress import SpinnerColumn
from rich.progress import TextColumn
from rich.progress import TimeElapsedColumn
from rich.progress import TimeRemainingColumn

logger = getLogger(__name__)


class ProgressDisplay:
    """Spinner and download progress for a single request"""

    def __init__(self, enabled: bool | None = None, console: Console | None = None) -> None:
        """Initialize progress display

        Args:
            enabled: Whether to draw anything, auto-detected from the terminal if None
            console: Console to draw on, a stderr console if None
        """
        self.console = console or Console(stderr=True)
        self.enabled = self.console.is_terminal if enabled is None else enabled

    def _progress(self, *columns: ProgressColumn) -> Progress:
        return Progress(
            *columns,
            console=self.console,
            transient=True,
            disable=not self.enabled,
        )

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Show an indeterminate spinner while the block runs

        Args:
            message: Text shown next to the spinner
        """
        progress = self._progress(SpinnerColumn(), TextColumn("{task.description}"))
        with progress:
            progress.add_task(message, total=None)
            yield

    @contextmanager
    def download(self, total: int | None) -> Iterator[Callable[[int], None]]:
        """Track bytes written during a streamed download

        A known total gives a determinate bar with bytes/total and ETA.
        Without one, a spinner with the running byte count and elapsed time
        is shown instead.

        Args:
            total: Declared content length, None when unknown

        Yields:
            Callback to report the size of each chunk written
        """
        if total is not None:
            progress = self._progress(
                BarColumn(bar_width=40, style="blue", complete_style="cyan"),
                DownloadColumn(),
                TimeRemainingColumn(),
            )
        else:
            progress = self._progress(
                SpinnerColumn(),
                TextColumn("{task.description}"),
                DownloadColumn(),
                TimeElapsedColumn(),
            )

        declared = total if total is not None else "unknown"
        logger.debug(f"Tracking download, declared size: {declared}")

        with progress:
            task_id = progress.add_task("Downloading...", total=total)

            def advance(size: int) -> None:
                progress.advance(task_id, size)

            yield advance
