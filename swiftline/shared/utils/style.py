# swiftline/shared/utils/style.py

"""Text styling helpers for terminal output

Colour and emphasis are applied only when the target stream is a terminal;
rich strips styles otherwise, so piped output stays plain.
"""

# Third party imports
from rich.console import Console
from rich.text import Text

# Local imports
from swiftline.core.types.json import JSONType


def stdout_console() -> Console:
    """Console bound to the current stdout"""
    return Console(soft_wrap=True)


def stderr_console() -> Console:
    """Console bound to the current stderr"""
    return Console(stderr=True, soft_wrap=True)


def title(message: str, console: Console | None = None) -> None:
    """Print a bold, underlined title"""
    (console or stdout_console()).print(Text(message, style="bold underline"))


def ok(message: str, console: Console | None = None) -> None:
    """Print a green success line"""
    (console or stdout_console()).print(Text(message, style="bold green"))


def err_line(message: str, console: Console | None = None) -> None:
    """Print a red error line to stderr"""
    (console or stderr_console()).print(Text(message, style="bold red"))


def status_line(status_code: int, reason: str = "", console: Console | None = None) -> None:
    """Print the HTTP status line, e.g. ``Status: 200 OK``"""
    status = f"{status_code} {reason}".strip()
    line = Text.assemble(("Status:", "bold"), " ", (status, "bold green"))
    (console or stdout_console()).print(line)


def print_json(value: JSONType, indent: int = 2, console: Console | None = None) -> None:
    """Pretty-print a JSON value, highlighted when stdout is a terminal

    Key order is kept and non-ASCII text is written as is.
    """
    (console or stdout_console()).print_json(data=value, indent=indent)


def print_text(text: str, console: Console | None = None) -> None:
    """Write text verbatim, with no markup or highlighting"""
    (console or stdout_console()).out(text, highlight=False)
