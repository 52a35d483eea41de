# swiftline/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from argparse import ArgumentTypeError
from argparse import RawDescriptionHelpFormatter
from argparse import SUPPRESS
from math import isfinite

# Local imports
from swiftline import __version__
from swiftline.infrastructure.config import LOG_LEVEL_ENV_VAR
from swiftline.infrastructure.config import get_config

PROG = "swiftline"


def positive_seconds(value: str) -> float:
    """argparse type for --timeout"""
    try:
        seconds = float(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid timeout '{value}', expected seconds")
    if not isfinite(seconds) or seconds <= 0:
        raise ArgumentTypeError(f"timeout must be a finite number greater than 0, got {value}")
    return seconds


def _add_verbosity(parser: ArgumentParser, default: object) -> None:
    # Verbosity - count occurrences: -v (INFO), -vv (DEBUG)
    # Subcommands use SUPPRESS so they only set it when the flag is given there
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=default,
        help=f"Increase verbosity (-v: INFO, -vv: DEBUG; {LOG_LEVEL_ENV_VAR} overrides)",
    )


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all subcommands"""
    config = get_config()
    http_config = config.http

    parser = ArgumentParser(
        prog=PROG,
        description="Minimal, fast CLI with just what matters",
        epilog="Run a subcommand with --help for its options.",
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    _add_verbosity(parser, 0)

    commands = parser.add_subparsers(dest="command", title="commands", metavar="<command>")

    # http get
    http_parser = commands.add_parser("http", help="HTTP utilities")
    http_commands = http_parser.add_subparsers(
        dest="http_command", title="commands", metavar="<command>", required=True
    )
    get_parser = http_commands.add_parser(
        "get",
        help="GET a URL (headers -H, timeout, optional save, pretty JSON)",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=f'example:\n  {PROG} http get https://httpbin.org/json -H "Accept: application/json" --pretty',
    )
    _add_verbosity(get_parser, SUPPRESS)
    get_parser.add_argument("url", help="URL to GET")
    get_parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        default=[],
        metavar="KEY:VALUE",
        help='Repeatable header key:value, e.g. -H "Accept: application/json"',
    )
    get_parser.add_argument(
        "--timeout",
        type=positive_seconds,
        default=None,
        metavar="SECS",
        help=f"Timeout in seconds (default: {http_config.timeout:g})",
    )
    get_parser.add_argument(
        "--save",
        default=None,
        metavar="PATH",
        help="Save response body to this file path (streamed with progress)",
    )
    get_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON responses (auto-colored)",
    )

    # json select
    json_parser = commands.add_parser("json", help="JSON utilities")
    json_commands = json_parser.add_subparsers(
        dest="json_command", title="commands", metavar="<command>", required=True
    )
    select_parser = json_commands.add_parser(
        "select",
        help="Select a value from JSON by a simple path like: data.items[0].name",
        formatter_class=RawDescriptionHelpFormatter,
        epilog=(
            "input priority: --file, then --text, then stdin\n"
            f"a path that matches nothing prints {config.json_select.not_found_sentinel}"
        ),
    )
    _add_verbosity(select_parser, SUPPRESS)
    select_parser.add_argument(
        "--text", default=None, help="The JSON input; if omitted, reads from stdin"
    )
    select_parser.add_argument(
        "--file", default=None, metavar="PATH", help="Read JSON from file instead of --text or stdin"
    )
    select_parser.add_argument(
        "--json5",
        action="store_true",
        help="Enable relaxed JSON5 parsing (unquoted keys, trailing commas, etc.)",
    )
    select_parser.add_argument(
        "--path",
        required=True,
        help="Path like: a.b[0].c  (dot for objects, [index] for arrays)",
    )

    return parser
