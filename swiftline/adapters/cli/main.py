# swiftline/adapters/cli/main.py

"""
swiftline - CLI Main Module

Entry point: set up logging, parse arguments, dispatch the subcommand, and
turn errors into a message on stderr and a non-zero exit status.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger

# Local imports
from swiftline.adapters.cli.parser import create_argument_parser
from swiftline.application.services import HttpFetchService
from swiftline.application.services import JsonSelectService
from swiftline.core.domain.errors import SwiftlineError
from swiftline.infrastructure.logging import setup_logging
from swiftline.shared.utils.style import err_line

logger = getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def run_http_get(args: Namespace) -> None:
    """Handle ``http get``"""
    HttpFetchService().fetch(
        args.url,
        headers=args.headers,
        timeout=args.timeout,
        save=args.save,
        pretty=args.pretty,
    )


def run_json_select(args: Namespace) -> None:
    """Handle ``json select``"""
    JsonSelectService().run(args.path, text=args.text, file=args.file, relaxed=args.json5)


COMMANDS = {
    ("http", "get"): run_http_get,
    ("json", "select"): run_json_select,
}


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point

    Args:
        argv: Arguments without the program name, sys.argv[1:] if None
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=getattr(args, "verbose", 0) or 0)
    logger.debug(f"CLI args: {vars(args)}")

    # No subcommand: print help (exit code 0)
    if args.command is None:
        parser.print_help()
        return

    subcommand = getattr(args, f"{args.command}_command")
    handler = COMMANDS[(args.command, subcommand)]

    try:
        handler(args)
    except SwiftlineError as e:
        logger.debug(f"{args.command} {subcommand} failed", exc_info=True)
        err_line(f"Error: {e}")
        raise SystemExit(EXIT_FAILURE) from e
    except BrokenPipeError as e:
        err_line("Error: Failed to write to standard output (broken pipe)")
        raise SystemExit(EXIT_FAILURE) from e
    except KeyboardInterrupt:
        err_line("Interrupted")
        raise SystemExit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
