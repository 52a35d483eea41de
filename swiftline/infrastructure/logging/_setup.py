# swiftline/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from logging import DEBUG
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import WARNING
from logging import getLevelName
from logging import getLogger

# Local imports
from swiftline.infrastructure.config import get_config


def level_for_verbosity(verbose: int) -> int:
    """Map the -v count to a logging level: warn, info, then debug"""
    if verbose <= 0:
        return WARNING
    if verbose == 1:
        return INFO
    return DEBUG


def set_up_logging(verbose: int = 0, level_override: str | None = None) -> int:
    """Configure logging for the application

    Log records go to stderr only so stdout stays reserved for data.

    Args:
        verbose: Number of -v flags given
        level_override: Level name that wins over verbose, e.g. from SWIFTLINE_LOG.
            Read from configuration when None.

    Returns:
        The effective logging level
    """
    if level_override is None:
        level_override = get_config().log_level_override()

    if level_override is not None:
        level = getLevelName(level_override)
    else:
        level = level_for_verbosity(verbose)

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(console_handler)

    return level
