# swiftline/infrastructure/logging/__init__.py

"""Logging infrastructure for swiftline.

This module provides centralized logging configuration and the progress
display used while waiting on the network.
"""

# Local imports
from swiftline.infrastructure.logging._progress import ProgressDisplay
from swiftline.infrastructure.logging._setup import level_for_verbosity
from swiftline.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["ProgressDisplay", "level_for_verbosity", "setup_logging"]
