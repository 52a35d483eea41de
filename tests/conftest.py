# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from io import StringIO
from logging import Logger
from logging import getLogger

# Third party imports
import pytest
from rich.console import Console

# Local imports
from swiftline.infrastructure.config import _loader


@pytest.fixture(autouse=True, scope="function")
def basic_isolation(monkeypatch):
    """Minimal isolation for most tests - reset logging and shared config"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    # Reset cached level checks on all logger instances (clearing loggerDict
    # would orphan module-level loggers and leave their caches stale)
    Logger.manager._clear_cache()

    # The environment must not leak a log level into tests
    monkeypatch.delenv("SWIFTLINE_LOG", raising=False)
    # Colour must follow the stream, not the CI environment
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setattr(_loader, "_default_config", None)

    yield


@pytest.fixture
def plain_console() -> Console:
    """Console writing to a buffer with no colour, as when output is piped"""
    return Console(file=StringIO(), color_system=None, force_terminal=False, width=200)


@pytest.fixture
def color_console() -> Console:
    """Console writing to a buffer as if it were a colour terminal"""
    return Console(file=StringIO(), color_system="truecolor", force_terminal=True, width=200)
