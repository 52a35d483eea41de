# swiftline/infrastructure/config/__init__.py

"""Configuration infrastructure for swiftline.

This module manages configuration defaults, validation, and the logging-level
override read from the environment.
"""

# Local imports
from swiftline.infrastructure.config._loader import ConfigLoader
from swiftline.infrastructure.config._loader import get_config
from swiftline.infrastructure.config._models import AppConfig
from swiftline.infrastructure.config._models import HttpConfig
from swiftline.infrastructure.config._models import JsonConfig
from swiftline.infrastructure.config._models import LOG_LEVEL_ENV_VAR
from swiftline.infrastructure.config._models import LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "HttpConfig",
    "JsonConfig",
    "LOG_LEVEL_ENV_VAR",
    "LoggingConfig",
    "get_config",
]
