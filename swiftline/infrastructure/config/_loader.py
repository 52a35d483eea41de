# swiftline/infrastructure/config/_loader.py

"""Configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from swiftline.infrastructure.config._models import AppConfig
from swiftline.infrastructure.config._models import HttpConfig
from swiftline.infrastructure.config._models import JsonConfig
from swiftline.infrastructure.config._models import LoggingConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration access for the CLI and services"""

    def __init__(self, env: dict[str, str] | None = None):
        """Initialize configuration loader

        Args:
            env: Environment mapping, ``os.environ`` if None
        """
        self._app_config = AppConfig.load(env)

    @property
    def http(self) -> HttpConfig:
        """HTTP configuration"""
        return self._app_config.http

    @property
    def json_select(self) -> JsonConfig:
        """JSON selection configuration"""
        return self._app_config.json_select

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging

    def log_level_override(self) -> str | None:
        """Level name from the environment, if one was given"""
        return self._app_config.logging.level


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(env: dict[str, str] | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        env: Environment mapping for a fresh loader, None for the shared default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if env is not None:
        return ConfigLoader(env)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config
