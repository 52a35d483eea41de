# swiftline/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from logging import getLogger
from os import environ

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from swiftline import __version__

logger = getLogger(__name__)

LOG_LEVEL_ENV_VAR = "SWIFTLINE_LOG"

_LEVEL_ALIASES = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}


def normalize_level_name(value: str) -> str:
    """Map a user supplied level name onto a logging level name

    Raises:
        ValueError: If the name is not a known level
    """
    level = _LEVEL_ALIASES.get(value.strip().lower())
    if level is None:
        raise ValueError(f"Unknown log level '{value}'")
    return level


class HttpConfig(BaseModel):
    """HTTP client configuration"""

    timeout: float = Field(
        30, gt=0, allow_inf_nan=False, description="Total request timeout in seconds"
    )
    chunk_size: int = Field(8192, gt=0, description="Bytes per streamed read when saving")
    user_agent: str = Field(f"swiftline/{__version__}", description="User-Agent header")


class JsonConfig(BaseModel):
    """JSON selection and rendering configuration"""

    indent: int = Field(2, ge=0, le=8, description="Indent used for pretty printing")
    not_found_sentinel: str = Field("(null)", description="Printed when a path resolves to nothing")

    @field_validator("not_found_sentinel")
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        """Sentinel must be visible in a pipeline"""
        if not v.strip():
            raise ValueError("not_found_sentinel must not be blank")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    level: str | None = Field(None, description="Level override taken from the environment")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str | None) -> str | None:
        """Normalize level names such as 'warn' or 'Debug'"""
        if v is None:
            return None
        return normalize_level_name(v)


class AppConfig(BaseModel):
    """Root application configuration model"""

    http: HttpConfig = Field(default_factory=HttpConfig)
    json_select: JsonConfig = Field(default_factory=JsonConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, env: dict[str, str] | None = None) -> "AppConfig":
        """Build configuration from defaults and the environment

        Only the logging level can be overridden, through ``SWIFTLINE_LOG``.
        An unusable value is reported and ignored.

        Args:
            env: Environment mapping, ``os.environ`` if None

        Returns:
            Validated AppConfig instance
        """
        env = environ if env is None else env
        raw_level = env.get(LOG_LEVEL_ENV_VAR)
        if not raw_level:
            return cls()

        try:
            return cls.model_validate({"logging": {"level": raw_level}})
        except ValidationError as e:
            logger.warning(f"Ignoring {LOG_LEVEL_ENV_VAR}={raw_level!r}: {e.errors()[0]['msg']}")
            return cls()
