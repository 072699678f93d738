import os
import sys
import logging
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# --- Logging Setup ---
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


_LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Settings(BaseModel):
    """Validated process environment. Field aliases are the variable names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Database
    database_url: str = Field(..., alias="DATABASE_URL")
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_name: str = Field(default="device_capabilities", alias="DB_NAME")
    db_user: str = Field(default="postgres", alias="DB_USER")
    db_password: str = Field(..., alias="DB_PASSWORD")

    # Server
    port: int = Field(default=3000, alias="PORT")
    node_env: Environment = Field(default=Environment.DEVELOPMENT, alias="NODE_ENV")

    # CORS
    cors_origin: str = Field(default="http://localhost:5173", alias="CORS_ORIGIN")

    # Logging
    log_level: LogLevel = Field(default=LogLevel.INFO, alias="LOG_LEVEL")

    @field_validator("database_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            raise ValueError("Invalid url")
        return value

    @property
    def is_development(self) -> bool:
        return self.node_env == Environment.DEVELOPMENT

    @property
    def async_database_url(self) -> str:
        """DATABASE_URL rewritten for the asyncpg driver."""
        return to_async_database_url(self.database_url)

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self.log_level]


class EnvValidationError(Exception):
    """Raised when the environment does not satisfy the settings schema."""

    def __init__(self, issues: List[Dict[str, str]]):
        self.issues = issues
        fields = ", ".join(issue["field"] for issue in issues)
        super().__init__(f"Environment validation failed: {fields}")

    @property
    def fields(self) -> List[str]:
        return [issue["field"] for issue in self.issues]


def to_async_database_url(url: str) -> str:
    parts = urlsplit(url)
    scheme = parts.scheme
    if scheme in ("postgres", "postgresql"):
        scheme = "postgresql+asyncpg"
    elif scheme.startswith("postgresql") and not scheme.startswith("postgresql+asyncpg"):
        logger.warning(
            f"DATABASE_URL uses driver '{scheme}'. Ensure it's correctly configured for async."
        )

    # asyncpg rejects libpq's sslmode parameter
    params = [
        (k, v)
        for (k, v) in parse_qsl(parts.query, keep_blank_values=True)
        if k != "sslmode"
    ]
    return urlunsplit((scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def validate_env(environ: Mapping[str, Any]) -> Settings:
    """Validate a mapping of environment variables.

    Raises:
        EnvValidationError: listing every violated field, not just the first.
    """
    try:
        return Settings.model_validate(dict(environ))
    except ValidationError as e:
        issues = []
        for err in e.errors():
            field = ".".join(str(part) for part in err["loc"])
            issues.append({"field": field, "message": err["msg"]})
        raise EnvValidationError(issues) from e


_cached_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Load settings from os.environ once and cache them.

    Invalid environments are logged field by field. Outside of the test
    environment the process exits with status 1.
    """
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings

    try:
        _cached_settings = validate_env(os.environ)
    except EnvValidationError as e:
        logger.critical("Invalid environment variables:")
        for issue in e.issues:
            logger.critical(f"  - {issue['field']}: {issue['message']}")
        if os.environ.get("NODE_ENV") == Environment.TEST.value:
            raise
        sys.exit(1)

    return _cached_settings


def reset_settings_cache() -> None:
    global _cached_settings
    _cached_settings = None


def configure_logging(settings: Settings) -> None:
    logging.getLogger().setLevel(settings.logging_level)
    logger.info(
        f"Logging configured: level={settings.log_level.value}, environment={settings.node_env.value}"
    )
