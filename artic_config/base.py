"""
Environment-backed configuration.

Values come from the process environment, optionally seeded from a ``.env``
file, with defaults matching the public artworks API.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.artic.edu/api/v1"
DEFAULT_PAGE_SIZE = 12
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_FIELDS: Tuple[str, ...] = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)


class ConfigurationError(ValueError):
    """Raised when a configuration value is missing or invalid."""


@dataclass
class BaseConfiguration:
    """Settings shared by the API client and the terminal session."""
    api_base_url: str = DEFAULT_BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    fields: Tuple[str, ...] = field(default=DEFAULT_FIELDS)

    def validate(self) -> None:
        if not self.api_base_url:
            raise ConfigurationError("ARTIC_API_BASE_URL must not be empty")
        if self.page_size <= 0:
            raise ConfigurationError(f"ARTIC_PAGE_SIZE must be positive, got {self.page_size}")
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"ARTIC_REQUEST_TIMEOUT must be positive, got {self.request_timeout}"
            )
        if logging.getLevelName(self.log_level.upper()) == f"Level {self.log_level.upper()}":
            raise ConfigurationError(f"Unknown ARTIC_LOG_LEVEL: {self.log_level}")

    @property
    def artworks_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/artworks"


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def load_configuration(env: Optional[Mapping[str, str]] = None,
                       dotenv: bool = True) -> BaseConfiguration:
    """
    Build a validated configuration from the environment.

    Args:
        env: Mapping to read instead of ``os.environ``
        dotenv: If True and ``env`` is not given, load a ``.env`` file first

    Returns:
        Validated BaseConfiguration
    """
    if env is None:
        if dotenv:
            load_dotenv()
        env = os.environ

    config = BaseConfiguration(
        api_base_url=env.get("ARTIC_API_BASE_URL", DEFAULT_BASE_URL),
        page_size=_read_int(env, "ARTIC_PAGE_SIZE", DEFAULT_PAGE_SIZE),
        request_timeout=_read_float(env, "ARTIC_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        log_level=env.get("ARTIC_LOG_LEVEL", "INFO"),
    )
    config.validate()
    logger.debug("Loaded configuration: %s", config)
    return config
