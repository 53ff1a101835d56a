import os
from dataclasses import dataclass
from typing import Self
from urllib.parse import urlsplit

from ticket_cli.constants import (
    BASE_URL_ENV_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Exception raised when the CLI configuration is invalid."""


@dataclass(frozen=True)
class TicketCLIConfig:
    """Ticket CLI configuration."""

    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        object.__setattr__(self, "base_url", self._normalize_base_url(self.base_url))
        object.__setattr__(self, "log_level", self._normalize_log_level(self.log_level))

    @classmethod
    def from_env(cls, environ: dict | None = None, **overrides) -> Self:
        """Create TicketCLIConfig from environment variables.

        Keyword overrides that are not None win over the environment.
        """
        environ = os.environ if environ is None else environ
        settings = {
            "base_url": environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL,
            "log_level": environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL,
        }
        settings.update({key: setting for key, setting in overrides.items() if setting is not None})
        return cls(**settings)

    def _normalize_base_url(self, base_url: str) -> str:
        base_url = base_url.strip()
        parts = urlsplit(base_url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ConfigError(f"Invalid base URL '{base_url}': expected http(s)://host[:port]")
        return base_url if base_url.endswith("/") else f"{base_url}/"

    def _normalize_log_level(self, log_level: str) -> str:
        log_level = log_level.strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level '{log_level}': expected one of {', '.join(LOG_LEVELS)}")
        return log_level
