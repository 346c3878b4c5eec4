"""
Environment configuration management module.

This module provides a centralized Environment manager class that loads,
validates, and serves all configuration values for the application.
Values are validated through the Pydantic configuration schema.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_PAGE_DELAY,
    DEFAULT_MIN_PAGE_DELAY,
    DEFAULT_PER_PAGE,
    DEFAULT_TEXT_FORMAT,
)
from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Env:
    """
    Immutable configuration container for environment variables.

    The API token is optional here: a client without one falls back to
    its credential store (environment at call time, then prompt).
    """

    GENIUS_API_TOKEN: Optional[str] = None
    GENIUS_API_BASE_URL: str = DEFAULT_BASE_URL
    GENIUS_TEXT_FORMAT: str = DEFAULT_TEXT_FORMAT
    GENIUS_PER_PAGE: int = DEFAULT_PER_PAGE
    GENIUS_MIN_PAGE_DELAY: float = DEFAULT_MIN_PAGE_DELAY
    GENIUS_MAX_PAGE_DELAY: float = DEFAULT_MAX_PAGE_DELAY

    @property
    def page_delay_range(self) -> tuple:
        return (self.GENIUS_MIN_PAGE_DELAY, self.GENIUS_MAX_PAGE_DELAY)

    @staticmethod
    def from_config(config: ConfigSchema) -> "Env":
        """Create an Env instance from a validated schema instance."""
        return Env(
            GENIUS_API_TOKEN=config.genius_api_token,
            GENIUS_API_BASE_URL=config.base_url,
            GENIUS_TEXT_FORMAT=config.text_format,
            GENIUS_PER_PAGE=config.per_page,
            GENIUS_MIN_PAGE_DELAY=config.min_page_delay,
            GENIUS_MAX_PAGE_DELAY=config.max_page_delay,
        )

    @staticmethod
    def load(
        cli_overrides: Optional[Mapping[str, str]] = None,
        cli_args: Optional[Namespace] = None,
    ) -> "Env":
        """
        Load configuration from all sources with precedence handling.

        Args:
            cli_overrides: Optional mapping of env-var names to values
            cli_args: Optional parsed CLI arguments

        Returns:
            Configured Env instance, also stored as the current instance

        Raises:
            ConfigError: If any value is invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env.from_config(config)
        logger.debug("Environment configuration loaded successfully")
        return _ENV

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @staticmethod
    def reset() -> None:
        """Forget the current instance (used by tests and long-lived shells)."""
        global _ENV
        _ENV = None

    def to_dict(self) -> dict:
        """Convert environment to dictionary representation."""
        return {
            "GENIUS_API_TOKEN": self.GENIUS_API_TOKEN,
            "GENIUS_API_BASE_URL": self.GENIUS_API_BASE_URL,
            "GENIUS_TEXT_FORMAT": self.GENIUS_TEXT_FORMAT,
            "GENIUS_PER_PAGE": self.GENIUS_PER_PAGE,
            "GENIUS_MIN_PAGE_DELAY": self.GENIUS_MIN_PAGE_DELAY,
            "GENIUS_MAX_PAGE_DELAY": self.GENIUS_MAX_PAGE_DELAY,
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Values go through the same schema validation as ``load``, but the
        process environment and dotenv file are not consulted.

        Raises:
            ConfigError: If any value is invalid
        """
        field_by_env = {
            (info.json_schema_extra or {}).get("env_var"): name
            for name, info in ConfigSchema.model_fields.items()
        }
        values = {}
        for key, value in mapping.items():
            field_name = field_by_env.get(key)
            if field_name is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            values[field_name] = value

        try:
            config = ConfigSchema(**values)
        except ValueError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        return cls.from_config(config)

    def mask(self) -> dict:
        """Return masked version for safe logging (hides sensitive values)."""
        masked = self.to_dict()
        masked["GENIUS_API_TOKEN"] = "***" if self.GENIUS_API_TOKEN else None
        return masked
