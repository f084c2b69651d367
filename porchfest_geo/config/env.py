"""
Environment configuration management module.

This module provides the immutable Env snapshot that the rest of the
application reads configuration from once it has been loaded and validated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

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
    """Immutable configuration container."""

    GEOCODE_BASE_URL: str
    GEOCODE_LOCALITY: str
    EVENT_TIMEZONE: str
    DATA_DIR: str
    EVENT_DATE: Optional[date] = None

    @staticmethod
    def load(overrides: Optional[Mapping[str, str]] = None, cli_args=None) -> "Env":
        """
        Load configuration from all sources and install it as the current Env.

        Args:
            overrides: Optional mapping of env var names to values
            cli_args: Optional parsed CLI namespace

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If any value is invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                overrides=overrides,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env.from_schema(config)
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
        """Forget the current Env (used by tests)."""
        global _ENV
        _ENV = None

    @classmethod
    def from_schema(cls, config: ConfigSchema) -> "Env":
        return cls(
            GEOCODE_BASE_URL=config.geocode_base_url,
            GEOCODE_LOCALITY=config.geocode_locality,
            EVENT_TIMEZONE=config.event_timezone,
            DATA_DIR=config.data_dir,
            EVENT_DATE=config.event_date,
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create an Env from a plain mapping without touching the process
        environment (useful for testing).

        Raises:
            ConfigError: If a value fails validation
        """
        values = {}
        for field_name, field_info in ConfigSchema.model_fields.items():
            env_var = field_info.json_schema_extra.get("env_var")
            if mapping.get(env_var):
                values[field_name] = mapping[env_var]

        try:
            config = ConfigSchema(**values)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        return cls.from_schema(config)

    def to_dict(self) -> dict:
        return {
            "GEOCODE_BASE_URL": self.GEOCODE_BASE_URL,
            "GEOCODE_LOCALITY": self.GEOCODE_LOCALITY,
            "EVENT_DATE": self.EVENT_DATE.isoformat() if self.EVENT_DATE else None,
            "EVENT_TIMEZONE": self.EVENT_TIMEZONE,
            "DATA_DIR": self.DATA_DIR,
        }
