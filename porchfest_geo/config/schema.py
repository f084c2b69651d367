"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from datetime import date
from typing import Any, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from ..constants import (
    DEFAULT_DATA_DIR,
    DEFAULT_EVENT_TIMEZONE,
    DEFAULT_GEOCODE_BASE_URL,
    DEFAULT_GEOCODE_LOCALITY,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    """

    # Geocoding service
    geocode_base_url: str = Field(
        DEFAULT_GEOCODE_BASE_URL,
        description="Base URL of the Nominatim-style geocoding service",
        json_schema_extra={
            "env_var": "GEOCODE_BASE_URL",
            "cli_arg": "geocode_url",
        }
    )

    geocode_locality: str = Field(
        DEFAULT_GEOCODE_LOCALITY,
        min_length=1,
        description="Locality appended to addresses that do not already name it",
        json_schema_extra={
            "env_var": "GEOCODE_LOCALITY",
            "cli_arg": "locality",
        }
    )

    # Time parsing
    event_date: Optional[date] = Field(
        None,
        description="Festival date (YYYY-MM-DD) used for time ranges; defaults to today",
        json_schema_extra={
            "env_var": "EVENT_DATE",
            "cli_arg": "event_date",
        }
    )

    event_timezone: str = Field(
        DEFAULT_EVENT_TIMEZONE,
        description="IANA time zone the listed times are in",
        json_schema_extra={
            "env_var": "EVENT_TIMEZONE",
            "cli_arg": "timezone",
        }
    )

    # Files
    data_dir: str = Field(
        DEFAULT_DATA_DIR,
        description="Directory holding the per-year input and output files",
        json_schema_extra={
            "env_var": "PORCHFEST_DATA_DIR",
            "cli_arg": "data_dir",
        }
    )

    @field_validator('geocode_base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Geocode base URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator('event_timezone')
    @classmethod
    def validate_timezone(cls, v: Any) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
