"""
Schema-driven configuration loader.

Values are gathered from each source keyed by schema field name and merged
in precedence order before a single validation pass, so every source goes
through the same validators.
"""

import logging
import os
import typing
from argparse import ArgumentParser, Namespace
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)

DOTENV_FILE = ".env.local"

# argparse converters for non-string schema fields
_CLI_TYPES: Dict[type, Callable[[str], Any]] = {
    int: int,
    float: float,
    date: date.fromisoformat,
}


class ConfigLoader:
    """Builds a validated ConfigSchema from defaults, env files, env vars and CLI flags."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> ConfigSchema:
        """
        Merge all configuration sources and validate the result.

        Precedence, lowest first:
        1. Schema defaults
        2. ``.env.local`` (never overrides variables already set)
        3. OS environment variables
        4. ``overrides``, keyed by env var name
        5. CLI arguments

        Raises:
            ValueError: With one line per invalid field, named by env var
        """
        _load_from_dotenv_file()

        values: Dict[str, Any] = {}
        values.update(_values_from_environment(schema))
        values.update(_values_from_overrides(schema, overrides or {}))
        values.update(_values_from_cli(schema, cli_args))

        try:
            config = schema(**values)
        except ValidationError as e:
            raise ValueError(_describe_validation_error(schema, e)) from e

        logger.debug(f"Configuration resolved from {len(values)} explicit values")
        return config

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Geocode a porchfest listing",
        epilog: Optional[str] = None,
    ) -> ArgumentParser:
        """
        Build an ArgumentParser with ``--verbose`` and one flag per schema field.

        Flags default to None so that unset options leave lower-precedence
        sources in charge. Commands add their own arguments to the result.
        """
        parser = ArgumentParser(description=description, epilog=epilog)
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Enable verbose logging (DEBUG level)",
        )

        for field_info in schema.model_fields.values():
            cli_arg = _field_extra(field_info, "cli_arg")
            if not cli_arg:
                continue

            kwargs: Dict[str, Any] = {
                "default": None,
                "help": field_info.description
                or f"Override {_field_extra(field_info, 'env_var')}",
            }
            converter = _CLI_TYPES.get(_unwrap_optional(field_info.annotation))
            if converter is not None:
                kwargs["type"] = converter

            parser.add_argument(f"--{cli_arg.replace('_', '-')}", **kwargs)

        return parser


def _field_extra(field_info, key: str) -> Optional[Any]:
    """Read a key from a field's json_schema_extra metadata."""
    if field_info is None or not field_info.json_schema_extra:
        return None
    return field_info.json_schema_extra.get(key)


def _unwrap_optional(annotation: Any) -> Any:
    """``Optional[X]`` -> ``X``; anything else is returned unchanged."""
    if typing.get_origin(annotation) is typing.Union:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _normalize(value: Any) -> Any:
    """Trim strings; a blank string means "no value"."""
    if isinstance(value, str):
        return value.strip() or None
    return value


def _values_from_environment(schema: type[ConfigSchema]) -> Dict[str, Any]:
    values = {}
    for field_name, field_info in schema.model_fields.items():
        env_var = _field_extra(field_info, "env_var")
        value = _normalize(os.getenv(env_var)) if env_var else None
        # Blank variables fall back to the schema default
        if value is not None:
            values[field_name] = value
    return values


def _values_from_overrides(schema: type[ConfigSchema], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    values = {}
    for field_name, field_info in schema.model_fields.items():
        env_var = _field_extra(field_info, "env_var")
        if env_var in overrides and overrides[env_var] is not None:
            # A blank override explicitly clears the field
            values[field_name] = _normalize(overrides[env_var])
    return values


def _values_from_cli(schema: type[ConfigSchema], cli_args: Optional[Namespace]) -> Dict[str, Any]:
    if cli_args is None:
        return {}
    values = {}
    for field_name, field_info in schema.model_fields.items():
        cli_arg = _field_extra(field_info, "cli_arg")
        value = getattr(cli_args, cli_arg, None) if cli_arg else None
        if value is not None:
            values[field_name] = _normalize(value)
    return values


def _describe_validation_error(schema: type[ConfigSchema], error: ValidationError) -> str:
    lines = []
    for item in error.errors():
        field = item["loc"][0] if item["loc"] else "config"
        env_var = _field_extra(schema.model_fields.get(field), "env_var")
        lines.append(f"  - {env_var or str(field).upper()}: {item['msg']}")
    return "Configuration validation failed:\n" + "\n".join(lines)


def _load_from_dotenv_file() -> None:
    """Load values from .env.local without overriding the process environment."""
    if os.path.exists(DOTENV_FILE):
        load_dotenv(DOTENV_FILE, override=False)
        logger.debug(f"Loaded configuration from {DOTENV_FILE}")
    else:
        logger.debug(f"{DOTENV_FILE} not found, skipping")
