"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
import typing
from typing import Dict, Any, Optional, Mapping
from argparse import ArgumentParser, Namespace

from pydantic import ValidationError

from .schema import ConfigSchema


logger = logging.getLogger(__name__)


def _field_extra(field_info) -> dict:
    return field_info.json_schema_extra or {}


def _clean(value: Any) -> Any:
    """Strip strings; an explicit empty string clears the value."""
    if isinstance(value, str):
        stripped = value.strip()
        return stripped if stripped else None
    return value


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        dotenv_path: str = ".env.local",
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. .env.local file (if it exists)
        3. OS environment variables
        4. CLI arguments (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Mapping of env-var names to override values
            dotenv_path: Path of the dotenv file to read

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        # Step 1: Load from .env.local file if available (never overrides OS env)
        _load_from_dotenv_file(dotenv_path)

        # Step 2: Load from environment variables based on schema
        for field_name, field_info in schema.model_fields.items():
            env_var = _field_extra(field_info).get("env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None and env_value.strip():
                    # Empty strings fall back to the default
                    config_dict[field_name] = env_value.strip()

        # Step 3: Apply CLI arguments
        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _field_extra(field_info).get("cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is not None:
                        config_dict[field_name] = _clean(cli_value)

        # Step 4: Apply explicit overrides keyed by env var name
        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                env_var = _field_extra(field_info).get("env_var")
                if env_var in cli_overrides and cli_overrides[env_var] is not None:
                    config_dict[field_name] = _clean(cli_overrides[env_var])

        # A cleared value means "use the default"
        config_dict = {key: value for key, value in config_dict.items() if value is not None}

        # Step 5: Create and validate the configuration
        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            # Convert Pydantic validation errors to more user-friendly messages
            errors = []
            for error in e.errors():
                loc = error.get("loc") or ()
                field = loc[0] if loc else None
                msg = error["msg"]
                field_info = schema.model_fields.get(field) if field else None
                if field_info is not None:
                    env_var = _field_extra(field_info).get("env_var", str(field).upper())
                else:
                    env_var = str(field).upper() if field else "CONFIG"
                errors.append(f"{env_var}: {msg}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def add_schema_arguments(
        parser: ArgumentParser,
        schema: type[ConfigSchema] = ConfigSchema,
    ) -> ArgumentParser:
        """
        Add one ``--option`` per schema field that declares a ``cli_arg``.

        Defaults are left as None so the loader can tell "not given" apart
        from an explicit value.
        """
        for field_name, field_info in schema.model_fields.items():
            extra = _field_extra(field_info)
            cli_arg = extra.get("cli_arg")
            if not cli_arg:
                continue

            arg_name = f"--{cli_arg.replace('_', '-')}"
            kwargs: Dict[str, Any] = {
                "dest": cli_arg,
                "help": field_info.description or f"Override {extra.get('env_var', field_name.upper())} env var",
                "default": None,
            }

            field_type = field_info.annotation

            # Unwrap Optional[X]
            if typing.get_origin(field_type) is typing.Union:
                non_none_args = [arg for arg in typing.get_args(field_type) if arg is not type(None)]
                if len(non_none_args) == 1:
                    field_type = non_none_args[0]

            if field_type == int:
                kwargs["type"] = int
            elif field_type == float:
                kwargs["type"] = float

            choices = extra.get("cli_choices")
            if choices:
                kwargs["choices"] = choices

            env_var = extra.get("env_var")
            if env_var:
                kwargs["help"] += f" (env: {env_var})"

            parser.add_argument(arg_name, **kwargs)

        return parser


def _load_from_dotenv_file(path: str = ".env.local") -> None:
    """Load values from a dotenv file if it exists."""
    from dotenv import load_dotenv

    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path} file")
    else:
        logger.debug(f"{path} file not found, skipping")
