"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for all configuration in the application.
"""

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator, model_validator

from ..constants import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_PAGE_DELAY,
    DEFAULT_MIN_PAGE_DELAY,
    DEFAULT_PER_PAGE,
    DEFAULT_TEXT_FORMAT,
    MAX_PER_PAGE,
    TEXT_FORMATS,
)


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    This is the single source of truth for all application configuration.
    Each field can be set via environment variables or CLI arguments.
    """

    # Authentication
    genius_api_token: Optional[str] = Field(
        None,
        description="Genius API bearer token",
        json_schema_extra={
            "env_var": "GENIUS_API_TOKEN",
            "cli_arg": "token",
            "sensitive": True,
        }
    )

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Base URL of the Genius API",
        json_schema_extra={
            "env_var": "GENIUS_API_BASE_URL",
            "cli_arg": "base_url",
        }
    )

    text_format: str = Field(
        DEFAULT_TEXT_FORMAT,
        description="Text format for annotation, referent, song and artist bodies",
        json_schema_extra={
            "env_var": "GENIUS_TEXT_FORMAT",
            "cli_arg": "text_format",
            "cli_choices": list(TEXT_FORMATS),
        }
    )

    # Pagination configuration
    per_page: int = Field(
        DEFAULT_PER_PAGE,
        ge=1,
        le=MAX_PER_PAGE,
        description=f"Results per page when collecting paginated lists (1-{MAX_PER_PAGE})",
        json_schema_extra={
            "env_var": "GENIUS_PER_PAGE",
            "cli_arg": "per_page",
        }
    )

    min_page_delay: float = Field(
        DEFAULT_MIN_PAGE_DELAY,
        ge=0.0,
        description="Lower bound (seconds) of the random pause between pages",
        json_schema_extra={
            "env_var": "GENIUS_MIN_PAGE_DELAY",
            "cli_arg": "min_page_delay",
        }
    )

    max_page_delay: float = Field(
        DEFAULT_MAX_PAGE_DELAY,
        ge=0.0,
        description="Upper bound (seconds) of the random pause between pages",
        json_schema_extra={
            "env_var": "GENIUS_MAX_PAGE_DELAY",
            "cli_arg": "max_page_delay",
        }
    )

    @field_validator('text_format', mode='before')
    @classmethod
    def parse_text_format(cls, v: Any) -> str:
        """Normalize and check the text format."""
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in TEXT_FORMATS:
            raise ValueError(f"Invalid text format: {v} (choose from {', '.join(TEXT_FORMATS)})")
        return v

    @field_validator('base_url', mode='after')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop trailing slashes so paths join cleanly."""
        return v.rstrip("/")

    @model_validator(mode='after')
    def check_delay_bounds(self) -> "ConfigSchema":
        """Ensure the delay range is ordered."""
        if self.min_page_delay > self.max_page_delay:
            raise ValueError(
                "min_page_delay must be less than or equal to max_page_delay"
            )
        return self

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
