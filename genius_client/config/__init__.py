"""
Configuration management for the Genius client.

This module provides centralized configuration handling with support for
environment variables, .env files, and CLI overrides, validated through a
Pydantic schema.
"""

from .env import Env, ConfigError
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Env", "ConfigError", "ConfigSchema", "ConfigLoader"]
