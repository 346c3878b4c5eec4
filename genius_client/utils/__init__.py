"""
Utilities module for the Genius client.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup
- Validation utilities for request parameters and paths
"""

# Logging utilities
from .logging import setup_logging

# Validation utilities
from .validation import (
    build_query,
    require_param,
    _is_output_path_writable,
)

__all__ = [
    "setup_logging",
    "build_query",
    "require_param",
    "_is_output_path_writable",
]
