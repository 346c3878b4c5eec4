#!/usr/bin/env python3
"""
CLI package for the Genius client.

This package provides command-line interface components including
argument parsing and subcommand dispatch.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
)

__all__ = [
    # Argument parsing
    "create_argument_parser",
    # Main application flow
    "main",
]
