#!/usr/bin/env python3
"""
Application Constants

This module contains the API endpoints, request defaults and exit codes
used throughout the Genius client.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_API_FAILURES = 4
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Genius API
DEFAULT_BASE_URL = "https://api.genius.com"
TOKEN_ENV_VAR = "GENIUS_API_TOKEN"
TEXT_FORMATS = ("dom", "plain", "html")
DEFAULT_TEXT_FORMAT = "dom"
SONG_SORT_ORDERS = ("title", "popularity")

# Pagination
DEFAULT_FIRST_PAGE = 1
DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 50
DEFAULT_MIN_PAGE_DELAY = 1.0  # seconds
DEFAULT_MAX_PAGE_DELAY = 3.0  # seconds
