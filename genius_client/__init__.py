#!/usr/bin/env python3
"""
Genius Client Package

A Python client for the read-only Genius music-metadata API: artists,
songs, annotations, referents, web pages and search, with pagination,
search disambiguation and flat record projection.

This package provides both a command-line interface and a programmatic API.
"""

__version__ = "1.0.0"
__author__ = "Genius Client"
__description__ = "Typed client for the Genius music-metadata API"
__license__ = "MIT"

# Import models for public API
from .models import (
    Page,
    Candidate,
    ArtistDetails,
    SongDetails,
    ARTIST_DETAILS_SCHEMA,
    SONG_DETAILS_SCHEMA,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_BASE_URL,
    DEFAULT_PER_PAGE,
)

# Import API functions for public API
from .api import (
    GeniusClient,
    CredentialStore,
    create_genius_client,
    get_annotation,
    get_referents,
    get_song,
    get_artist,
    get_artist_songs,
    get_web_page,
    search,
    GeniusError,
    MissingCredentialError,
    MissingParameterError,
    ConflictingParameterError,
    RequestFailedError,
    NotFoundError,
    InvalidSelectionError,
)

# Import core functionality for public API
from .core import (
    safe_get,
    project,
    flatten,
    collect_all_pages,
    build_candidates,
    resolve,
    first_candidate,
    prompt_for_candidate,
    get_artist_details,
    get_song_details,
    get_all_songs_from_artist,
)

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import (
    setup_logging,
)

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "Page",
    "Candidate",
    "ArtistDetails",
    "SongDetails",
    "ARTIST_DETAILS_SCHEMA",
    "SONG_DETAILS_SCHEMA",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_API_FAILURES",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_BASE_URL",
    "DEFAULT_PER_PAGE",
    # Client and operations
    "GeniusClient",
    "CredentialStore",
    "create_genius_client",
    "get_annotation",
    "get_referents",
    "get_song",
    "get_artist",
    "get_artist_songs",
    "get_web_page",
    "search",
    # Errors
    "GeniusError",
    "MissingCredentialError",
    "MissingParameterError",
    "ConflictingParameterError",
    "RequestFailedError",
    "NotFoundError",
    "InvalidSelectionError",
    # Core functionality
    "safe_get",
    "project",
    "flatten",
    "collect_all_pages",
    "build_candidates",
    "resolve",
    "first_candidate",
    "prompt_for_candidate",
    "get_artist_details",
    "get_song_details",
    "get_all_songs_from_artist",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
