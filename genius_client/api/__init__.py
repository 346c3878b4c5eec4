#!/usr/bin/env python3
"""
API package for the Genius client.

This package provides client management, the credential store, endpoint
operations and the error types for the Genius client.
"""

from .errors import (
    GeniusError,
    MissingCredentialError,
    MissingParameterError,
    ConflictingParameterError,
    RequestFailedError,
    NotFoundError,
    InvalidSelectionError,
)

from .credentials import (
    CredentialStore,
    prompt_for_token,
)

from .client import (
    GeniusClient,
    create_genius_client,
)

from .operations import (
    get_annotation,
    get_referents,
    get_song,
    get_artist,
    get_artist_songs,
    get_web_page,
    search,
)

__all__ = [
    # Errors
    "GeniusError",
    "MissingCredentialError",
    "MissingParameterError",
    "ConflictingParameterError",
    "RequestFailedError",
    "NotFoundError",
    "InvalidSelectionError",
    # Credentials
    "CredentialStore",
    "prompt_for_token",
    # Client management
    "GeniusClient",
    "create_genius_client",
    # Operations
    "get_annotation",
    "get_referents",
    "get_song",
    "get_artist",
    "get_artist_songs",
    "get_web_page",
    "search",
]
