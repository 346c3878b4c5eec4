#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures and record schemas used
throughout the Genius client.
"""

from .api import Page
from .candidate import Candidate
from .records import (
    RecordSchema,
    ArtistDetails,
    SongDetails,
    ARTIST_DETAILS_SCHEMA,
    SONG_DETAILS_SCHEMA,
)

__all__ = [
    "Page",
    "Candidate",
    "RecordSchema",
    "ArtistDetails",
    "SongDetails",
    "ARTIST_DETAILS_SCHEMA",
    "SONG_DETAILS_SCHEMA",
]
