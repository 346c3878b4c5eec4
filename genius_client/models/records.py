#!/usr/bin/env python3
"""
Record Models

This module declares the flat record schemas projected from nested
Genius responses. Each schema is an ordered list of
``(field_name, dotted_path)`` pairs; the matching NamedTuple fixes the
field order callers see.
"""

from typing import Any, NamedTuple, Optional, Sequence, Tuple

RecordSchema = Sequence[Tuple[str, str]]


class ArtistDetails(NamedTuple):
    """
    Flattened artist details.

    Missing upstream fields are None.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    url: Optional[str] = None
    header_image_url: Optional[str] = None
    image_url: Optional[str] = None
    is_verified: Optional[bool] = None
    iq: Optional[Any] = None


class SongDetails(NamedTuple):
    """
    Flattened song details.

    Missing upstream fields are None.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None
    release_date: Optional[str] = None
    song_art_image_url: Optional[str] = None
    primary_artist: Optional[str] = None
    lyrics_state: Optional[str] = None
    page_views: Optional[int] = None


# Paths are relative to ``response.artist``
ARTIST_DETAILS_SCHEMA: RecordSchema = (
    ("id", "id"),
    ("name", "name"),
    ("url", "url"),
    ("header_image_url", "header_image_url"),
    ("image_url", "image_url"),
    ("is_verified", "is_verified"),
    ("iq", "iq"),
)

# Paths are relative to ``response.song``
SONG_DETAILS_SCHEMA: RecordSchema = (
    ("id", "id"),
    ("title", "title"),
    ("url", "url"),
    ("release_date", "release_date"),
    ("song_art_image_url", "song_art_image_url"),
    ("primary_artist", "primary_artist.name"),
    ("lyrics_state", "lyrics_state"),
    ("page_views", "stats.pageviews"),
)
