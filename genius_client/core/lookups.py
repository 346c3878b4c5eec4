"""
High-level lookup module.

This module composes search, disambiguation, detail requests and record
projection into the name-based lookups most callers want, plus the
paginated collection of an artist's full song list.
"""

import logging
import random
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..api import operations
from ..api.client import GeniusClient
from ..constants import DEFAULT_PER_PAGE
from ..models import (
    ARTIST_DETAILS_SCHEMA,
    SONG_DETAILS_SCHEMA,
    ArtistDetails,
    Page,
    SongDetails,
)
from .pagination import DEFAULT_DELAY_RANGE, collect_all_pages
from .projection import flatten_rows, project_as, safe_get
from .selection import CandidateSelector, build_candidates, make_prompt_selector, resolve

logger = logging.getLogger(__name__)


def _search_hits(client: GeniusClient, query: str) -> List[Mapping[str, Any]]:
    results = operations.search(client, query)
    hits = safe_get(results, "response.hits", [])
    return hits if isinstance(hits, list) else []


def _song_label(hit: Mapping[str, Any]) -> str:
    title = safe_get(hit, "result.title")
    artist = safe_get(hit, "result.primary_artist.name")
    return f"{title} by {artist}"


def find_artist_id(
    client: GeniusClient,
    artist_name: str,
    select_candidate: Optional[CandidateSelector] = None,
) -> Any:
    """Search for an artist by name and resolve the matches to one artist id."""
    hits = _search_hits(client, artist_name)
    candidates = build_candidates(
        hits,
        id_path="result.primary_artist.id",
        name_path="result.primary_artist.name",
        url_path="result.primary_artist.url",
    )
    logger.debug(f"Found {len(candidates)} artist candidate(s) for {artist_name!r}")
    return resolve(candidates, select_candidate or make_prompt_selector("artist"), kind="artist")


def find_song_id(
    client: GeniusClient,
    song_name: str,
    select_candidate: Optional[CandidateSelector] = None,
) -> Any:
    """Search for a song by name and resolve the matches to one song id."""
    hits = _search_hits(client, song_name)
    candidates = build_candidates(
        hits,
        id_path="result.id",
        name_path="result.title",
        url_path="result.url",
        label_func=_song_label,
    )
    logger.debug(f"Found {len(candidates)} song candidate(s) for {song_name!r}")
    return resolve(candidates, select_candidate or make_prompt_selector("song"), kind="song")


def get_artist_details(
    client: GeniusClient,
    artist_name: str,
    select_candidate: Optional[CandidateSelector] = None,
) -> ArtistDetails:
    """
    Search for an artist and return their details as a flat record.

    If the search matches several artists, ``select_candidate`` chooses one
    (interactive prompt by default). Missing detail fields are None.

    Raises:
        MissingParameterError: If ``artist_name`` is empty
        NotFoundError: If the search yields no artist
        InvalidSelectionError: If the choice is invalid
        RequestFailedError: If any request fails
    """
    artist_id = find_artist_id(client, artist_name, select_candidate)
    details = operations.get_artist(client, artist_id)
    return project_as(ArtistDetails, safe_get(details, "response.artist"), ARTIST_DETAILS_SCHEMA)


def get_song_details(
    client: GeniusClient,
    song_name: str,
    select_candidate: Optional[CandidateSelector] = None,
) -> SongDetails:
    """
    Search for a song and return its details as a flat record.

    If the search matches several songs, ``select_candidate`` chooses one
    (interactive prompt by default). Missing detail fields are None.
    """
    song_id = find_song_id(client, song_name, select_candidate)
    details = operations.get_song(client, song_id)
    return project_as(SongDetails, safe_get(details, "response.song"), SONG_DETAILS_SCHEMA)


def artist_songs_page_fetcher(
    client: GeniusClient,
    artist_id: Any,
    per_page: int = DEFAULT_PER_PAGE,
    sort: str = "title",
) -> Callable[[Any], Page]:
    """Return a ``fetch_page`` callable over ``/artists/{id}/songs``."""

    def fetch_page(cursor: Any) -> Page:
        response = operations.get_artist_songs(
            client, artist_id, sort=sort, per_page=per_page, page=cursor
        )
        songs = safe_get(response, "response.songs", [])
        return Page(
            items=songs if isinstance(songs, list) else [],
            next_cursor=safe_get(response, "response.next_page"),
        )

    return fetch_page


def get_all_songs_from_artist(
    client: GeniusClient,
    artist_id: Any,
    per_page: int = DEFAULT_PER_PAGE,
    sort: str = "title",
    delay_range: Optional[Tuple[float, float]] = None,
    sleep: Optional[Callable[[float], None]] = None,
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """
    Retrieve every song by an artist, following pagination to the end.

    Each song is returned as a flattened row with dotted keys
    (e.g. ``primary_artist.name``). A failure on any page aborts the
    whole collection.
    """
    songs = collect_all_pages(
        artist_songs_page_fetcher(client, artist_id, per_page=per_page, sort=sort),
        delay_range=delay_range or DEFAULT_DELAY_RANGE,
        sleep=sleep,
        rng=rng,
        label=f"artists/{artist_id}/songs",
    )
    return flatten_rows(songs)
