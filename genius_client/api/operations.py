"""
API operations module.

This module wraps each read-only Genius endpoint. Every wrapper validates
its identifying parameters before touching the network, builds a query
with unset parameters omitted, and returns the parsed JSON document.
"""

import logging
from typing import Any, Dict, Optional, Union

from ..constants import (
    DEFAULT_FIRST_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_TEXT_FORMAT,
    SONG_SORT_ORDERS,
)
from ..utils.validation import build_query, forbid_both, require_any, require_param
from .client import GeniusClient

logger = logging.getLogger(__name__)

Identifier = Union[int, str]


def get_annotation(
    client: GeniusClient,
    annotation_id: Identifier,
    text_format: str = DEFAULT_TEXT_FORMAT,
) -> Dict[str, Any]:
    """Retrieve a single annotation (``/annotations/{id}``)."""
    require_param("annotation_id", annotation_id)
    return client.execute(f"annotations/{annotation_id}", text_format=text_format)


def get_referents(
    client: GeniusClient,
    created_by_id: Optional[Identifier] = None,
    song_id: Optional[Identifier] = None,
    web_page_id: Optional[Identifier] = None,
    text_format: str = DEFAULT_TEXT_FORMAT,
    per_page: Optional[int] = None,
    page: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Retrieve referents (annotated fragments) filtered by creator, song or web page.

    Args:
        client: Initialized Genius client
        created_by_id: Optional ID of the user who created the referents
        song_id: Optional song ID; must not be combined with ``web_page_id``
        web_page_id: Optional web page ID; must not be combined with ``song_id``
        text_format: Format for text bodies (dom, plain or html)
        per_page: Optional number of results per page
        page: Optional page number

    Raises:
        ConflictingParameterError: If both ``song_id`` and ``web_page_id`` are given
    """
    forbid_both("song_id", song_id, "web_page_id", web_page_id)

    params = build_query(
        created_by_id=created_by_id,
        song_id=song_id,
        web_page_id=web_page_id,
        per_page=per_page,
        page=page,
    )
    return client.execute("referents", params, text_format=text_format)


def get_song(
    client: GeniusClient,
    song_id: Identifier,
    text_format: str = DEFAULT_TEXT_FORMAT,
) -> Dict[str, Any]:
    """Retrieve a single song (``/songs/{id}``)."""
    require_param("song_id", song_id)
    return client.execute(f"songs/{song_id}", text_format=text_format)


def get_artist(
    client: GeniusClient,
    artist_id: Identifier,
    text_format: str = DEFAULT_TEXT_FORMAT,
) -> Dict[str, Any]:
    """Retrieve a single artist (``/artists/{id}``)."""
    require_param("artist_id", artist_id)
    return client.execute(f"artists/{artist_id}", text_format=text_format)


def get_artist_songs(
    client: GeniusClient,
    artist_id: Identifier,
    sort: str = "title",
    per_page: int = DEFAULT_PER_PAGE,
    page: int = DEFAULT_FIRST_PAGE,
) -> Dict[str, Any]:
    """
    Retrieve one page of an artist's songs (``/artists/{id}/songs``).

    The response's ``response.next_page`` is the cursor for the following
    page, or null on the last page.
    """
    require_param("artist_id", artist_id)
    if sort not in SONG_SORT_ORDERS:
        raise ValueError(f"Invalid sort '{sort}'. Choose from: {', '.join(SONG_SORT_ORDERS)}")

    params = build_query(sort=sort, per_page=per_page, page=page)
    return client.execute(f"artists/{artist_id}/songs", params)


def get_web_page(
    client: GeniusClient,
    raw_annotatable_url: Optional[str] = None,
    canonical_url: Optional[str] = None,
    og_url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Look up a web page by any of its URL variants (``/web_pages/lookup``).

    Raises:
        MissingParameterError: If none of the three URLs is provided
    """
    require_any(
        {
            "raw_annotatable_url": raw_annotatable_url,
            "canonical_url": canonical_url,
            "og_url": og_url,
        }
    )

    params = build_query(
        raw_annotatable_url=raw_annotatable_url,
        canonical_url=canonical_url,
        og_url=og_url,
    )
    return client.execute("web_pages/lookup", params)


def search(client: GeniusClient, query: str) -> Dict[str, Any]:
    """Run a free-text search (``/search?q=...``)."""
    require_param("query", query)
    logger.debug(f"Searching Genius for: {query}")
    return client.execute("search", {"q": query})
