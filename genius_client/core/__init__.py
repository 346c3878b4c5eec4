#!/usr/bin/env python3
"""
Core package for the Genius client.

This package provides the reusable request-processing core: record
projection, pagination, disambiguation, high-level lookups and output
formatting.
"""

from .projection import (
    safe_get,
    project,
    project_as,
    flatten,
    flatten_rows,
)

from .pagination import (
    iter_pages,
    collect_all_pages,
)

from .selection import (
    build_candidates,
    resolve,
    first_candidate,
    prompt_for_candidate,
    make_prompt_selector,
)

from .lookups import (
    find_artist_id,
    find_song_id,
    get_artist_details,
    get_song_details,
    get_all_songs_from_artist,
)

from .output import (
    write_json,
    write_jsonl_output,
)

__all__ = [
    # Record projection
    "safe_get",
    "project",
    "project_as",
    "flatten",
    "flatten_rows",
    # Pagination
    "iter_pages",
    "collect_all_pages",
    # Disambiguation
    "build_candidates",
    "resolve",
    "first_candidate",
    "prompt_for_candidate",
    "make_prompt_selector",
    # High-level lookups
    "find_artist_id",
    "find_song_id",
    "get_artist_details",
    "get_song_details",
    "get_all_songs_from_artist",
    # Output
    "write_json",
    "write_jsonl_output",
]
