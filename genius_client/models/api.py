#!/usr/bin/env python3
"""
API Response Models

This module contains data structures related to paginated Genius API
responses.
"""

from typing import Any, List, NamedTuple, Optional


class Page(NamedTuple):
    """
    One page of a paginated result set.

    Attributes:
        items: Items on this page, in server order
        next_cursor: Cursor for the following page, or None on the last page
    """

    items: List[Any]
    next_cursor: Optional[Any] = None
