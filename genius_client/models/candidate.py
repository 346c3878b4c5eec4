#!/usr/bin/env python3
"""
Candidate Models

This module contains the lightweight summary used when a search yields
more than one possible artist or song.
"""

from typing import NamedTuple, Optional, Union


class Candidate(NamedTuple):
    """
    A possible match awaiting disambiguation.

    Attributes:
        id: Genius identifier (the de-duplication key)
        name: Display name (artist name or song title)
        url: Disambiguating Genius URL
        label: Text shown when asking the user to choose (defaults to name)
    """

    id: Union[int, str]
    name: Optional[str]
    url: Optional[str] = None
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label or self.name or str(self.id)
