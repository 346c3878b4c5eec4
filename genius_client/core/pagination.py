"""
Pagination module.

This module drives a page-fetching function from the first cursor until
the server reports no further page, with a randomized pause between
consecutive requests to stay clear of upstream rate limits.
"""

import logging
import random
import time
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..constants import DEFAULT_FIRST_PAGE, DEFAULT_MAX_PAGE_DELAY, DEFAULT_MIN_PAGE_DELAY
from ..models import Page
from ..utils.logging import log_pagination_summary

logger = logging.getLogger(__name__)

FetchPage = Callable[[Any], Page]

DEFAULT_DELAY_RANGE: Tuple[float, float] = (DEFAULT_MIN_PAGE_DELAY, DEFAULT_MAX_PAGE_DELAY)


def _validate_delay_range(delay_range: Tuple[float, float]) -> Tuple[float, float]:
    low, high = delay_range
    if low < 0 or high < low:
        raise ValueError(f"Invalid delay range: {delay_range!r}")
    return float(low), float(high)


def iter_pages(
    fetch_page: FetchPage,
    first_cursor: Any = DEFAULT_FIRST_PAGE,
    delay_range: Tuple[float, float] = DEFAULT_DELAY_RANGE,
    sleep: Optional[Callable[[float], None]] = None,
    rng: Optional[random.Random] = None,
) -> Iterator[Page]:
    """
    Yield pages in cursor order until a page has no next cursor.

    The delay is drawn uniformly from ``delay_range`` and applied only
    between two fetches, never before the first or after the last.
    A cursor that cycles is not detected.
    """
    low, high = _validate_delay_range(delay_range)
    sleep = sleep or time.sleep
    uniform = (rng or random).uniform

    cursor = first_cursor
    page_number = 0
    while True:
        if page_number:
            delay = uniform(low, high)
            logger.debug(f"Waiting {delay:.2f}s before fetching page cursor {cursor!r}")
            sleep(delay)

        page = fetch_page(cursor)
        page_number += 1
        logger.debug(
            f"Fetched page {page_number} (cursor={cursor!r}, items={len(page.items)}, "
            f"next={page.next_cursor!r})"
        )
        yield page

        if page.next_cursor is None:
            return
        cursor = page.next_cursor


def collect_all_pages(
    fetch_page: FetchPage,
    first_cursor: Any = DEFAULT_FIRST_PAGE,
    delay_range: Tuple[float, float] = DEFAULT_DELAY_RANGE,
    sleep: Optional[Callable[[float], None]] = None,
    rng: Optional[random.Random] = None,
    label: str = "pages",
) -> List[Any]:
    """
    Fetch every page and return the concatenation of their items.

    Items keep their per-page server order; nothing is re-sorted or
    de-duplicated across pages. If any fetch raises, the error propagates
    and items gathered so far are discarded.

    Args:
        fetch_page: Callable taking a cursor and returning a ``Page``
        first_cursor: Cursor of the first page (page 1 by default)
        delay_range: Bounds (seconds) of the uniform inter-page delay
        sleep: Sleep function (defaults to time.sleep)
        rng: Optional random generator for the delay draw
        label: Name used in the completion log record

    Returns:
        All items from all pages, in order
    """
    started = time.monotonic()
    items: List[Any] = []
    pages = 0
    for page in iter_pages(fetch_page, first_cursor, delay_range, sleep, rng):
        items.extend(page.items)
        pages += 1

    log_pagination_summary(label, pages, len(items), time.monotonic() - started, logger=logger)
    return items
