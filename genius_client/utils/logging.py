"""
Logging utilities for the Genius client.

This module provides centralized logging configuration and structured
request event helpers to ensure consistent logging behavior across
the application.
"""

import json
import logging
import time
from typing import Any, Mapping, Optional

SENSITIVE_PARAMS = frozenset({"access_token", "token"})


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("httpx").setLevel(logging.WARNING)  # Reduce HTTP client noise
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def mask_params(params: Optional[Mapping[str, Any]]) -> dict:
    """Return a copy of query parameters with sensitive values masked."""
    if not params:
        return {}
    return {
        key: ("***" if key in SENSITIVE_PARAMS else value)
        for key, value in params.items()
    }


def log_request_event(
    path: str,
    params: Optional[Mapping[str, Any]],
    status_code: int,
    duration: float,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
):
    """
    Log a structured record for a completed API request.

    Args:
        path: API path relative to the base URL
        params: Query parameters sent with the request
        status_code: HTTP status code received
        duration: Time taken by the request (seconds)
        timestamp: Event timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    request_record = {
        "event_type": "api_request",
        "timestamp": timestamp,
        "path": path,
        "params": mask_params(params),
        "status_code": status_code,
        "duration_seconds": round(duration, 3),
        "success": status_code == 200,
    }

    logger.debug(f"REQUEST: {json.dumps(request_record, ensure_ascii=False, default=str)}")


def log_request_failure(
    path: str,
    status_code: int,
    body: str,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None,
    max_body_chars: int = 200,
):
    """
    Log a structured record for a failed (non-200) API request.

    The response body is truncated to keep log lines readable; the full body
    is still carried by the raised error.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    failure_record = {
        "event_type": "request_failure",
        "timestamp": timestamp,
        "path": path,
        "status_code": status_code,
        "body": body[:max_body_chars],
        "rate_limited": status_code == 429,
        "success": False,
    }

    logger.warning(f"REQUEST_FAILURE: {json.dumps(failure_record, ensure_ascii=False)}")


def log_pagination_summary(
    label: str,
    pages: int,
    items: int,
    duration: float,
    logger: Optional[logging.Logger] = None,
):
    """Log a structured summary once a paginated collection completes."""
    if logger is None:
        logger = logging.getLogger(__name__)

    summary_record = {
        "event_type": "pagination_complete",
        "timestamp": time.time(),
        "label": label,
        "pages": pages,
        "items": items,
        "duration_seconds": round(duration, 3),
    }

    logger.info(f"PAGINATION: {json.dumps(summary_record, ensure_ascii=False)}")
