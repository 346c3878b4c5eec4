"""
Validation utilities for the Genius client.

This module provides the pre-request checks shared by the endpoint
wrappers, plus the output path check used by the CLI.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from ..api.errors import ConflictingParameterError, MissingParameterError


def is_missing(value: Any) -> bool:
    """Return True for None or a blank string."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_param(name: str, value: Any) -> Any:
    """Raise MissingParameterError if a required identifying value is absent."""
    if is_missing(value):
        raise MissingParameterError(
            f"The '{name}' parameter must be provided.", parameters=(name,)
        )
    return value


def require_any(params: Mapping[str, Any]) -> None:
    """Raise MissingParameterError unless at least one of ``params`` is present."""
    if all(is_missing(value) for value in params.values()):
        names = ", ".join(f"'{name}'" for name in params)
        raise MissingParameterError(
            f"At least one of the parameters ({names}) must be provided.",
            parameters=tuple(params),
        )


def forbid_both(first: str, first_value: Any, second: str, second_value: Any) -> None:
    """Raise ConflictingParameterError if two mutually exclusive values are both set."""
    if not is_missing(first_value) and not is_missing(second_value):
        raise ConflictingParameterError(
            f"You may pass only one of '{first}' and '{second}', not both.",
            parameters=(first, second),
        )


def build_query(**params: Any) -> Dict[str, Any]:
    """Build a query descriptor, dropping parameters that are None or blank."""
    return {key: value for key, value in params.items() if not is_missing(value)}


def _is_output_path_writable(path_str: str) -> Tuple[bool, Optional[str]]:
    """Check whether the output path's parent directory is writable without creating the file."""
    try:
        path = Path(path_str)
        parent = path.parent if path.parent != Path("") else Path(".")
        if not parent.exists():
            return False, f"Output directory does not exist: {parent}"
        if not os.access(parent, os.W_OK):
            return False, f"No write permission for directory: {parent}"
        return True, None
    except Exception as e:
        return False, f"Unable to validate output path '{path_str}': {e}"
