"""
Record projection module.

This module maps nested JSON payloads onto flat, fixed-schema records.
Lookups never fail on missing data: any absent or null path segment
yields the sentinel value instead.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

Path = Union[str, Sequence[Union[str, int]]]

_MISSING = object()


def _split_path(path: Path) -> Tuple[Union[str, int], ...]:
    if isinstance(path, str):
        return tuple(segment for segment in path.split(".") if segment)
    return tuple(path)


def safe_get(obj: Any, path: Path, default: Any = None) -> Any:
    """
    Look up a dotted path in a nested JSON object.

    Dict steps are looked up by key; list steps accept an integer index
    (either an int segment or a digit string). A missing key, an index
    out of range, a step into a non-container, or a null value all return
    ``default``.

    Args:
        obj: Parsed JSON value to walk
        path: Dotted string (``"primary_artist.name"``) or sequence of segments
        default: Value returned when the path cannot be resolved

    Returns:
        The value found at the path, or ``default``
    """
    current = obj
    for segment in _split_path(path):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        elif isinstance(current, (list, tuple)):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return default
        else:
            return default
        if current is _MISSING:
            return default
    return default if current is None else current


def project(
    raw: Any,
    schema: Sequence[Tuple[str, Path]],
    default: Any = None,
) -> Dict[str, Any]:
    """
    Project a nested object onto a flat record.

    Every field in ``schema`` is present in the result, in declaration
    order. Values are passed through without type coercion.
    """
    return {field: safe_get(raw, path, default) for field, path in schema}


def project_as(record_type, raw: Any, schema: Sequence[Tuple[str, Path]]):
    """Project onto ``schema`` and build a NamedTuple ``record_type`` from the result."""
    return record_type(**project(raw, schema))


def flatten(obj: Mapping[str, Any], prefix: str = "", sep: str = ".") -> Dict[str, Any]:
    """
    Flatten nested dicts into a single-level dict keyed by dotted paths.

    Lists are kept as values rather than expanded.

    Example:
        ``{"id": 1, "primary_artist": {"name": "X"}}`` becomes
        ``{"id": 1, "primary_artist.name": "X"}``
    """
    flat: Dict[str, Any] = {}
    for key, value in obj.items():
        name = f"{prefix}{sep}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            flat.update(flatten(value, name, sep))
        else:
            flat[name] = value
    return flat


def flatten_rows(rows: Optional[Sequence[Mapping[str, Any]]]) -> list:
    """Flatten a sequence of JSON objects, skipping non-object entries."""
    if not rows:
        return []
    return [flatten(row) for row in rows if isinstance(row, Mapping)]
