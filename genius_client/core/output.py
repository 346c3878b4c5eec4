"""
Output formatting module.

This module renders API results and flattened records as JSON for the
command line, or writes row results to a JSONL file.
"""

import json
import logging
import os
from typing import Any, Iterable, TextIO

logger = logging.getLogger(__name__)


def to_serializable(value: Any) -> Any:
    """Convert records (NamedTuples) and containers of records into plain JSON data."""
    if hasattr(value, "_asdict"):
        return {key: to_serializable(item) for key, item in value._asdict().items()}
    if isinstance(value, dict):
        return {key: to_serializable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_serializable(item) for item in value]
    return value


def write_json(value: Any, stream: TextIO, indent: int = 2) -> None:
    """Write a single JSON document to a text stream."""
    stream.write(json.dumps(to_serializable(value), ensure_ascii=False, indent=indent) + "\n")


def write_jsonl_output(rows: Iterable[Any], output_path: str) -> int:
    """
    Write rows to a JSONL output file, one JSON object per line.

    Args:
        rows: Records or dicts to write
        output_path: Path to the output JSONL file

    Returns:
        Number of records written
    """
    try:
        output_dir = os.path.dirname(output_path)
        if output_dir and not os.path.exists(output_dir):
            os.makedirs(output_dir, exist_ok=True)

        count = 0
        with open(output_path, "w", encoding="utf-8") as f:
            for row in rows:
                f.write(json.dumps(to_serializable(row), ensure_ascii=False) + "\n")
                count += 1

        logger.info(f"Successfully wrote {count} records to {output_path}")
        return count

    except Exception as e:
        logger.error(f"Failed to write JSONL output to {output_path}: {e}")
        raise

