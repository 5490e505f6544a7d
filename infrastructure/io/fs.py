"""Filesystem utility functions."""

import json
from pathlib import Path
from typing import Any


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_json(path: Path) -> Any:
    """Read and decode a UTF-8 JSON file. Decode errors propagate."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, payload: Any) -> Path:
    """
    Write payload as pretty-printed UTF-8 JSON (2-space indent), creating parent dirs.

    Non-ASCII characters are written as-is.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return path
