"""I/O utilities: filesystem operations and JSON files."""

from infrastructure.io.fs import ensure_exists, read_json, write_json

__all__ = [
    "ensure_exists",
    "read_json",
    "write_json",
]
