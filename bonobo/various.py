"""Small file utilities."""

from __future__ import annotations

from pathlib import Path


def slurp_file(path: str | Path) -> str:
    """Return the whole text of a file, up to its first NUL character."""
    data = Path(path).read_bytes()
    return data.split(b"\0", 1)[0].decode("utf-8")