"""Reading and writing of whole text files."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a file, line endings untouched."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(path: str | os.PathLike[str], content: str) -> None:
    """Write content to a file, creating it with mode 0644 or truncating it."""
    descriptor = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(descriptor, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)