"""Open a log file for streaming."""

from __future__ import annotations

from typing import BinaryIO


def open_file(path: str) -> BinaryIO:
    """Open the file at *path* for binary reading.

    The caller owns the returned handle and must close it.

    Raises:
        RuntimeError: If the file cannot be opened (missing, a directory,
            permission denied, ...).
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise RuntimeError(f"failed to open '{path}': {e.strerror or e}")
