"""Input source selection: standard input or a single file."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional, Tuple

from .file import open_file

STDIN_MARKER = "-"


def open_source(path: Optional[str]) -> Tuple[BinaryIO, str, bool]:
    """Resolve the CLI path argument to a readable byte stream.

    ``None`` or ``"-"`` selects standard input; anything else is opened as a
    file.

    Returns:
        A tuple of ``(stream, source_description, owned)`` where
        *source_description* identifies the input (``"stdin"`` or
        ``"file:<path>"``) and *owned* tells the caller whether it must close
        the stream (standard input is never closed).

    Raises:
        RuntimeError: If the file cannot be opened.
    """
    if path is None or path == STDIN_MARKER:
        return sys.stdin.buffer, "stdin", False

    return open_file(path), f"file:{path}", True
