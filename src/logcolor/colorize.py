"""Stream colorizer: read lines, highlight the level token, write them out.

Lines are pulled one at a time from a binary stream, so the loop works on
endless inputs (``tail -f app.log | logcolor``) as well as regular files.
Each output line is flushed as soon as it is written.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional

from .levels import BOLD, RESET, color_for
from .locate import locate


def colorize_line(line: str) -> str:
    """Return *line* with its level token wrapped in bold+color escape codes.

    Lines without a recognized token are returned unchanged. The result has
    no trailing newline.
    """
    found = locate(line)
    if found is None:
        return line
    prefix, text, suffix = found.split(line)
    return f"{prefix}{BOLD}{color_for(text)}{text}{RESET}{suffix}"


def read_line(source: BinaryIO) -> Optional[str]:
    """Read the next line from *source* without its line terminator.

    Strips a trailing ``\\n`` and then one ``\\r``. Returns ``None`` at
    end-of-stream.

    Raises:
        OSError: If the underlying read fails.
        UnicodeDecodeError: If the line is not valid UTF-8.
    """
    raw = source.readline()
    if not raw:
        return None
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw.decode("utf-8")


def colorize_stream(source: BinaryIO, out: Optional[BinaryIO] = None, source_name: str = "input") -> bool:
    """Colorize every line of *source* onto *out* (standard output by default).

    Output is written as UTF-8 bytes to the binary layer of standard output,
    so lines pass through whatever encoding the terminal or pipe reports.

    Stops at end-of-stream, or at the first read or write failure, which is
    reported on standard error together with *source_name*. Lines already
    written are left in place.

    Returns:
        ``True`` if the whole stream was processed, ``False`` if an error
        cut the run short.
    """
    if out is None:
        out = sys.stdout.buffer

    while True:
        try:
            line = read_line(source)
        except (OSError, UnicodeDecodeError) as e:
            print(f"read error ({source_name}): {e}", file=sys.stderr)
            return False
        if line is None:
            return True

        try:
            out.write((colorize_line(line) + "\n").encode("utf-8"))
            out.flush()
        except OSError as e:
            print(f"write error: {e}", file=sys.stderr)
            return False
