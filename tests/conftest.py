"""Shared pytest fixtures for the logcolor test suite.

Provides sample log lines, a temporary log file, a way to feed bytes to
standard input, and an escape-code stripper so the colorizer and CLI tests
can compare output against the original text.
"""

from __future__ import annotations

import io
import re
import sys
from pathlib import Path

import pytest

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def strip_ansi():
    """Return a function that removes SGR escape sequences from a string."""

    def _strip(text: str) -> str:
        return _ANSI_RE.sub("", text)

    return _strip


@pytest.fixture
def sample_lines() -> list[str]:
    """Provide realistic log lines covering every pattern kind the locator knows.

    Mixed casing, bracketed and delimited forms, aliases, a token inside a
    longer word, and lines with no level at all.
    """
    return [
        # Bracketed canonical level after an ISO timestamp
        "2024-01-15T10:30:45Z [ERROR] disk full on /dev/sda1",
        # Parenthesized alias in lower case
        "worker-3 (warning) queue is 90% full",
        # Colon-delimited, lower case
        "something warn: retry in 5s",
        # Space-hyphen delimited
        "app INFO - started in 120ms",
        # Space-anchored bare token
        "2024 DEBUG cache miss for key=user:42",
        # Token at the very start of the line, no delimiter
        "TRACE entering handler",
        # Token only inside a longer word (bare fallback)
        "interrupted by user",
        # No level at all
        "plain line with nothing to highlight",
        # Empty line
        "",
    ]


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    """Write a small three-line log to a temporary file and return its path."""
    f = tmp_path / "app.log"
    f.write_text("2024 INFO start\n2024 [ERROR] boom\nno level here\n")
    return f


@pytest.fixture
def feed_stdin(monkeypatch):
    """Factory fixture that replaces ``sys.stdin`` with the given bytes.

    The replacement is a text wrapper over a ``BytesIO`` so that
    ``sys.stdin.buffer`` behaves like the real binary standard input.

    Example::

        feed_stdin(b"2024 INFO start\\n")
    """

    def _feed(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _feed
