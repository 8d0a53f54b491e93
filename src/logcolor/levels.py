"""Severity tokens and their terminal colors.

Holds the closed list of recognized level names (in match priority order),
the ANSI SGR constants, and the read-only mapping from level name to color.
Aliases (``ERR``, ``WARNING``) share the color of their canonical level.
"""

from __future__ import annotations

import re
from types import MappingProxyType

RED = "\x1b[31m"
YELLOW = "\x1b[33m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"
BOLD = "\x1b[1m"

# Priority order: earlier tokens win within a matching pass.
TOKENS = ("ERROR", "ERR", "WARNING", "WARN", "INFO", "DEBUG", "TRACE")

ALIASES = MappingProxyType({
    "ERR": "ERROR",
    "WARNING": "WARN",
})

_CANONICAL_COLORS = {
    "ERROR": RED,
    "WARN": YELLOW,
    "INFO": GREEN,
    "DEBUG": CYAN,
    "TRACE": MAGENTA,
}

# Aliases borrow the color of the level they stand for.
LEVEL_COLORS = MappingProxyType({
    **_CANONICAL_COLORS,
    **{alias: _CANONICAL_COLORS[level] for alias, level in ALIASES.items()},
})

_SPAN_TRIM_RE = re.compile(r"^[\[\]():\-\s]+|[\[\]():\-\s]+$")


def canonical_level(span: str) -> str:
    """Reduce a matched span such as ``"[warn]"`` or ``"Error:"`` to its level name.

    Strips brackets, parentheses, colons, hyphens and whitespace from both
    ends, then upper-cases. Aliases are returned as-is (``"ERR"`` stays
    ``"ERR"``); ``LEVEL_COLORS`` carries a row for each of them.
    """
    return _SPAN_TRIM_RE.sub("", span).upper()


def color_for(span: str) -> str:
    """Return the SGR color code for a matched span.

    Unknown names fall back to ``RESET``.
    """
    return LEVEL_COLORS.get(canonical_level(span), RESET)
