"""Severity token locator.

Finds the level token to highlight in a single log line. Detection is a
cascade of string-search rules tried in a fixed order:

  1. bracketed forms: ``[TOKEN]`` then ``(TOKEN)``, for every token;
  2. delimited forms: ``TOKEN:``, ``TOKEN -``, then `` TOKEN`` (anchored on
     a preceding space, which is not part of the span), for every token;
  3. bare occurrences of every token, even inside longer words.

Each rule scans the whole line, and the first rule that hits wins. Within a
pass the token priority from ``levels.TOKENS`` decides, not the position in
the line: ``"WARN: x ERR: y"`` reports ``ERR:``.

Matching ignores case but every offset refers to the original line, so the
highlighted text keeps its original spelling.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .levels import TOKENS

# Pattern kinds grouped by pass, in the order they are tried per token.
BRACKET_KINDS = ("bracket", "paren")
DELIMITED_KINDS = ("colon", "dash", "spaced")
BARE_KINDS = ("bare",)

_TEMPLATES = {
    "bracket": r"\[{}\]",
    "paren": r"\({}\)",
    "colon": r"{}:",
    "dash": r"{} -",
    "spaced": r"(?<= ){}",
    "bare": r"{}",
}


@dataclass(frozen=True)
class Match:
    """A located token: ``text == line[start:end]`` in the original line."""
    start: int
    end: int
    text: str

    def split(self, line: str) -> Tuple[str, str, str]:
        """Return ``(prefix, text, suffix)``; joined they give back *line*."""
        return line[:self.start], line[self.start:self.end], line[self.end:]


@dataclass(frozen=True)
class Rule:
    """One (pattern kind, token) step of the locator cascade."""
    kind: str
    token: str
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.kind not in _TEMPLATES:
            raise ValueError(f"Unknown pattern kind: {self.kind}")
        source = _TEMPLATES[self.kind].format(re.escape(self.token))
        object.__setattr__(self, "regex", re.compile(source, re.IGNORECASE))

    def search(self, line: str) -> Optional[Match]:
        """Return the first occurrence of this rule's pattern in *line*, if any."""
        m = self.regex.search(line)
        if m is None:
            return None
        return Match(start=m.start(), end=m.end(), text=m.group(0))


def build_rules(tokens=TOKENS) -> Tuple[Rule, ...]:
    """Expand *tokens* into the ordered rule cascade (pass by pass)."""
    rules = []
    for kinds in (BRACKET_KINDS, DELIMITED_KINDS, BARE_KINDS):
        for token in tokens:
            rules.extend(Rule(kind, token) for kind in kinds)
    return tuple(rules)


RULES = build_rules()


def locate(line: str) -> Optional[Match]:
    """Return the highlight span for the level token in *line*, or ``None``."""
    for rule in RULES:
        found = rule.search(line)
        if found is not None:
            return found
    return None
