"""Whitespace clean-up applied to each extracted documentation member."""

from __future__ import annotations

import re
from typing import Tuple

_ASTERISK_INDENT = re.compile(r"\s+\*")

# Leading whitespace before these keywords is dropped entirely.
JOINED_KEYWORDS: Tuple[str, ...] = ("protected", "private", "public", "constructor")

_KEYWORD_PATTERNS = tuple(re.compile(rf"\s+{keyword}") for keyword in JOINED_KEYWORDS)


def collapse_asterisk_indent(text: str) -> str:
    """Collapse any whitespace run before `*` into a single space."""
    return _ASTERISK_INDENT.sub(" *", text)


def join_keywords(text: str) -> str:
    """Strip the whitespace preceding each visibility/constructor keyword."""
    for pattern, keyword in zip(_KEYWORD_PATTERNS, JOINED_KEYWORDS):
        text = pattern.sub(keyword, text)
    return text


def normalize_member(text: str) -> str:
    """Apply the member clean-up rules in their fixed order."""
    text = collapse_asterisk_indent(text)
    text = collapse_asterisk_indent(text)
    return join_keywords(text)


__all__ = [
    "JOINED_KEYWORDS",
    "collapse_asterisk_indent",
    "join_keywords",
    "normalize_member",
]
