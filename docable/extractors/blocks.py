"""Segments source text into documentation blocks.

A block opens at ``/**`` followed by a newline and runs, non-greedily, up to
the first of these boundaries (the boundary itself is not captured):

* ``\\n\\n``        a blank line
* `` {}\\n``        an empty body followed by a newline
* `` {\\n`` + EOF   an opening brace and newline ending the input
* `` = {``          an object or map literal assignment
* ``\\n`` + EOF     a newline ending the input

This keeps a doc comment together with the signature that follows it while
leaving the declaration body out. An opener with no boundary after it yields
nothing.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List

from ..errors import NoDocumentationBlocksFound
from ..postproc.whitespace import normalize_member

_BLOCK_PATTERN = re.compile(
    r"/\*\*\n[\s\S]*?(?=(\n\n)|( \{\}\n)|( \{\n\Z)|( = \{)|(\n\Z))"
)


class BlockSegmenter:
    """Extracts doc blocks and their trailing signatures from raw source text."""

    def __init__(self, normalizer: Callable[[str], str] = normalize_member) -> None:
        self._normalize = normalizer

    def segment(self, text: str) -> List[str]:
        """Return raw (un-normalized) blocks in source order."""
        return [match.group(0) for match in _BLOCK_PATTERN.finditer(text)]

    def normalize(self, blocks: Iterable[str]) -> List[str]:
        return [self._normalize(block) for block in blocks]

    def extract(self, text: str, *, path: str | None = None) -> List[str]:
        """Return normalized blocks or raise NoDocumentationBlocksFound."""
        raw_blocks = self.segment(text)
        if not raw_blocks:
            raise NoDocumentationBlocksFound(path)
        return self.normalize(raw_blocks)


def segment_blocks(text: str) -> List[str]:
    return BlockSegmenter().segment(text)


def extract_blocks(text: str, *, path: str | None = None) -> List[str]:
    return BlockSegmenter().extract(text, path=path)


def count_openers(text: str) -> int:
    """Count doc-comment openers, matched or not. Useful for diagnostics."""
    return text.count("/**\n")


__all__ = [
    "BlockSegmenter",
    "count_openers",
    "extract_blocks",
    "segment_blocks",
]
