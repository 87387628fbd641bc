"""Locates the namespace marker line a source file declares."""

from __future__ import annotations

import re
from typing import Optional

from ..errors import MissingNamespaceMarker

# Anchored to the start of a line; the value runs to the end of that line.
_MARKER_PATTERN = re.compile(r"^// docable-member-namespace: ([^\r\n]+)", re.MULTILINE)


class NamespaceExtractor:
    """Finds the first `// docable-member-namespace: <value>` line in a file."""

    def find(self, text: str) -> Optional[str]:
        """Return the declared namespace, or None when no marker line exists."""
        match = _MARKER_PATTERN.search(text)
        if match is None:
            return None
        return match.group(1)

    def extract(self, text: str, *, path: str | None = None) -> str:
        """Return the declared namespace or raise MissingNamespaceMarker."""
        namespace = self.find(text)
        if namespace is None:
            raise MissingNamespaceMarker(path)
        return namespace


def find_namespace(text: str) -> Optional[str]:
    return NamespaceExtractor().find(text)


def extract_namespace(text: str, *, path: str | None = None) -> str:
    return NamespaceExtractor().extract(text, path=path)


__all__ = ["NamespaceExtractor", "extract_namespace", "find_namespace"]
