"""File-content providers used to load source text for extraction."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol

from .errors import FileReadError


class FileContentProvider(Protocol):
    """Supplies decoded text for a path."""

    def read(self, path: str) -> str:  # pragma: no cover - protocol definition
        ...


class LocalFileProvider:
    """Reads UTF-8 text from the local filesystem, dropping a leading BOM."""

    def __init__(self, base_dir: Path | None = None, encoding: str = "utf-8-sig") -> None:
        self.base_dir = base_dir
        self.encoding = encoding

    def read(self, path: str) -> str:
        target = Path(path).expanduser()
        if self.base_dir is not None and not target.is_absolute():
            target = self.base_dir / target
        try:
            return target.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(path, str(exc)) from exc


class InMemoryProvider:
    """Serves file contents from a mapping, for service mode and tests."""

    def __init__(self, files: Mapping[str, str]) -> None:
        self._files = dict(files)

    def read(self, path: str) -> str:
        try:
            return self._files[path]
        except KeyError as exc:
            raise FileReadError(path, "no content supplied for this path") from exc


__all__ = ["FileContentProvider", "InMemoryProvider", "LocalFileProvider"]
