"""Expands input paths into the ordered list of source files to extract."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .logging import get_logger

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    "dist",
}

DEFAULT_SUFFIXES: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")


@dataclass
class ExcludeRule:
    """A gitignore-style exclusion pattern from .docable.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            if self.directory_only and rel_path.startswith(f"{self.pattern}/"):
                return True
            return False

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return ExcludeRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


class SourceScanner:
    """Turns files and directories into a de-duplicated, ordered file list."""

    def __init__(
        self,
        suffixes: Sequence[str] = DEFAULT_SUFFIXES,
        exclude_paths: Sequence[str] = (),
    ) -> None:
        self.suffixes = tuple(suffix.lower() for suffix in suffixes)
        self.rules: List[ExcludeRule] = [
            rule for rule in (build_exclude_rule(p) for p in exclude_paths) if rule is not None
        ]
        self.logger = get_logger("scanner")

    def expand(self, paths: Sequence[str]) -> List[str]:
        """Return files in the order given, walking directories in sorted order.

        Explicit file paths are kept verbatim even if their suffix is not in
        the configured list; directories contribute only matching files.
        """
        results: List[str] = []
        seen: set[str] = set()
        for raw in paths:
            candidate = Path(raw).expanduser()
            if candidate.is_dir():
                found = list(self._iter_directory(candidate))
                self.logger.debug("Found %d source files under %s", len(found), candidate)
            else:
                found = [raw]
            for path in found:
                if path in seen:
                    continue
                seen.add(path)
                results.append(path)
        return results

    def _iter_directory(self, root: Path) -> Iterator[str]:
        for dirpath, dirnames, filenames in os.walk(root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            kept_dirs = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if self._is_excluded(rel_path, True):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if not filename.lower().endswith(self.suffixes):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._is_excluded(rel_path, False):
                    continue
                yield str(current_dir / filename)

    def _is_excluded(self, rel_path: str, is_dir: bool) -> bool:
        return any(rule.matches(rel_path, is_dir) for rule in self.rules)


__all__ = ["DEFAULT_SUFFIXES", "ExcludeRule", "SourceScanner", "build_exclude_rule"]
