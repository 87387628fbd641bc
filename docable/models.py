"""Core data models shared across docable components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List


@dataclass(frozen=True)
class InputFile:
    """A source file's path and decoded text."""

    path: str
    content: str


@dataclass
class OutputEntry:
    """Documentation members extracted from one file."""

    namespace: str
    file: str
    members: List[str] = field(default_factory=list)


@dataclass
class OutputDocument:
    """Ordered mapping of namespace to the entry extracted for it."""

    entries: Dict[str, OutputEntry] = field(default_factory=dict)

    def add(self, entry: OutputEntry) -> None:
        # Last write wins; dict keeps the first insertion position for the key.
        self.entries[entry.namespace] = entry

    def namespaces(self) -> List[str]:
        return list(self.entries)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self.entries

    def __getitem__(self, namespace: str) -> OutputEntry:
        return self.entries[namespace]

    def __iter__(self) -> Iterator[OutputEntry]:
        return iter(self.entries.values())

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class FileFailure:
    """A soft failure recorded for one input file."""

    path: str
    reason: str
    message: str


@dataclass
class RunResult:
    """Outcome of a single extraction run."""

    document: OutputDocument
    failures: List[FileFailure] = field(default_factory=list)
    halted: bool = False

    @property
    def ok(self) -> bool:
        return not self.failures
