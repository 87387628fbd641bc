"""Runs extraction over a sequence of files and assembles the output document."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from .config import FAILURE_POLICIES, POLICY_CONTINUE, POLICY_HALT
from .errors import ExtractionError
from .extractors import BlockSegmenter, NamespaceExtractor, count_openers
from .logging import get_diagnostics_logger, get_logger
from .models import FileFailure, InputFile, OutputDocument, OutputEntry, RunResult
from .readers import FileContentProvider, LocalFileProvider


class Docable:
    """Extracts documentation members from files, one file at a time.

    Each file must declare a namespace and contain at least one doc block.
    A file that fails either check is a soft failure: with the ``halt``
    policy the run stops there and returns what it has accumulated, with
    ``continue`` the file is skipped. Read failures always propagate.
    """

    def __init__(
        self,
        provider: FileContentProvider | None = None,
        *,
        on_failure: str = POLICY_HALT,
        namespace_extractor: NamespaceExtractor | None = None,
        segmenter: BlockSegmenter | None = None,
    ) -> None:
        if on_failure not in FAILURE_POLICIES:
            choices = ", ".join(FAILURE_POLICIES)
            raise ValueError(f"on_failure must be one of: {choices} (got {on_failure!r})")
        self.provider = provider or LocalFileProvider()
        self.on_failure = on_failure
        self.namespace_extractor = namespace_extractor or NamespaceExtractor()
        self.segmenter = segmenter or BlockSegmenter()
        self.logger = get_logger("orchestrator")
        self.diagnostics = get_diagnostics_logger()

    def process(self, source: InputFile) -> OutputEntry:
        """Extract one file's entry, raising an ExtractionError subclass on failure."""
        namespace = self.namespace_extractor.extract(source.content, path=source.path)
        members = self.segmenter.extract(source.content, path=source.path)
        self.logger.debug(
            "Extracted %d of %d doc blocks from %s (%s)",
            len(members),
            count_openers(source.content),
            source.path,
            namespace,
        )
        return OutputEntry(namespace=namespace, file=source.path, members=members)

    def run(self, paths: Sequence[str]) -> RunResult:
        """Read and extract each path in order."""
        self.logger.info("Extracting doc blocks from %d files", len(paths))
        return self.run_sources(self._read_all(paths))

    def run_sources(self, sources: Iterable[InputFile]) -> RunResult:
        """Fold already-loaded sources into a RunResult."""
        result = RunResult(document=OutputDocument())
        for source in sources:
            try:
                entry = self.process(source)
            except ExtractionError as exc:
                self.diagnostics.warning("%s", exc)
                result.failures.append(
                    FileFailure(path=source.path, reason=exc.reason, message=str(exc))
                )
                if self.on_failure == POLICY_CONTINUE:
                    continue
                result.halted = True
                self.logger.info("Stopping after the first failed file")
                break

            if entry.namespace in result.document:
                previous = result.document[entry.namespace]
                self.diagnostics.warning(
                    'Namespace "%s" from %s replaces the entry from %s',
                    entry.namespace,
                    entry.file,
                    previous.file,
                )
            result.document.add(entry)
        return result

    def _read_all(self, paths: Sequence[str]) -> Iterator[InputFile]:
        # Lazy so a halted run never reads the files after the failure.
        for path in paths:
            yield InputFile(path=path, content=self.provider.read(path))


__all__ = ["Docable"]
