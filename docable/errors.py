"""Exception types raised while extracting documentation members."""

from __future__ import annotations


class DocableError(Exception):
    """Base class for docable failures."""


class ExtractionError(DocableError):
    """A soft, per-file failure. The run may skip the file or halt."""

    reason = "extraction_error"

    def __init__(self, path: str | None = None, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or self.describe(path))

    @classmethod
    def describe(cls, path: str | None) -> str:
        return f'File "{path}" could not be processed.'


class MissingNamespaceMarker(ExtractionError):
    """No `// docable-member-namespace:` line was found."""

    reason = "missing_namespace_marker"

    @classmethod
    def describe(cls, path: str | None) -> str:
        return (
            f'File "{path}" is missing the "// docable-member-namespace:" comment '
            "at the top of the file."
        )


class NoDocumentationBlocksFound(ExtractionError):
    """A namespace was declared but no doc blocks matched."""

    reason = "no_documentation_blocks"

    @classmethod
    def describe(cls, path: str | None) -> str:
        return f'File "{path}" does not have any doc blocks.'


class FileReadError(DocableError):
    """Raised when a file-content provider cannot supply a file's text."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f'Unable to read "{path}": {message}')


class OutputFormatError(DocableError, ValueError):
    """Raised when serialized member data does not have the expected shape."""


class RenderError(DocableError):
    """Raised when an HTML template cannot be located or rendered."""


__all__ = [
    "DocableError",
    "ExtractionError",
    "FileReadError",
    "MissingNamespaceMarker",
    "NoDocumentationBlocksFound",
    "OutputFormatError",
    "RenderError",
]
