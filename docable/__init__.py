"""Extract documentation blocks from source files into namespaced JSON."""

from .errors import (
    DocableError,
    FileReadError,
    MissingNamespaceMarker,
    NoDocumentationBlocksFound,
)
from .models import InputFile, OutputDocument, OutputEntry, RunResult
from .orchestrator import Docable

__all__ = [
    "Docable",
    "DocableError",
    "FileReadError",
    "InputFile",
    "MissingNamespaceMarker",
    "NoDocumentationBlocksFound",
    "OutputDocument",
    "OutputEntry",
    "RunResult",
]
