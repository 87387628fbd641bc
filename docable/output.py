"""JSON serialization for extracted documentation members."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import OutputFormatError
from .models import OutputDocument, OutputEntry

DEFAULT_INDENT = 2


def document_to_dict(document: OutputDocument) -> Dict[str, Dict[str, Any]]:
    """Return the `{namespace: {"file": ..., "members": [...]}}` structure."""
    return {
        entry.namespace: {"file": entry.file, "members": list(entry.members)}
        for entry in document
    }


def document_from_dict(data: Mapping[str, Any]) -> OutputDocument:
    """Rebuild a document from its dict form, validating the shape."""
    if not isinstance(data, Mapping):
        raise OutputFormatError("Member document must be a JSON object")

    document = OutputDocument()
    for namespace, payload in data.items():
        if not isinstance(payload, Mapping):
            raise OutputFormatError(f'Entry "{namespace}" must be an object')
        file = payload.get("file")
        members = payload.get("members")
        if not isinstance(file, str):
            raise OutputFormatError(f'Entry "{namespace}" is missing a string "file"')
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            raise OutputFormatError(f'Entry "{namespace}" must have a list of string "members"')
        document.add(OutputEntry(namespace=str(namespace), file=file, members=list(members)))
    return document


def dumps(document: OutputDocument, *, indent: int = DEFAULT_INDENT) -> str:
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


def loads(text: str) -> OutputDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise OutputFormatError(f"Invalid member JSON: {exc}") from exc
    return document_from_dict(data)


def write_document(
    document: OutputDocument, path: Path, *, indent: int = DEFAULT_INDENT
) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(document, indent=indent) + "\n", encoding="utf-8")
    return path


def read_document(path: Path) -> OutputDocument:
    return loads(path.read_text(encoding="utf-8"))


__all__ = [
    "DEFAULT_INDENT",
    "document_from_dict",
    "document_to_dict",
    "dumps",
    "loads",
    "read_document",
    "write_document",
]
