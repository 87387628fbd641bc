"""Tests for the namespace marker extractor."""

from __future__ import annotations

import pytest

from docable.errors import MissingNamespaceMarker
from docable.extractors.namespace import NamespaceExtractor, extract_namespace, find_namespace


def test_extracts_namespace_from_first_line() -> None:
    text = "// docable-member-namespace: Drash.Http.Server\n\nexport class Server {}\n"
    assert extract_namespace(text) == "Drash.Http.Server"


def test_marker_may_appear_after_other_lines() -> None:
    text = "import { x } from './x.ts';\n// docable-member-namespace: Foo.Bar\n"
    assert find_namespace(text) == "Foo.Bar"


def test_first_marker_wins() -> None:
    text = (
        "// docable-member-namespace: First.One\n"
        "// docable-member-namespace: Second.One\n"
    )
    assert find_namespace(text) == "First.One"


def test_value_runs_to_end_of_line_only() -> None:
    text = "// docable-member-namespace: Foo.Bar \n/**\n"
    assert find_namespace(text) == "Foo.Bar "


def test_marker_at_end_of_text_without_newline() -> None:
    assert find_namespace("// docable-member-namespace: Foo.Bar") == "Foo.Bar"


def test_crlf_line_ending_is_not_part_of_namespace() -> None:
    assert find_namespace("// docable-member-namespace: Foo.Bar\r\n") == "Foo.Bar"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "export const x = 1;\n",
        "  // docable-member-namespace: Indented.Marker\n",
        "/// docable-member-namespace: Triple.Slash\n",
        "/* docable-member-namespace: Block.Comment */\n",
        "// docable-member-namespace:NoSpace\n",
        "// docable-member-namespace: \n",
    ],
)
def test_missing_or_malformed_marker_is_not_found(text: str) -> None:
    assert find_namespace(text) is None


def test_extract_raises_with_path() -> None:
    with pytest.raises(MissingNamespaceMarker) as excinfo:
        NamespaceExtractor().extract("no marker here\n", path="src/mod.ts")

    assert excinfo.value.path == "src/mod.ts"
    assert 'File "src/mod.ts" is missing the "// docable-member-namespace:"' in str(excinfo.value)
