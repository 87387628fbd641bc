"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docable.cli import _build_parser, main
from tests._fixtures.source_builder import SourceBuilder

GOOD_SOURCE = """
// docable-member-namespace: Drash.Http.Server

/**
 * Run the server.
 */
export function run() {}
"""

MISSING_SOURCE = """
/**
 * Orphaned docs.
 */
export function orphan() {}
"""


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "extract"])
    assert args.verbose is True
    assert args.command == "extract"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["extract", "--verbose"])
    assert args.verbose is True


def test_cli_continue_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["extract", "src", "--continue"])
    assert args.paths == ["src"]
    assert args.keep_going is True


def test_extract_prints_json(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    (path,) = source_builder.write({"server.ts": GOOD_SOURCE})

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", path, "--config", str(source_builder.path())])

    assert excinfo.value.code == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "Drash.Http.Server": {
            "file": path,
            "members": ["/** * Run the server. */\nexport function run()"],
        }
    }


def test_extract_halts_and_exits_with_soft_failure(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    good, missing = source_builder.write({"a.ts": GOOD_SOURCE, "b.ts": MISSING_SOURCE})

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", good, missing, "--config", str(source_builder.path())])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert list(json.loads(captured.out)) == ["Drash.Http.Server"]
    assert 'is missing the "// docable-member-namespace:" comment' in captured.err


def test_extract_writes_json_and_html_from_config(
    source_builder: SourceBuilder, tmp_path: Path
) -> None:
    source_builder.write({"lib/a.ts": MISSING_SOURCE, "lib/b.ts": GOOD_SOURCE})
    root = source_builder.path()
    (root / ".docable.yml").write_text(
        "inputs: [lib]\n"
        "on_failure: continue\n"
        "output:\n"
        "  json: out/members.json\n"
        "  html: out/members.html\n",
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "--config", str(root)])

    assert excinfo.value.code == 1
    data = json.loads((root / "out" / "members.json").read_text(encoding="utf-8"))
    assert list(data) == ["Drash.Http.Server"]
    assert "Drash.Http.Server" in (root / "out" / "members.html").read_text(encoding="utf-8")


def test_extract_missing_file_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["extract", str(tmp_path / "absent.ts"), "--config", str(tmp_path)])

    assert excinfo.value.code == 2


def test_extract_without_inputs_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["extract", "--config", str(tmp_path)])

    assert excinfo.value.code == 2


def test_render_command(tmp_path: Path) -> None:
    document = tmp_path / "members.json"
    document.write_text(
        json.dumps({"Foo.Bar": {"file": "foo.ts", "members": ["/** * Foo. */\nfoo()"]}}),
        encoding="utf-8",
    )
    output = tmp_path / "members.html"

    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(document), "--output", str(output), "--title", "Foo"])

    assert excinfo.value.code == 0
    assert "<h1>Foo</h1>" in output.read_text(encoding="utf-8")


def test_render_rejects_malformed_document(tmp_path: Path) -> None:
    document = tmp_path / "members.json"
    document.write_text("[]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(document), "--output", str(tmp_path / "x.html")])

    assert excinfo.value.code == 2


def test_extract_unwritable_output_is_fatal(
    source_builder: SourceBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (path,) = source_builder.write({"server.ts": GOOD_SOURCE})
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(
            [
                "extract",
                path,
                "--config",
                str(source_builder.path()),
                "--output",
                str(blocker / "members.json"),
            ]
        )

    assert excinfo.value.code == 2
    assert "cannot write" in capsys.readouterr().err


def test_render_unwritable_output_is_fatal(tmp_path: Path) -> None:
    document = tmp_path / "members.json"
    document.write_text("{}", encoding="utf-8")
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["render", str(document), "--output", str(blocker / "index.html")])

    assert excinfo.value.code == 2


def test_cli_verbose_defaults_to_false_for_subcommands() -> None:
    args = _build_parser().parse_args(["render", "doc.json", "--output", "doc.html"])
    assert args.verbose is False
