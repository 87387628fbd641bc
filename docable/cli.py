"""CLI entrypoints for docable commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import POLICY_CONTINUE, ConfigError, load_config
from .errors import FileReadError, OutputFormatError, RenderError
from .logging import configure_logging, get_logger
from .orchestrator import Docable
from .output import dumps, read_document, write_document
from .readers import LocalFileProvider
from .render import HtmlRenderer
from .source_scanner import SourceScanner

EXIT_OK = 0
EXIT_SOFT_FAILURE = 1
EXIT_FATAL = 2


def _subcommand_options() -> argparse.ArgumentParser:
    # Suppressed default so `docable -v extract` is not reset by the subparser.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log debug detail to stderr.",
    )
    return common


def _add_templates_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory searched for HTML templates before the bundled ones.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docable",
        description="Extract documentation blocks from source files into JSON.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug detail to stderr.")
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    common = _subcommand_options()

    extract_parser = subparsers.add_parser(
        "extract",
        parents=[common],
        help="Extract doc blocks from files or directories.",
    )
    _add_templates_option(extract_parser)
    extract_parser.add_argument(
        "paths",
        nargs="*",
        help="Files or directories to scan (defaults to `inputs` from .docable.yml).",
    )
    extract_parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .docable.yml or the directory containing it.",
    )
    extract_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write JSON to this file instead of stdout.",
    )
    extract_parser.add_argument(
        "--html",
        type=Path,
        default=None,
        help="Also render the members to this HTML file.",
    )
    extract_parser.add_argument(
        "--continue",
        dest="keep_going",
        action="store_true",
        help="Skip files that fail extraction instead of stopping at the first one.",
    )

    render_parser = subparsers.add_parser(
        "render",
        parents=[common],
        help="Render a previously extracted JSON document as HTML.",
    )
    _add_templates_option(render_parser)
    render_parser.add_argument("document", type=Path, help="JSON document to render.")
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="HTML file to write.",
    )
    render_parser.add_argument("--title", default="API Members", help="Page title.")

    serve_parser = subparsers.add_parser(
        "serve", parents=[common], help="Run the HTTP extraction service."
    )
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docable commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "extract":
        parser.exit(_run_extract(parser, args))
    elif args.command == "render":
        parser.exit(_run_render(parser, args))
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(EXIT_FATAL, "Unknown command\n")


def _run_extract(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    logger = get_logger("cli")
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(EXIT_FATAL, f"docable extract failed: {exc}\n")

    inputs = list(args.paths) or config.inputs
    if not inputs:
        parser.exit(EXIT_FATAL, "No input files given and no `inputs` configured.\n")

    scanner = SourceScanner(suffixes=config.suffixes, exclude_paths=config.exclude_paths)
    paths = scanner.expand(inputs)
    logger.debug("Resolved %d input files", len(paths))

    on_failure = POLICY_CONTINUE if args.keep_going else config.on_failure
    extractor = Docable(LocalFileProvider(), on_failure=on_failure)
    try:
        result = extractor.run(paths)
    except FileReadError as exc:
        parser.exit(EXIT_FATAL, f"docable extract failed: {exc}\n")

    indent = config.output.indent
    json_path = args.output or config.output.json_path
    if json_path is not None:
        try:
            write_document(result.document, json_path, indent=indent)
        except OSError as exc:
            parser.exit(EXIT_FATAL, f"docable extract failed: cannot write {json_path}: {exc}\n")
        print(f"Wrote {len(result.document)} namespaces to {_display_path(json_path)}")
    else:
        print(dumps(result.document, indent=indent))

    html_path = args.html or config.output.html_path
    if html_path is not None:
        renderer = HtmlRenderer(args.templates_dir or config.templates_dir)
        try:
            renderer.write(result.document, html_path)
        except (OSError, RenderError) as exc:
            parser.exit(EXIT_FATAL, f"docable extract failed: {exc}\n")

    return EXIT_OK if result.ok else EXIT_SOFT_FAILURE


def _run_render(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        document = read_document(args.document)
    except (OSError, OutputFormatError) as exc:
        parser.exit(EXIT_FATAL, f"docable render failed: {exc}\n")

    try:
        HtmlRenderer(args.templates_dir).write(document, args.output, title=args.title)
    except (OSError, RenderError) as exc:
        parser.exit(EXIT_FATAL, f"docable render failed: {exc}\n")
    print(f"HTML written to {_display_path(args.output)}")
    return EXIT_OK


def _display_path(path: Path) -> str:
    resolved = path.resolve()
    cwd = Path.cwd()
    return str(resolved.relative_to(cwd)) if resolved.is_relative_to(cwd) else str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
