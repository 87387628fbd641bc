"""Renders extracted members into HTML through Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from .errors import RenderError
from .logging import get_logger
from .models import OutputDocument

DEFAULT_TEMPLATE = "members.html.j2"


class HtmlRenderer:
    """Substitutes an OutputDocument into an HTML template."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.template_name = template_name
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("render")

    def render(self, document: OutputDocument, *, title: str = "API Members") -> str:
        try:
            template = self._env.get_template(self.template_name)
        except TemplateNotFound as exc:
            raise RenderError(f"Template not found: {exc.name}") from exc
        try:
            return template.render(title=title, entries=list(document))
        except TemplateError as exc:
            raise RenderError(f"Failed to render {self.template_name}: {exc}") from exc

    def write(self, document: OutputDocument, path: Path, *, title: str = "API Members") -> Path:
        html = self.render(document, title=title)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        self.logger.debug("Wrote %d namespaces to %s", len(document), path)
        return path

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)


__all__ = ["DEFAULT_TEMPLATE", "HtmlRenderer"]
