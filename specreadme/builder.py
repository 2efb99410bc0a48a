"""Renders new readme sections from Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from .errors import ConfigError
from .markdown.yaml_block import dump_yaml

VERSION_DEFINITION_TEMPLATE = "version_definition.md.j2"
SUPPRESSION_SECTION_TEMPLATE = "suppression_section.md.j2"


class ReadMeBuilder:
    """Produces markdown fragments for tag and suppression sections."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def version_definition(self, yaml_body: Any, tag: str) -> str:
        """Render a ``### Tag: <tag>`` section whose code block carries ``yaml_body``."""
        return self._render(VERSION_DEFINITION_TEMPLATE, tag=tag, yaml_body=dump_yaml(yaml_body))

    def suppression_section(self) -> str:
        """Render an empty ``## Suppression`` section."""
        return self._render(SUPPRESSION_SECTION_TEMPLATE, yaml_body=dump_yaml({"directive": []}))

    def _render(self, name: str, **context: Any) -> str:
        try:
            template = self._env.get_template(name)
        except TemplateNotFound as exc:
            raise ConfigError(f"Template {name} not found in {self.templates_dir}") from exc
        return template.render(**context)


__all__ = ["ReadMeBuilder"]
