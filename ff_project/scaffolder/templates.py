"""Jinja2 rendering for bundled ff-project templates.

Provides the TemplateRenderer class which loads templates from the bundled
``ff_project/templates/`` directory (or any other template root) and renders
them with a context dictionary.  Only the AGENTS.md document is rendered;
skill and spec assets are copied verbatim by the sync engine.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ff_project.config import DEFAULT_TEMPLATE_DIR
from ff_project.errors import TemplateNotFoundError


class TemplateRenderer:
    """Renders Jinja2 templates from an ff-project template root."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"AGENTS.md.j2"``).
            context: Dictionary of variables available inside the template.

        Raises:
            TemplateNotFoundError: If the template file does not exist.
        """
        if not (self.template_dir / template_path).is_file():
            raise TemplateNotFoundError(str(self.template_dir / template_path))
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Discovery ---------------------------------------------------------

    def list_skills(self) -> list[str]:
        """Return the sorted names of the skill directories under ``agents/skills``."""
        skills_dir = self.template_dir / "agents" / "skills"
        if not skills_dir.is_dir():
            return []
        return sorted(p.name for p in skills_dir.iterdir() if p.is_dir())

    def agents_md_context(self, skills_dir: str, spec_dir: str) -> dict[str, Any]:
        """Build the deterministic context used to render ``AGENTS.md.j2``.

        Nothing developer-specific goes in here, so every developer renders
        the same managed block.
        """
        return {
            "skills": self.list_skills(),
            "skills_dir": skills_dir,
            "spec_dir": spec_dir,
        }
