"""ff-project configuration.

Typed configuration for a scaffolding run.  Settings are Pydantic v2 models so
they are validated at construction time; derived target and template paths
are exposed as read-only properties and are always absolute.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class Config(BaseModel):
    """Global ff-project configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the ``Installer``.
    """

    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    target_dir: Path = Field(default_factory=Path.cwd)
    agents_dir: str = Field(default=".agents")
    ff_dir: str = Field(default=".ff")
    agents_md: str = Field(default="AGENTS.md")
    git_timeout: int = Field(
        default=10, ge=1, description="Seconds allowed for the git user.name lookup"
    )

    # ------------------------------------------------------------------
    # Target paths
    # ------------------------------------------------------------------

    @property
    def root(self) -> Path:
        """Absolute target project directory."""
        return self.target_dir.resolve()

    @property
    def agents_path(self) -> Path:
        """Root of the ``.agents/`` directory."""
        return self.root / self.agents_dir

    @property
    def skills_path(self) -> Path:
        """Directory receiving the installed skills."""
        return self.agents_path / "skills"

    @property
    def ff_path(self) -> Path:
        """Root of the hidden ``.ff/`` configuration area."""
        return self.root / self.ff_dir

    @property
    def spec_path(self) -> Path:
        return self.ff_path / "spec"

    @property
    def gitignore_path(self) -> Path:
        return self.ff_path / ".gitignore"

    @property
    def developer_path(self) -> Path:
        """File holding the developer identity."""
        return self.ff_path / ".developer"

    @property
    def agents_md_path(self) -> Path:
        """Top-level document that receives the managed block."""
        return self.root / self.agents_md

    # ------------------------------------------------------------------
    # Template paths
    # ------------------------------------------------------------------

    @property
    def template_root(self) -> Path:
        return self.template_dir.resolve()

    @property
    def template_skills_path(self) -> Path:
        return self.template_root / "agents" / "skills"

    @property
    def template_spec_path(self) -> Path:
        return self.template_root / "ff" / "spec"

    @property
    def template_gitignore_path(self) -> Path:
        return self.template_root / "ff" / ".gitignore"

    @property
    def agents_md_template(self) -> str:
        """Name of the AGENTS.md template, relative to the template root."""
        return "AGENTS.md.j2"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FF_PROJECT_TEMPLATE_DIR, FF_PROJECT_TARGET_DIR,
            FF_PROJECT_GIT_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FF_PROJECT_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["FF_PROJECT_TEMPLATE_DIR"])
        if os.environ.get("FF_PROJECT_TARGET_DIR"):
            kwargs["target_dir"] = Path(os.environ["FF_PROJECT_TARGET_DIR"])
        if os.environ.get("FF_PROJECT_GIT_TIMEOUT"):
            kwargs["git_timeout"] = int(os.environ["FF_PROJECT_GIT_TIMEOUT"])
        return cls(**kwargs)
