"""Shared pytest fixtures for the ff-project test suite.

Provides reusable fixtures for:
- Temporary target project directories
- A small synthetic template tree with nested and empty directories
- A temporary git repository with a configured user name
- RunFlags / RunStats factories
- A patched git lookup so runs never depend on the host's git config
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from ff_project.config import DEFAULT_TEMPLATE_DIR, Config
from ff_project.models import RunFlags, RunStats


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty target project directory (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """A small template tree: 3 files across 3 directories (one of them empty).

    Layout::

        templates/
            a.txt
            empty/
            sub/
                b.txt
                deep/
                    c.bin
    """
    root = tmp_path / "templates"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("alpha\n", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("bravo\n", encoding="utf-8")
    (root / "sub" / "deep" / "c.bin").write_bytes(b"\x00\x01\x02charlie")
    yield root


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Temporary git repository with a repo-local ``user.name``."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo_dir = tmp_path / "test-repo"
    repo_dir.mkdir()
    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.name", "FF Test"],
        cwd=repo_dir, check=True, capture_output=True,
    )
    yield repo_dir


# ---------------------------------------------------------------------------
# Models & Config
# ---------------------------------------------------------------------------

@pytest.fixture
def make_flags():
    """Factory for ``RunFlags`` with keyword overrides."""
    def _make(**kwargs) -> RunFlags:
        return RunFlags(**kwargs)
    return _make


@pytest.fixture
def stats() -> RunStats:
    return RunStats()


@pytest.fixture
def project_config(tmp_project_dir: Path) -> Config:
    """Config pointing at the bundled templates and an empty target directory."""
    return Config(template_dir=DEFAULT_TEMPLATE_DIR, target_dir=tmp_project_dir)


@pytest.fixture
def bundled_template_counts() -> tuple[int, int]:
    """``(files, dirs)`` under the bundled skills and spec subtrees, plus the ignore file."""
    files = 1  # ff/.gitignore
    dirs = 0
    for subtree in (
        DEFAULT_TEMPLATE_DIR / "agents" / "skills",
        DEFAULT_TEMPLATE_DIR / "ff" / "spec",
    ):
        for path in subtree.rglob("*"):
            if path.is_dir():
                dirs += 1
            else:
                files += 1
    return files, dirs


# ---------------------------------------------------------------------------
# Git lookup
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_git_name():
    """Patch the git lookup to report ``Ada Lovelace``."""
    with patch(
        "ff_project.scaffolder.identity.run_command",
        new_callable=AsyncMock,
        return_value=(0, "Ada Lovelace", ""),
    ) as mock_run:
        yield mock_run


@pytest.fixture
def mock_git_missing():
    """Patch the git lookup to behave as if git were not installed."""
    with patch(
        "ff_project.scaffolder.identity.run_command",
        new_callable=AsyncMock,
        side_effect=FileNotFoundError("git"),
    ) as mock_run:
        yield mock_run
