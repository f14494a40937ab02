"""Developer identity resolution.

The identity file records who is working in the project.  It is written on the
first run only; later runs never overwrite it, even with ``force``.  The name
comes from ``git config user.name`` when available and falls back to
``DEFAULT_DEVELOPER`` on any failure of that lookup.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ff_project.models import FileAction, RunFlags, RunStats
from ff_project.scaffolder.fs_sync import path_exists
from ff_project.utils import display_path, print_action, run_command

DEFAULT_DEVELOPER = "developer"


async def lookup_git_user_name(
    cwd: str | Path | None = None, timeout: float = 10
) -> str | None:
    """Return the configured git ``user.name``, or ``None`` if it is unavailable.

    A missing git binary, a non-zero exit, a timeout and empty output are all
    treated as "no name".
    """
    try:
        returncode, stdout, _ = await run_command(
            ["git", "config", "user.name"], cwd=cwd, timeout=timeout
        )
    except OSError:
        return None
    if returncode != 0:
        return None
    return stdout.strip() or None


async def resolve_developer_name(
    cwd: str | Path | None = None, timeout: float = 10
) -> str:
    """Return the git user name, or ``DEFAULT_DEVELOPER``."""
    return await lookup_git_user_name(cwd, timeout) or DEFAULT_DEVELOPER


async def setup_developer(
    path: str | Path,
    flags: RunFlags,
    stats: RunStats,
    *,
    root: Path | None = None,
    timeout: float = 10,
) -> FileAction:
    """Write the developer identity file unless it already exists.

    In dry-run mode git is not consulted and nothing is written.
    """
    dev_path = Path(path)
    shown = display_path(dev_path, root)

    if path_exists(dev_path):
        if flags.verbose:
            print_action("[dim]-[/dim]", "Skipped (exists)", shown)
        return stats.record(FileAction.SKIPPED)

    if flags.dry_run:
        print_action("[cyan]?[/cyan]", "Would create", shown)
        return stats.record(FileAction.CREATED)

    name = await resolve_developer_name(root or dev_path.parent, timeout)
    await asyncio.to_thread(dev_path.write_text, name, encoding="utf-8")
    if flags.verbose:
        print_action("[green]+[/green]", "Created", f"{shown} ({name})")
    return stats.record(FileAction.CREATED)
