"""Flag-governed filesystem sync primitives.

Copies template files and directories into the target project.  Every
operation consults ``RunFlags`` for the create / overwrite / skip decision and
reports exactly one outcome into the shared ``RunStats``.  Nothing here ever
deletes a destination entry.
"""

from __future__ import annotations

import asyncio
import errno
import shutil
from pathlib import Path

from ff_project.errors import TemplateNotFoundError
from ff_project.models import FileAction, RunFlags, RunStats
from ff_project.utils import display_path, print_action


def path_exists(path: str | Path) -> bool:
    """Return ``True`` if an entry exists at *path*.  A missing path is not an error."""
    return Path(path).exists()


async def ensure_dir(
    path: str | Path,
    flags: RunFlags,
    stats: RunStats,
    *,
    root: Path | None = None,
) -> bool:
    """Create the directory at *path* (and its parents) if it is absent.

    Returns ``True`` when the directory was (or, in dry-run mode, would have
    been) created.  ``dirs_created`` is only incremented in that case.
    """
    dir_path = Path(path)
    if path_exists(dir_path):
        return False

    shown = display_path(dir_path, root)
    if flags.dry_run:
        print_action("[cyan]?[/cyan]", "Would create", f"{shown}/")
    else:
        await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
        if flags.verbose:
            print_action("[green]+[/green]", "Created", f"{shown}/")
    stats.dirs_created += 1
    return True


async def copy_file(
    src: str | Path,
    dest: str | Path,
    flags: RunFlags,
    stats: RunStats,
    *,
    root: Path | None = None,
) -> FileAction:
    """Copy one template file, resolving conflicts with the destination.

    The checks run in order:

    1. Destination missing -> copy, ``CREATED``.
    2. Destination present and ``force`` -> overwrite, ``OVERWRITTEN``.
       A directory in the way raises ``IsADirectoryError`` instead.
    3. Destination present otherwise -> leave untouched, ``SKIPPED``.

    In dry-run mode the would-be action is still counted and announced, but
    nothing is written.
    """
    src_path = Path(src)
    dest_path = Path(dest)
    shown = display_path(dest_path, root)

    if not path_exists(dest_path):
        action = FileAction.CREATED
        would, done = "Would create", "Created"
        marker = "[green]+[/green]"
    elif flags.force:
        if dest_path.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Is a directory", str(dest_path))
        action = FileAction.OVERWRITTEN
        would, done = "Would overwrite", "Overwritten"
        marker = "[yellow]~[/yellow]"
    else:
        if flags.verbose:
            print_action("[dim]-[/dim]", "Skipped (exists)", shown)
        return stats.record(FileAction.SKIPPED)

    if flags.dry_run:
        print_action("[cyan]?[/cyan]", would, shown)
    else:
        await asyncio.to_thread(shutil.copy2, src_path, dest_path)
        if flags.verbose:
            print_action(marker, done, shown)
    return stats.record(action)


async def sync_directory(
    src: str | Path,
    dest: str | Path,
    flags: RunFlags,
    stats: RunStats,
    *,
    root: Path | None = None,
) -> None:
    """Mirror every entry of the *src* tree into *dest*.

    The walk uses an explicit stack of ``(source, destination)`` pairs rather
    than recursion.  Subdirectories go through :func:`ensure_dir`, files
    through :func:`copy_file`; entries present only in *dest* are left alone.

    Raises:
        TemplateNotFoundError: If *src* is not a directory.
    """
    src_root = Path(src)
    if not src_root.is_dir():
        raise TemplateNotFoundError(str(src_root))

    stack: list[tuple[Path, Path]] = [(src_root, Path(dest))]
    while stack:
        current_src, current_dest = stack.pop()
        entries = await asyncio.to_thread(_sorted_entries, current_src)
        subdirs: list[tuple[Path, Path]] = []
        for entry in entries:
            target = current_dest / entry.name
            if entry.is_dir():
                await ensure_dir(target, flags, stats, root=root)
                subdirs.append((entry, target))
            else:
                await copy_file(entry, target, flags, stats, root=root)
        # Reversed so subdirectories are visited in sorted order.
        stack.extend(reversed(subdirs))


def _sorted_entries(directory: Path) -> list[Path]:
    return sorted(directory.iterdir())
