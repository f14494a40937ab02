"""Managed-block merging for agent instruction documents.

A managed block is the region of a document delimited by ``BEGIN_MARKER`` and
``END_MARKER``.  Merging replaces the first complete block, appends one when
the document has none, or creates the document when it is missing.  Content
outside the block is never touched, so repeated merges of the same content
converge to a fixed point.

The marker strings are part of the on-disk format: documents written by
earlier runs are found again only if they stay byte-for-byte identical.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ff_project.errors import ManagedBlockError
from ff_project.models import FileAction, RunFlags, RunStats
from ff_project.scaffolder.fs_sync import path_exists
from ff_project.utils import display_path, print_action

BEGIN_MARKER = "<!-- ff-project:begin -->"
END_MARKER = "<!-- ff-project:end -->"


def build_managed_block(content: str) -> str:
    """Wrap the stripped *content* between the begin and end markers."""
    return f"{BEGIN_MARKER}\n{content.strip()}\n{END_MARKER}"


def find_managed_block(
    text: str, *, source: str = "<document>"
) -> tuple[int, int] | None:
    """Locate the first managed block in *text*.

    Returns:
        ``(start, end)`` slice bounds covering the begin marker through the
        first end marker after it, or ``None`` when there is no begin marker.

    Raises:
        ManagedBlockError: If a begin marker has no end marker after it.
    """
    start = text.find(BEGIN_MARKER)
    if start == -1:
        return None
    end = text.find(END_MARKER, start + len(BEGIN_MARKER))
    if end == -1:
        raise ManagedBlockError(
            source,
            f"found {BEGIN_MARKER!r} without a matching {END_MARKER!r}; "
            "fix or remove the partial block and re-run",
        )
    return start, end + len(END_MARKER)


def merge_managed_block(
    existing: str | None, block: str, *, source: str = "<document>"
) -> tuple[str, FileAction]:
    """Merge *block* into *existing* document text.

    Args:
        existing: Current document content, or ``None`` if the document does
            not exist.
        block: A block produced by :func:`build_managed_block`.
        source: Document name used in error messages.

    Returns:
        ``(new_text, action)`` where *action* is ``CREATED`` for a new
        document and ``UPDATED`` otherwise.
    """
    if existing is None:
        return f"{block}\n", FileAction.CREATED

    span = find_managed_block(existing, source=source)
    if span is not None:
        start, end = span
        return existing[:start] + block + existing[end:], FileAction.UPDATED

    prefix = existing.strip()
    if not prefix:
        return f"{block}\n", FileAction.UPDATED
    return f"{prefix}\n\n{block}\n", FileAction.UPDATED


async def apply_managed_block(
    content: str,
    doc_path: str | Path,
    flags: RunFlags,
    stats: RunStats,
    *,
    root: Path | None = None,
) -> FileAction:
    """Merge *content* as a managed block into the document at *doc_path*.

    Honours ``dry_run`` (the merge is computed and announced but not written)
    and ``verbose``.  Counts ``files_created`` or ``files_updated``.
    """
    path = Path(doc_path)
    shown = display_path(path, root)
    block = build_managed_block(content)

    existing: str | None = None
    if path_exists(path):
        raw = await asyncio.to_thread(path.read_bytes)
        existing = raw.decode("utf-8")

    new_text, action = merge_managed_block(existing, block, source=shown)

    if existing is None:
        would, done = "Would create", "Created"
    elif BEGIN_MARKER in existing:
        would, done = "Would update managed block in", "Updated managed block in"
    else:
        would, done = "Would append managed block to", "Appended managed block to"

    if flags.dry_run:
        print_action("[cyan]?[/cyan]", would, shown)
    else:
        await asyncio.to_thread(path.write_bytes, new_text.encode("utf-8"))
        if flags.verbose:
            print_action("[green]+[/green]", done, shown)
    return stats.record(action)
