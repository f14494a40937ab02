"""ff-project scaffolder -- the idempotent filesystem sync engine.

Copies bundled template trees into a target project, merges the managed block
into agent instruction documents and records the developer identity.  Every
operation is governed by ``RunFlags`` and reports into a shared ``RunStats``.

Quick usage::

    from ff_project.models import RunFlags, RunStats
    from ff_project.scaffolder import sync_directory

    stats = RunStats()
    await sync_directory(template_dir, target_dir, RunFlags(force=True), stats)
"""

from ff_project.scaffolder.fs_sync import copy_file, ensure_dir, path_exists, sync_directory
from ff_project.scaffolder.identity import (
    DEFAULT_DEVELOPER,
    resolve_developer_name,
    setup_developer,
)
from ff_project.scaffolder.managed_block import (
    BEGIN_MARKER,
    END_MARKER,
    apply_managed_block,
    build_managed_block,
    merge_managed_block,
)
from ff_project.scaffolder.templates import TemplateRenderer

__all__ = [
    # Filesystem sync
    "path_exists",
    "ensure_dir",
    "copy_file",
    "sync_directory",
    # Managed block
    "BEGIN_MARKER",
    "END_MARKER",
    "build_managed_block",
    "merge_managed_block",
    "apply_managed_block",
    # Identity
    "DEFAULT_DEVELOPER",
    "resolve_developer_name",
    "setup_developer",
    # Templates
    "TemplateRenderer",
]
