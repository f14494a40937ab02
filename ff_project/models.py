"""Run-scoped data models for ff-project.

``RunFlags`` captures the user's choices for one invocation and is frozen once
built.  ``RunStats`` is the single mutable accumulator that every filesystem
operation reports into; the installer reads it once to render the summary.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileAction(str, Enum):
    """Terminal outcome of one filesystem operation."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    SKIPPED = "skipped"
    UPDATED = "updated"


class RunFlags(BaseModel):
    """User-supplied switches for a single run.

    ``dry_run`` suppresses every filesystem mutation regardless of the other
    flags.
    """

    model_config = ConfigDict(frozen=True)

    force: bool = Field(default=False, description="Overwrite existing files")
    dry_run: bool = Field(default=False, description="Simulate without writing")
    yes: bool = Field(default=False, description="Skip the confirmation prompt")
    verbose: bool = Field(default=False, description="Print per-item notices")


# Display order of the summary rows.
_SUMMARY_LABELS: tuple[tuple[str, str], ...] = (
    ("dirs_created", "Directories created"),
    ("files_created", "Files created"),
    ("files_updated", "Files updated"),
    ("files_overwritten", "Files overwritten"),
    ("files_skipped", "Files skipped"),
)


class RunStats(BaseModel):
    """Counters accumulated over one run.  Only ever incremented."""

    dirs_created: int = 0
    files_created: int = 0
    files_overwritten: int = 0
    files_skipped: int = 0
    files_updated: int = 0

    def record(self, action: FileAction) -> FileAction:
        """Increment the file counter matching *action* and return it."""
        if action is FileAction.CREATED:
            self.files_created += 1
        elif action is FileAction.OVERWRITTEN:
            self.files_overwritten += 1
        elif action is FileAction.SKIPPED:
            self.files_skipped += 1
        else:
            self.files_updated += 1
        return action

    def summary_rows(self) -> dict[str, int]:
        """Return ``{label: count}`` for every non-zero counter, in display order."""
        rows: dict[str, int] = {}
        for attr, label in _SUMMARY_LABELS:
            value = getattr(self, attr)
            if value > 0:
                rows[label] = value
        return rows
