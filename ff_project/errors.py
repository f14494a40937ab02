"""Exception types raised by ff-project.

Filesystem failures surface as plain ``OSError``; these classes cover the
conditions the tool detects itself.
"""

from __future__ import annotations


class FFProjectError(Exception):
    """Base class for all ff-project specific errors."""


class TemplateNotFoundError(FFProjectError):
    """Raised when a bundled template file or directory is missing."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(message or f"Template not found: {path}")


class UsageError(FFProjectError):
    """Raised when the command line cannot be parsed."""


class ManagedBlockError(FFProjectError):
    """Raised when a document contains a begin sentinel without a matching end."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
