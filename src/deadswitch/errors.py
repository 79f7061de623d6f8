"""Unified exception hierarchy for deadswitch.

All custom exceptions inherit from DeadswitchError for consistent error handling.
CLI catches these and converts them to user-friendly messages.

Dependency direction:
    This module has NO internal dependencies (leaf module).
    It may be imported by: all other deadswitch modules.
"""

from __future__ import annotations

from pathlib import Path


class DeadswitchError(Exception):
    """Base exception for all deadswitch errors."""


class ConfigError(DeadswitchError):
    """Configuration-related errors. Fatal to startup.

    Examples:
        - Configuration file missing or unreadable
        - Missing [Settings] section or required key
        - Non-numeric or non-positive time limit
    """


class DeletionError(DeadswitchError):
    """Base class for errors raised while deleting files.

    Deletion errors are recorded and logged, never propagated to
    request-handling callers.
    """

    _action = "Deletion failed for"

    def __init__(self, path: Path, cause: OSError | None = None) -> None:
        self.path = path
        self.cause = cause
        detail = f": {cause.strerror or cause}" if cause is not None else ""
        super().__init__(f"{self._action} {path}{detail}")


class DeletionWalkError(DeletionError):
    """A directory could not be traversed."""

    _action = "Cannot traverse"


class FileRemoveError(DeletionError):
    """An individual file could not be removed (permissions, in use, etc.)."""

    _action = "Cannot remove"
