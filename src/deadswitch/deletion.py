"""Best-effort recursive file deletion.

Removes every non-directory entry below a root while leaving the directory
structure in place. Failures are collected in a DeletionReport and logged;
nothing here raises to the caller.

Symbolic link handling:
    - A configured root that is a link to a directory is followed once.
    - Links found during the walk are never followed. They are removed as
      entries themselves, including links that point at directories, so
      nothing outside the configured trees is touched.
    - Removing a directory link with os.remove is POSIX behaviour. On
      Windows such links need os.rmdir, so they end up as FileRemoveError
      entries in the report there.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .errors import DeadswitchError, DeletionWalkError, FileRemoveError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class DeletionReport:
    """Outcome of deleting files under one root."""

    root: Path
    removed: list[Path] = field(default_factory=list)
    errors: list[DeadswitchError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def iter_files(root: Path, errors: list[DeadswitchError]) -> Iterator[Path]:
    """Lazily yield every non-directory entry under root.

    Traversal errors are appended to ``errors`` as DeletionWalkError and the
    walk moves on to the remaining entries.

    Args:
        root: Directory to walk.
        errors: Accumulator for traversal errors.

    Yields:
        Paths of regular files, special files and symbolic links.
    """

    def on_error(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        error = DeletionWalkError(failed, exc)
        errors.append(error)
        logger.warning("%s", error)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        base = Path(dirpath)
        links = [name for name in dirnames if (base / name).is_symlink()]
        if links:
            # Prune before yielding so the walk never descends into them
            dirnames[:] = [name for name in dirnames if name not in links]
        for name in filenames:
            yield base / name
        for name in links:
            yield base / name


def _remove(path: Path, report: DeletionReport) -> None:
    logger.info("Removing file: %s", path)
    try:
        os.remove(path)
    except OSError as e:
        error = FileRemoveError(path, e)
        report.errors.append(error)
        logger.warning("%s", error)
    else:
        report.removed.append(path)


def delete_files_under(root: str | Path) -> DeletionReport:
    """Remove every file under root, best-effort.

    If root does not exist or cannot be read, the error is recorded and the
    call returns without effect. If root is itself a file, it is removed.

    Args:
        root: Directory tree (or single file) to clean.

    Returns:
        DeletionReport listing removed files and collected errors.
    """
    root = Path(root)
    report = DeletionReport(root=root)
    logger.info("Deleting files in directory %s", root)

    try:
        mode = os.stat(root).st_mode
    except OSError as e:
        error = DeletionWalkError(root, e)
        report.errors.append(error)
        logger.error("Error cleaning directory: %s", error)
        return report

    entries: Iterable[Path] = iter_files(root, report.errors) if stat.S_ISDIR(mode) else [root]
    for path in entries:
        _remove(path, report)

    if report.ok:
        logger.info("Directory cleaned successfully: %s (%d file(s))", root, len(report.removed))
    else:
        logger.error(
            "Directory %s cleaned with %d error(s), %d file(s) removed",
            root,
            len(report.errors),
            len(report.removed),
        )
    return report


def delete_all(roots: Iterable[str | Path]) -> list[DeletionReport]:
    """Run delete_files_under over each root in order."""
    return [delete_files_under(root) for root in roots]
