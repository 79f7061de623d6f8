"""Pytest configuration and fixtures for deadswitch tests.

Ensures the deadswitch package is importable without installation and
provides throwaway directory trees for the deletion tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add src directory to path for development testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from deadswitch.config import Configuration  # noqa: E402


def make_tree(root: Path) -> list[Path]:
    """Create a small nested tree under root and return its files."""
    files = [
        root / "README.md",
        root / "src" / "main.py",
        root / "src" / "pkg" / "util.py",
        root / ".git" / "HEAD",
    ]
    (root / "empty").mkdir(parents=True)
    for path in files:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("data", encoding="utf-8")
    return files


@pytest.fixture
def code_roots(tmp_path: Path) -> tuple[Path, Path]:
    """Two populated roots: (git_repo, local_code)."""
    git_repo = tmp_path / "repo"
    local_code = tmp_path / "code"
    make_tree(git_repo)
    make_tree(local_code)
    return git_repo, local_code


@pytest.fixture
def config(code_roots: tuple[Path, Path]) -> Configuration:
    git_repo, local_code = code_roots
    return Configuration(
        git_repo_path=git_repo,
        local_code_path=local_code,
        time_limit_seconds=2,
    )
