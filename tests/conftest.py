"""Shared pytest fixtures for the agent scaffolder test suite.

Provides reusable fixtures for:
- Temporary output directories
- Running a test from inside a temporary working directory
- A helper that snapshots every file under a directory
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Temporary parent directory for generated projects (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the current working directory."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, str]]:
    """Return a function mapping every file under a root to its content."""

    def _snapshot(root: Path) -> dict[str, str]:
        return {
            str(path.relative_to(root)): path.read_text(encoding="utf-8")
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
