"""Integration tests for the scaffolder command line.

These tests run ``python -m agent_scaffold`` in a subprocess against a
temporary directory and check the generated project on disk.  No network or
Node.js toolchain is required.
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_cli(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    env = {**os.environ, "PYTHONPATH": str(_REPO_ROOT), "PYTHONIOENCODING": "utf-8"}
    return subprocess.run(
        [sys.executable, "-m", "agent_scaffold", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldCommand:
    def test_scaffold_code_review(self, tmp_path: Path) -> None:
        result = _run_cli(tmp_path, "my-reviewer", "code-review")

        assert result.returncode == 0, result.stderr
        root = tmp_path / "my-reviewer"
        assert sorted(p.name for p in root.iterdir()) == [
            "CLAUDE.md",
            "my-reviewer.ts",
            "package.json",
            "tsconfig.json",
        ]
        manifest = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-reviewer"
        assert manifest["scripts"]["start"] == "npx tsx my-reviewer.ts"
        tsconfig = json.loads((root / "tsconfig.json").read_text(encoding="utf-8"))
        assert tsconfig["compilerOptions"]["strict"] is True

    def test_rerun_is_idempotent(self, tmp_path: Path) -> None:
        assert _run_cli(tmp_path, "again", "research").returncode == 0
        first = (tmp_path / "again" / "again.ts").read_bytes()

        assert _run_cli(tmp_path, "again", "research").returncode == 0
        assert (tmp_path / "again" / "again.ts").read_bytes() == first

    def test_missing_name_fails(self, tmp_path: Path) -> None:
        result = _run_cli(tmp_path)
        assert result.returncode == 1
        assert "Usage:" in result.stdout
        assert list(tmp_path.iterdir()) == []

    def test_unknown_type_fails(self, tmp_path: Path) -> None:
        result = _run_cli(tmp_path, "agent", "bogus")
        assert result.returncode == 1
        assert "Unknown type: bogus" in result.stdout
        assert list(tmp_path.iterdir()) == []
