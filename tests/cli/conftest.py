"""Fixtures for CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

SOURCE = "package a\n\nfunc A() {\n\treturn\n}\n"


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Drop handlers bound to the runner's streams."""
    yield
    logging.getLogger().handlers.clear()


@pytest.fixture
def module_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Go module as the working directory, with two profiles of one file."""
    root = tmp_path / "mod"
    (root / "pkg").mkdir(parents=True)
    (root / "go.mod").write_text("module example.com/m\n")
    (root / "pkg" / "a.go").write_text(SOURCE)
    (root / "unit.out").write_text("mode: count\nexample.com/m/pkg/a.go:3.10,5.2 1 2\n")
    (root / "integ.out").write_text("mode: count\nexample.com/m/pkg/a.go:3.10,5.2 1 3\n")
    monkeypatch.chdir(root)
    return root
