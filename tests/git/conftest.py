"""Test fixtures for git module."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")

    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    (repo_path / "go.mod").write_text("module example.com/m\n")
    repo.index.add("go.mod")
    repo.index.write()
    tree = repo.index.write_tree()
    author = pygit2.Signature("Test Author", "author@example.com")
    committer = pygit2.Signature("Test Committer", "committer@example.com")
    repo.create_commit("refs/heads/main", author, committer, "Initial commit\n", tree, [])
    repo.set_head("refs/heads/main")

    yield repo


@pytest.fixture
def repo_with_remote(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository with a configured origin remote."""
    temp_repo.remotes.create("origin", "https://github.com/example/m.git")
    return temp_repo
