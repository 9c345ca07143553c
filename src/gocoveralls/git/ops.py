"""Read-only repository queries backed by pygit2."""

from __future__ import annotations

from pathlib import Path

import pygit2

from gocoveralls.core.logging import get_logger
from gocoveralls.git.errors import NotARepositoryError
from gocoveralls.git.models import CommitInfo, GitInfo, RemoteInfo

log = get_logger(__name__)


class GitOps:
    """Thin wrapper around pygit2.Repository with cleaner error handling."""

    def __init__(self, repo_path: Path | str) -> None:
        discovered = pygit2.discover_repository(str(repo_path))
        if discovered is None:
            raise NotARepositoryError(str(repo_path))
        try:
            self._repo = pygit2.Repository(discovered)
        except pygit2.GitError as e:
            raise NotARepositoryError(str(repo_path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        """Direct access to the underlying pygit2 Repository."""
        return self._repo

    def head_commit(self) -> CommitInfo | None:
        """HEAD commit, or None if unborn."""
        if self._repo.head_is_unborn:
            return None
        return CommitInfo.from_pygit2(self._repo.head.peel(pygit2.Commit))

    def current_branch(self) -> str | None:
        """Current branch name, or None if detached or unborn."""
        if self._repo.head_is_unborn or self._repo.head_is_detached:
            return None
        return self._repo.head.shorthand

    def remotes(self) -> list[RemoteInfo]:
        """List remotes."""
        return [RemoteInfo(r.name or "", r.url or "") for r in self._repo.remotes]


def read_git_info(path: Path, *, branch: str | None = None) -> GitInfo | None:
    """Collect the git section of a job, or None outside a repository.

    ``branch`` overrides the checked-out branch (CI checkouts are often detached).
    """
    try:
        ops = GitOps(path)
    except NotARepositoryError:
        log.debug("git_info_unavailable", path=str(path))
        return None

    head = ops.head_commit()
    if head is None:
        log.debug("git_head_unborn", path=str(path))
        return None

    return GitInfo(
        head=head,
        branch=branch or ops.current_branch(),
        remotes=tuple(ops.remotes()),
    )
