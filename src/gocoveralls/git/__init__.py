"""Git operations module."""

from gocoveralls.git.errors import GitError, NotARepositoryError
from gocoveralls.git.models import CommitInfo, GitInfo, RemoteInfo, Signature
from gocoveralls.git.ops import GitOps, read_git_info

__all__ = [
    "GitOps",
    "read_git_info",
    # Models
    "CommitInfo",
    "GitInfo",
    "RemoteInfo",
    "Signature",
    # Errors
    "GitError",
    "NotARepositoryError",
]
