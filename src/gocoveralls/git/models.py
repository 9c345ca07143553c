"""Serializable data models for the git section of a Coveralls job."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import pygit2


@dataclass(frozen=True, slots=True)
class Signature:
    """Git author/committer signature."""

    name: str
    email: str
    time: datetime

    @classmethod
    def from_pygit2(cls, sig: pygit2.Signature) -> Signature:
        return cls(sig.name, sig.email, datetime.fromtimestamp(sig.time, tz=UTC))


@dataclass(frozen=True, slots=True)
class CommitInfo:
    """Git commit information."""

    sha: str
    message: str
    author: Signature
    committer: Signature

    @classmethod
    def from_pygit2(cls, commit: pygit2.Commit) -> CommitInfo:
        return cls(
            sha=str(commit.id),
            message=commit.message,
            author=Signature.from_pygit2(commit.author),
            committer=Signature.from_pygit2(commit.committer),
        )


@dataclass(frozen=True, slots=True)
class RemoteInfo:
    """Git remote information."""

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class GitInfo:
    """HEAD commit, branch and remotes of the working repository."""

    head: CommitInfo
    branch: str | None
    remotes: tuple[RemoteInfo, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Coveralls ``git`` object."""
        return {
            "head": {
                "id": self.head.sha,
                "author_name": self.head.author.name,
                "author_email": self.head.author.email,
                "committer_name": self.head.committer.name,
                "committer_email": self.head.committer.email,
                "message": self.head.message.strip(),
            },
            "branch": self.branch or "",
            "remotes": [{"name": r.name, "url": r.url} for r in self.remotes],
        }
