"""Coveralls job payload."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from gocoveralls.config.models import UploadConfig
from gocoveralls.coverage.models import SourceFile
from gocoveralls.coveralls.ci import CIContext
from gocoveralls.git.models import GitInfo


@dataclass(frozen=True, slots=True)
class Job:
    """One upload to ``/api/v1/jobs``."""

    service_name: str
    source_files: tuple[SourceFile, ...]
    run_at: datetime
    repo_token: str | None = None
    service_job_id: str | None = None
    service_number: str | None = None
    service_pull_request: str | None = None
    parallel: bool = False
    flag_name: str | None = None
    git: GitInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the ``json_file`` upload field; unset keys are omitted."""
        data: dict[str, Any] = {
            "service_name": self.service_name,
            "run_at": self.run_at.isoformat(),
            "source_files": [sf.to_dict() for sf in self.source_files],
        }
        if self.repo_token:
            data["repo_token"] = self.repo_token
        if self.service_job_id:
            data["service_job_id"] = self.service_job_id
        if self.service_number:
            data["service_number"] = self.service_number
        if self.service_pull_request:
            data["service_pull_request"] = self.service_pull_request
        if self.parallel:
            data["parallel"] = True
        if self.flag_name:
            data["flag_name"] = self.flag_name
        if self.git is not None:
            data["git"] = self.git.to_dict()
        return data


def build_job(
    source_files: Sequence[SourceFile],
    config: UploadConfig,
    *,
    ci: CIContext | None = None,
    git: GitInfo | None = None,
    run_at: datetime | None = None,
) -> Job:
    """Assemble a job from projected files, upload config and CI context.

    Explicit config wins over values detected from the CI environment.
    """
    ci = ci or CIContext()
    return Job(
        service_name=config.service_name,
        source_files=tuple(source_files),
        run_at=run_at or datetime.now(tz=UTC),
        repo_token=config.repo_token,
        service_job_id=config.service_job_id or ci.job_id,
        service_number=config.service_number or ci.service_number,
        service_pull_request=ci.pull_request,
        parallel=config.parallel,
        flag_name=config.flag_name,
        git=git,
    )
