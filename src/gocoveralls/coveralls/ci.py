"""CI environment detection for job metadata."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

# First variable present wins.
_JOB_ID_VARS = (
    "GITHUB_RUN_ID",
    "TRAVIS_JOB_ID",
    "CIRCLE_BUILD_NUM",
    "APPVEYOR_JOB_ID",
    "SEMAPHORE_BUILD_NUMBER",
    "BUILDKITE_BUILD_ID",
    "DRONE_BUILD_NUMBER",
    "BUILD_NUMBER",
    "CI_BUILD_ID",
)

# Build-level number shared by every job of one build.
_SERVICE_NUMBER_VARS = (
    "GITHUB_RUN_ID",
    "TRAVIS_BUILD_NUMBER",
    "CIRCLE_WORKFLOW_ID",
    "APPVEYOR_BUILD_NUMBER",
    "SEMAPHORE_WORKFLOW_ID",
    "BUILDKITE_BUILD_NUMBER",
    "DRONE_BUILD_NUMBER",
    "BUILD_NUMBER",
)

_PULL_REQUEST_VARS = (
    "TRAVIS_PULL_REQUEST",
    "APPVEYOR_PULL_REQUEST_NUMBER",
    "BUILDKITE_PULL_REQUEST",
    "DRONE_PULL_REQUEST",
    "PULL_REQUEST_NUMBER",
)

_BRANCH_VARS = (
    "GITHUB_HEAD_REF",
    "TRAVIS_BRANCH",
    "CIRCLE_BRANCH",
    "APPVEYOR_REPO_BRANCH",
    "BUILDKITE_BRANCH",
    "DRONE_BRANCH",
    "GIT_BRANCH",
)

_GITHUB_PR_REF = re.compile(r"^refs/pull/(\d+)/merge$")
_TRAILING_NUMBER = re.compile(r"(\d+)$")


@dataclass(frozen=True, slots=True)
class CIContext:
    """Job metadata gathered from CI environment variables."""

    job_id: str | None = None
    service_number: str | None = None
    pull_request: str | None = None
    branch: str | None = None


def _first(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        if value := env.get(name):
            return value
    return None


def _pull_request(env: Mapping[str, str]) -> str | None:
    if env.get("GITHUB_EVENT_NAME", "").startswith("pull_request"):
        match = _GITHUB_PR_REF.match(env.get("GITHUB_REF", ""))
        if match:
            return match.group(1)

    # CircleCI exposes the PR URL, not the number
    if url := env.get("CI_PULL_REQUEST"):
        match = _TRAILING_NUMBER.search(url)
        if match:
            return match.group(1)

    value = _first(env, _PULL_REQUEST_VARS)
    if value in (None, "false"):
        return None
    return value


def _branch(env: Mapping[str, str]) -> str | None:
    if branch := _first(env, _BRANCH_VARS):
        return branch
    ref = env.get("GITHUB_REF", "")
    if ref.startswith("refs/heads/"):
        return ref.removeprefix("refs/heads/")
    return None


def detect_ci(env: Mapping[str, str]) -> CIContext:
    """Read job id, build number, pull request number and branch from ``env``."""
    return CIContext(
        job_id=_first(env, _JOB_ID_VARS),
        service_number=_first(env, _SERVICE_NUMBER_VARS),
        pull_request=_pull_request(env),
        branch=_branch(env),
    )
