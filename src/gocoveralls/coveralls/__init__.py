"""Coveralls job building and upload."""

from gocoveralls.coveralls.ci import CIContext, detect_ci
from gocoveralls.coveralls.client import CoverallsClient
from gocoveralls.coveralls.job import Job, build_job

__all__ = [
    "CIContext",
    "CoverallsClient",
    "Job",
    "build_job",
    "detect_ci",
]
