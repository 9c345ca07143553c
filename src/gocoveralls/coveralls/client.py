"""HTTP client for the Coveralls API."""

from __future__ import annotations

import json
from types import TracebackType
from typing import Any

import httpx

from gocoveralls.core.errors import UploadError
from gocoveralls.core.logging import get_logger
from gocoveralls.coveralls.job import Job

log = get_logger(__name__)

JOBS_PATH = "/api/v1/jobs"
WEBHOOK_PATH = "/webhook"


class CoverallsClient:
    """Posts jobs and parallel-build webhooks.

    One attempt per request; failures raise UploadError with ``retryable``
    set for server-side and transport errors.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=endpoint.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> CoverallsClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _post(self, path: str, **kwargs: Any) -> dict[str, Any]:
        url = str(self._client.base_url.join(path))
        try:
            response = self._client.post(path, **kwargs)
        except httpx.RequestError as e:
            raise UploadError.transport(url, str(e)) from e

        if response.is_error:
            raise UploadError.rejected(url, response.status_code, response.text)

        try:
            body = response.json()
        except json.JSONDecodeError:
            body = {"message": response.text}
        log.debug("coveralls_response", url=url, status_code=response.status_code)
        return body if isinstance(body, dict) else {"response": body}

    def upload(self, job: Job) -> dict[str, Any]:
        """Upload a job; returns the decoded response (``message``, ``url``)."""
        payload = json.dumps(job.to_dict())
        log.info(
            "coveralls_upload",
            files=len(job.source_files),
            service=job.service_name,
            job_id=job.service_job_id,
        )
        return self._post(
            JOBS_PATH,
            files={"json_file": ("json_file", payload, "application/json")},
        )

    def finish(self, *, repo_token: str | None, build_num: str | None) -> dict[str, Any]:
        """Close a parallel build so Coveralls aggregates its jobs."""
        params = {"repo_token": repo_token} if repo_token else None
        data = {"payload": {"build_num": build_num, "status": "done"}}
        log.info("coveralls_finish", build_num=build_num)
        return self._post(WEBHOOK_PATH, params=params, json=data)
