"""Tests for the Coveralls HTTP client."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import httpx
import pytest

from gocoveralls.config.models import UploadConfig
from gocoveralls.core.errors import ErrorCode, UploadError
from gocoveralls.coverage.models import SourceFile
from gocoveralls.coveralls.client import CoverallsClient
from gocoveralls.coveralls.job import build_job

ENDPOINT = "https://coveralls.example.com"


def _job():
    source = SourceFile(name="a.go", source="package a\n", coverage=(None, 2))
    config = UploadConfig(repo_token="tok")
    return build_job([source], config, run_at=datetime(2024, 1, 1, tzinfo=UTC))


def _json_file_part(request: httpx.Request) -> dict:
    """Pull the json_file field out of a multipart body."""
    body = request.read().decode()
    assert 'name="json_file"' in body
    start = body.index("{")
    end = body.rindex("}") + 1
    return json.loads(body[start:end])


class TestUpload:
    def test_given_job_when_uploaded_then_multipart_json_file_posted(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"message": "Job #1.1", "url": "https://coveralls.example.com/jobs/1"}
            )

        with CoverallsClient(ENDPOINT, transport=httpx.MockTransport(handler)) as client:
            response = client.upload(_job())

        assert response["url"] == "https://coveralls.example.com/jobs/1"
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/api/v1/jobs"
        assert request.headers["content-type"].startswith("multipart/form-data")
        payload = _json_file_part(request)
        assert payload["repo_token"] == "tok"
        assert payload["source_files"][0]["coverage"] == [None, 2]

    @pytest.mark.parametrize(("status_code", "retryable"), [(422, False), (502, True)])
    def test_given_error_status_when_uploaded_then_rejected(
        self, status_code: int, retryable: bool
    ) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(status_code, text="nope"))

        with (
            CoverallsClient(ENDPOINT, transport=transport) as client,
            pytest.raises(UploadError) as exc_info,
        ):
            client.upload(_job())

        assert exc_info.value.code == ErrorCode.UPLOAD_REJECTED
        assert exc_info.value.retryable is retryable
        assert exc_info.value.details["body"] == "nope"

    def test_given_connection_failure_when_uploaded_then_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with (
            CoverallsClient(ENDPOINT, transport=httpx.MockTransport(handler)) as client,
            pytest.raises(UploadError) as exc_info,
        ):
            client.upload(_job())

        assert exc_info.value.code == ErrorCode.UPLOAD_TRANSPORT_ERROR
        assert exc_info.value.retryable is True

    def test_given_non_json_response_when_uploaded_then_text_as_message(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))

        with CoverallsClient(ENDPOINT, transport=transport) as client:
            assert client.upload(_job()) == {"message": "ok"}


class TestFinish:
    def test_given_build_num_when_finished_then_webhook_payload(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"done": True})

        with CoverallsClient(ENDPOINT + "/", transport=httpx.MockTransport(handler)) as client:
            response = client.finish(repo_token="tok", build_num="99")

        assert response == {"done": True}
        request = seen[0]
        assert request.url.path == "/webhook"
        assert request.url.params["repo_token"] == "tok"
        assert json.loads(request.content) == {"payload": {"build_num": "99", "status": "done"}}

    def test_given_no_token_when_finished_then_no_query_params(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"done": True})

        with CoverallsClient(ENDPOINT, transport=httpx.MockTransport(handler)) as client:
            client.finish(repo_token=None, build_num="1")

        assert "repo_token" not in seen[0].url.params
