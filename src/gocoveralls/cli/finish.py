"""gocoveralls finish command - close a parallel build."""

from __future__ import annotations

import os

import click

from gocoveralls.cli.utils import abort_on_error, get_config
from gocoveralls.core.progress import status
from gocoveralls.coveralls import CoverallsClient, detect_ci


@click.command()
@click.option("--build-num", default=None, help="Build number (default: service number)")
@click.option("--repo-token", default=None, envvar="COVERALLS_TOKEN", help="Repository token")
@click.option("--endpoint", default=None, help="Coveralls base URL")
@click.pass_context
def finish_command(
    ctx: click.Context,
    build_num: str | None,
    repo_token: str | None,
    endpoint: str | None,
) -> None:
    """Tell Coveralls that all parallel jobs of a build have been uploaded."""
    upload_config = get_config(ctx).upload
    build_num = (
        build_num or upload_config.service_number or detect_ci(os.environ).service_number
    )
    if not build_num:
        raise click.UsageError("No build number: pass --build-num or run inside a CI job")

    with (
        abort_on_error("Finish"),
        CoverallsClient(
            endpoint or upload_config.endpoint,
            timeout=upload_config.timeout_sec,
        ) as client,
    ):
        response = client.finish(
            repo_token=repo_token or upload_config.repo_token,
            build_num=build_num,
        )

    status(f"Build {build_num} finished: {response.get('done', response)}", style="success")
