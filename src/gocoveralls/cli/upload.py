"""gocoveralls upload command - send merged coverage to Coveralls."""

from __future__ import annotations

import json
import os
from pathlib import Path

import click

from gocoveralls.cli.utils import abort_on_error, get_config, profile_paths
from gocoveralls.core.progress import pluralize, spinner, status
from gocoveralls.coveralls import CoverallsClient, build_job, detect_ci
from gocoveralls.git import read_git_info
from gocoveralls.pipeline import collect_source_files

REDACTED = "***"


@click.command()
@click.argument("profiles")
@click.option("--endpoint", default=None, help="Coveralls base URL")
@click.option("--service", "service_name", default=None, help="CI service name")
@click.option("--service-number", default=None, help="Build number shared by parallel jobs")
@click.option("--repo-token", default=None, envvar="COVERALLS_TOKEN", help="Repository token")
@click.option(
    "--parallel/--no-parallel",
    default=None,
    help="Mark as one of several parallel jobs",
)
@click.option("--flag-name", default=None, help="Flag shown for this job in the Coveralls UI")
@click.option("--path-prefix", default=None, help="Prefix for reported file names")
@click.option("--dry-run", is_flag=True, help="Print the job JSON instead of uploading")
@click.pass_context
def upload_command(
    ctx: click.Context,
    profiles: str,
    endpoint: str | None,
    service_name: str | None,
    service_number: str | None,
    repo_token: str | None,
    parallel: bool | None,
    flag_name: str | None,
    path_prefix: str | None,
    dry_run: bool,
) -> None:
    """Merge profiles and upload line coverage to Coveralls.

    PROFILES is a comma-separated list of `go test -coverprofile` outputs.
    """
    config = get_config(ctx)
    overrides = {
        "endpoint": endpoint,
        "service_name": service_name,
        "service_number": service_number,
        "repo_token": repo_token,
        "parallel": parallel,
        "flag_name": flag_name,
    }
    upload_config = config.upload.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    resolver_config = config.resolver
    if path_prefix is not None:
        resolver_config = resolver_config.model_copy(update={"path_prefix": path_prefix})

    paths = profile_paths(profiles)
    ci = detect_ci(os.environ)
    with abort_on_error("Upload"):
        source_files = collect_source_files(paths, resolver_config)
        job = build_job(
            source_files,
            upload_config,
            ci=ci,
            git=read_git_info(Path.cwd(), branch=ci.branch),
        )

        if dry_run:
            payload = job.to_dict()
            if "repo_token" in payload:
                payload["repo_token"] = REDACTED
            click.echo(json.dumps(payload, indent=2))
            return

        with (
            spinner(f"Uploading {pluralize(len(source_files), 'file')}"),
            CoverallsClient(upload_config.endpoint, timeout=upload_config.timeout_sec) as client,
        ):
            response = client.upload(job)

    status(response.get("message", "Uploaded"), style="success")
    if url := response.get("url"):
        click.echo(url)
