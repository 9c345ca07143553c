"""gocoveralls merge command - combine profiles into one."""

from __future__ import annotations

from pathlib import Path

import click

from gocoveralls.cli.utils import abort_on_error, profile_paths
from gocoveralls.core.progress import pluralize, status
from gocoveralls.coverage.writer import format_profiles
from gocoveralls.pipeline import merge_profile_files


@click.command()
@click.argument("profiles")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the merged profile here instead of stdout",
)
def merge_command(profiles: str, output: Path | None) -> None:
    """Merge coverage profiles into a single Go profile.

    PROFILES is a comma-separated list of `go test -coverprofile` outputs.
    """
    paths = profile_paths(profiles)
    with abort_on_error("Merge"):
        merged = merge_profile_files(paths)

    text = format_profiles(merged)
    if output is None:
        click.echo(text, nl=False)
        return

    try:
        output.write_text(text)
    except OSError as e:
        raise click.ClickException(f"Error writing {output}: {e.strerror or e}") from e
    status(
        f"Merged {pluralize(len(paths), 'profile')} into {output} "
        f"({pluralize(len(merged), 'file')})",
        style="success",
    )
