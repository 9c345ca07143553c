"""gocoveralls report command - show merged line coverage per file."""

from __future__ import annotations

import json

import click
from rich.table import Table

from gocoveralls.cli.utils import abort_on_error, get_config, profile_paths
from gocoveralls.core.progress import get_console
from gocoveralls.pipeline import collect_source_files


@click.command()
@click.argument("profiles")
@click.option("--json", "as_json", is_flag=True, help="Output source file records as JSON")
@click.pass_context
def report_command(ctx: click.Context, profiles: str, as_json: bool) -> None:
    """Show line coverage per source file.

    PROFILES is a comma-separated list of `go test -coverprofile` outputs.
    """
    config = get_config(ctx)
    paths = profile_paths(profiles)
    with abort_on_error("Report"):
        source_files = collect_source_files(paths, config.resolver)

    if as_json:
        click.echo(json.dumps([sf.to_dict() for sf in source_files]))
        return

    table = Table(title="Line coverage")
    table.add_column("File")
    table.add_column("Lines", justify="right")
    table.add_column("Hit", justify="right")
    table.add_column("Rate", justify="right")

    total_found = total_hit = 0
    for sf in source_files:
        total_found += sf.lines_found
        total_hit += sf.lines_hit
        table.add_row(sf.name, str(sf.lines_found), str(sf.lines_hit), f"{sf.line_rate:.1%}")

    total_rate = total_hit / total_found if total_found else 0.0
    table.add_row("TOTAL", str(total_found), str(total_hit), f"{total_rate:.1%}", style="bold")
    get_console().print(table)
