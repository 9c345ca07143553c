"""gocoveralls CLI."""

import click

from gocoveralls import __version__
from gocoveralls.cli.finish import finish_command
from gocoveralls.cli.merge import merge_command
from gocoveralls.cli.report import report_command
from gocoveralls.cli.upload import upload_command
from gocoveralls.config.loader import load_config
from gocoveralls.core.errors import ConfigError
from gocoveralls.core.logging import configure_logging, set_run_id


@click.group()
@click.version_option(version=__version__, prog_name="gocoveralls")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """gocoveralls - merge Go coverage profiles and upload them to Coveralls."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    set_run_id()

    ctx.obj["config"] = config


cli.add_command(merge_command, name="merge")
cli.add_command(report_command, name="report")
cli.add_command(upload_command, name="upload")
cli.add_command(finish_command, name="finish")


if __name__ == "__main__":
    cli()
