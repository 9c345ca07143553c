"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from gocoveralls.config.models import GocoverallsConfig
from gocoveralls.core.errors import GocoverallsError, ProfileParseError
from gocoveralls.core.logging import get_logger
from gocoveralls.core.progress import status
from gocoveralls.coverage.parser import split_profile_paths

log = get_logger(__name__)


def get_config(ctx: click.Context) -> GocoverallsConfig:
    """Config loaded by the root group."""
    config: GocoverallsConfig = ctx.obj["config"]
    return config


def profile_paths(spec: str) -> list[Path]:
    """Parse the comma-separated PROFILES argument.

    Raises:
        click.BadParameter: If the list is empty.
    """
    paths = split_profile_paths(spec)
    if not paths:
        raise click.BadParameter("at least one profile path is required", param_hint="PROFILES")
    return paths


@contextmanager
def abort_on_error(action: str) -> Iterator[None]:
    """Turn pipeline errors into a logged, non-zero exit.

    Parse errors are reported as usage-level failures. Everything else is
    fatal: it is logged with its structured details before exiting.
    """
    try:
        yield
    except ProfileParseError as e:
        log.error("profile_parse_failed", action=action, **e.to_dict())
        raise click.ClickException(f"Error parsing coverage: {e.message}") from e
    except GocoverallsError as e:
        log.error("fatal_error", action=action, **e.to_dict())
        status(f"{action} failed: {e.message}", style="error")
        raise SystemExit(1) from e
