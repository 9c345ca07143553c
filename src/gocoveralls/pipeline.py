"""Parse, merge and project profiles in one pass."""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from pathlib import Path

from gocoveralls.config.models import ResolverConfig
from gocoveralls.coverage.merge import merge_profiles
from gocoveralls.coverage.models import CoverageReport, SourceFile
from gocoveralls.coverage.parser import parse_reports
from gocoveralls.coverage.projector import display_name, project_profiles
from gocoveralls.coverage.resolver import FileResolver, PackageLocator
from gocoveralls.core.logging import get_logger

log = get_logger(__name__)


def merge_profile_files(paths: Sequence[Path]) -> CoverageReport:
    """Parse every profile and merge them.

    Raises:
        ProfileParseError: If any profile fails to parse.
        BlockMismatchError: If the profiles don't line up.
    """
    reports = parse_reports(paths)
    log.info("profiles_parsed", count=len(reports))
    merged = merge_profiles(reports)
    log.info("profiles_merged", files=len(merged))
    return merged


def collect_source_files(
    paths: Sequence[Path],
    config: ResolverConfig,
    *,
    locator: PackageLocator | None = None,
    cwd: Path | None = None,
) -> list[SourceFile]:
    """Run the full pipeline from profile paths to per-file coverage.

    Raises:
        ProfileParseError, BlockMismatchError, SourceNotFoundError, SourceReadError
    """
    merged = merge_profile_files(paths)
    resolver = FileResolver(locator, module_file=config.module_file, cwd=cwd)
    namer = partial(display_name, root=cwd, prefix=config.path_prefix)
    source_files = project_profiles(merged, resolver, namer=namer)
    log.info("profiles_projected", files=len(source_files))
    return source_files
