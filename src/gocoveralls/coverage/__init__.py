"""Go coverage profile parsing, merging, and line projection.

Usage:
    from gocoveralls.coverage import (
        FileResolver, merge_profiles, parse_reports, project_profiles,
    )

    reports = parse_reports([Path("a.out"), Path("b.out")])
    merged = merge_profiles(reports)
    source_files = project_profiles(merged, FileResolver())
"""

from gocoveralls.coverage.merge import merge_blocks, merge_profiles
from gocoveralls.coverage.models import (
    CoverageReport,
    LineHits,
    Profile,
    ProfileBlock,
    SourceFile,
)
from gocoveralls.coverage.parser import (
    parse_profiles,
    parse_profiles_text,
    parse_reports,
    split_profile_paths,
)
from gocoveralls.coverage.projector import (
    display_name,
    line_coverage,
    project_profiles,
    read_source,
)
from gocoveralls.coverage.resolver import (
    ChainLocator,
    FileResolver,
    GoListLocator,
    GopathLocator,
    PackageLocator,
    default_locator,
    find_module_root,
    read_module_name,
)
from gocoveralls.coverage.writer import format_profiles

__all__ = [
    # Models
    "CoverageReport",
    "LineHits",
    "Profile",
    "ProfileBlock",
    "SourceFile",
    # Parsing
    "format_profiles",
    "parse_profiles",
    "parse_profiles_text",
    "parse_reports",
    "split_profile_paths",
    # Merge
    "merge_blocks",
    "merge_profiles",
    # Resolution
    "ChainLocator",
    "FileResolver",
    "GoListLocator",
    "GopathLocator",
    "PackageLocator",
    "default_locator",
    "find_module_root",
    "read_module_name",
    # Projection
    "display_name",
    "line_coverage",
    "project_profiles",
    "read_source",
]
