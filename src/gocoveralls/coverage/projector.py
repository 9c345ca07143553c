"""Project merged block profiles onto per-line hit arrays."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from gocoveralls.coverage.models import LineHits, Profile, ProfileBlock, SourceFile
from gocoveralls.coverage.resolver import FileResolver
from gocoveralls.core.errors import SourceMismatchError, SourceReadError
from gocoveralls.core.logging import get_logger

log = get_logger(__name__)

SourceNamer = Callable[[Path], str]


def display_name(path: Path, *, root: Path | None = None, prefix: str = "") -> str:
    """Name reported for a source file.

    Relative to ``root`` (cwd by default) when inside it, always
    ``/``-separated, with ``prefix`` prepended.
    """
    root = (root or Path.cwd()).resolve()
    resolved = path.resolve()
    if resolved.is_relative_to(root):
        resolved = resolved.relative_to(root)
    return f"{prefix}{resolved.as_posix()}"


def line_coverage(
    blocks: Sequence[ProfileBlock],
    line_count: int,
    *,
    file_name: str = "<unknown>",
) -> list[LineHits]:
    """Expand blocks into a dense 1-based line array (index 0 is line 1).

    Counts accumulate where blocks share a line.

    Raises:
        SourceMismatchError: If a block ends past ``line_count``.
    """
    coverage: list[LineHits] = [None] * line_count
    for block in blocks:
        if block.end_line > line_count:
            raise SourceMismatchError.past_end(file_name, block.end_line, line_count)
        for line in range(max(block.start_line, 1), block.end_line + 1):
            coverage[line - 1] = (coverage[line - 1] or 0) + block.count
    return coverage


def read_source(path: Path) -> str:
    """Read a source file as text.

    Raises:
        SourceReadError: If the file can't be read.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError.for_path(str(path), str(e)) from e
    return data.decode("utf-8", errors="replace")


def project_profiles(
    profiles: Sequence[Profile],
    resolver: FileResolver,
    *,
    namer: SourceNamer | None = None,
) -> list[SourceFile]:
    """Build one SourceFile per profile, in profile order.

    Raises:
        SourceNotFoundError: If a profiled file can't be located.
        SourceReadError: If a located file can't be read.
        SourceMismatchError: If a block runs past the end of its file.
    """
    namer = namer or display_name
    result: list[SourceFile] = []
    for profile in profiles:
        path = resolver.resolve(profile.file_name)
        source = read_source(path)
        line_count = source.count("\n") + 1
        coverage = line_coverage(profile.blocks, line_count, file_name=profile.file_name)
        log.debug("source_projected", file=profile.file_name, path=str(path), lines=line_count)
        result.append(SourceFile(name=namer(path), source=source, coverage=tuple(coverage)))
    return result
