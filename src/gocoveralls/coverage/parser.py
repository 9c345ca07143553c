"""Go coverage profile parser.

Go test produces coverage profiles with format:
mode: set|count|atomic
<package>/<file>:<startline>.<startcol>,<endline>.<endcol> <numstmt> <count>

Example:
mode: set
github.com/user/pkg/main.go:10.2,12.16 3 1
github.com/user/pkg/main.go:15.2,20.16 5 0

- mode: set (0/1), count (hit count), atomic (thread-safe count)
- numstmt: number of statements in block
- count: execution count (0 = not covered)

Profiles concatenated from several runs may repeat the mode line; a
different mode in the same file is rejected.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from gocoveralls.coverage.models import CoverageReport, Profile, ProfileBlock, ProfileMode
from gocoveralls.core.errors import ProfileParseError
from gocoveralls.core.logging import get_logger

log = get_logger(__name__)

_MODES: frozenset[str] = frozenset({"set", "count", "atomic"})
_BLOCK_RE = re.compile(r"^(.+):(\d+)\.(\d+),(\d+)\.(\d+) (\d+) (\d+)$")


def parse_profiles(path: Path) -> CoverageReport:
    """Parse a Go coverage profile file.

    Raises:
        ProfileParseError: If the file is unreadable or malformed.
    """
    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileParseError.unreadable(str(path), str(e)) from e
    return parse_profiles_text(content, source=str(path))


def parse_profiles_text(content: str, *, source: str = "<string>") -> CoverageReport:
    """Parse Go coverage profile text into per-file profiles.

    Profiles are sorted by file name; blocks by (start_line, start_col).
    Blocks repeated at the exact same range are collapsed into one.
    """
    mode: ProfileMode | None = None
    blocks_by_file: dict[str, list[ProfileBlock]] = {}

    for line_no, raw in enumerate(content.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith("mode:"):
            found = line[len("mode:") :].strip()
            if found not in _MODES:
                raise ProfileParseError.at_line(source, line_no, f"unknown mode {found!r}")
            if mode is not None and found != mode:
                raise ProfileParseError.at_line(
                    source, line_no, f"mode changed from {mode!r} to {found!r}"
                )
            mode = found  # type: ignore[assignment]
            continue

        if mode is None:
            raise ProfileParseError.at_line(source, line_no, "missing mode line")

        match = _BLOCK_RE.match(line)
        if match is None:
            raise ProfileParseError.at_line(
                source, line_no, f"line {line!r} doesn't match expected format"
            )

        file_name = match.group(1)
        sl, sc, el, ec, num_stmt, count = (int(g) for g in match.groups()[1:])
        blocks_by_file.setdefault(file_name, []).append(
            ProfileBlock(
                start_line=sl,
                start_col=sc,
                end_line=el,
                end_col=ec,
                num_stmt=num_stmt,
                count=count,
            )
        )

    if mode is None:
        # An empty profile ("[no test files]") carries no blocks.
        return []

    profiles = [
        Profile(
            file_name=file_name,
            mode=mode,
            blocks=_collapse_duplicates(file_name, blocks, mode, source),
        )
        for file_name, blocks in sorted(blocks_by_file.items())
    ]
    log.debug("profiles_parsed", source=source, files=len(profiles), mode=mode)
    return profiles


def _collapse_duplicates(
    file_name: str,
    blocks: list[ProfileBlock],
    mode: ProfileMode,
    source: str,
) -> tuple[ProfileBlock, ...]:
    ordered = sorted(blocks, key=lambda b: b.start)
    result: list[ProfileBlock] = []
    for block in ordered:
        if result and _same_range(result[-1], block):
            last = result[-1]
            if last.num_stmt != block.num_stmt:
                raise ProfileParseError.invalid(
                    source,
                    f"inconsistent NumStmt in {file_name}: "
                    f"changed from {last.num_stmt} to {block.num_stmt}",
                )
            count = last.count | block.count if mode == "set" else last.count + block.count
            result[-1] = ProfileBlock(
                start_line=last.start_line,
                start_col=last.start_col,
                end_line=last.end_line,
                end_col=last.end_col,
                num_stmt=last.num_stmt,
                count=count,
            )
            continue
        result.append(block)
    return tuple(result)


def _same_range(a: ProfileBlock, b: ProfileBlock) -> bool:
    return (a.start_line, a.start_col, a.end_line, a.end_col) == (
        b.start_line,
        b.start_col,
        b.end_line,
        b.end_col,
    )


def split_profile_paths(spec: str) -> list[Path]:
    """Split a comma-separated profile list, dropping empty entries."""
    return [Path(part.strip()) for part in spec.split(",") if part.strip()]


def parse_reports(paths: Iterable[Path]) -> list[CoverageReport]:
    """Parse each profile in order, one report per path.

    Raises:
        ProfileParseError: On the first path that fails to parse.
    """
    return [parse_profiles(path) for path in paths]
