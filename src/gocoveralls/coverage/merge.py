"""Coverage profile merging with summed counts.

Reports from different packages or shards of the same build are merged
positionally: the profile at index i of every report is expected to describe
the same file, and its blocks are expected to line up one for one. Counts of
aligned blocks are summed.

Upstream parsing sorts files by name and blocks by start position, so two
reports of the same codebase under the same instrumentation share one
layout. Anything else is a corrupt or mismatched input and raises
BlockMismatchError instead of being merged.
"""

from collections.abc import Sequence

from gocoveralls.coverage.models import CoverageReport, Profile, ProfileBlock
from gocoveralls.core.errors import BlockMismatchError
from gocoveralls.core.logging import get_logger

log = get_logger(__name__)


def merge_blocks(
    left: Sequence[ProfileBlock],
    right: Sequence[ProfileBlock],
    *,
    file_name: str = "<unknown>",
) -> tuple[ProfileBlock, ...]:
    """Sum counts of two aligned block sequences.

    Raises:
        BlockMismatchError: If lengths differ or any pair disagrees on
            (start_line, start_col).
    """
    if len(left) != len(right):
        raise BlockMismatchError.length_mismatch(file_name, len(left), len(right))

    merged: list[ProfileBlock] = []
    for i, (a, b) in enumerate(zip(left, right, strict=True)):
        if a.start != b.start:
            raise BlockMismatchError.start_mismatch(file_name, i, a.start, b.start)
        merged.append(
            ProfileBlock(
                start_line=a.start_line,
                start_col=a.start_col,
                end_line=a.end_line,
                end_col=a.end_col,
                num_stmt=a.num_stmt,
                count=a.count + b.count,
            )
        )
    return tuple(merged)


def merge_profiles(reports: Sequence[CoverageReport]) -> CoverageReport:
    """Merge reports covering the same files into one report.

    Leading empty reports (runs with no test files) are skipped. A single
    remaining report is returned as-is. Otherwise the first remaining report
    is the baseline, and for each of its profiles every other report
    contributes the profile at the same index when the file names match.

    Args:
        reports: Parsed reports in the order they were supplied.

    Returns:
        Merged profiles in baseline order. Inputs are not modified.

    Raises:
        BlockMismatchError: If matched profiles have misaligned blocks.
    """
    start = 0
    while start < len(reports) and not reports[start]:
        start += 1
    remaining = reports[start:]

    if not remaining:
        return []
    if len(remaining) == 1:
        return remaining[0]

    head, rest = remaining[0], remaining[1:]
    merged: CoverageReport = []
    for i, profile in enumerate(head):
        blocks = profile.blocks
        for other in rest:
            if len(other) <= i:
                continue
            if other[i].file_name != profile.file_name:
                log.debug(
                    "profile_skipped",
                    file=profile.file_name,
                    index=i,
                    found=other[i].file_name,
                )
                continue
            blocks = merge_blocks(blocks, other[i].blocks, file_name=profile.file_name)
        merged.append(Profile(file_name=profile.file_name, mode=profile.mode, blocks=blocks))

    log.debug("profiles_merged", reports=len(remaining), files=len(merged))
    return merged
