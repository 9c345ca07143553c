"""Render profiles back to Go coverage profile text."""

from collections.abc import Sequence

from gocoveralls.coverage.models import Profile


def format_profiles(profiles: Sequence[Profile]) -> str:
    """Render a report in `go test -coverprofile` format.

    The mode line comes from the first profile; an empty report renders as "".
    """
    if not profiles:
        return ""

    lines = [f"mode: {profiles[0].mode}"]
    for profile in profiles:
        for b in profile.blocks:
            lines.append(
                f"{profile.file_name}:{b.start_line}.{b.start_col},"
                f"{b.end_line}.{b.end_col} {b.num_stmt} {b.count}"
            )
    return "\n".join(lines) + "\n"
