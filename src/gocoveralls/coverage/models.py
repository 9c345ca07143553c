"""Coverage data model.

Block-centric model mirroring the Go cover profile: a report is an ordered
list of per-file profiles, each an ordered tuple of blocks. The projected
output is file-centric: one SourceFile per profiled file with a dense
per-line hit array.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ProfileMode = Literal["set", "count", "atomic"]

# None: no block covers the line (not executable).
# 0: covered by a block that never ran. n > 0: accumulated hits.
LineHits = int | None


@dataclass(frozen=True, slots=True)
class ProfileBlock:
    """A contiguous source range with one execution count."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_stmt: int
    count: int

    @property
    def start(self) -> tuple[int, int]:
        return (self.start_line, self.start_col)


@dataclass(frozen=True, slots=True)
class Profile:
    """Blocks for one source file within a report.

    Blocks are sorted by (start_line, start_col).
    """

    file_name: str  # logical path, e.g. example.com/mod/pkg/file.go
    mode: ProfileMode
    blocks: tuple[ProfileBlock, ...] = ()


CoverageReport = list[Profile]


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Per-file line coverage ready for upload."""

    name: str
    source: str
    coverage: tuple[LineHits, ...]

    @property
    def lines_found(self) -> int:
        """Number of executable lines."""
        return sum(1 for hits in self.coverage if hits is not None)

    @property
    def lines_hit(self) -> int:
        """Number of executable lines with at least one hit."""
        return sum(1 for hits in self.coverage if hits)

    @property
    def line_rate(self) -> float:
        """Fraction of executable lines covered (0.0 to 1.0)."""
        found = self.lines_found
        if not found:
            return 0.0
        return self.lines_hit / found

    def to_dict(self) -> dict[str, Any]:
        """Coveralls ``source_files[]`` entry."""
        return {
            "name": self.name,
            "source": self.source,
            "coverage": list(self.coverage),
        }
