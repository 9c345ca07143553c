"""Tests for Go coverage profile parsing."""

from pathlib import Path

import pytest

from gocoveralls.coverage import (
    ProfileBlock,
    parse_profiles,
    parse_profiles_text,
    parse_reports,
    split_profile_paths,
)
from gocoveralls.core.errors import ErrorCode, ProfileParseError


class TestParseProfilesText:
    """Parsing of profile text."""

    def test_given_blocks_when_parsed_then_grouped_per_file(self) -> None:
        """Blocks are grouped by file with all fields preserved."""
        content = (
            "mode: count\n"
            "example.com/mod/a.go:3.10,5.2 2 4\n"
            "example.com/mod/a.go:7.2,7.20 1 0\n"
        )

        profiles = parse_profiles_text(content)

        assert len(profiles) == 1
        assert profiles[0].file_name == "example.com/mod/a.go"
        assert profiles[0].mode == "count"
        assert profiles[0].blocks == (
            ProfileBlock(start_line=3, start_col=10, end_line=5, end_col=2, num_stmt=2, count=4),
            ProfileBlock(start_line=7, start_col=2, end_line=7, end_col=20, num_stmt=1, count=0),
        )

    def test_given_unsorted_input_when_parsed_then_files_and_blocks_sorted(self) -> None:
        """Files are sorted by name; blocks by start line and column."""
        content = (
            "mode: set\n"
            "m/z.go:10.1,11.1 1 1\n"
            "m/a.go:9.5,9.9 1 1\n"
            "m/a.go:9.1,9.4 1 0\n"
            "m/a.go:2.1,3.1 1 1\n"
        )

        profiles = parse_profiles_text(content)

        assert [p.file_name for p in profiles] == ["m/a.go", "m/z.go"]
        assert [b.start for b in profiles[0].blocks] == [(2, 1), (9, 1), (9, 5)]

    def test_given_duplicate_blocks_in_count_mode_when_parsed_then_counts_summed(self) -> None:
        """Blocks repeated at the same range are collapsed by summing."""
        content = "mode: count\nm/a.go:1.1,2.1 1 3\nm/a.go:1.1,2.1 1 4\n"

        profiles = parse_profiles_text(content)

        assert len(profiles[0].blocks) == 1
        assert profiles[0].blocks[0].count == 7

    def test_given_duplicate_blocks_in_set_mode_when_parsed_then_counts_ored(self) -> None:
        """Set mode keeps counts at 0/1 when collapsing."""
        content = "mode: set\nm/a.go:1.1,2.1 1 1\nm/a.go:1.1,2.1 1 1\n"

        profiles = parse_profiles_text(content)

        assert profiles[0].blocks[0].count == 1

    def test_given_duplicate_blocks_with_different_num_stmt_when_parsed_then_raises(
        self,
    ) -> None:
        """Inconsistent statement counts for one range are rejected."""
        content = "mode: count\nm/a.go:1.1,2.1 1 3\nm/a.go:1.1,2.1 2 4\n"

        with pytest.raises(ProfileParseError, match="inconsistent NumStmt"):
            parse_profiles_text(content)

    def test_given_repeated_same_mode_when_parsed_then_accepted(self) -> None:
        """Concatenated profiles may repeat the mode line."""
        content = "mode: set\nm/a.go:1.1,2.1 1 1\nmode: set\nm/b.go:1.1,2.1 1 0\n"

        profiles = parse_profiles_text(content)

        assert [p.file_name for p in profiles] == ["m/a.go", "m/b.go"]

    def test_given_changed_mode_when_parsed_then_raises(self) -> None:
        """A second, different mode line is an error."""
        content = "mode: set\nm/a.go:1.1,2.1 1 1\nmode: count\n"

        with pytest.raises(ProfileParseError, match="mode changed"):
            parse_profiles_text(content)

    def test_given_missing_mode_when_parsed_then_raises_with_line(self) -> None:
        """Block lines before any mode line are rejected."""
        with pytest.raises(ProfileParseError) as exc_info:
            parse_profiles_text("m/a.go:1.1,2.1 1 1\n", source="cover.out")

        assert exc_info.value.code == ErrorCode.PROFILE_PARSE_ERROR
        assert exc_info.value.details["line"] == 1
        assert exc_info.value.details["source"] == "cover.out"

    def test_given_unknown_mode_when_parsed_then_raises(self) -> None:
        with pytest.raises(ProfileParseError, match="unknown mode"):
            parse_profiles_text("mode: sometimes\n")

    def test_given_malformed_line_when_parsed_then_raises(self) -> None:
        """A line not matching the block format is an error, not skipped."""
        content = "mode: set\nm/a.go:1.1,2.1 1 1\nnot a block\n"

        with pytest.raises(ProfileParseError) as exc_info:
            parse_profiles_text(content)

        assert exc_info.value.details["line"] == 3

    def test_given_empty_text_when_parsed_then_empty_report(self) -> None:
        """An empty profile ([no test files]) is an empty report."""
        assert parse_profiles_text("") == []
        assert parse_profiles_text("\n\n") == []

    def test_given_mode_only_when_parsed_then_empty_report(self) -> None:
        assert parse_profiles_text("mode: atomic\n") == []

    def test_given_path_with_colons_when_parsed_then_last_colon_splits(self) -> None:
        """File names may contain colons (e.g., Windows drive letters)."""
        content = "mode: set\nC:/src/m/a.go:1.1,2.1 1 1\n"

        profiles = parse_profiles_text(content)

        assert profiles[0].file_name == "C:/src/m/a.go"


class TestParseProfilesFile:
    """Parsing from disk."""

    def test_given_file_when_parsed_then_returns_profiles(self, tmp_path: Path) -> None:
        path = tmp_path / "cover.out"
        path.write_text("mode: set\nm/a.go:1.1,2.1 1 1\n")

        profiles = parse_profiles(path)

        assert profiles[0].file_name == "m/a.go"

    def test_given_missing_file_when_parsed_then_raises_parse_error(self, tmp_path: Path) -> None:
        """Unreadable profiles are reported as recoverable parse errors."""
        with pytest.raises(ProfileParseError, match="Failed to read profile"):
            parse_profiles(tmp_path / "missing.out")

    def test_given_several_paths_when_parse_reports_then_one_report_each_in_order(
        self, tmp_path: Path
    ) -> None:
        first = tmp_path / "a.out"
        first.write_text("mode: set\nm/a.go:1.1,2.1 1 1\n")
        empty = tmp_path / "empty.out"
        empty.write_text("")
        second = tmp_path / "b.out"
        second.write_text("mode: set\nm/b.go:1.1,2.1 1 0\n")

        reports = parse_reports([first, empty, second])

        assert len(reports) == 3
        assert reports[0][0].file_name == "m/a.go"
        assert reports[1] == []
        assert reports[2][0].file_name == "m/b.go"


class TestSplitProfilePaths:
    def test_given_comma_list_when_split_then_paths_in_order(self) -> None:
        assert split_profile_paths("a.out,b/c.out") == [Path("a.out"), Path("b/c.out")]

    def test_given_blank_entries_when_split_then_dropped(self) -> None:
        assert split_profile_paths(" a.out , ,b.out,") == [Path("a.out"), Path("b.out")]
