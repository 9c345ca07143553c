"""Tests for gocoveralls merge command."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from gocoveralls.cli.main import cli

runner = CliRunner()


class TestMergeCommand:
    def test_given_two_profiles_when_merged_then_profile_on_stdout(self, module_dir: Path) -> None:
        result = runner.invoke(cli, ["merge", "unit.out,integ.out"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "mode: count\nexample.com/m/pkg/a.go:3.10,5.2 1 5\n"

    def test_given_output_option_when_merged_then_file_written(self, module_dir: Path) -> None:
        result = runner.invoke(cli, ["merge", "unit.out,integ.out", "-o", "merged.out"])

        assert result.exit_code == 0, result.output
        assert (module_dir / "merged.out").read_text().endswith(" 1 5\n")
        assert "Merged 2 profiles" in result.stderr

    def test_given_malformed_profile_when_merged_then_parse_error(self, module_dir: Path) -> None:
        (module_dir / "bad.out").write_text("mode: count\nnot a block line\n")

        result = runner.invoke(cli, ["merge", "bad.out"])

        assert result.exit_code == 1
        assert "Error parsing coverage" in result.stderr

    def test_given_misaligned_profiles_when_merged_then_fatal(self, module_dir: Path) -> None:
        (module_dir / "other.out").write_text("mode: count\nexample.com/m/pkg/a.go:1.1,2.2 1 1\n")

        result = runner.invoke(cli, ["merge", "unit.out,other.out"])

        assert result.exit_code == 1
        assert "Merge failed" in result.stderr

    def test_given_empty_list_when_merged_then_usage_error(self, module_dir: Path) -> None:
        result = runner.invoke(cli, ["merge", ","])

        assert result.exit_code == 2

    def test_given_unwritable_output_when_merged_then_clean_error(self, module_dir: Path) -> None:
        result = runner.invoke(cli, ["merge", "unit.out", "-o", "no-such-dir/merged.out"])

        assert result.exit_code == 1
        assert "Error writing" in result.stderr
        assert not isinstance(result.exception, OSError)
