"""CLI tests for the dailybread command.

Drives each command through click's CliRunner with a fixture file of
range texts in place of a live content source.
"""

from __future__ import annotations

import pytest
import yaml
from click.testing import CliRunner

from dailybread import __version__
from dailybread.__main__ import cli
from dailybread.reader import DailyBread

FIXTURES = {
    "ranges": {
        "John 3:16-16": "For God so loved the world",
        "Obadiah 1:1-4": "The vision of Obadiah",
        "Isaiah 52:13-200": "See, my servant will act wisely",
        "Isaiah 53:1-12": "Who has believed our message?",
        "Tobit 1:1-1": "This book tells the story of Tobit",
    },
    "featured": {"reference": "John 3:16", "text": "For God so loved the world"},
}


@pytest.fixture
def fixtures_file(tmp_path):
    path = tmp_path / "fixtures.yaml"
    path.write_text(yaml.safe_dump(FIXTURES))
    return str(path)


@pytest.fixture
def runner():
    return CliRunner()


class TestRead:
    """Tests for the read command."""

    def test_reads_passages(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "John 3:16; Obadiah 1-4"]
        )
        assert result.exit_code == 0, result.output
        assert "John 3:16" in result.output
        assert "For God so loved the world" in result.output
        assert "Obadiah 1-4" in result.output
        assert result.output.index("John 3:16") < result.output.index("Obadiah 1-4")

    def test_arguments_joined(self, runner, fixtures_file):
        result = runner.invoke(cli, ["read", "-f", fixtures_file, "John", "3:16"])
        assert result.exit_code == 0, result.output
        assert "For God so loved the world" in result.output

    def test_lenient_skips_missing(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "Hezekiah 1; John 3:16"]
        )
        assert result.exit_code == 0, result.output
        assert "For God so loved the world" in result.output

    def test_nothing_found(self, runner, fixtures_file):
        result = runner.invoke(cli, ["read", "-f", fixtures_file, "Hezekiah 1"])
        assert result.exit_code == 1
        assert "No passages found" in result.output

    def test_strict_fails(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "--strict", "John 3:16; Hezekiah 1"]
        )
        assert result.exit_code == 1
        assert "Invalid book: Hezekiah" in result.output

    def test_unsupported_version(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "-v", "XYZ", "John 3:16"]
        )
        assert result.exit_code == 1
        assert "XYZ is not a supported version" in result.output

    def test_deuterocanon_version(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "-v", "CEB", "Tobit 1:1"]
        )
        assert result.exit_code == 0, result.output
        assert "story of Tobit" in result.output

    def test_zero_spacing(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "--spacing", "0", "Isaiah 52:13-53:12"]
        )
        assert result.exit_code == 0, result.output
        assert "wisely Who has believed" in result.output

    def test_negative_spacing(self, runner, fixtures_file):
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "--spacing=-1", "John 3:16"]
        )
        assert result.exit_code == 1
        assert "paragraph_spacing" in result.output

    def test_malformed_fixture_file(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("ranges: [unclosed\n")
        result = runner.invoke(cli, ["read", "-f", str(path), "John 3:16"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, yaml.YAMLError)

    @pytest.mark.parametrize(
        "content",
        [
            "ranges: [a, b]\n",
            "featured: {reference: John 3:16}\n",
            "- not a mapping\n",
        ],
    )
    def test_fixture_file_wrong_shape(self, runner, tmp_path, content):
        path = tmp_path / "bad.yaml"
        path.write_text(content)
        result = runner.invoke(cli, ["read", "-f", str(path), "John 3:16"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_verse_numbers_flag(self, runner, fixtures_file, monkeypatch):
        seen = []

        class RecordingReader(DailyBread):
            def set_formatting(self, **options):
                seen.append(options)
                super().set_formatting(**options)

        monkeypatch.setattr("dailybread.__main__.DailyBread", RecordingReader)
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "--no-verse-numbers", "John 3:16"]
        )
        assert result.exit_code == 0, result.output
        assert seen == [{"show_verse_numbers": False}]

    def test_verse_numbers_default(self, runner, fixtures_file, monkeypatch):
        seen = []

        class RecordingReader(DailyBread):
            def set_formatting(self, **options):
                seen.append(options)
                super().set_formatting(**options)

        monkeypatch.setattr("dailybread.__main__.DailyBread", RecordingReader)
        result = runner.invoke(
            cli, ["read", "-f", fixtures_file, "--spacing", "1", "John 3:16"]
        )
        assert result.exit_code == 0, result.output
        assert seen == [{"show_verse_numbers": True, "paragraph_spacing": 1}]

    def test_fixture_file_required(self, runner):
        result = runner.invoke(cli, ["read", "John 3:16"])
        assert result.exit_code != 0


class TestBook:
    """Tests for the book command."""

    def test_book_table(self, runner):
        result = runner.invoke(cli, ["book", "1", "sam"])
        assert result.exit_code == 0, result.output
        assert "1 Samuel" in result.output
        assert "1SAM" in result.output
        assert "31" in result.output

    def test_unknown_book(self, runner):
        result = runner.invoke(cli, ["book", "Hezekiah"])
        assert result.exit_code == 1
        assert "Book not found: Hezekiah" in result.output

    def test_deuterocanon_needs_version(self, runner):
        assert runner.invoke(cli, ["book", "Tobit"]).exit_code == 1
        result = runner.invoke(cli, ["book", "Tobit", "-v", "CEB"])
        assert result.exit_code == 0, result.output
        assert "Deuterocanon" in result.output


class TestVersions:
    """Tests for the versions command."""

    def test_lists_versions(self, runner):
        result = runner.invoke(cli, ["versions"])
        assert result.exit_code == 0, result.output
        assert "NIV" in result.output
        assert "RVR1960" in result.output

    def test_filter_by_language(self, runner):
        result = runner.invoke(cli, ["versions", "--language", "korean"])
        assert result.exit_code == 0, result.output
        assert "KLB" in result.output
        assert "NIV" not in result.output

    def test_unknown_language(self, runner):
        result = runner.invoke(cli, ["versions", "--language", "klingon"])
        assert result.exit_code != 0


class TestPlan:
    """Tests for the plan command."""

    def test_plans_queries(self, runner):
        result = runner.invoke(cli, ["plan", "Isaiah 52:13-53:12"])
        assert result.exit_code == 0, result.output
        assert "Isaiah 52:13-200" in result.output
        assert "Isaiah 53:1-12" in result.output

    def test_chapters_per_query(self, runner):
        result = runner.invoke(
            cli, ["plan", "--chapters-per-query", "2", "Genesis 1-4"]
        )
        assert result.exit_code == 0, result.output
        assert "Genesis 1-2" in result.output
        assert "Genesis 3-4" in result.output

    def test_max_verse(self, runner):
        result = runner.invoke(cli, ["plan", "--max-verse", "180", "Genesis 1"])
        assert result.exit_code == 0, result.output
        assert "Genesis 1:1-180" in result.output

    def test_invalid_reference(self, runner):
        result = runner.invoke(cli, ["plan", "John 3:16; Genesis 51"])
        assert result.exit_code == 1
        assert "John 3:16-16" in result.output
        assert "Chapter not found" in result.output

    def test_no_references(self, runner):
        result = runner.invoke(cli, ["plan", "9001"])
        assert result.exit_code == 1
        assert "No passages found" in result.output


class TestGroupOptions:
    """Tests for options on the command group."""

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "versions"])
        assert result.exit_code == 0, result.output
