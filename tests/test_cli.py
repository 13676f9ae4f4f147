"""Tests for the command line interface."""

import json
import logging
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.app import app
from cli.commands.dump import find_regions
from cli.log import setup_logging
from splice import decode_file

from conftest import PATTERN_1_OUTPUT, TEMPO_120, build_pattern, build_track

runner = CliRunner()


@pytest.fixture
def bad_note_file(tmp_path):
    notes = [0] * 16
    notes[3] = 0x7F
    path = tmp_path / "bad.splice"
    path.write_bytes(build_pattern(b"0.808-alpha", TEMPO_120, [build_track(0, b"kick", notes)]))
    return path


class TestInfoCommand:
    """Test cases for the info command."""

    def test_plain(self, pattern_1_file):
        """Test plain output matches the text rendering."""
        result = runner.invoke(app, ["info", str(pattern_1_file), "--plain"])

        assert result.exit_code == 0
        assert result.stdout == PATTERN_1_OUTPUT

    def test_rich(self, pattern_1_file):
        """Test the default table output."""
        result = runner.invoke(app, ["info", str(pattern_1_file)])

        assert result.exit_code == 0
        assert "0.808-alpha" in result.stdout
        assert "120 BPM" in result.stdout
        assert "kick" in result.stdout

    def test_json(self, pattern_1_file):
        """Test JSON output."""
        result = runner.invoke(app, ["info", str(pattern_1_file), "--json"])

        assert result.exit_code == 0
        described = json.loads(result.stdout)
        assert described["hw_version"] == "0.808-alpha"
        assert len(described["tracks"]) == 6

    def test_missing_file(self, tmp_path):
        """Test a missing file exits with an error."""
        result = runner.invoke(app, ["info", str(tmp_path / "missing.splice")])

        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_decode_error(self, bad_note_file):
        """Test decode errors are reported with exit code 1."""
        result = runner.invoke(app, ["info", str(bad_note_file)])

        assert result.exit_code == 1
        assert "Invalid note byte" in result.stdout


class TestTracksCommand:
    """Test cases for the tracks command."""

    def test_plain_filtered(self, pattern_1_file):
        """Test selecting a track by ID."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--id", "4", "--plain"])

        assert result.exit_code == 0
        assert result.stdout == "(4) hh-close\t|x---|x---|----|x--x|\n"

    def test_unknown_id(self, pattern_1_file):
        """Test an unknown ID exits with an error."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--id", "99"])

        assert result.exit_code == 1

    def test_detail(self, pattern_1_file):
        """Test per-step detail output."""
        result = runner.invoke(app, ["tracks", str(pattern_1_file), "--id", "0", "--detail"])

        assert result.exit_code == 0
        assert "Active: 1, 5, 9, 13" in result.stdout


class TestValidateCommand:
    """Test cases for the validate command."""

    def test_valid(self, pattern_1_file):
        """Test a valid file passes."""
        result = runner.invoke(app, ["validate", str(pattern_1_file)])

        assert result.exit_code == 0
        assert "VALID" in result.stdout

    def test_invalid(self, bad_note_file):
        """Test a bad note byte fails validation."""
        result = runner.invoke(app, ["validate", str(bad_note_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.stdout

    def test_strict_trailing(self, tmp_path, trailing_data):
        """Test trailing data is a warning, and an error with --strict."""
        path = tmp_path / "trailing.splice"
        path.write_bytes(trailing_data)

        assert runner.invoke(app, ["validate", str(path)]).exit_code == 0
        assert runner.invoke(app, ["validate", str(path), "--strict"]).exit_code == 1


class TestDumpCommand:
    """Test cases for the dump command."""

    def test_regions(self, trailing_data):
        """Test region mapping follows the layout."""
        names = [r[2] for r in find_regions(trailing_data)]

        assert names == ["MAGIC", "LENGTH", "HW_VERSION", "TEMPO", "TRACK 1", "TRACK 2", "TRAILING"]

    def test_dump(self, pattern_1_file):
        """Test dump output includes regions."""
        result = runner.invoke(app, ["dump", str(pattern_1_file)])

        assert result.exit_code == 0
        assert "HW_VERSION" in result.stdout
        assert "TRACK 6" in result.stdout


class TestEncodeCommand:
    """Test cases for the encode command."""

    def test_encode(self, tmp_path):
        """Test building a file from JSON."""
        source = tmp_path / "kick.json"
        source.write_text(
            json.dumps(
                {
                    "hw_version": "0.808-alpha",
                    "tempo": 120,
                    "tracks": [{"id": 0, "name": "kick", "notes": "x---|x---|x---|x---"}],
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["encode", str(source)])

        assert result.exit_code == 0
        pattern = decode_file(tmp_path / "kick.splice")
        assert pattern.tracks[0].steps == [0, 4, 8, 12]

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON exits with an error."""
        source = tmp_path / "broken.json"
        source.write_text("{not json", encoding="utf-8")

        result = runner.invoke(app, ["encode", str(source)])

        assert result.exit_code == 1

    def test_tempo_too_large(self, tmp_path):
        """Test a tempo outside binary32 range is reported, not raised."""
        source = tmp_path / "fast.json"
        source.write_text('{"hw_version": "x", "tempo": 1e39, "tracks": []}', encoding="utf-8")

        result = runner.invoke(app, ["encode", str(source)])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "does not fit a binary32 float" in result.stdout
        assert not (tmp_path / "fast.splice").exists()


class TestVersion:
    """Test cases for version output."""

    def test_version_flag(self):
        """Test the --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "splice" in result.stdout


class TestLogging:
    """Test cases for CLI logging setup."""

    def test_verbose_sets_debug(self):
        """Test --verbose level selection."""
        setup_logging(verbose=True)

        assert logging.getLogger("splice").level == logging.DEBUG

    def test_unknown_level_falls_back(self):
        """Test an unknown level name falls back to WARNING."""
        setup_logging(level="chatty")

        assert logging.getLogger("splice").level == logging.WARNING

    def test_decode_logs_at_debug(self, caplog, kick_data):
        """Test the reader logs decoded fields at DEBUG."""
        from splice import decode

        with caplog.at_level(logging.DEBUG, logger="splice"):
            decode(kick_data)

        assert "payload length 61" in caplog.text
        assert "kick" in caplog.text
