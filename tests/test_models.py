"""Tests for the Pattern and Track models."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from splice.models import Pattern, Track, format_tempo, step_grid


class TestTrack:
    """Test cases for Track."""

    def test_defaults_to_silent_bar(self):
        """Test that a track without notes has 16 silent steps."""
        track = Track(id=1, name="hat")

        assert track.notes == (False,) * 16
        assert track.steps == []

    def test_notes_normalized(self):
        """Test that notes are stored as a tuple of bools."""
        track = Track(id=1, name="hat", notes=[1, 0] * 8)

        assert track.notes[:2] == (True, False)
        assert isinstance(track.notes, tuple)

    def test_wrong_note_count(self):
        """Test that anything but 16 notes is rejected."""
        with pytest.raises(ValueError, match="16 notes"):
            Track(id=1, name="hat", notes=[True] * 15)

    def test_id_range(self):
        """Test that IDs outside 0-255 are rejected."""
        with pytest.raises(ValueError, match="0-255"):
            Track(id=256, name="hat")

    def test_frozen(self):
        """Test that tracks are immutable."""
        track = Track(id=1, name="hat")

        with pytest.raises(dataclasses.FrozenInstanceError):
            track.name = "ride"

    def test_from_grid(self):
        """Test building a track from a grid string."""
        track = Track.from_grid(0, "kick", "x---|x---|x---|x---")

        assert track.steps == [0, 4, 8, 12]

    def test_record_size(self):
        """Test encoded record size."""
        assert Track(id=0, name="kick").record_size == 25

    def test_str(self):
        """Test text rendering."""
        track = Track.from_grid(4, "hh-close", "x---|x---|----|x--x")

        assert str(track) == "(4) hh-close\t|x---|x---|----|x--x|"


class TestPattern:
    """Test cases for Pattern."""

    def test_payload_length(self):
        """Test payload length covers metadata and all tracks."""
        pattern = Pattern("0.808-alpha", 120.0, [Track(0, "kick"), Track(1, "snare")])

        assert pattern.payload_length == 36 + 25 + 26

    def test_tracks_stored_as_tuple(self):
        """Test that the track list cannot be mutated."""
        pattern = Pattern("v", 120.0, [Track(0, "kick")])

        assert isinstance(pattern.tracks, tuple)

    def test_tempo_rounded_to_binary32(self):
        """Test that tempo is stored as its binary32 value."""
        pattern = Pattern("v", 98.4)

        assert pattern.tempo != 98.4
        assert format_tempo(pattern.tempo) == "98.4"

    def test_tempo_out_of_binary32_range(self):
        """Test that a tempo too large for binary32 is a ValueError."""
        with pytest.raises(ValueError, match="does not fit a binary32 float"):
            Pattern("v", 1e39)

    def test_get_track(self):
        """Test looking up the first track with an ID."""
        first = Track(3, "a")
        pattern = Pattern("v", 120.0, [first, Track(3, "b")])

        assert pattern.get_track(3) is first
        assert pattern.get_track(9) is None

    def test_str_without_tracks(self):
        """Test rendering an empty pattern."""
        pattern = Pattern("0.808-alpha", 120.0)

        assert str(pattern) == "Saved with HW Version: 0.808-alpha\nTempo: 120\n"


class TestFormatting:
    """Test cases for text helpers."""

    @pytest.mark.parametrize(
        "tempo,expected",
        [
            (120.0, "120"),
            (98.4, "98.4"),
            (136.5, "136.5"),
            (240.0, "240"),
            (3.0, "3"),
            (123456.0, "123456"),
            (1e6, "1e+06"),
            (1234567.0, "1.234567e+06"),
            (0.0001, "0.0001"),
            (0.00001, "1e-05"),
            (float("nan"), "NaN"),
            (float("inf"), "+Inf"),
        ],
    )
    def test_format_tempo(self, tempo, expected):
        """Test shortest binary32 tempo formatting."""
        assert format_tempo(tempo) == expected

    def test_step_grid(self):
        """Test grid rendering in beats of four."""
        notes = [True] + [False] * 15

        assert step_grid(notes) == "|x---|----|----|----|"
        assert step_grid([]) == ""
