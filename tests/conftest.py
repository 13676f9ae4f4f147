"""Test configuration and fixtures."""

import struct
from typing import Iterable, Optional, Sequence

import pytest

TEMPO_120 = b"\x00\x00\xf0\x42"  # 120.0, little-endian binary32
TEMPO_98_4 = b"\xcd\xcc\xc4\x42"  # 98.4

FOUR_ON_THE_FLOOR = [1, 0, 0, 0] * 4


def build_track(track_id: int, name: bytes, notes: Sequence[int]) -> bytes:
    """Build a raw track record."""
    return bytes([track_id]) + b"\x00\x00\x00" + bytes([len(name)]) + name + bytes(notes)


def build_pattern(
    hw_version: bytes,
    tempo: bytes,
    tracks: Iterable[bytes] = (),
    payload_length: Optional[int] = None,
    trailing: bytes = b"",
) -> bytes:
    """Build a raw pattern file; payload length is computed unless given."""
    body = hw_version.ljust(32, b"\x00") + tempo + b"".join(tracks)
    if payload_length is None:
        payload_length = len(body)
    return b"SPLICE" + struct.pack(">Q", payload_length) + body + trailing


def grid(text: str) -> list:
    """Convert "x---|x---|..." into a list of 0/1."""
    return [1 if c == "x" else 0 for c in text if c in "x-"]


PATTERN_1_TRACKS = [
    (0, b"kick", "x---|x---|x---|x---"),
    (1, b"snare", "----|x---|----|x---"),
    (2, b"clap", "----|x-x-|----|----"),
    (3, b"hh-open", "--x-|--x-|x-x-|--x-"),
    (4, b"hh-close", "x---|x---|----|x--x"),
    (5, b"cowbell", "----|----|--x-|----"),
]

PATTERN_1_OUTPUT = """Saved with HW Version: 0.808-alpha
Tempo: 120
(0) kick\t|x---|x---|x---|x---|
(1) snare\t|----|x---|----|x---|
(2) clap\t|----|x-x-|----|----|
(3) hh-open\t|--x-|--x-|x-x-|--x-|
(4) hh-close\t|x---|x---|----|x--x|
(5) cowbell\t|----|----|--x-|----|
"""


@pytest.fixture
def kick_data():
    """Single kick track at 120 BPM."""
    return build_pattern(b"0.808-alpha", TEMPO_120, [build_track(0, b"kick", FOUR_ON_THE_FLOOR)])


@pytest.fixture
def empty_data():
    """Pattern with no tracks."""
    return build_pattern(b"0.808-alpha", TEMPO_120)


@pytest.fixture
def pattern_1_data():
    """Six-track pattern, payload length 0xC5."""
    tracks = [build_track(i, name, grid(g)) for i, name, g in PATTERN_1_TRACKS]
    return build_pattern(b"0.808-alpha", TEMPO_120, tracks)


@pytest.fixture
def pattern_1_file(tmp_path, pattern_1_data):
    """Six-track pattern written to disk."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(pattern_1_data)
    return path


@pytest.fixture
def trailing_data():
    """Two tracks followed by bytes that do not belong to the pattern."""
    tracks = [
        build_track(40, b"kick", FOUR_ON_THE_FLOOR),
        build_track(1, b"clap", grid("----|x---|----|x---")),
    ]
    return build_pattern(b"0.909", TEMPO_98_4, tracks, trailing=b"\x01SPLICE\xff\xff")
