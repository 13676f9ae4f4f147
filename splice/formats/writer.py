"""
Splice pattern writer.

Encodes Pattern objects into the binary layout read by splice.formats.reader.
"""

import logging
import struct
from pathlib import Path
from typing import Union

from splice.layout import (
    MAGIC,
    HW_VERSION_SIZE,
    MAX_TRACK_NAME_LENGTH,
    NOTE_OFF,
    NOTE_ON,
    TRACK_PADDING_SIZE,
)
from splice.models.pattern import Pattern
from splice.models.track import Track
from splice.utils.text import encode_text

logger = logging.getLogger(__name__)


class SpliceWriter:
    """
    Writer for Splice pattern files.

    Example:
        pattern = Pattern("0.808-alpha", 120.0, [Track.from_grid(0, "kick", "x---" * 4)])
        SpliceWriter.write(pattern, "kick.splice")
    """

    def __init__(self):
        self._buffer: bytearray = bytearray()

    @classmethod
    def write(cls, pattern: Pattern, filepath: Union[str, Path]) -> None:
        """
        Write a Pattern to a file.

        Args:
            pattern: Pattern to write
            filepath: Output file path
        """
        writer = cls()
        data = writer.to_bytes(pattern)

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

        logger.debug("Wrote %d bytes to %s", len(data), filepath)

    def to_bytes(self, pattern: Pattern) -> bytes:
        """
        Convert a Pattern to its binary form.

        Raises:
            ValueError: If the hardware version or a track name does not fit
        """
        self._buffer = bytearray()

        self._write_header(pattern)
        self._write_metadata(pattern)
        for track in pattern.tracks:
            self._write_track(track)

        return bytes(self._buffer)

    def _write_header(self, pattern: Pattern) -> None:
        self._buffer += MAGIC
        self._buffer += struct.pack(">Q", pattern.payload_length)

    def _write_metadata(self, pattern: Pattern) -> None:
        version = encode_text(pattern.hw_version)
        if len(version) > HW_VERSION_SIZE:
            raise ValueError(
                f"Hardware version too long: {len(version)} bytes (max {HW_VERSION_SIZE})"
            )

        self._buffer += version.ljust(HW_VERSION_SIZE, b"\x00")
        self._buffer += struct.pack("<f", pattern.tempo)

    def _write_track(self, track: Track) -> None:
        name = encode_text(track.name)
        if len(name) > MAX_TRACK_NAME_LENGTH:
            raise ValueError(
                f"Track name too long: {len(name)} bytes (max {MAX_TRACK_NAME_LENGTH})"
            )

        self._buffer.append(track.id)
        self._buffer += bytes(TRACK_PADDING_SIZE)
        self._buffer.append(len(name))
        self._buffer += name
        self._buffer += bytes(NOTE_ON if note else NOTE_OFF for note in track.notes)


def encode(pattern: Pattern) -> bytes:
    """Encode a Pattern to bytes."""
    return SpliceWriter().to_bytes(pattern)
