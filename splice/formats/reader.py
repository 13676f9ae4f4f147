"""
Splice pattern reader.

Decodes the binary pattern format into the Pattern model in three stages
over a single byte stream:

    read_header    magic marker and payload length
    read_metadata  hardware version and tempo
    read_tracks    track records until the payload length is used up

Track parsing stops on the byte budget from the payload length, not on the
end of the source, so data following the pattern is never consumed.

Example:
    pattern = decode_file("pattern_1.splice")
    print(pattern)
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from splice.layout import (
    MAGIC,
    MAGIC_SIZE,
    HEADER_SIZE,
    HW_VERSION_SIZE,
    METADATA_SIZE,
    NOTES_PER_TRACK,
    NOTE_OFF,
    NOTE_ON,
    TRACK_PADDING_SIZE,
    track_data_size,
)
from splice.models.pattern import Pattern
from splice.models.track import Track
from splice.utils.byte_stream import ByteStream
from splice.utils.errors import InvalidFormatError, InvalidNoteByteError, SpliceError
from splice.utils.text import decode_text, remove_null_bytes

logger = logging.getLogger(__name__)

Source = Union[BinaryIO, bytes, bytearray, memoryview]


def read_header(stream: ByteStream) -> int:
    """
    Read the file header.

    Args:
        stream: Stream positioned at the start of a pattern

    Returns:
        Payload length in bytes

    Raises:
        InvalidFormatError: If the magic marker is not "SPLICE"
        TruncatedInputError: If the header is incomplete
    """
    start = stream.offset
    magic = stream.read_exact(MAGIC_SIZE, "magic")
    if magic != MAGIC:
        raise InvalidFormatError(f"Invalid Splice header: {magic!r}", offset=start)

    payload_length = stream.read_u64_be("payload length")
    logger.debug("Header ok, payload length %d", payload_length)
    return payload_length


def read_metadata(stream: ByteStream) -> Tuple[str, float]:
    """
    Read the hardware version and tempo.

    Null bytes are removed from anywhere in the version field.

    Returns:
        Tuple of (hardware version, tempo)
    """
    raw_version = stream.read_exact(HW_VERSION_SIZE, "hardware version")
    hw_version = decode_text(remove_null_bytes(raw_version))

    # Tempo is the only little-endian field in the format
    tempo = stream.read_f32_le("tempo")

    logger.debug("Hardware version %r, tempo %r", hw_version, tempo)
    return hw_version, tempo


def read_track(stream: ByteStream) -> Track:
    """
    Read a single track record.

    Raises:
        InvalidNoteByteError: If a note byte is not 0x00 or 0x01
        TruncatedInputError: If the record is incomplete
    """
    track_id = stream.read_u8("track ID")
    stream.skip(TRACK_PADDING_SIZE, "track padding")

    name_length = stream.read_u8("track name length")
    name = decode_text(stream.read_exact(name_length, "track name"))

    notes_offset = stream.offset
    note_bytes = stream.read_exact(NOTES_PER_TRACK, "note mask")
    notes = []
    for step, value in enumerate(note_bytes):
        if value not in (NOTE_OFF, NOTE_ON):
            raise InvalidNoteByteError(track_id, step, value, offset=notes_offset + step)
        notes.append(value == NOTE_ON)

    track = Track(id=track_id, name=name, notes=tuple(notes))
    logger.debug("Track %s", track)
    return track


def read_tracks(stream: ByteStream, remaining_bytes: int) -> List[Track]:
    """
    Read track records until `remaining_bytes` have been consumed.

    Args:
        stream: Stream positioned at the first track record
        remaining_bytes: Size of the track region

    Returns:
        Tracks in file order

    Raises:
        TruncatedInputError: If a record crosses the end of the region
    """
    region = stream.bounded(remaining_bytes)
    tracks = []
    while region.remaining > 0:
        tracks.append(read_track(region))
    return tracks


def read_pattern(stream: ByteStream) -> Pattern:
    """Read a complete pattern from a stream."""
    payload_length = read_header(stream)
    remaining = track_data_size(payload_length)
    if remaining < 0:
        raise InvalidFormatError(
            f"Payload length {payload_length} is smaller than the "
            f"{METADATA_SIZE}-byte metadata block",
            offset=MAGIC_SIZE,
        )

    hw_version, tempo = read_metadata(stream)
    tracks = read_tracks(stream, remaining)

    return Pattern(hw_version=hw_version, tempo=tempo, tracks=tuple(tracks))


def _as_stream(source: Source) -> ByteStream:
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    return ByteStream(source)


def decode(source: Source) -> Pattern:
    """
    Decode a pattern from a binary file object or a bytes buffer.

    Raises:
        SpliceError: On any decode failure; no partial pattern is returned
    """
    return read_pattern(_as_stream(source))


def decode_file(filepath: Union[str, Path]) -> Pattern:
    """
    Decode the pattern file at `filepath`.

    Raises:
        FileNotFoundError: If the file does not exist
        SpliceError: On any decode failure
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "rb") as f:
        return decode(f)


class Decoder:
    """
    Decodes a pattern from a binary source.

    The last decode error is kept in `err`.

    Example:
        decoder = Decoder(f)
        pattern = decoder.decode()
    """

    def __init__(self, source: Source):
        self.stream = _as_stream(source)
        self.err: Optional[SpliceError] = None

    def decode(self) -> Pattern:
        """Decode the pattern, recording any failure in `err`."""
        try:
            pattern = read_pattern(self.stream)
        except SpliceError as e:
            self.err = e
            raise
        self.err = None
        return pattern


class SpliceReader:
    """
    Reader for Splice pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.hw_version}, Tempo: {pattern.tempo}")
    """

    def __init__(self):
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a pattern file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Parsed Pattern object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """Parse a pattern file, keeping its raw bytes."""
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            self._raw_data = f.read()

        return self.parse_bytes(self._raw_data)

    def parse_bytes(self, data: bytes) -> Pattern:
        """Parse a pattern from bytes."""
        self._raw_data = bytes(data)
        return decode(self._raw_data)

    def parse_stream(self, stream: BinaryIO) -> Pattern:
        """Parse a pattern from an open binary stream."""
        return decode(stream)

    @property
    def raw_data(self) -> bytes:
        """Raw bytes of the last parsed file or buffer."""
        return self._raw_data

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the Splice magic marker.

        Args:
            filepath: Path to check

        Returns:
            True if the file appears to be a Splice pattern
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                return f.read(MAGIC_SIZE) == MAGIC
        except OSError:
            return False

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a pattern file without decoding tracks.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": False,
            "size": len(data),
            "magic": data[:MAGIC_SIZE].decode("ascii", errors="replace"),
        }

        if len(data) >= HEADER_SIZE:
            payload_length = int.from_bytes(data[MAGIC_SIZE:HEADER_SIZE], "big")
            info["payload_length"] = payload_length
            info["expected_size"] = HEADER_SIZE + payload_length
            info["trailing_bytes"] = max(0, len(data) - info["expected_size"])
            info["valid"] = data[:MAGIC_SIZE] == MAGIC and len(data) >= info["expected_size"]

        return info
