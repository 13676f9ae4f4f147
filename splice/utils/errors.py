"""
Error types raised while decoding Splice pattern data.

All decode failures derive from SpliceError so callers can catch the whole
family at once. Every error records the stream offset of the field that
failed.
"""

from typing import Optional


class SpliceError(Exception):
    """Base class for all Splice decode errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(SpliceError):
    """Raised when the input ends before a field could be fully read."""

    def __init__(self, field: str, expected: int, got: int, offset: Optional[int] = None):
        super().__init__(
            f"Truncated input reading {field}: expected {expected} bytes, got {got}",
            offset=offset,
        )
        self.field = field
        self.expected = expected
        self.got = got


class InvalidFormatError(SpliceError):
    """Raised when the data is not a Splice pattern."""

    pass


class InvalidNoteByteError(SpliceError):
    """Raised when a note mask byte is not 0x00 or 0x01."""

    def __init__(self, track_id: int, step: int, value: int, offset: Optional[int] = None):
        super().__init__(
            f"Invalid note byte 0x{value:02X} at step {step + 1} of track {track_id}",
            offset=offset,
        )
        self.track_id = track_id
        self.step = step
        self.value = value


class SourceReadError(SpliceError):
    """Raised when the underlying byte source fails with an I/O error."""

    pass
