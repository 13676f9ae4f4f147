"""Utility functions for Splice decoding."""

from splice.utils.byte_stream import ByteStream
from splice.utils.errors import (
    SpliceError,
    TruncatedInputError,
    InvalidFormatError,
    InvalidNoteByteError,
    SourceReadError,
)
from splice.utils.text import remove_null_bytes, decode_text, encode_text, is_printable_ascii

__all__ = [
    "ByteStream",
    "SpliceError",
    "TruncatedInputError",
    "InvalidFormatError",
    "InvalidNoteByteError",
    "SourceReadError",
    "remove_null_bytes",
    "decode_text",
    "encode_text",
    "is_printable_ascii",
]
