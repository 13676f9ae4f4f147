"""
Splice - decoder for drum machine pattern files (.splice).

This library provides tools to:
- Decode .splice pattern files into Pattern and Track objects
- Encode Pattern objects back to the binary format
- Render patterns as step grids

Example usage:
    from splice import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern)

    # Saved with HW Version: 0.808-alpha
    # Tempo: 120
    # (0) kick	|x---|x---|x---|x---|
"""

__version__ = "0.1.0"
__author__ = "Splice Contributors"

from splice.models.pattern import Pattern
from splice.models.track import Track
from splice.formats.reader import Decoder, SpliceReader, decode, decode_file
from splice.formats.writer import SpliceWriter, encode
from splice.utils.errors import (
    SpliceError,
    TruncatedInputError,
    InvalidFormatError,
    InvalidNoteByteError,
    SourceReadError,
)

__all__ = [
    "Pattern",
    "Track",
    "Decoder",
    "SpliceReader",
    "SpliceWriter",
    "decode",
    "decode_file",
    "encode",
    "SpliceError",
    "TruncatedInputError",
    "InvalidFormatError",
    "InvalidNoteByteError",
    "SourceReadError",
]
