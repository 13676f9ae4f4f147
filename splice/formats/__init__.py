"""Splice pattern format handlers."""

from splice.formats.reader import (
    Decoder,
    SpliceReader,
    decode,
    decode_file,
    read_header,
    read_metadata,
    read_track,
    read_tracks,
)
from splice.formats.writer import SpliceWriter, encode
from splice.formats.json_spec import load_pattern_json, pattern_from_dict, pattern_to_dict

__all__ = [
    "Decoder",
    "SpliceReader",
    "SpliceWriter",
    "decode",
    "decode_file",
    "encode",
    "read_header",
    "read_metadata",
    "read_track",
    "read_tracks",
    "load_pattern_json",
    "pattern_from_dict",
    "pattern_to_dict",
]
