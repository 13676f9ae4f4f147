"""
Pattern data model - the top-level result of decoding a Splice file.
"""

import math
import struct
from dataclasses import dataclass, field
from typing import Optional, Tuple

from splice.layout import METADATA_SIZE
from splice.models.track import Track


def format_tempo(tempo: float) -> str:
    """
    Format a tempo with the shortest text that maps back to the same binary32 value.

    Exponent form is used below 1e-4 and from 1e6 upward.

    Example:
        >>> format_tempo(120.0)
        '120'
        >>> format_tempo(98.4000015258789)
        '98.4'
        >>> format_tempo(1e6)
        '1e+06'
    """
    if math.isnan(tempo):
        return "NaN"
    if math.isinf(tempo):
        return "+Inf" if tempo > 0 else "-Inf"

    packed = struct.pack("<f", tempo)
    shortest = tempo
    digits = 17
    for precision in range(1, 10):
        candidate = float(f"{tempo:.{precision}g}")
        if struct.pack("<f", candidate) == packed:
            shortest = candidate
            digits = precision
            break

    mantissa, exponent = f"{shortest:.{digits - 1}e}".split("e")
    exponent = int(exponent)
    if exponent < -4 or exponent >= 6:
        if "." in mantissa:
            mantissa = mantissa.rstrip("0").rstrip(".")
        return f"{mantissa}e{exponent:+03d}"

    text = repr(shortest)
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class Pattern:
    """
    A decoded drum machine pattern.

    Attributes:
        hw_version: Hardware version the pattern was saved with
        tempo: Tempo in BPM (a binary32 value)
        tracks: Tracks in file order, duplicate IDs allowed
    """

    hw_version: str
    tempo: float
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))
        # Normalize to the nearest binary32 so encode/decode is lossless
        try:
            packed = struct.pack("<f", self.tempo)
        except OverflowError as e:
            raise ValueError(f"Tempo {self.tempo} does not fit a binary32 float") from e
        object.__setattr__(self, "tempo", struct.unpack("<f", packed)[0])

    @property
    def payload_length(self) -> int:
        """Bytes following the header when this pattern is encoded."""
        return METADATA_SIZE + sum(track.record_size for track in self.tracks)

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given ID."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def __str__(self) -> str:
        lines = [
            f"Saved with HW Version: {self.hw_version}\n",
            f"Tempo: {format_tempo(self.tempo)}\n",
        ]
        lines.extend(f"{track}\n" for track in self.tracks)
        return "".join(lines)
