"""
Track data model for Splice patterns.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from splice.layout import NOTES_PER_TRACK, track_record_size
from splice.utils.text import encode_text

STEPS_PER_BEAT = 4


def step_grid(notes: Sequence[bool], on: str = "x", off: str = "-", sep: str = "|") -> str:
    """
    Render a step sequence as a beat grid.

    Returns:
        Formatted string like "|x---|x---|x---|x---|"
    """
    if not notes:
        return ""

    parts = []
    for i, note in enumerate(notes):
        if i % STEPS_PER_BEAT == 0:
            parts.append(sep)
        parts.append(on if note else off)
    parts.append(sep)
    return "".join(parts)


@dataclass(frozen=True)
class Track:
    """
    A single instrument track within a pattern.

    Each track holds one bar of sixteenth-note steps.

    Attributes:
        id: Instrument identifier (0-255)
        name: Display name
        notes: 16 step flags, index 0 = first step of the bar
    """

    id: int
    name: str
    notes: Tuple[bool, ...] = field(default=(False,) * NOTES_PER_TRACK)

    def __post_init__(self):
        if not 0 <= self.id <= 255:
            raise ValueError(f"Track ID must be 0-255, got {self.id}")

        notes = tuple(bool(n) for n in self.notes)
        if len(notes) != NOTES_PER_TRACK:
            raise ValueError(f"Track must have {NOTES_PER_TRACK} notes, got {len(notes)}")
        object.__setattr__(self, "notes", notes)

    @property
    def steps(self) -> List[int]:
        """Indices of active steps."""
        return [i for i, note in enumerate(self.notes) if note]

    @property
    def record_size(self) -> int:
        """Encoded size of this track in bytes."""
        return track_record_size(len(encode_text(self.name)))

    @classmethod
    def from_grid(cls, track_id: int, name: str, grid: str) -> "Track":
        """
        Create a track from a grid string.

        Bar separators are ignored, "x" marks an active step.

        Example:
            Track.from_grid(0, "kick", "x---|x---|x---|x---")
        """
        cells = [c for c in grid if c not in "| "]
        return cls(id=track_id, name=name, notes=tuple(c.lower() == "x" for c in cells))

    def __str__(self) -> str:
        return f"({self.id}) {self.name}\t{step_grid(self.notes)}"
