"""Data models for Splice pattern representation."""

from splice.models.pattern import Pattern, format_tempo
from splice.models.track import Track, step_grid

__all__ = [
    "Pattern",
    "Track",
    "format_tempo",
    "step_grid",
]
