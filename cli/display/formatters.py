"""
Display formatting utilities for CLI output.

Provides step grids, tempo display and density bars.
"""

from typing import Sequence

from rich.text import Text

from splice.models import format_tempo, step_grid


def step_grid_text(
    notes: Sequence[bool],
    on_char: str = "x",
    off_char: str = "-",
    on_style: str = "bold green",
    off_style: str = "dim",
) -> Text:
    """
    Create a colored step grid.

    Returns:
        Rich Text like "|x---|x---|x---|x---|" with active steps highlighted
    """
    text = Text()
    for char in step_grid(notes, on=on_char, off=off_char):
        if char == on_char:
            text.append(char, style=on_style)
        elif char == off_char:
            text.append(char, style=off_style)
        else:
            text.append(char, style="dim cyan")
    return text


def format_bpm(tempo: float) -> str:
    """
    Format tempo in BPM.

    Returns:
        "120 BPM" or "98.4 BPM"
    """
    return f"{format_tempo(tempo)} BPM"


def density_bar(
    used: int,
    total: int,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a density/usage bar with count.

    Returns:
        Formatted string like "[████░░░░░░░░░░░░]  4/16"
    """
    if total <= 0:
        return f"[{empty_char * width}]  0/0"

    fill_count = int((used / total) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)

    return f"[{bar}] {used:2d}/{total}"

