"""
Hex dump display utilities.
"""

from typing import Callable, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()

# Maps an offset to (region name, color)
RegionLookup = Callable[[int], Tuple[str, str]]


def format_hex_line(
    chunk: bytes,
    offset: int,
    bytes_per_line: int = 16,
    region_for: Optional[RegionLookup] = None,
) -> Text:
    """
    Format a single line of hex dump.

    Bytes are colored by the region they belong to when `region_for` is given.
    """
    text = Text()
    text.append(f"{offset:08X}  ", style="dim")

    for i, byte in enumerate(chunk):
        if i == 8:
            text.append(" ")  # Extra space at midpoint
        style = region_for(offset + i)[1] if region_for else ""
        if byte == 0x00 and not style:
            style = "dim"
        text.append(f"{byte:02X} ", style=style)

    # Pad short final lines
    missing = bytes_per_line - len(chunk)
    if missing > 0:
        text.append("   " * missing + (" " if len(chunk) <= 8 else ""))

    ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
    text.append(f" {ascii_str}", style="cyan")
    return text


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
    region_for: Optional[RegionLookup] = None,
) -> None:
    """Display formatted hex dump with Rich."""
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]
        lines.append(format_hex_line(chunk, start_offset + offset, bytes_per_line, region_for))

    if len(data) > end:
        remaining = len(data) - end
        lines.append(Text(f"... {remaining} more bytes ...", style="dim"))

    content = Text("\n").join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
