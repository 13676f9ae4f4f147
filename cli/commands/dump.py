"""
Dump command - annotated hex dump of a pattern file.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from splice.layout import (
    HEADER_SIZE,
    HW_VERSION_SIZE,
    MAGIC_SIZE,
    METADATA_SIZE,
    NOTES_PER_TRACK,
    TRACK_PADDING_SIZE,
)
from cli.display.hex_view import display_hex_dump

console = Console()
app = typer.Typer()

# (start, end, name, color)
Region = Tuple[int, int, str, str]

TRACK_COLORS = ["green", "magenta"]


def find_regions(data: bytes) -> List[Region]:
    """
    Map the file into named regions by walking its layout.

    Walks as far as the data allows; anything left over is tagged TRAILING.
    """
    regions: List[Region] = [
        (0, MAGIC_SIZE, "MAGIC", "bright_blue"),
        (MAGIC_SIZE, HEADER_SIZE, "LENGTH", "cyan"),
        (HEADER_SIZE, HEADER_SIZE + HW_VERSION_SIZE, "HW_VERSION", "yellow"),
        (HEADER_SIZE + HW_VERSION_SIZE, HEADER_SIZE + METADATA_SIZE, "TEMPO", "red"),
    ]

    if len(data) < HEADER_SIZE:
        return [r for r in regions if r[0] < len(data)]

    payload_length = int.from_bytes(data[MAGIC_SIZE:HEADER_SIZE], "big")
    end = min(HEADER_SIZE + payload_length, len(data))

    offset = HEADER_SIZE + METADATA_SIZE
    track_num = 0
    while offset < end:
        name_length_at = offset + 1 + TRACK_PADDING_SIZE
        if name_length_at >= end:
            record_end = end
        else:
            record_end = min(name_length_at + 1 + data[name_length_at] + NOTES_PER_TRACK, end)
        color = TRACK_COLORS[track_num % len(TRACK_COLORS)]
        regions.append((offset, record_end, f"TRACK {track_num + 1}", color))
        offset = record_end
        track_num += 1

    if len(data) > end:
        regions.append((end, len(data), "TRAILING", "dim"))

    return [r for r in regions if r[0] < len(data)]


def region_lookup(regions: List[Region]):
    """Build an offset -> (name, color) lookup over `regions`."""

    def lookup(offset: int) -> Tuple[str, str]:
        for start, end, name, color in regions:
            if start <= offset < end:
                return name, color
        return "UNKNOWN", "white"

    return lookup


def create_legend(regions: List[Region]) -> Table:
    """Create a legend table of the file regions."""
    table = Table(title="Regions", box=box.SIMPLE, show_header=True, header_style="dim")
    table.add_column("Region", width=12)
    table.add_column("Offset", width=12)
    table.add_column("Size", justify="right", width=6)

    for start, end, name, color in regions:
        table.add_row(
            f"[{color}]{name}[/{color}]",
            f"0x{start:03X}-0x{end - 1:03X}",
            str(end - start),
        )

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Pattern file (.splice)"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    max_lines: int = typer.Option(64, "--max-lines", "-n", help="Maximum lines to show"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide region legend"),
) -> None:
    """
    Annotated hex dump of a pattern file.

    Bytes are colored by region: header, hardware version, tempo and each
    track record. Data after the declared payload is shown as TRAILING.

    Examples:

        splice dump pattern_1.splice

        splice dump pattern_1.splice --width 8
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print("[red]Error: --width must be at least 1[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    regions = find_regions(data)

    if not no_legend:
        console.print(create_legend(regions))
        console.print()

    display_hex_dump(
        data,
        title=f"[bold]{escape(file.name)}[/bold] ({len(data)} bytes)",
        bytes_per_line=width,
        max_lines=max_lines,
        region_for=region_lookup(regions),
    )


if __name__ == "__main__":
    app()
