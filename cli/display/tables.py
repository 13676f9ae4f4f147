"""
Rich table displays for pattern information.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from splice.layout import NOTES_PER_TRACK
from splice.models import Pattern, Track
from cli.display.formatters import density_bar, format_bpm, step_grid_text

console = Console()


def display_pattern_info(pattern: Pattern, file_info: Optional[dict] = None) -> None:
    """Display pattern overview with Rich formatting."""
    lines = [
        f"[bold]HW Version:[/bold] {escape(pattern.hw_version) or '[dim]N/A[/dim]'}",
        f"[bold]Tempo:[/bold] {format_bpm(pattern.tempo)}",
        f"[bold]Tracks:[/bold] {len(pattern.tracks)}",
        f"[bold]Payload Length:[/bold] {pattern.payload_length} bytes",
    ]

    if file_info:
        lines.insert(0, f"[bold]File Size:[/bold] {file_info['size']} bytes")
        trailing = file_info.get("trailing_bytes", 0)
        if trailing:
            lines.append(f"[yellow]Trailing Data:[/yellow] {trailing} bytes after pattern")

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_tracks_table(tracks: Sequence[Track], show_density: bool = True) -> None:
    """Display all tracks with their step grids."""
    if not tracks:
        console.print("[dim]No tracks in pattern[/dim]")
        return

    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan", justify="right", width=4)
    table.add_column("Name", style="bold", width=14)
    table.add_column("Steps", width=23)
    if show_density:
        table.add_column("Active", width=16)

    for i, track in enumerate(tracks):
        row = [str(i + 1), str(track.id), escape(track.name), step_grid_text(track.notes)]
        if show_density:
            row.append(density_bar(len(track.steps), NOTES_PER_TRACK, width=8))
        table.add_row(*row)

    console.print(table)
