"""
Tracks command - step grid display per track.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from splice.models import Track
from cli.commands.info import load_pattern
from cli.display.formatters import step_grid_text
from cli.display.tables import display_tracks_table

console = Console()
app = typer.Typer()


def display_track_detail(index: int, track: Track) -> None:
    """Display detailed info for a single track."""
    header = f"[bold]{escape(track.name) or '(unnamed)'}[/bold]  ID {track.id}"
    console.print(Panel(header, title=f"Track {index}", border_style="cyan", expand=False))

    table = Table(box=box.SIMPLE, show_header=True, header_style="dim", padding=(0, 1))
    for step in range(len(track.notes)):
        table.add_column(f"{step + 1}", justify="center", width=2)

    table.add_row(*["[bold green]x[/bold green]" if n else "[dim]-[/dim]" for n in track.notes])
    console.print(table)

    steps = ", ".join(str(s + 1) for s in track.steps) or "none"
    console.print("Grid:   ", step_grid_text(track.notes))
    console.print(f"Active: {steps}")
    console.print()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="Pattern file (.splice)"),
    track_id: Optional[int] = typer.Option(None, "--id", "-i", help="Show only tracks with this ID"),
    detail: bool = typer.Option(False, "--detail", "-d", help="Show per-step detail"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
) -> None:
    """
    Show track step grids.

    Examples:

        splice tracks pattern_1.splice

        splice tracks pattern_1.splice --id 1 --detail
    """
    pattern = load_pattern(file)

    selected = [
        (i + 1, t) for i, t in enumerate(pattern.tracks) if track_id is None or t.id == track_id
    ]
    if track_id is not None and not selected:
        console.print(f"[yellow]No track with ID {track_id}[/yellow]")
        raise typer.Exit(1)

    if plain:
        for _, track in selected:
            typer.echo(str(track))
        return

    if detail:
        for index, track in selected:
            display_track_detail(index, track)
    else:
        display_tracks_table([track for _, track in selected])


if __name__ == "__main__":
    app()
