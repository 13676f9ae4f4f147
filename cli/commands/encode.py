"""
Encode command - build a pattern file from a JSON description.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from splice import SpliceWriter
from splice.formats.json_spec import load_pattern_json
from splice.layout import HEADER_SIZE
from splice.models import format_tempo

console = Console()
app = typer.Typer()


@app.command()
def encode(
    source: Path = typer.Argument(..., help="JSON pattern description"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """
    Build a .splice file from a JSON description.

    The JSON holds "hw_version", "tempo" and a "tracks" list of
    {"id", "name", "notes"} where notes is a grid like "x---|x---|x---|x---".

    Examples:

        splice encode kick.json

        splice encode kick.json -o patterns/kick.splice
    """
    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    output_path = output or source.with_suffix(".splice")

    try:
        pattern = load_pattern_json(source)
        SpliceWriter.write(pattern, output_path)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {source}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]Wrote {output_path}[/green] "
        f"({len(pattern.tracks)} tracks, {format_tempo(pattern.tempo)} BPM, "
        f"{HEADER_SIZE + pattern.payload_length} bytes)"
    )


if __name__ == "__main__":
    app()
