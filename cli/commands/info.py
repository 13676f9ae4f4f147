"""
Info command - display pattern overview.
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splice import SpliceError, SpliceReader
from splice.formats.json_spec import pattern_to_dict
from splice.models import Pattern
from cli.display.tables import display_pattern_info, display_tracks_table

console = Console()
app = typer.Typer()


def load_pattern(file: Path) -> Pattern:
    """Decode a pattern file, exiting with a message on failure."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        return SpliceReader.read(file)
    except SpliceError as e:
        where = f" at offset {e.offset} (0x{e.offset:X})" if e.offset is not None else ""
        console.print(f"[red]Error: {escape(str(e))}{where}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    file: Path = typer.Argument(..., help="Pattern file (.splice)"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Plain text output"),
    as_json: bool = typer.Option(False, "--json", "-j", help="JSON output"),
) -> None:
    """
    Show pattern information.

    Displays hardware version, tempo, payload size and track grids.

    Examples:

        splice info pattern_1.splice

        splice info pattern_1.splice --plain

        splice info pattern_1.splice --json > pattern_1.json
    """
    pattern = load_pattern(file)

    if as_json:
        typer.echo(json.dumps(pattern_to_dict(pattern), indent=2))
        return

    if plain:
        typer.echo(str(pattern), nl=False)
        return

    display_pattern_info(pattern, SpliceReader.get_file_info(file))
    display_tracks_table(pattern.tracks)


if __name__ == "__main__":
    app()
