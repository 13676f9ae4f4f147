"""
Splice - decoder for drum machine pattern files.

A CLI tool for inspecting, validating and building .splice patterns.
"""

import typer
from rich.console import Console

from splice import __version__
from cli.log import setup_logging
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.validate import validate
from cli.commands.dump import dump
from cli.commands.encode import encode

console = Console()

# Main app
app = typer.Typer(
    name="splice",
    help="Decode and inspect drum machine pattern files (.splice).",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="validate")(validate)
app.command(name="dump")(dump)
app.command(name="encode")(encode)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splice[/bold] version {__version__}")
    console.print("[dim]Decoder for drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="SPLICE_LOG_LEVEL", help="Log level"
    ),
) -> None:
    """
    Splice - decode and inspect drum machine patterns.

    [bold]Quick Start:[/bold]

        splice info pattern_1.splice          # Pattern overview
        splice info pattern_1.splice --plain  # Plain text grid

    [bold]Analysis Commands:[/bold]

        splice tracks pattern_1.splice    # Track step grids
        splice dump pattern_1.splice      # Annotated hex dump

    [bold]Utility Commands:[/bold]

        splice validate pattern_1.splice  # Validate file structure
        splice encode kick.json           # Build a file from JSON

    Use --help with any command for more details.
    """
    setup_logging(verbose=verbose, level=log_level)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
