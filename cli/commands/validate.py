"""
Validate command - check pattern file integrity and structure.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splice import SpliceError, decode
from splice.layout import HEADER_SIZE, MAGIC, MAGIC_SIZE, METADATA_SIZE
from splice.models import Pattern, format_tempo
from splice.utils.text import encode_text, is_printable_ascii

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a pattern file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)


class SpliceValidator:
    """Validate pattern file structure and content."""

    # Tempos outside this range decode fine but are unlikely to be intended
    USUAL_TEMPO_RANGE = (20.0, 300.0)

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.pattern: Optional[Pattern] = None

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        self._validate_header()
        self._validate_decode()
        if self.pattern is not None:
            self._validate_size()
            self._validate_tempo()
            self._validate_track_names()
            self._validate_track_ids()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        """Add a validation issue."""
        self.issues.append(
            ValidationIssue(severity=severity, area=area, offset=offset, message=message)
        )

    def _validate_header(self) -> None:
        """Check header magic bytes."""
        if self.data[:MAGIC_SIZE] == MAGIC:
            self._add_issue("info", "Header", 0, "Header magic is valid")

    def _validate_decode(self) -> None:
        """Decode the pattern, recording any failure."""
        try:
            self.pattern = decode(self.data)
        except SpliceError as e:
            self._add_issue("error", type(e).__name__, e.offset or 0, str(e))
            return

        self._add_issue(
            "info",
            "Tracks",
            HEADER_SIZE + METADATA_SIZE,
            f"{len(self.pattern.tracks)} tracks decoded",
        )

    def _validate_size(self) -> None:
        """Check for data after the declared payload."""
        expected = HEADER_SIZE + self.pattern.payload_length
        trailing = len(self.data) - expected
        if trailing > 0:
            self._add_issue(
                "warning",
                "File Size",
                expected,
                f"{trailing} bytes after the declared payload",
            )
        else:
            self._add_issue("info", "File Size", 0, f"File size matches payload ({expected} bytes)")

    def _validate_tempo(self) -> None:
        """Check tempo is a usual BPM value."""
        tempo = self.pattern.tempo
        low, high = self.USUAL_TEMPO_RANGE
        offset = HEADER_SIZE + METADATA_SIZE - 4

        if not math.isfinite(tempo) or not low <= tempo <= high:
            self._add_issue("warning", "Tempo", offset, f"Unusual tempo: {format_tempo(tempo)} BPM")
        else:
            self._add_issue("info", "Tempo", offset, f"Tempo is {format_tempo(tempo)} BPM")

    def _validate_track_names(self) -> None:
        """Check track names are printable ASCII."""
        offset = HEADER_SIZE + METADATA_SIZE
        for track in self.pattern.tracks:
            name = encode_text(track.name)
            if not all(is_printable_ascii(b) for b in name):
                self._add_issue(
                    "warning",
                    "Track Name",
                    offset,
                    f"Track {track.id}: name has non-printable bytes",
                )
            offset += track.record_size

    def _validate_track_ids(self) -> None:
        """Note duplicate track IDs."""
        counts = Counter(track.id for track in self.pattern.tracks)
        for track_id, count in sorted(counts.items()):
            if count > 1:
                self._add_issue(
                    "info",
                    "Track IDs",
                    HEADER_SIZE + METADATA_SIZE,
                    f"Track ID {track_id} appears {count} times",
                )


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(result.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=8)
        table.add_column("Area", style="cyan", width=20)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=36)

        for issue in result.errors:
            table.add_row(
                "[red]ERROR[/red]",
                issue.area,
                f"0x{issue.offset:03X}",
                escape(issue.message),
            )

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]",
                issue.area,
                f"0x{issue.offset:03X}",
                escape(issue.message),
            )

        console.print(table)

    if result.info and (verbose or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Pattern file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a pattern file structure and content.

    Checks for:

    - Valid "SPLICE" header magic
    - Complete header, metadata and track records
    - Note bytes limited to 0x00 / 0x01
    - Data after the declared payload
    - Unusual tempo values and non-printable track names

    Examples:

        splice validate pattern_1.splice

        splice validate pattern_1.splice --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    validator = SpliceValidator(data, str(file))
    result = validator.validate()

    # In strict mode, treat warnings as errors
    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
