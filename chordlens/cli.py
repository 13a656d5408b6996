"""Command-line interface for Chordlens.

Provides commands for:
- analyze: Name the chord formed by note numbers or note names
- keys: Name the chord played on the computer-keyboard layout
"""

import logging
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import check_midi_note, midi_note_to_name, parse_note_name
from .engine import ChordEngine
from .inference import ChordAnalysis

app = typer.Typer(
    name="chordlens",
    help="Real-time chord recognition for held notes",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse_note(value: str) -> int:
    """Accept a MIDI note number or a note name such as 'C4' / 'F#3'."""
    value = value.strip()
    if value.lstrip("-").isdigit():
        return check_midi_note(int(value))
    return parse_note_name(value)


@app.command()
def analyze(
    notes: List[str] = typer.Argument(..., help="Note numbers or names, e.g. 60 64 67 or C4 E4 G4"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Name the chord formed by the given notes.

    **Examples:**

        chordlens analyze 60 64 67 70

        chordlens analyze E3 G3 C4 --json
    """
    _setup_logging(verbose)

    try:
        numbers = [_parse_note(n) for n in notes]
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    engine = ChordEngine()
    for number in numbers:
        engine.note_on(number)

    _report(engine, json_output)


@app.command()
def keys(
    pressed: List[str] = typer.Argument(..., help="Computer keys, e.g. a d g"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Name the chord played on the computer-keyboard layout (a = C4, w = D♭4, ...)."""
    _setup_logging(verbose)

    engine = ChordEngine()
    for key in pressed:
        if engine.keyboard.note_for(key) is None:
            console.print(f"[red]Error: Key {key!r} is not mapped to a note[/red]")
            raise typer.Exit(1)
        engine.key_down(key)

    _report(engine, json_output)


def _report(engine: ChordEngine, json_output: bool) -> None:
    analysis = engine.analysis

    if json_output:
        result = {
            "notes": analysis.notes,
            "primary": analysis.primary.to_dict() if analysis.primary else None,
            "alternatives": [c.to_dict() for c in analysis.alternatives],
            "spelling": engine.spelling_context.to_dict() if engine.spelling_context else None,
            "spelled_notes": [n.name for n in engine.spelled_notes()],
        }
        console.print_json(data=result)
        return

    held = ", ".join(midi_note_to_name(n) for n in analysis.notes)
    if analysis.primary is None:
        console.print("[yellow](unrecognized)[/yellow]")
        console.print(f"  Held notes: {held}")
        return

    console.print(f"[bold green]{analysis.primary.full_name}[/bold green]  {analysis.primary.inversion_label}")
    console.print(f"  Held notes: {held}")
    console.print(f"  Spelled: {', '.join(n.name for n in engine.spelled_notes())}")
    _show_candidates_table(analysis)


def _show_candidates_table(analysis: ChordAnalysis) -> None:
    """Display alternatives in a table."""
    table = Table(title="Alternatives")
    table.add_column("Chord", style="cyan")
    table.add_column("Inversion", style="green")
    table.add_column("Score", style="yellow")
    table.add_column("Source", style="magenta")

    for candidate in analysis.alternatives:
        table.add_row(
            candidate.full_name,
            candidate.inversion_label,
            str(candidate.score),
            candidate.source.value,
        )

    if not analysis.alternatives:
        table.add_row("(none)", "", "", "")

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
