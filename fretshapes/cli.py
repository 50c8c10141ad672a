"""fretshapes CLI entry point."""

import json
import sys

import click

from fretshapes import __version__
from fretshapes.fretboard import DEFAULT_FIRST_FRET, Grid, notes
from fretshapes.logging_config import LOG_LEVELS, setup_logging
from fretshapes.pitch_sets import resolve_pitch_set
from fretshapes.shapes import DEFAULT_LAST_FRET, DEFAULT_SPAN, Position, ShapeExtractor, Slot
from fretshapes.tunings import names, resolve, simplify, tuning_pitches

OUTPUT_FORMATS = ["text", "json"]
EMPTY_CELL = "-"


def _format_slot(slot: Slot) -> str:
    if slot is None:
        return EMPTY_CELL
    if isinstance(slot, list):
        return "/".join(str(fret) for fret in slot)
    return str(slot)


def _format_grid(grid: Grid, first: int) -> list[str]:
    """Render a grid as aligned text lines: a fret header, then one line per string."""
    cells = [[cell or EMPTY_CELL for cell in row] for row in grid]
    frets = [str(first + i) for i in range(len(grid[0]))]
    width = max(len(text) for text in frets + [cell for row in cells for cell in row])
    header = " ".join(fret.rjust(width) for fret in frets)
    return [header] + [" ".join(cell.rjust(width) for cell in row) for row in cells]


def _format_shape(anchor: int, position: Position) -> str:
    return f"fret {anchor:>3}  " + " ".join(_format_slot(slot) for slot in position)


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "auto_envvar_prefix": "FRETSHAPES",
    }
)
@click.version_option(version=__version__, prog_name="fretshapes")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity (messages go to stderr).",
)
def main(log_level: str) -> None:
    """fretshapes — fretboard notes and chord shapes for stringed instruments."""
    setup_logging(log_level)


# ── tunings subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.option("--aliases", is_flag=True, help="Include alias names.")
def tunings(aliases: bool) -> None:
    """List the known tuning names."""
    for name in names(aliases=aliases):
        click.echo(name)


# ── tuning subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("token")
@click.option(
    "--simple",
    is_flag=True,
    help="Show pitch classes with doubled courses merged.",
)
def tuning(token: str, simple: bool) -> None:
    """
    Show the open-string pitches of a tuning.

    TOKEN is a tuning name or alias, or a quoted list of pitches.

    \b
    Examples:
      fretshapes tuning guitar
      fretshapes tuning charango --simple
      fretshapes tuning "D2 A2 D3 G3 A3 D4"
    """
    resolved = resolve(token)
    if resolved is None:
        click.echo(f"  ERROR: Unknown tuning '{token}'.", err=True)
        sys.exit(1)

    pitches = simplify(resolved) if simple else resolved
    click.echo(" ".join(p or EMPTY_CELL for p in pitches))


# ── notes subcommand ───────────────────────────────────────────────────────────

@main.command("notes")
@click.argument("tuning_token", metavar="TUNING")
@click.option("--first", type=int, default=DEFAULT_FIRST_FRET, show_default=True, help="First fret.")
@click.option("--last", type=int, default=None, help="Last fret (inclusive). Defaults to --first.")
@click.option(
    "--set",
    "pitch_set",
    default=None,
    metavar="DESCRIPTOR",
    help='Only show notes of a chord or scale, e.g. "C E G", "Am7" or "A minor".',
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
def notes_command(
    tuning_token: str,
    first: int,
    last: int | None,
    pitch_set: str | None,
    output_format: str,
) -> None:
    """
    Print the note on every fret of every string.

    \b
    Examples:
      fretshapes notes guitar --last 12
      fretshapes notes guitar --last 12 --set "A minor"
      fretshapes notes "G2 D3 G3 B3 D4" --first 5 --last 9 --format json
    """
    grid = notes(tuning_token, first, last, pitch_set)

    if output_format.lower() == "json":
        click.echo(json.dumps(grid))
        return
    if not grid:
        click.echo("  WARNING: Empty fret range.", err=True)
        return

    labels = tuning_pitches(tuning_token)
    label_width = max(len(label) for label in labels)
    lines = _format_grid(grid, first)
    click.echo(" " * (label_width + 2) + lines[0])
    for label, line in zip(labels, lines[1:]):
        click.echo(f"{label:<{label_width}}  {line}")


# ── shapes subcommand ──────────────────────────────────────────────────────────

@main.command()
@click.argument("tuning_token", metavar="TUNING")
@click.argument("descriptor")
@click.option("--first", type=int, default=DEFAULT_FIRST_FRET, show_default=True, help="First fret.")
@click.option("--last", type=int, default=DEFAULT_LAST_FRET, show_default=True, help="Last fret (inclusive).")
@click.option(
    "--span",
    type=int,
    default=DEFAULT_SPAN,
    show_default=True,
    help="Number of frets one hand position can reach.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
def shapes(
    tuning_token: str,
    descriptor: str,
    first: int,
    last: int,
    span: int,
    output_format: str,
) -> None:
    """
    Find reachable shapes of a chord or scale along the neck.

    DESCRIPTOR is a chord symbol, a scale ("A minor") or a quoted note list.
    Each shape lists one entry per string: '-' for a muted string, a fret
    number, or several frets joined by '/'.

    \b
    Examples:
      fretshapes shapes guitar C
      fretshapes shapes guitar "C E G" --last 5 --span 3
      fretshapes shapes charango Am7 --format json
    """
    classes = resolve_pitch_set(descriptor)
    if not classes:
        click.echo(f"  WARNING: Could not interpret '{descriptor}' as a chord or scale.", err=True)

    grid = notes(tuning_token, first, last, classes)
    found = ShapeExtractor(span).extract_with_frets(grid, first)

    if output_format.lower() == "json":
        click.echo(json.dumps([position for _, position in found]))
        return
    if not found:
        click.echo("  WARNING: No playable shapes found.", err=True)
        return

    for anchor, position in found:
        click.echo(_format_shape(anchor, position))
