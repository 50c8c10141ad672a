"""Fretboard grids: every fret of every string as a pitch, optionally filtered by a pitch set."""

import logging
from collections.abc import Sequence

from fretshapes import pitch
from fretshapes.pitch_sets import PitchSet, PitchSetInput, resolve_pitch_set
from fretshapes.tunings import TuningInput, tuning_pitches

logger = logging.getLogger(__name__)

#: grid[string][fret - first] -> pitch name, or None when the fret is not a note
Grid = list[list[str | None]]

DEFAULT_FIRST_FRET = 0


def build_grid(tuning: Sequence[str], first: int = DEFAULT_FIRST_FRET, last: int | None = None) -> Grid:
    """
    Transpose each open string across the fret range ``[first, last]``.

    Args:
        tuning: Open-string pitch tokens, lowest string first.
        first:  First fret (may be negative).
        last:   Last fret, inclusive. Defaults to ``first``.

    Returns:
        One row per string, ``last - first + 1`` cells per row. An empty
        grid when ``first > last``. Strings whose open pitch is not a valid
        pitch name give a row of None.
    """
    if last is None:
        last = first
    if first > last:
        logger.debug("Empty fret range [%d, %d]", first, last)
        return []

    frets = range(first, last + 1)
    return [[pitch.transpose(open_pitch, fret) for fret in frets] for open_pitch in tuning]


def filter_grid(grid: Grid, pitch_set: PitchSet | None) -> Grid:
    """
    Blank out every cell whose pitch class is not in ``pitch_set``.

    With no pitch set the grid is returned unchanged (the same object).
    """
    if not pitch_set:
        return grid

    def keep(cell: str | None) -> str | None:
        return cell if pitch.pitch_class(cell) in pitch_set else None

    return [[keep(cell) for cell in row] for row in grid]


def notes(
    tuning: TuningInput,
    first: int = DEFAULT_FIRST_FRET,
    last: int | None = None,
    pitch_set: PitchSetInput = None,
) -> Grid:
    """
    Build the fretboard for a tuning, optionally keeping only a scale or chord.

    Args:
        tuning:    Tuning name, alias, or list of open-string pitches.
        first:     First fret.
        last:      Last fret, inclusive. Defaults to ``first``.
        pitch_set: Scale/chord descriptor (see ``resolve_pitch_set``).

    Returns:
        The (filtered) grid. A descriptor that cannot be interpreted matches
        no notes, so every cell is None.

    Example:
        >>> notes("guitar")
        [['E2'], ['A2'], ['D3'], ['G3'], ['B3'], ['E4']]
    """
    grid = build_grid(tuning_pitches(tuning), first, last)
    classes = resolve_pitch_set(pitch_set)
    if classes is None:
        return grid
    if not classes:
        return [[None] * len(row) for row in grid]
    return filter_grid(grid, classes)


def scale(
    tuning: TuningInput,
    pitch_set: PitchSetInput,
    first: int = DEFAULT_FIRST_FRET,
    last: int | None = None,
) -> Grid:
    """Fretboard showing only the notes of ``pitch_set``."""
    return notes(tuning, first, last, pitch_set)
