"""ShapeExtractor: Slides a hand-sized fret window along the neck to find chord shapes."""

from collections.abc import Sequence
from typing import Union

import numpy as np

from fretshapes.fretboard import DEFAULT_FIRST_FRET, Grid, notes
from fretshapes.pitch_sets import PitchSetInput
from fretshapes.tunings import TuningInput

#: None (nothing reachable), a single fret, or several frets on one string
Slot = Union[int, list[int], None]

#: One slot per string, lowest string first
Position = list[Slot]

DEFAULT_LAST_FRET = 12
DEFAULT_SPAN = 4

#: A shape must sound on at least this many strings
MIN_SOUNDING_STRINGS = 2


def sounding_strings(position: Sequence[Slot]) -> int:
    """Number of strings with at least one reachable fret."""
    return sum(slot is not None for slot in position)


def drop_adjacent_duplicates(positions: Sequence[Position]) -> list[Position]:
    """
    Remove positions identical to the one kept just before them.

    Only consecutive repeats are merged: the same shape reappearing later on
    the neck is a different hand position and is kept.
    """
    kept: list[Position] = []
    for position in positions:
        if kept and position == kept[-1]:
            continue
        kept.append(position)
    return kept


class ShapeExtractor:
    """
    Extracts reachable chord shapes from a filtered fretboard grid.

    Algorithm overview
    ------------------
    1. **Windows** – For every string and every fret index ``f`` the hand is
       anchored at ``f`` and reaches ``span`` frets: ``row[f:f + span]``
       (clipped at the end of the row). The frets of the non-empty cells in
       that window are the notes reachable on that string.

    2. **Positions** – The windows with the same anchor are combined across
       strings. Each string contributes None (no note), a bare fret number
       (one note) or a list of frets (a choice of notes).

    3. **Filtering** – Positions sounding on fewer than two strings are not
       chord shapes and are dropped. A position identical to the previously
       kept one is the same shape with the hand moved a fret, so it is
       reported only once.

    The cost is O(strings × frets × span); strings are independent until
    step 2, which must run in anchor order for step 3 to work.
    """

    def __init__(self, span: int = DEFAULT_SPAN) -> None:
        """
        Args:
            span: Number of consecutive frets one hand position can reach.
        """
        self.span = span

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _string_windows(self, row: Sequence[str | None], first: int) -> list[list[int]]:
        """
        Reachable frets for every anchor on one string.

        Args:
            row:   One grid row; None marks frets that are not wanted.
            first: Fret number of ``row[0]``.

        Returns:
            For each anchor index, the increasing list of absolute frets.
        """
        if not row:
            return []
        mask = np.array([cell is not None for cell in row], dtype=bool)
        padded = np.concatenate([mask, np.zeros(self.span - 1, dtype=bool)])
        windows = np.lib.stride_tricks.sliding_window_view(padded, self.span)
        return [
            [first + anchor + int(offset) for offset in np.flatnonzero(window)]
            for anchor, window in enumerate(windows)
        ]

    @staticmethod
    def _slot(frets: list[int]) -> Slot:
        if not frets:
            return None
        if len(frets) == 1:
            return frets[0]
        return frets

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def positions(self, grid: Grid, first: int = DEFAULT_FIRST_FRET) -> list[Position]:
        """
        Every hand position, one per anchor fret, before any filtering.

        Args:
            grid:  Fretboard grid, usually filtered to a chord or scale.
            first: Fret number of the grid's first column.

        Returns:
            Positions in anchor order; empty for an empty grid or a
            non-positive span.
        """
        if self.span <= 0 or not grid:
            return []

        windows = [self._string_windows(row, first) for row in grid]
        n_anchors = max(len(string) for string in windows)
        return [
            [self._slot(string[anchor]) if anchor < len(string) else None for string in windows]
            for anchor in range(n_anchors)
        ]

    def extract_with_frets(self, grid: Grid, first: int = DEFAULT_FIRST_FRET) -> list[tuple[int, Position]]:
        """
        Like ``extract`` but paired with the anchor fret of each shape.

        Returns:
            ``(anchor_fret, position)`` tuples in neck order.
        """
        kept: list[tuple[int, Position]] = []
        for anchor, position in enumerate(self.positions(grid, first)):
            if sounding_strings(position) < MIN_SOUNDING_STRINGS:
                continue
            if kept and position == kept[-1][1]:
                continue
            kept.append((first + anchor, position))
        return kept

    def extract(self, grid: Grid, first: int = DEFAULT_FIRST_FRET) -> list[Position]:
        """
        Playable chord shapes along the neck.

        Returns:
            Positions sounding on two or more strings, with consecutive
            repeats merged, in neck order.
        """
        playable = [p for p in self.positions(grid, first) if sounding_strings(p) >= MIN_SOUNDING_STRINGS]
        return drop_adjacent_duplicates(playable)


def extract(grid: Grid, span: int = DEFAULT_SPAN, first: int = DEFAULT_FIRST_FRET) -> list[Position]:
    """Chord shapes of ``grid`` for a hand spanning ``span`` frets."""
    return ShapeExtractor(span).extract(grid, first)


def chord_shapes(
    tuning: TuningInput,
    pitch_set: PitchSetInput,
    first: int = DEFAULT_FIRST_FRET,
    last: int | None = None,
    span: int = DEFAULT_SPAN,
) -> list[Position]:
    """
    Reachable shapes of a chord (or scale) on an instrument.

    Args:
        tuning:    Tuning name, alias, or list of open-string pitches.
        pitch_set: Chord/scale descriptor, e.g. ``"C E G"`` or ``"Am"``.
        first:     First fret. Default 0.
        last:      Last fret, inclusive. Default 12.
        span:      Frets reachable per hand position. Default 4.

    Returns:
        One list per shape, one entry per string, e.g. ``[None, 3, 2, 0, 1, 0]``.
    """
    if last is None:
        last = DEFAULT_LAST_FRET
    grid = notes(tuning, first, last, pitch_set)
    return extract(grid, span, first)
