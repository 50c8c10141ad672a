"""Pitch-set descriptors: note lists, scale names and chord symbols as pitch-class sets."""

import logging
import re
from collections.abc import Iterable
from typing import Final, Union

from music21 import harmony, scale
from music21.exceptions21 import Music21Exception

from fretshapes import pitch

logger = logging.getLogger(__name__)

PitchSet = frozenset[int]
PitchSetInput = Union[str, Iterable[str], Iterable[int], None]

#: Mode names accepted after a tonic, e.g. "A minor" or "D dorian"
SCALES: Final[dict[str, type[scale.ConcreteScale]]] = {
    "major": scale.MajorScale,
    "ionian": scale.MajorScale,
    "minor": scale.MinorScale,
    "natural minor": scale.MinorScale,
    "aeolian": scale.MinorScale,
    "harmonic minor": scale.HarmonicMinorScale,
    "dorian": scale.DorianScale,
    "phrygian": scale.PhrygianScale,
    "lydian": scale.LydianScale,
    "mixolydian": scale.MixolydianScale,
    "locrian": scale.LocrianScale,
    "whole tone": scale.WholeToneScale,
    "chromatic": scale.ChromaticScale,
}

# Chord root (and optional slash bass) written with "b" flats
_CHORD_ROOT_RE = re.compile(r"^([A-G])(b+|#+)?(.*)$")
_SLASH_BASS_RE = re.compile(r"/([A-G])(b+)")


def _pitch_classes(tokens: Iterable[str]) -> PitchSet:
    classes = (pitch.pitch_class(token) for token in tokens)
    return frozenset(pc for pc in classes if pc is not None)


def scale_pitch_set(tonic: str, mode: str) -> PitchSet | None:
    """
    Pitch classes of a scale, e.g. ``scale_pitch_set("A", "minor")``.

    Returns None when the tonic is not a pitch name or the mode is unknown.
    """
    scale_class = SCALES.get(" ".join(mode.split()).lower())
    tonic_pitch = pitch.parse(tonic)
    if scale_class is None or tonic_pitch is None:
        return None
    return frozenset(p.pitchClass for p in scale_class(tonic_pitch).getPitches())


def chord_pitch_set(symbol: str) -> PitchSet | None:
    """
    Pitch classes of a chord symbol such as ``Am7``, ``Bbmaj7`` or ``C/E``.

    Returns None when music21 cannot interpret the symbol.
    """
    match = _CHORD_ROOT_RE.match(symbol.strip())
    if match is None:
        return None
    letter, accidentals, rest = match.groups()
    figure = letter + (accidentals or "").replace("b", "-")
    figure += _SLASH_BASS_RE.sub(lambda m: "/" + m.group(1) + "-" * len(m.group(2)), rest)

    try:
        chord = harmony.ChordSymbol(figure)
    except (Music21Exception, ValueError, IndexError, KeyError) as exc:
        logger.debug("music21 rejected chord symbol %r: %s", symbol, exc)
        return None

    classes = frozenset(p.pitchClass for p in chord.pitches)
    return classes or None


def resolve_pitch_set(descriptor: PitchSetInput) -> PitchSet | None:
    """
    Turn a scale or chord descriptor into a set of pitch classes.

    Accepted forms, tried in order for strings:

    - several pitch tokens: ``"C E G"``
    - a tonic and a mode: ``"A minor"``, ``"D dorian"``
    - a chord symbol: ``"C"``, ``"Am7"``, ``"F#dim"``
    - a single pitch token: ``"C4"`` (only when it is not a chord symbol)

    Non-string iterables are treated as pitch tokens, or as pitch-class
    integers. An already resolved frozenset is returned as is (reduced mod
    12), so an empty one still matches nothing.

    Returns:
        None when no descriptor is given (nothing to filter by). An empty set
        when the descriptor cannot be interpreted.
    """
    if descriptor is None:
        return None
    if isinstance(descriptor, frozenset):
        return frozenset(pc % 12 for pc in descriptor)
    if not isinstance(descriptor, str):
        items = list(descriptor)
        if not items:
            return None
        if all(isinstance(item, int) for item in items):
            return frozenset(item % 12 for item in items)
        return _pitch_classes(item for item in items if isinstance(item, str))

    tokens = descriptor.split()
    if not tokens:
        return None

    if len(tokens) > 1:
        if all(pitch.parse(token) is not None for token in tokens):
            return _pitch_classes(tokens)
        found = scale_pitch_set(tokens[0], " ".join(tokens[1:]))
        if found is not None:
            return found
    else:
        found = chord_pitch_set(tokens[0])
        if found is not None:
            return found
        if pitch.parse(tokens[0]) is not None:
            return _pitch_classes(tokens)

    logger.warning("Could not interpret pitch set %r; no notes will match", descriptor)
    return frozenset()
