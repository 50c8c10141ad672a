"""Pitch helpers: a narrow adapter over music21 for note-name parsing and transposition."""

import re

from music21 import interval
from music21 import pitch as m21pitch
from music21.exceptions21 import Music21Exception

#: Letter, up to four accidentals (all sharps or all flats) and an optional octave number
_TOKEN_RE = re.compile(r"^([A-Ga-g])(#{0,4}|b{0,4})(-?\d+)?$")


def parse(token: object) -> m21pitch.Pitch | None:
    """
    Parse a scientific pitch notation token into a music21 Pitch.

    Accepts ``E2``, ``F#3``, ``Bb-1`` or an octave-less pitch class such as
    ``Eb``. Flats are written with ``b`` (music21 itself uses ``-``).

    Returns:
        The Pitch, or None when the token is not a valid pitch name.
    """
    if not isinstance(token, str):
        return None
    match = _TOKEN_RE.match(token.strip())
    if match is None:
        return None

    letter, accidentals, octave = match.groups()
    try:
        parsed = m21pitch.Pitch(letter.upper() + accidentals.replace("b", "-"))
    except Music21Exception:
        return None
    if octave is not None:
        parsed.octave = int(octave)
    return parsed


def to_name(parsed: m21pitch.Pitch, with_octave: bool = True) -> str:
    """Render a music21 Pitch as ``Bb2`` style text (octave omitted for pitch classes)."""
    name = parsed.name.replace("-", "b")
    if with_octave and parsed.octave is not None:
        return f"{name}{parsed.octave}"
    return name


def transpose(token: object, semitones: int) -> str | None:
    """
    Transpose a pitch token by a number of semitones.

    The semitone count is turned into a spelled interval by music21, so the
    spelling may vary (A2 + 1 -> Bb2) but the sounding pitch always moves by
    exactly ``semitones``. Invalid tokens give None.
    """
    parsed = parse(token)
    if parsed is None:
        return None
    moved = parsed.transpose(interval.Interval(semitones))
    return to_name(moved, with_octave=parsed.octave is not None)


def pitch_class(token: object) -> int | None:
    """Pitch class of a token (0=C, 1=C#, ..., 11=B), or None if invalid."""
    parsed = parse(token)
    return None if parsed is None else parsed.pitchClass


def pitch_class_name(token: object) -> str | None:
    """Pitch-class spelling of a token, e.g. 'E4' -> 'E', 'Bb2' -> 'Bb'."""
    parsed = parse(token)
    return None if parsed is None else to_name(parsed, with_octave=False)


def semitone_number(token: object) -> int | None:
    """
    Absolute semitone number of a token on the MIDI scale (C4 = 60).

    Unlike ``Pitch.midi`` this is not folded back into 0-127, so it can be
    used to compare pitches far below or above the MIDI range.
    """
    parsed = parse(token)
    return None if parsed is None else int(round(parsed.ps))
