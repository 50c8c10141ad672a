"""Tuning resolution: instrument tuning names, literal tunings and doubled-course simplification."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Union

from fretshapes import pitch

logger = logging.getLogger(__name__)

# ── Tuning dictionary ───────────────────────────────────────────────────────

#: name -> (open-string pitches, lowest string first; alias names)
_TUNING_DATA: Final[dict[str, tuple[str, tuple[str, ...]]]] = {
    "guitar": ("E2 A2 D3 G3 B3 E4", ("guitar 6-string standard",)),
    "charango": ("G4 G4 C5 C5 E5 E4 A4 A4 E5 E5", ()),
    "bouzouki": ("C3 C4 F3 F4 A3 A3 D4 D4", ()),
    "open D tuning": ("D2 A2 D3 F#3 A3 D4", ("vestopol",)),
    "open C tuning": ("C2 G2 C3 G3 C4 E4", ()),
    "drop D tuning": ("D2 A2 D3 G3 B3 E4", ("drop d",)),
    "open G tuning": ("D2 G2 D3 G3 B3 D4", ("open g",)),
    "dadgad": ("D2 A2 D3 G3 A3 D4", ()),
    "half step down": ("Eb2 Ab2 Db3 Gb3 Bb3 Eb4", ()),
}

#: Canonical tuning name -> open-string pitches
TUNINGS: Final[dict[str, tuple[str, ...]]] = {
    name: tuple(notes.split()) for name, (notes, _) in _TUNING_DATA.items()
}

#: Alias name -> canonical tuning name
ALIASES: Final[dict[str, str]] = {
    alias: name for name, (_, aliases) in _TUNING_DATA.items() for alias in aliases
}


def _lookup_key(name: str) -> str:
    return " ".join(name.split()).casefold()


_LOOKUP: Final[dict[str, str]] = {
    **{_lookup_key(name): name for name in TUNINGS},
    **{_lookup_key(alias): name for alias, name in ALIASES.items()},
}


# ── Tuning specifications ───────────────────────────────────────────────────

@dataclass(frozen=True)
class TuningName:
    """A tuning given by dictionary name or alias (or a space-delimited pitch list)."""

    name: str


@dataclass(frozen=True)
class TuningLiteral:
    """A tuning given directly as open-string pitch tokens."""

    pitches: tuple[str, ...]


TuningSpec = Union[TuningName, TuningLiteral]
TuningInput = Union[TuningSpec, str, Sequence[str]]


def tuning_spec(value: TuningInput) -> TuningSpec:
    """Wrap raw user input (a name or a list of pitch tokens) as a TuningSpec."""
    if isinstance(value, (TuningName, TuningLiteral)):
        return value
    if isinstance(value, str):
        return TuningName(value)
    return TuningLiteral(tuple(value))


def _tokens(spec: TuningSpec) -> list[str]:
    if isinstance(spec, TuningName):
        return spec.name.split()
    return list(spec.pitches)


# ── Public API ──────────────────────────────────────────────────────────────

def names(aliases: bool = False) -> list[str]:
    """
    Return the known tuning names in alphabetical order.

    Args:
        aliases: Also include alias names (sorted) after the canonical ones.
    """
    result = sorted(TUNINGS)
    if aliases:
        result.extend(sorted(ALIASES))
    return result


def resolve(value: TuningInput) -> list[str] | None:
    """
    Resolve a tuning to its open-string pitches.

    Dictionary names and aliases (case-insensitive) resolve to their stored
    pitches. Anything else is accepted only if every token is a valid pitch
    name, which allows ad-hoc tunings such as ``"D2 G2 D3 G3 B3 D4"``.

    Returns:
        A new list of pitch tokens, or None for an unknown tuning.
    """
    spec = tuning_spec(value)
    if isinstance(spec, TuningName):
        canonical = _LOOKUP.get(_lookup_key(spec.name))
        if canonical is not None:
            return list(TUNINGS[canonical])

    tokens = _tokens(spec)
    if tokens and all(pitch.parse(token) is not None for token in tokens):
        return tokens

    logger.debug("Unknown tuning %r", spec)
    return None


def tuning_pitches(value: TuningInput) -> list[str]:
    """
    Resolve a tuning, falling back to its literal tokens when it is unknown.

    Invalid tokens are passed through untouched; the grid builder turns them
    into rows with no notes.
    """
    spec = tuning_spec(value)
    resolved = resolve(spec)
    if resolved is not None:
        return resolved
    return _tokens(spec)


def simplify(value: TuningInput) -> list[str | None]:
    """
    Reduce a tuning to pitch classes, merging doubled courses.

    Strings are paired as (0, 1), (2, 3), ... and each pair sharing a pitch
    class becomes one entry, so the charango's ten strings give
    ``['G', 'C', 'E', 'A', 'E']``. If any pair differs the whole tuning is
    returned unmerged as pitch classes. A lone last string is kept as is.
    """
    tokens = tuning_pitches(value)
    classes = [pitch.pitch_class(token) for token in tokens]
    pc_names = [pitch.pitch_class_name(token) for token in tokens]

    merged: list[str | None] = []
    for i in range(0, len(tokens), 2):
        paired = i + 1 < len(tokens)
        if paired and (classes[i] is None or classes[i] != classes[i + 1]):
            return pc_names
        merged.append(pc_names[i])
    return merged
