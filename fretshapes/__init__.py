"""fretshapes: fretboard note grids and reachable chord shapes for stringed instruments."""

from fretshapes.fretboard import build_grid, filter_grid, notes, scale
from fretshapes.pitch_sets import resolve_pitch_set
from fretshapes.shapes import ShapeExtractor, chord_shapes, extract
from fretshapes.tunings import TuningLiteral, TuningName, names, resolve, simplify

__version__ = "0.1.0"

__all__ = [
    "ShapeExtractor",
    "TuningLiteral",
    "TuningName",
    "build_grid",
    "chord_shapes",
    "extract",
    "filter_grid",
    "names",
    "notes",
    "resolve",
    "resolve_pitch_set",
    "scale",
    "simplify",
]
