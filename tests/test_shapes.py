"""Unit tests for chord shape extraction."""

from fretshapes.fretboard import notes
from fretshapes.shapes import (
    ShapeExtractor,
    chord_shapes,
    drop_adjacent_duplicates,
    extract,
    sounding_strings,
)

X = "C4"  # any note; extraction only looks at which cells are empty

C_MAJOR_SHAPES = [
    [[0, 3], 3, 2, 0, 1, [0, 3]],
    [3, 3, 2, None, 1, 3],
    [3, 3, 2, None, None, 3],
    [3, 3, None, None, None, 3],
]


def test_c_major_triad_shapes_on_guitar() -> None:
    grid = notes("guitar", 0, 3, "C E G")
    assert extract(grid, 4) == C_MAJOR_SHAPES


def test_chord_shapes_query() -> None:
    assert chord_shapes("guitar", "C E G", 0, 3) == C_MAJOR_SHAPES
    assert chord_shapes(["E2", "A2", "D3", "G3", "B3", "E4"], "C", 0, 3, 4) == C_MAJOR_SHAPES


def test_chord_shapes_default_range_is_twelve_frets() -> None:
    default = chord_shapes("guitar", "Am")
    assert default == chord_shapes("guitar", "Am", 0, 12, 4)
    assert default


def test_single_reachable_fret_is_a_bare_number() -> None:
    grid = [[X, None, X], [X, X, None]]
    shapes = ShapeExtractor(span=2).extract(grid)
    assert shapes == [[0, [0, 1]], [2, 1]]
    assert isinstance(shapes[1][0], int)


def test_frets_are_absolute_when_grid_starts_higher() -> None:
    grid = [[X, None, X], [X, X, None]]
    assert extract(grid, 2, first=5) == [[5, [5, 6]], [7, 6]]


def test_raw_positions_include_every_anchor() -> None:
    grid = [[X, None, X], [X, X, None]]
    assert ShapeExtractor(span=2).positions(grid) == [
        [0, [0, 1]],
        [2, 1],
        [2, None],
    ]


def test_single_string_positions_are_dropped() -> None:
    grid = [[X, None, None, None], [None, None, None, X]]
    assert extract(grid, 2) == []


def test_sliding_without_change_reports_shape_once() -> None:
    grid = [[None, None, X, None, None], [None, None, X, None, None]]
    assert extract(grid, 3) == [[2, 2]]
    assert ShapeExtractor(span=3).extract_with_frets(grid) == [(0, [2, 2])]


def test_extract_with_frets_reports_anchor_fret() -> None:
    grid = notes("guitar", 2, 5, "C E G")
    found = ShapeExtractor(span=4).extract_with_frets(grid, first=2)
    assert [position for _, position in found] == extract(grid, 4, first=2)
    assert [anchor for anchor, _ in found] == sorted(anchor for anchor, _ in found)
    assert found[0][0] == 2


def test_degenerate_inputs_give_no_shapes() -> None:
    grid = notes("guitar", 0, 3, "C E G")
    assert extract(grid, 0) == []
    assert extract(grid, -1) == []
    assert extract([], 4) == []
    assert extract([[], []], 4) == []


def test_span_wider_than_grid() -> None:
    grid = [[X, None], [None, X]]
    assert extract(grid, 10) == [[0, 1]]


def test_drop_adjacent_duplicates_keeps_non_adjacent_repeats() -> None:
    positions = [[1, 2], [1, 2], [3, 4], [1, 2], [1, 2]]
    assert drop_adjacent_duplicates(positions) == [[1, 2], [3, 4], [1, 2]]


def test_drop_adjacent_duplicates_distinguishes_list_from_number() -> None:
    positions = [[[3], 2], [3, 2]]
    assert drop_adjacent_duplicates(positions) == positions


def test_no_singleton_or_repeated_neighbours() -> None:
    shapes = chord_shapes("guitar", "A minor", 0, 15, 3)
    assert shapes
    assert all(sounding_strings(shape) >= 2 for shape in shapes)
    assert all(a != b for a, b in zip(shapes, shapes[1:]))


def test_wider_span_never_loses_strings() -> None:
    grid = notes("guitar", 0, 12, "G")
    for span in range(1, 6):
        narrow = ShapeExtractor(span).positions(grid)
        wide = ShapeExtractor(span + 1).positions(grid)
        assert len(narrow) == len(wide)
        for small, large in zip(narrow, wide):
            assert sounding_strings(large) >= sounding_strings(small)


def test_extract_does_not_modify_grid() -> None:
    grid = notes("guitar", 0, 5, "C E G")
    snapshot = [list(row) for row in grid]
    extract(grid, 4)
    assert grid == snapshot
