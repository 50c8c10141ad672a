"""Unit tests for tuning resolution and simplification."""

from fretshapes.tunings import (
    TUNINGS,
    TuningLiteral,
    TuningName,
    names,
    resolve,
    simplify,
    tuning_pitches,
    tuning_spec,
)

STANDARD = ["E2", "A2", "D3", "G3", "B3", "E4"]
CHARANGO = ["G4", "G4", "C5", "C5", "E5", "E4", "A4", "A4", "E5", "E5"]


def test_resolve_by_name() -> None:
    assert resolve("guitar") == STANDARD
    assert resolve(TuningName("charango")) == CHARANGO


def test_resolve_by_alias() -> None:
    assert resolve("vestopol") == ["D2", "A2", "D3", "F#3", "A3", "D4"]
    assert resolve("guitar 6-string standard") == STANDARD


def test_resolve_ignores_case_and_spacing() -> None:
    assert resolve("  Open  C tuning ") == ["C2", "G2", "C3", "G3", "C4", "E4"]
    assert resolve("GUITAR") == STANDARD


def test_resolve_literal_pitch_list() -> None:
    assert resolve("D2 A2 D3 G3 A3 D4") == ["D2", "A2", "D3", "G3", "A3", "D4"]
    assert resolve(["C3", "G3", "D4", "A4"]) == ["C3", "G3", "D4", "A4"]
    assert resolve(TuningLiteral(("G3", "D4"))) == ["G3", "D4"]


def test_resolve_unknown_returns_none() -> None:
    assert resolve("banjo") is None
    assert resolve("E2 X9") is None
    assert resolve("E2 C#####") is None
    assert resolve(["Cbbbbb"]) is None
    assert resolve("") is None
    assert resolve([]) is None


def test_resolve_returns_a_copy() -> None:
    first = resolve("guitar")
    first.append("E5")
    assert resolve("guitar") == STANDARD
    assert TUNINGS["guitar"] == tuple(STANDARD)


def test_tuning_pitches_falls_back_to_literal_tokens() -> None:
    assert tuning_pitches("guitar") == STANDARD
    assert tuning_pitches("E2 X9") == ["E2", "X9"]
    assert tuning_pitches(["A2", "??"]) == ["A2", "??"]


def test_tuning_spec_wraps_raw_input() -> None:
    assert tuning_spec("guitar") == TuningName("guitar")
    assert tuning_spec(["E2", "A2"]) == TuningLiteral(("E2", "A2"))
    literal = TuningLiteral(("E2",))
    assert tuning_spec(literal) is literal


def test_names() -> None:
    tuning_names = names()
    assert "guitar" in tuning_names
    assert "vestopol" not in tuning_names
    assert "vestopol" in names(aliases=True)
    assert names(aliases=True)[: len(tuning_names)] == tuning_names


def test_names_are_sorted() -> None:
    assert names() == sorted(names())
    assert names()[0] == "bouzouki"
    alias_names = names(aliases=True)[len(names()) :]
    assert alias_names == sorted(alias_names)


def test_simplify_collapses_doubled_courses() -> None:
    assert simplify(CHARANGO) == ["G", "C", "E", "A", "E"]
    assert simplify("charango") == ["G", "C", "E", "A", "E"]
    assert simplify("bouzouki") == ["C", "F", "A", "D"]


def test_simplify_mismatched_pair_returns_all_pitch_classes() -> None:
    assert simplify("guitar") == ["E", "A", "D", "G", "B", "E"]
    assert simplify(["G4", "G3", "C5", "D5"]) == ["G", "G", "C", "D"]


def test_simplify_lone_last_string_passes_through() -> None:
    assert simplify(["E2", "E3", "A2"]) == ["E", "A"]


def test_simplify_matches_enharmonic_pairs() -> None:
    assert simplify(["C#3", "Db4"]) == ["C#"]


def test_simplify_empty_tuning() -> None:
    assert simplify([]) == []
