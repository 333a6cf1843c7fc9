import doctest

import pytest

from chord_fingering import pitch_class
from chord_fingering.pitch_class import (
    get_recommended_capo,
    interval_between,
    is_flat_spelling,
    normalize_accidentals,
    normalize_note,
    note_to_pc,
    pc_to_note,
    pitch_classes_from_intervals,
    transpose_note,
)


class TestNoteToPc:
    @pytest.mark.parametrize(
        "note,expected",
        [
            ("C", 0),
            ("C#", 1),
            ("Db", 1),
            ("E", 4),
            ("Fb", 4),
            ("E#", 5),
            ("Gb", 6),
            ("Bb", 10),
            ("B", 11),
            ("Cb", 11),
            ("B#", 0),
        ],
    )
    def test_known_notes(self, note, expected):
        assert note_to_pc(note) == expected

    def test_enharmonic_spellings_match(self):
        assert note_to_pc("F#") == note_to_pc("Gb")
        assert note_to_pc("A#") == note_to_pc("Bb")

    @pytest.mark.parametrize("note", ["H", "c", "X#", "", "Cbb"])
    def test_unknown_note_raises(self, note):
        with pytest.raises(ValueError, match="Unknown note"):
            note_to_pc(note)


class TestPcToNote:
    def test_sharp_spelling_by_default(self):
        assert [pc_to_note(pc) for pc in (1, 3, 6, 8, 10)] == ["C#", "D#", "F#", "G#", "A#"]

    def test_flat_spelling(self):
        assert [pc_to_note(pc, prefer_flat=True) for pc in (1, 3, 6, 8, 10)] == [
            "Db",
            "Eb",
            "Gb",
            "Ab",
            "Bb",
        ]

    def test_reduces_mod_12(self):
        assert pc_to_note(12) == "C"
        assert pc_to_note(-1) == "B"


class TestSpelling:
    def test_normalize_accidentals(self):
        assert normalize_accidentals("B♭maj7") == "Bbmaj7"
        assert normalize_accidentals("F♯m7") == "F#m7"
        assert normalize_accidentals("C＃") == "C#"

    def test_normalize_accidentals_leaves_ascii_alone(self):
        assert normalize_accidentals("Ebm7b5") == "Ebm7b5"

    @pytest.mark.parametrize(
        "note,expected",
        [("Bb", "A#"), ("Db", "C#"), ("Fb", "E"), ("E#", "F"), ("Cb", "B"), ("B#", "C"), ("G", "G")],
    )
    def test_normalize_note(self, note, expected):
        assert normalize_note(note) == expected

    def test_is_flat_spelling(self):
        assert is_flat_spelling("Bb")
        assert not is_flat_spelling("B")
        assert not is_flat_spelling("F#")


class TestTransposeNote:
    def test_up(self):
        assert transpose_note("C", 2) == "D"
        assert transpose_note("A", 3) == "C"

    def test_down_wraps(self):
        assert transpose_note("C", -1) == "B"

    def test_prefer_flat(self):
        assert transpose_note("A", 1, prefer_flat=True) == "Bb"
        assert transpose_note("A", 1) == "A#"

    def test_full_octave(self):
        assert transpose_note("F#", 12) == "F#"


class TestIntervals:
    def test_interval_between(self):
        assert interval_between("C", "G") == 7
        assert interval_between("G", "C") == 5
        assert interval_between("Bb", "A#") == 0

    def test_compound_intervals_reduce(self):
        assert pitch_classes_from_intervals(0, (0, 4, 7, 14)) == frozenset({0, 2, 4, 7})

    def test_compound_ninth_above_g(self):
        assert pitch_classes_from_intervals(7, (0, 4, 7, 14)) == frozenset({2, 7, 9, 11})

    def test_wraps_above_root(self):
        assert pitch_classes_from_intervals(9, (0, 3, 7)) == frozenset({9, 0, 4})

    def test_docstring_examples(self):
        assert doctest.testmod(pitch_class).failed == 0


class TestRecommendedCapo:
    def test_offsets_transposition(self):
        assert get_recommended_capo(3, 2) == 1
        assert get_recommended_capo(0, -2) == 2

    def test_out_of_range_keeps_original(self):
        assert get_recommended_capo(1, 3) == 1
        assert get_recommended_capo(11, -5) == 11
