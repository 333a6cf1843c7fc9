import pytest

from chord_fingering import ChordSymbol, build_chord_name, parse_chord_name, transpose_chord
from chord_fingering.parser import normalize_chord_name
from chord_fingering.transpose import guess_key_from_chords


class TestParseChordName:
    @pytest.mark.parametrize(
        "name,root,quality,bass",
        [
            ("C", "C", "", None),
            ("Am7", "A", "m7", None),
            ("F#m7b5", "F#", "m7b5", None),
            ("Bbmaj7", "Bb", "maj7", None),
            ("D/F#", "D", "", "F#"),
            ("Am/G", "A", "m", "G"),
            ("C6/9", "C", "6/9", None),
            ("C7sus4", "C", "7sus4", None),
            ("Ebm7/Db", "Eb", "m7", "Db"),
            ("Cblk", "C", "blk", None),
            ("Bblk", "B", "blk", None),
            ("Bbblk", "Bb", "blk", None),
            ("C#blk", "C#", "blk", None),
            ("Cb", "Cb", "", None),
        ],
    )
    def test_parses_parts(self, name, root, quality, bass):
        assert parse_chord_name(name) == ChordSymbol(root=root, quality=quality, bass=bass)

    def test_unicode_accidentals(self):
        assert parse_chord_name("B♭m") == ChordSymbol(root="Bb", quality="m")
        assert parse_chord_name("D/F♯") == ChordSymbol(root="D", quality="", bass="F#")

    def test_surrounding_whitespace(self):
        assert parse_chord_name("  G7 ") == ChordSymbol(root="G", quality="7")

    @pytest.mark.parametrize("name", ["", "   ", "Xyz", "H7", "cm", "N.C.", "7"])
    def test_no_valid_root(self, name):
        assert parse_chord_name(name) is None

    def test_garbage_quality_still_parses(self):
        symbol = parse_chord_name("Cxyz")
        assert symbol.root == "C"
        assert symbol.quality == "xyz"

    def test_symbol_properties(self):
        symbol = parse_chord_name("Bb7/Ab")
        assert symbol.root_pc == 10
        assert symbol.bass_pc == 8
        assert symbol.is_slash
        assert symbol.name == "Bb7/Ab"


class TestChordNames:
    def test_build_chord_name(self):
        assert build_chord_name("C", "m7") == "Cm7"
        assert build_chord_name("G", bass="B") == "G/B"
        assert build_chord_name("F#") == "F#"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Cmaj7", "CM7"),
            ("Amin", "Am"),
            ("Bbm7-5", "Bbm7b5"),
            ("G7sus", "G7sus4"),
            ("D/F♯", "D/F#"),
            ("E", "E"),
        ],
    )
    def test_normalize_chord_name(self, name, expected):
        assert normalize_chord_name(name) == expected

    def test_normalize_with_canonical_root(self):
        assert normalize_chord_name("Dbmaj7/Ab", canonical_root=True) == "C#M7/G#"

    def test_normalize_unparsable(self):
        assert normalize_chord_name("N.C.") is None


class TestTransposeChord:
    @pytest.mark.parametrize(
        "name,semitones,expected",
        [
            ("Am7", 3, "Cm7"),
            ("C", 1, "C#"),
            ("Bbmaj7", 2, "Cmaj7"),
            ("Eb", 2, "F"),
            ("Eb", 1, "E"),
            ("Db", 1, "D"),
            ("Ab", 1, "A"),
            ("Gb", 1, "G"),
            ("Eb/G", 1, "E/Ab"),
            ("D/F#", -2, "C/E"),
            ("F#m7b5", 12, "F#m7b5"),
        ],
    )
    def test_transpose(self, name, semitones, expected):
        assert transpose_chord(name, semitones) == expected

    def test_flat_input_gives_flat_output(self):
        assert transpose_chord("Bb", 1) == "B"
        assert transpose_chord("Bb", 3) == "Db"

    def test_sharp_input_gives_sharp_output(self):
        assert transpose_chord("A", 1) == "A#"

    def test_quality_kept_verbatim(self):
        assert transpose_chord("Cmaj7(#11)", 2) == "Dmaj7(#11)"
        assert transpose_chord("Cmin7", 5) == "Fmin7"

    def test_zero_semitones_is_identity(self):
        assert transpose_chord("B♭m", 0) == "B♭m"

    def test_unparsable_returned_unchanged(self):
        assert transpose_chord("N.C.", 5) == "N.C."

    # Sharps are the default spelling, so a flat name only survives a round
    # trip when the intermediate root or bass is itself flat-spelled.
    @pytest.mark.parametrize(
        "name",
        ["C", "C#m", "Db7/F", "Ebmaj7", "F#m7b5", "G/B", "Ab/C", "Bbsus4", "A7b9", "Em/D", "D/F#"],
    )
    def test_round_trip_with_spelling_kept(self, name):
        assert transpose_chord(transpose_chord(name, 3), -3) == name

    @pytest.mark.parametrize("name,expected", [("Db7", "C#7"), ("Gbm", "F#m"), ("Ab", "G#")])
    def test_round_trip_through_natural_root_gives_sharps(self, name, expected):
        assert transpose_chord(transpose_chord(name, 3), -3) == expected


class TestGuessKey:
    def test_first_major_chord(self):
        assert guess_key_from_chords(["Am", "F", "C", "G"]) == "F"

    def test_alias_major_counts(self):
        assert guess_key_from_chords(["Em", "Gmaj"]) == "G"

    def test_falls_back_to_first_root(self):
        assert guess_key_from_chords(["Em7", "Am"]) == "E"

    def test_skips_unparsable(self):
        assert guess_key_from_chords(["N.C.", "D"]) == "D"

    def test_empty(self):
        assert guess_key_from_chords([]) is None
