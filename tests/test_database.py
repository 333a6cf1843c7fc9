import pytest

from chord_fingering import FingeringSource
from chord_fingering.sources import (
    get_all_chord_names,
    get_chord_definition,
    get_database_fingerings,
    get_default_fingering,
)
from chord_fingering.sources.database import CHORD_DATABASE


class TestLookup:
    @pytest.mark.parametrize(
        "name,shape",
        [
            ("C", "x32010"),
            ("Am", "x02210"),
            ("G", "320003"),
            ("D/F#", "2x0232"),
            ("Em7", "020000"),
        ],
    )
    def test_default_shape(self, name, shape):
        assert get_default_fingering(name).shape == shape

    def test_quality_alias(self):
        assert get_chord_definition("Cmaj7").name == "CM7"
        assert get_chord_definition("Amin").name == "Am"

    def test_unicode_accidentals(self):
        assert get_chord_definition("D/F♯").name == "D/F#"

    @pytest.mark.parametrize("name", ["Db", "C#", "Bbmaj7", "Xyz", "", "F#m7b5"])
    def test_missing(self, name):
        assert get_chord_definition(name) is None
        assert get_database_fingerings(name) == []
        assert get_default_fingering(name) is None

    def test_several_entries(self):
        fingerings = get_database_fingerings("Em7")
        assert [f.id for f in fingerings] == ["database-Em7-open", "database-Em7-open-d"]
        assert [f.is_default for f in fingerings] == [True, False]


class TestEntries:
    def test_all_names_sorted(self):
        names = get_all_chord_names()
        assert names == sorted(names)
        assert "C" in names
        assert "F/A" in names

    @pytest.mark.parametrize("name", sorted(CHORD_DATABASE))
    def test_exactly_one_default(self, name):
        fingerings = CHORD_DATABASE[name].fingerings
        assert sum(f.is_default for f in fingerings) == 1
        assert all(f.source is FingeringSource.DATABASE for f in fingerings)

    def test_f_barre(self):
        fingering = get_default_fingering("F")
        assert fingering.shape == "133211"
        assert fingering.barre_at == 1
        assert fingering.barre_strings == (0, 5)
        assert fingering.difficulty == "hard"
        assert fingering.base_fret == 1

    def test_partial_barre(self):
        fingering = get_default_fingering("B")
        assert fingering.barre_at == 2
        assert fingering.barre_strings == (0, 4)

    def test_open_chords_have_no_barre(self):
        fingering = get_default_fingering("A")
        assert fingering.barre_at is None
        assert fingering.is_open_position
