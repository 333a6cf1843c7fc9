import pytest

from chord_fingering import FingeringSource
from chord_fingering.sources import get_caged_fingerings, is_caged_supported
from chord_fingering.sources.caged import CAGED_QUALITIES


def shapes(name):
    return [f.shape for f in get_caged_fingerings(name)]


class TestSupport:
    @pytest.mark.parametrize("quality", ["", "m", "maj7", "min7", "-", "sus", "m6", "mM7", "6"])
    def test_supported(self, quality):
        assert is_caged_supported(quality)

    @pytest.mark.parametrize("quality", ["9", "dim", "aug", "m7b5", "Xyz", "add9"])
    def test_unsupported(self, quality):
        assert not is_caged_supported(quality)

    def test_slash_chord(self):
        assert get_caged_fingerings("C/E") == []

    def test_unknown_quality(self):
        assert get_caged_fingerings("C9") == []

    def test_invalid_name(self):
        assert get_caged_fingerings("Xyz") == []


class TestForms:
    def test_c_major(self):
        assert shapes("C") == [
            "8-10-10-9-8-8",
            "x35553",
            "x32010",
            "875558",
            "x-x-10-12-13-12",
        ]

    def test_g_major(self):
        assert shapes("G") == [
            "355433",
            "x-10-12-12-12-10",
            "x-10-9-7-8-7",
            "320003",
            "xx5787",
        ]

    def test_defaults_to_open_shape(self):
        defaults = [f for f in get_caged_fingerings("G") if f.is_default]
        assert [f.shape for f in defaults] == ["320003"]

    def test_open_shape_difficulty(self):
        fingering = get_caged_fingerings("C")[2]
        assert fingering.id == "caged-C-C-form"
        assert fingering.difficulty == "easy"
        assert fingering.barre_at is None

    def test_moved_alternative_forms_are_hard(self):
        fingering = get_caged_fingerings("G")[2]
        assert fingering.id == "caged-G-C-form"
        assert fingering.difficulty == "hard"

    def test_e_form_barre(self):
        fingering = get_caged_fingerings("F")[0]
        assert fingering.shape == "133211"
        assert fingering.barre_at == 1
        assert fingering.is_default

    def test_alias_quality(self):
        assert shapes("Cmaj7")[:2] == ["8-10-9-9-8-8", "x35453"]

    def test_flat_root(self):
        assert shapes("Bb")[:2] == ["688766", "x13331"]

    def test_m6_open_override(self):
        assert "x02212" in shapes("Am6")
        cm6 = shapes("Cm6")
        assert "x3524x" in cm6
        assert "x35545" not in cm6

    @pytest.mark.parametrize("quality", CAGED_QUALITIES)
    def test_one_default_per_quality(self, quality):
        fingerings = get_caged_fingerings(f"D{quality}")
        assert fingerings
        assert sum(f.is_default for f in fingerings) == 1
        assert all(f.source is FingeringSource.CAGED for f in fingerings)
        assert len({f.frets for f in fingerings}) == len(fingerings)
