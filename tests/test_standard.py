import pytest

from chord_fingering import FingeringSource
from chord_fingering.sources import get_standard_fingerings
from chord_fingering.sources.standard import STANDARD_LIBRARY
from chord_fingering.sources.standard_data import OPEN_VOICINGS, STANDARD_TEMPLATES


def shapes(name):
    return [f.shape for f in get_standard_fingerings(name)]


class TestLibrary:
    def test_open_voicing_first(self):
        fingerings = get_standard_fingerings("Cadd9")
        assert fingerings[0].shape == "x32033"
        assert fingerings[0].id == "standard-Cadd9-open"
        assert fingerings[0].is_default

    def test_templates_cover_every_root(self):
        for quality in STANDARD_TEMPLATES:
            for root in ("C", "F#", "A#"):
                assert f"{root}{quality}" in STANDARD_LIBRARY

    def test_open_voicings_present(self):
        for name in OPEN_VOICINGS:
            assert STANDARD_LIBRARY[name][0].id == f"standard-{name}-open"

    @pytest.mark.parametrize("name", sorted(STANDARD_LIBRARY))
    def test_entry_invariants(self, name):
        fingerings = STANDARD_LIBRARY[name]
        assert sum(f.is_default for f in fingerings) == 1
        assert len({f.frets for f in fingerings}) == len(fingerings)
        assert all(f.source is FingeringSource.STANDARD for f in fingerings)

    def test_template_repeating_open_voicing_skipped(self):
        ids = [f.id for f in STANDARD_LIBRARY["F#m7b5"]]
        assert ids == ["standard-F#m7b5-open"]


class TestTemplates:
    def test_thirteenth(self):
        assert shapes("C13") == ["x32335", "8-x-8-9-10-10"]

    @pytest.mark.parametrize(
        "name,shape",
        [("G7", "3x343x"), ("Am7", "5x555x"), ("GM7", "3x443x"), ("G6", "3x243x")],
    )
    def test_shell_voicings(self, name, shape):
        assert shape in shapes(name)

    def test_open_string_placement_has_no_barre(self):
        fingering = get_standard_fingerings("A#13")[0]
        assert fingering.shape == "x10113"
        assert fingering.barre_at is None


class TestLookupKeys:
    def test_flat_root(self):
        assert get_standard_fingerings("Bb13") == get_standard_fingerings("A#13")

    def test_alias_quality(self):
        fingerings = get_standard_fingerings("Cmaj13")
        assert fingerings
        assert fingerings == get_standard_fingerings("CM13")

    def test_flat_root_and_alias(self):
        assert get_standard_fingerings("Ebmin6") == get_standard_fingerings("D#m6")

    @pytest.mark.parametrize("name", ["C", "C13/E", "Xyz", "Cxyz", ""])
    def test_nothing_found(self, name):
        assert get_standard_fingerings(name) == []
