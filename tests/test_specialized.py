import pytest

from chord_fingering import FingeringSource
from chord_fingering.fretboard import fingering_pitch_classes
from chord_fingering.sources import (
    get_extended_fingerings,
    get_half_diminished_fingerings,
    get_power_chord_fingerings,
    get_sus2_fingerings,
    get_symmetric_fingerings,
)
from chord_fingering.sources.extended import EXTENDED_QUALITIES
from chord_fingering.sources.symmetric import SYMMETRIC_QUALITIES


def shapes(fingerings):
    return [f.shape for f in fingerings]


class TestPowerChords:
    def test_a(self):
        fingerings = get_power_chord_fingerings("A")
        assert shapes(fingerings) == ["577xxx", "57xxxx", "x022xx", "x-x-7-9-10-x"]
        assert [f.id for f in fingerings][0] == "power-A5-E-root"

    def test_default_open(self):
        defaults = [f for f in get_power_chord_fingerings("E") if f.is_default]
        assert shapes(defaults) == ["022xxx"]

    @pytest.mark.parametrize("root,pc", [("C", 0), ("F#", 6), ("Bb", 10)])
    def test_root_and_fifth_only(self, root, pc):
        for fingering in get_power_chord_fingerings(root):
            assert fingering_pitch_classes(fingering) == frozenset({pc, (pc + 7) % 12})
            assert fingering.source is FingeringSource.POWER_CHORD

    def test_flat_root_name_kept(self):
        assert get_power_chord_fingerings("Bb")[0].id == "power-Bb5-E-root"

    def test_invalid_root(self):
        assert get_power_chord_fingerings("H") == []


class TestSus2:
    def test_open_voicing_first(self):
        fingerings = get_sus2_fingerings("G")
        assert fingerings[0].shape == "300233"
        assert fingerings[0].id == "sus2-Gsus2-open"
        assert fingerings[0].is_default

    def test_root_without_open_voicing(self):
        ids = [f.id for f in get_sus2_fingerings("F")]
        assert ids == ["sus2-Fsus2-A-root", "sus2-Fsus2-D-root", "sus2-Fsus2-E-root"]

    def test_open_voicing_not_repeated(self):
        fingerings = get_sus2_fingerings("A")
        assert shapes(fingerings).count("x02200") == 1

    def test_invalid_root(self):
        assert get_sus2_fingerings("") == []


class TestSymmetric:
    def test_diminished_seventh_repeats(self):
        fingerings = get_symmetric_fingerings("C#", "dim7")
        repeats = [f for f in fingerings if "-repeat-" in f.id]
        assert [f.frets[3] for f in repeats] == [2, 5, 8, 11]
        assert [f.id for f in repeats][0] == "symmetric-C#dim7-repeat-2"
        assert all(f.barre_at is None for f in repeats)

    def test_diminished_seventh_shapes(self):
        assert shapes(get_symmetric_fingerings("C", "dim7"))[:4] == [
            "xx1212",
            "xx4545",
            "xx7878",
            "x-x-10-11-10-11",
        ]

    def test_augmented_repeats(self):
        assert shapes(get_symmetric_fingerings("C", "aug"))[:3] == [
            "xx2554",
            "xx6998",
            "x-x-10-13-13-12",
        ]

    def test_repeats_shared_by_inversions(self):
        def repeats(root):
            return {f.frets for f in get_symmetric_fingerings(root, "dim7") if "-repeat-" in f.id}

        assert repeats("C") == repeats("D#") == repeats("F#") == repeats("A")

    def test_alias_quality(self):
        assert get_symmetric_fingerings("C", "°7") == get_symmetric_fingerings("C", "dim7")
        assert get_symmetric_fingerings("C", "+")[0].id.startswith("symmetric-Caug-")

    def test_diminished_triad_has_no_repeats(self):
        fingerings = get_symmetric_fingerings("B", "dim")
        assert not any("-repeat-" in f.id for f in fingerings)
        assert fingerings

    @pytest.mark.parametrize("quality", ["m7", "", "9"])
    def test_other_qualities(self, quality):
        assert get_symmetric_fingerings("C", quality) == []

    @pytest.mark.parametrize("quality", SYMMETRIC_QUALITIES)
    def test_one_default(self, quality):
        fingerings = get_symmetric_fingerings("E", quality)
        assert sum(f.is_default for f in fingerings) == 1
        assert len({f.frets for f in fingerings}) == len(fingerings)


class TestHalfDiminished:
    def test_b(self):
        assert shapes(get_half_diminished_fingerings("B"))[:2] == ["x2323x", "x-x-9-10-10-10"]

    def test_names(self):
        fingerings = get_half_diminished_fingerings("F#")
        assert fingerings[0].id == "half-diminished-F#m7b5-A-root"
        assert all(f.source is FingeringSource.HALF_DIMINISHED for f in fingerings)
        assert sum(f.is_default for f in fingerings) == 1

    def test_invalid_root(self):
        assert get_half_diminished_fingerings("X") == []


class TestExtended:
    def test_e9(self):
        fingerings = get_extended_fingerings("E", "9")
        assert shapes(fingerings) == ["x76777", "020102", "xx2132"]
        assert shapes(f for f in fingerings if f.is_default) == ["020102"]

    def test_alias_quality(self):
        fingerings = get_extended_fingerings("C", "maj9")
        assert fingerings[0].id == "extended-CM9-A-root"

    def test_suspended_alias(self):
        assert get_extended_fingerings("A", "7sus") == get_extended_fingerings("A", "7sus4")

    def test_add2_has_close_voicing(self):
        ids = [f.id for f in get_extended_fingerings("G", "add2")]
        assert "extended-Gadd2-E-close" in ids
        assert not any(f.id.endswith("E-close") for f in get_extended_fingerings("G", "add9"))

    @pytest.mark.parametrize("quality", ["m7", "", "dim7", "Xyz"])
    def test_other_qualities(self, quality):
        assert get_extended_fingerings("C", quality) == []

    @pytest.mark.parametrize("quality", EXTENDED_QUALITIES)
    def test_one_default(self, quality):
        fingerings = get_extended_fingerings("D", quality)
        assert fingerings
        assert sum(f.is_default for f in fingerings) == 1
