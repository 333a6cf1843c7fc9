import pytest

from chord_fingering import get_chord_intervals, normalize_quality, resolve_intervals
from chord_fingering.intervals import (
    CHORD_FORMULAS,
    QUALITY_ALIASES,
    chord_pitch_classes,
    infer_intervals,
    rewrite_quality_spelling,
)


class TestCanonicalQualities:
    @pytest.mark.parametrize(
        "quality,expected",
        [
            ("", (0, 4, 7)),
            ("m", (0, 3, 7)),
            ("5", (0, 7)),
            ("dim", (0, 3, 6)),
            ("aug", (0, 4, 8)),
            ("sus2", (0, 2, 7)),
            ("sus4", (0, 5, 7)),
            ("7", (0, 4, 7, 10)),
            ("M7", (0, 4, 7, 11)),
            ("m7", (0, 3, 7, 10)),
            ("mM7", (0, 3, 7, 11)),
            ("dim7", (0, 3, 6, 9)),
            ("m7b5", (0, 3, 6, 10)),
            ("aug7", (0, 4, 8, 10)),
            ("7b5", (0, 4, 6, 10)),
            ("6", (0, 4, 7, 9)),
            ("69", (0, 4, 7, 9, 14)),
            ("9", (0, 4, 7, 10, 14)),
            ("add9", (0, 4, 7, 14)),
            ("add2", (0, 2, 4, 7)),
            ("11", (0, 4, 7, 10, 14, 17)),
            ("13", (0, 4, 7, 10, 14, 21)),
            ("7#9", (0, 4, 7, 10, 15)),
            ("7b9", (0, 4, 7, 10, 13)),
            ("alt", (0, 4, 8, 10, 13)),
        ],
    )
    def test_formula(self, quality, expected):
        assert get_chord_intervals(quality) == expected

    @pytest.mark.parametrize("quality", sorted(CHORD_FORMULAS))
    def test_every_formula_starts_at_root(self, quality):
        intervals = get_chord_intervals(quality)
        assert intervals[0] == 0
        assert list(intervals) == sorted(set(intervals))

    @pytest.mark.parametrize("quality", sorted(CHORD_FORMULAS))
    def test_exact_tier(self, quality):
        resolution = resolve_intervals(quality)
        assert resolution.tier == "exact"
        assert resolution.canonical == quality


class TestAliases:
    @pytest.mark.parametrize("alias,canonical", sorted(QUALITY_ALIASES.items()))
    def test_alias_targets_exist(self, alias, canonical):
        assert canonical in CHORD_FORMULAS

    @pytest.mark.parametrize(
        "alias,canonical",
        [
            ("maj7", "M7"),
            ("min", "m"),
            ("-7", "m7"),
            ("ø", "m7b5"),
            ("m7-5", "m7b5"),
            ("+", "aug"),
            ("7sus", "7sus4"),
            ("6/9", "69"),
            ("o7", "dim7"),
        ],
    )
    def test_normalize_quality(self, alias, canonical):
        assert normalize_quality(alias) == canonical
        assert get_chord_intervals(alias) == get_chord_intervals(canonical)

    def test_unknown_quality_unchanged(self):
        assert normalize_quality("weird") == "weird"


class TestSpellingRewrites:
    @pytest.mark.parametrize(
        "quality,expected",
        [
            ("maj7(#11)", "M7#11"),
            ("min7(-5)", "m7b5"),
            ("Maj9", "M9"),
            ("7(b9)", "7b9"),
            ("7 sus4", "7sus4"),
            ("7(+9)", "7#9"),
        ],
    )
    def test_rewrite(self, quality, expected):
        assert rewrite_quality_spelling(quality) == expected

    def test_rewritten_alias_tier(self):
        resolution = resolve_intervals("min7(-5)")
        assert resolution.tier == "alias"
        assert resolution.quality == "m7b5"
        assert resolution.intervals == (0, 3, 6, 10)
        assert resolution.canonical == "m7b5"


class TestInference:
    def test_added_eleventh(self):
        assert infer_intervals("m7add11").intervals == (0, 3, 7, 10, 17)

    def test_sharp_eleventh_major_seventh(self):
        resolution = infer_intervals("M7#11")
        assert resolution.tier == "inferred"
        assert resolution.intervals == (0, 4, 7, 11, 18)
        assert "major-seventh" in resolution.matched_rules

    def test_sharp_ninth_flat_thirteenth(self):
        assert infer_intervals("7#9b13").intervals == (0, 4, 7, 10, 15, 20)

    def test_sus_locks_third(self):
        assert infer_intervals("9sus2").intervals == (0, 2, 7, 10, 14)

    def test_half_diminished_wins_over_minor(self):
        assert infer_intervals("m7b5add11").intervals == (0, 3, 6, 10, 17)

    def test_no_third(self):
        assert infer_intervals("7no3").intervals == (0, 7, 10)

    def test_inferred_has_no_canonical(self):
        assert resolve_intervals("m7add11").canonical is None

    @pytest.mark.parametrize("quality", ["Xyz", "xyz", "q"])
    def test_unresolved(self, quality):
        resolution = resolve_intervals(quality)
        assert resolution.tier == "unresolved"
        assert not resolution.resolved
        assert resolution.intervals == ()
        assert get_chord_intervals(quality) == ()


class TestChordPitchClasses:
    def test_triad(self):
        assert chord_pitch_classes("A", "m") == frozenset({9, 0, 4})

    def test_compound_reduced(self):
        assert chord_pitch_classes("C", "9") == frozenset({0, 2, 4, 7, 10})

    def test_slash_bass_included(self):
        assert chord_pitch_classes("C", "", bass="D") == frozenset({0, 2, 4, 7})

    def test_bad_root_raises(self):
        with pytest.raises(ValueError):
            chord_pitch_classes("H", "")
