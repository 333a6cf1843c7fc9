"""Chord quality to interval resolution.

A quality string (the part of a chord name after the root) is resolved to
an ordered tuple of semitone offsets from the root in three tiers:

1. Exact lookup in the canonical quality table and its alias table.
2. Spelling rewrites (``maj`` to ``M``, ``min`` to ``m``, parentheses and
   ``-``/``+`` alterations) followed by a second exact lookup, then
   pychord's quality catalogue.
3. Structural inference: an ordered list of substring rules, each
   contributing to a chord under construction. This tier is best-effort;
   a quality that matches no rule at all is reported as unresolved with
   an empty interval tuple rather than silently treated as major.

Compound intervals (9 = 14, 11 = 17, 13 = 21) are kept in the resolved
tuples. Reduce them mod 12 when comparing pitch classes.

Examples
--------
>>> get_chord_intervals("maj7")
(0, 4, 7, 11)
>>> resolve_intervals("min7(-5)").tier
'alias'
>>> get_chord_intervals("Xyz")
()
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

from pychord import Chord as PyChord

from chord_fingering.pitch_class import note_to_pc, pitch_classes_from_intervals

logger = logging.getLogger(__name__)

Triad = Literal["major", "minor", "diminished", "augmented", "sus2", "sus4", "power"]
ResolutionTier = Literal["exact", "alias", "inferred", "unresolved"]

TRIAD_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "diminished": (0, 3, 6),
    "augmented": (0, 4, 8),
    "sus2": (0, 2, 7),
    "sus4": (0, 5, 7),
    "power": (0, 7),
}


@dataclass(frozen=True)
class ChordFormula:
    """Structural description of a chord quality.

    Parameters
    ----------
    triad : Triad
        Base triad.
    fifth : int | None
        Altered fifth replacing the triad's fifth (6 for b5, 8 for #5).
    seventh : int | None
        Seventh above the root: 9 (diminished), 10 (minor) or 11 (major).
    extensions : tuple[int, ...]
        Added tones, compound where they are extensions (14 for the 9th).
    """

    triad: Triad = "major"
    fifth: int | None = None
    seventh: int | None = None
    extensions: tuple[int, ...] = ()

    @property
    def intervals(self) -> tuple[int, ...]:
        base = list(TRIAD_INTERVALS[self.triad])
        if self.fifth is not None:
            base = [self.fifth if interval in (6, 7, 8) else interval for interval in base]
        tones = set(base)
        if self.seventh is not None:
            tones.add(self.seventh)
        tones.update(self.extensions)
        return tuple(sorted(tones))


# Canonical quality tokens
CHORD_FORMULAS: MappingProxyType[str, ChordFormula] = MappingProxyType(
    {
        "": ChordFormula(),
        "5": ChordFormula("power"),
        "m": ChordFormula("minor"),
        "dim": ChordFormula("diminished"),
        "aug": ChordFormula("augmented"),
        "sus2": ChordFormula("sus2"),
        "sus4": ChordFormula("sus4"),
        "6": ChordFormula(extensions=(9,)),
        "m6": ChordFormula("minor", extensions=(9,)),
        "69": ChordFormula(extensions=(9, 14)),
        "m69": ChordFormula("minor", extensions=(9, 14)),
        "7": ChordFormula(seventh=10),
        "M7": ChordFormula(seventh=11),
        "m7": ChordFormula("minor", seventh=10),
        "mM7": ChordFormula("minor", seventh=11),
        "dim7": ChordFormula("diminished", seventh=9),
        "m7b5": ChordFormula("diminished", seventh=10),
        "aug7": ChordFormula("augmented", seventh=10),
        "M7#5": ChordFormula("augmented", seventh=11),
        "7b5": ChordFormula(fifth=6, seventh=10),
        "M7b5": ChordFormula(fifth=6, seventh=11),
        "7sus4": ChordFormula("sus4", seventh=10),
        "7sus2": ChordFormula("sus2", seventh=10),
        "9": ChordFormula(seventh=10, extensions=(14,)),
        "M9": ChordFormula(seventh=11, extensions=(14,)),
        "m9": ChordFormula("minor", seventh=10, extensions=(14,)),
        "add9": ChordFormula(extensions=(14,)),
        "madd9": ChordFormula("minor", extensions=(14,)),
        "add2": ChordFormula(extensions=(2,)),
        "add4": ChordFormula(extensions=(5,)),
        "9sus4": ChordFormula("sus4", seventh=10, extensions=(14,)),
        "11": ChordFormula(seventh=10, extensions=(14, 17)),
        "m11": ChordFormula("minor", seventh=10, extensions=(14, 17)),
        "13": ChordFormula(seventh=10, extensions=(14, 21)),
        "M13": ChordFormula(seventh=11, extensions=(14, 21)),
        "m13": ChordFormula("minor", seventh=10, extensions=(14, 21)),
        "7#9": ChordFormula(seventh=10, extensions=(15,)),
        "7b9": ChordFormula(seventh=10, extensions=(13,)),
        "7#11": ChordFormula(seventh=10, extensions=(18,)),
        "7b13": ChordFormula(seventh=10, extensions=(20,)),
        "alt": ChordFormula("augmented", seventh=10, extensions=(13,)),
        # Blackadder chord: whole-tone cluster over the root
        "blk": ChordFormula("sus2", fifth=6, seventh=10),
    }
)

# Alternate spellings of canonical qualities
QUALITY_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        # major triad
        "M": "",
        "maj": "",
        "Maj": "",
        "major": "",
        # minor triad
        "mi": "m",
        "min": "m",
        "minor": "m",
        "-": "m",
        # major seventh
        "maj7": "M7",
        "Maj7": "M7",
        "ma7": "M7",
        "major7": "M7",
        "Δ": "M7",
        "Δ7": "M7",
        "j7": "M7",
        # minor seventh
        "mi7": "m7",
        "min7": "m7",
        "minor7": "m7",
        "-7": "m7",
        # minor-major seventh
        "minMaj7": "mM7",
        "mMaj7": "mM7",
        "mmaj7": "mM7",
        "minmaj7": "mM7",
        "m(M7)": "mM7",
        "m(maj7)": "mM7",
        "m/M7": "mM7",
        "min/maj7": "mM7",
        "-Δ7": "mM7",
        "mΔ7": "mM7",
        # diminished
        "o": "dim",
        "°": "dim",
        "o7": "dim7",
        "°7": "dim7",
        # half-diminished
        "ø": "m7b5",
        "ø7": "m7b5",
        "Ø": "m7b5",
        "Ø7": "m7b5",
        "-7b5": "m7b5",
        "min7b5": "m7b5",
        "m7-5": "m7b5",
        "hdim": "m7b5",
        "hdim7": "m7b5",
        # augmented
        "+": "aug",
        "aug5": "aug",
        "+7": "aug7",
        "7#5": "aug7",
        "7+5": "aug7",
        "7+": "aug7",
        "maj7#5": "M7#5",
        "maj7b5": "M7b5",
        # sixths
        "maj6": "6",
        "add6": "6",
        "M6": "6",
        "min6": "m6",
        "-6": "m6",
        "6/9": "69",
        "6add9": "69",
        "m6/9": "m69",
        # suspended
        "sus": "sus4",
        "suspended4": "sus4",
        "suspended2": "sus2",
        "7sus": "7sus4",
        "sus47": "7sus4",
        "sus27": "7sus2",
        "9sus": "9sus4",
        # extended
        "maj9": "M9",
        "min9": "m9",
        "-9": "m9",
        "min11": "m11",
        "maj13": "M13",
        "min13": "m13",
        "7-5": "7b5",
        "7-9": "7b9",
        "7+9": "7#9",
        "m(add9)": "madd9",
        "(add9)": "add9",
        "2": "add2",
        "7alt": "alt",
        "dom7": "7",
        "blackadder": "blk",
    }
)

# Rewrites applied in order during tier 2
_SPELLING_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s+"), ""),
    (re.compile(r"[()]"), ""),
    (re.compile(r"major|Major|MAJ|maj|Maj"), "M"),
    (re.compile(r"minor|MIN|min|^mi"), "m"),
    (re.compile(r"^-(?=\d|$|M|Δ)"), "m"),
    (re.compile(r"Δ"), "M7"),
    (re.compile(r"M77"), "M7"),
    (re.compile(r"-(?=\d)"), "b"),
    (re.compile(r"(?<=\d)\+(?=\d)"), "#"),
    (re.compile(r"^\+"), "aug"),
    (re.compile(r"[ø]7?"), "m7b5"),
    (re.compile(r"°"), "dim"),
    (re.compile(r"/"), ""),
)


def normalize_quality(quality: str) -> str:
    """Map an alias spelling to its canonical quality token.

    Unknown qualities are returned unchanged.

    Examples
    --------
    >>> normalize_quality("maj7")
    'M7'
    >>> normalize_quality("-7")
    'm7'
    >>> normalize_quality("m7")
    'm7'
    """
    if quality in CHORD_FORMULAS:
        return quality
    return QUALITY_ALIASES.get(quality, quality)


def rewrite_quality_spelling(quality: str) -> str:
    """Rewrite alternate spellings into the canonical vocabulary.

    >>> rewrite_quality_spelling("maj7(#11)")
    'M7#11'
    >>> rewrite_quality_spelling("min7(-5)")
    'm7b5'
    """
    for pattern, replacement in _SPELLING_REWRITES:
        quality = pattern.sub(replacement, quality)
    return quality


def _lookup(quality: str) -> str | None:
    canonical = normalize_quality(quality)
    if canonical in CHORD_FORMULAS:
        return canonical
    return None


def _pychord_intervals(quality: str) -> tuple[int, ...] | None:
    """Intervals for a quality pychord knows, or None."""
    try:
        components = PyChord(f"C{quality}").components()
        intervals = [note_to_pc(note) for note in components]
    except ValueError:
        return None
    return tuple(sorted(set(intervals)))


@dataclass
class _ChordBuilder:
    third: int | None = 4
    fifth: int | None = 7
    seventh: int | None = None
    extensions: set[int] = field(default_factory=set)
    third_locked: bool = False
    fifth_locked: bool = False

    def set_third(self, value: int | None) -> None:
        if not self.third_locked:
            self.third = value
            self.third_locked = True

    def set_fifth(self, value: int | None) -> None:
        if not self.fifth_locked:
            self.fifth = value
            self.fifth_locked = True

    def set_seventh(self, value: int) -> None:
        if self.seventh is None:
            self.seventh = value

    def intervals(self) -> tuple[int, ...]:
        tones = {0, *self.extensions}
        for tone in (self.third, self.fifth, self.seventh):
            if tone is not None:
                tones.add(tone)
        return tuple(sorted(tones))


@dataclass(frozen=True)
class InferenceRule:
    """One substring rule of the structural inference tier."""

    name: str
    pattern: re.Pattern[str]
    apply: Callable[[_ChordBuilder, str], None]

    def matches(self, quality: str) -> bool:
        return self.pattern.search(quality) is not None


def _half_diminished(chord: _ChordBuilder, quality: str) -> None:
    chord.set_third(3)
    chord.set_fifth(6)
    chord.set_seventh(10)


def _diminished_seventh(chord: _ChordBuilder, quality: str) -> None:
    chord.set_third(3)
    chord.set_fifth(6)
    chord.set_seventh(9)


def _diminished(chord: _ChordBuilder, quality: str) -> None:
    chord.set_third(3)
    chord.set_fifth(6)


def _augmented(chord: _ChordBuilder, quality: str) -> None:
    chord.set_fifth(8)


def _minor(chord: _ChordBuilder, quality: str) -> None:
    chord.set_third(3)


def _suspended(chord: _ChordBuilder, quality: str) -> None:
    chord.third = 2 if "sus2" in quality else 5
    chord.third_locked = True


def _major_seventh(chord: _ChordBuilder, quality: str) -> None:
    chord.set_seventh(11)


def _dominant_seventh(chord: _ChordBuilder, quality: str) -> None:
    chord.set_seventh(10)


def _implied_seventh(chord: _ChordBuilder, quality: str) -> None:
    # 9, 11 and 13 imply a seventh unless written as added tones or with a sixth
    if "6" not in quality:
        chord.set_seventh(10)


def _sixth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(9)


def _ninth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(14)


def _flat_ninth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(13)


def _sharp_ninth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(15)


def _eleventh(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(17)
    if "add11" not in quality:
        chord.extensions.add(14)


def _sharp_eleventh(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(18)


def _thirteenth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(21)
    if "add13" not in quality:
        chord.extensions.add(14)


def _flat_thirteenth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(20)


def _flat_fifth(chord: _ChordBuilder, quality: str) -> None:
    chord.set_fifth(6)


def _sharp_fifth(chord: _ChordBuilder, quality: str) -> None:
    chord.set_fifth(8)


def _added_second(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(2)


def _added_fourth(chord: _ChordBuilder, quality: str) -> None:
    chord.extensions.add(5)


def _no_third(chord: _ChordBuilder, quality: str) -> None:
    chord.third = None
    chord.third_locked = True


def _no_fifth(chord: _ChordBuilder, quality: str) -> None:
    chord.fifth = None
    chord.fifth_locked = True


# Evaluated top to bottom; earlier, more specific rules lock the third and
# fifth so later, broader rules cannot override them.
INFERENCE_RULES: tuple[InferenceRule, ...] = (
    InferenceRule("half-diminished", re.compile(r"m7b5|ø"), _half_diminished),
    InferenceRule("diminished-seventh", re.compile(r"dim7|°7|^o7"), _diminished_seventh),
    InferenceRule("diminished", re.compile(r"dim|°|^o$"), _diminished),
    InferenceRule("augmented", re.compile(r"aug|^\+"), _augmented),
    InferenceRule("no-third", re.compile(r"no3"), _no_third),
    InferenceRule("no-fifth", re.compile(r"no5"), _no_fifth),
    InferenceRule("suspended", re.compile(r"sus"), _suspended),
    InferenceRule("minor", re.compile(r"^m(?!aj)"), _minor),
    InferenceRule("major-seventh", re.compile(r"M(?:7|9|11|13)|maj(?:7|9|11|13)"), _major_seventh),
    InferenceRule("dominant-seventh", re.compile(r"(?<![#b\d])7"), _dominant_seventh),
    InferenceRule("implied-seventh", re.compile(r"(?<!add)(?<![#b\d])(?:9|11|13)"), _implied_seventh),
    InferenceRule("sixth", re.compile(r"(?<![#b\d])6"), _sixth),
    InferenceRule("ninth", re.compile(r"(?<![#b\d])9"), _ninth),
    InferenceRule("flat-ninth", re.compile(r"b9"), _flat_ninth),
    InferenceRule("sharp-ninth", re.compile(r"#9"), _sharp_ninth),
    InferenceRule("eleventh", re.compile(r"(?<![#b\d])11"), _eleventh),
    InferenceRule("sharp-eleventh", re.compile(r"#11"), _sharp_eleventh),
    InferenceRule("thirteenth", re.compile(r"(?<![#b\d])13"), _thirteenth),
    InferenceRule("flat-thirteenth", re.compile(r"b13"), _flat_thirteenth),
    InferenceRule("flat-fifth", re.compile(r"b5"), _flat_fifth),
    InferenceRule("sharp-fifth", re.compile(r"#5"), _sharp_fifth),
    InferenceRule("added-second", re.compile(r"add2"), _added_second),
    InferenceRule("added-fourth", re.compile(r"add4"), _added_fourth),
)


@dataclass(frozen=True)
class IntervalResolution:
    """Outcome of resolving a quality string.

    Parameters
    ----------
    quality : str
        Canonical token for tiers 1 and 2, the rewritten spelling for tier 3.
    intervals : tuple[int, ...]
        Semitone offsets from the root, ascending. Empty when unresolved.
    tier : ResolutionTier
        Which tier produced the result.
    matched_rules : tuple[str, ...]
        Inference rules that fired (tier 3 only).
    """

    quality: str
    intervals: tuple[int, ...]
    tier: ResolutionTier
    matched_rules: tuple[str, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.tier != "unresolved"

    @property
    def canonical(self) -> str | None:
        """Canonical quality token, when the quality is a known one."""
        if self.tier in ("exact", "alias") and self.quality in CHORD_FORMULAS:
            return self.quality
        return None


def infer_intervals(quality: str) -> IntervalResolution:
    """Tier 3: build intervals from substring rules.

    Examples
    --------
    >>> infer_intervals("m7add11").intervals
    (0, 3, 7, 10, 17)
    >>> infer_intervals("Xyz").tier
    'unresolved'
    """
    chord = _ChordBuilder()
    matched: list[str] = []
    for rule in INFERENCE_RULES:
        if rule.matches(quality):
            rule.apply(chord, quality)
            matched.append(rule.name)

    if not matched:
        logger.debug("Quality %r matched no inference rule", quality)
        return IntervalResolution(quality=quality, intervals=(), tier="unresolved")
    return IntervalResolution(
        quality=quality,
        intervals=chord.intervals(),
        tier="inferred",
        matched_rules=tuple(matched),
    )


def resolve_intervals(quality: str) -> IntervalResolution:
    """Resolve a quality string to intervals through the three tiers.

    Parameters
    ----------
    quality : str
        Quality suffix of a chord name (e.g., "", "m7", "maj7#11").

    Returns
    -------
    IntervalResolution
        The resolution, never raising for unknown input.

    Examples
    --------
    >>> resolve_intervals("m7").intervals
    (0, 3, 7, 10)
    >>> resolve_intervals("Δ7").quality
    'M7'
    """
    canonical = _lookup(quality)
    if canonical is not None:
        return IntervalResolution(
            quality=canonical, intervals=CHORD_FORMULAS[canonical].intervals, tier="exact"
        )

    rewritten = rewrite_quality_spelling(quality)
    canonical = _lookup(rewritten)
    if canonical is not None:
        return IntervalResolution(
            quality=canonical, intervals=CHORD_FORMULAS[canonical].intervals, tier="alias"
        )

    catalogue = _pychord_intervals(quality)
    if catalogue is not None:
        return IntervalResolution(quality=rewritten, intervals=catalogue, tier="alias")

    return infer_intervals(rewritten)


def get_chord_intervals(quality: str) -> tuple[int, ...]:
    """Semitone offsets for a quality; empty when it cannot be resolved.

    >>> get_chord_intervals("")
    (0, 4, 7)
    >>> get_chord_intervals("9")
    (0, 4, 7, 10, 14)
    """
    return resolve_intervals(quality).intervals


def chord_pitch_classes(root: str, quality: str, bass: str | None = None) -> frozenset[int]:
    """Pitch classes a chord should sound, slash bass included.

    Raises
    ------
    ValueError
        If the root or bass is not a valid note name.

    Examples
    --------
    >>> sorted(chord_pitch_classes("C", ""))
    [0, 4, 7]
    >>> sorted(chord_pitch_classes("C", "", bass="D"))
    [0, 2, 4, 7]
    """
    pitch_classes = set(pitch_classes_from_intervals(note_to_pc(root), get_chord_intervals(quality)))
    if bass is not None:
        pitch_classes.add(note_to_pc(bass))
    return frozenset(pitch_classes)
