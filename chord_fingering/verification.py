"""Chord tone verification.

Recomputes the pitch classes a fingering actually sounds and compares them
with the chord's theoretical tones. Guitar voicings routinely drop the
perfect fifth, so a missing fifth is the one discrepancy that still counts
as correct. Slash chords expect their bass note as well.

Examples
--------
>>> from chord_fingering.sources import get_database_fingerings
>>> verify_chord_tones("C", get_database_fingerings("C")[0]).ok
True
>>> report = verify_chord_tones("Cm", get_database_fingerings("C")[0])
>>> sorted(report.extra), sorted(report.missing)
([4], [3])
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chord_fingering.fretboard import fingering_pitch_classes
from chord_fingering.intervals import chord_pitch_classes
from chord_fingering.models import Fingering
from chord_fingering.parser import build_chord_name, parse_chord_name
from chord_fingering.pitch_class import NOTES, pc_to_note
from chord_fingering.sources import (
    get_all_chord_names,
    get_caged_fingerings,
    get_database_fingerings,
    get_extended_fingerings,
    get_half_diminished_fingerings,
    get_power_chord_fingerings,
    get_sus2_fingerings,
    get_symmetric_fingerings,
)
from chord_fingering.sources.caged import CAGED_QUALITIES
from chord_fingering.sources.extended import EXTENDED_QUALITIES
from chord_fingering.sources.standard import STANDARD_LIBRARY
from chord_fingering.sources.symmetric import SYMMETRIC_QUALITIES

PERFECT_FIFTH = 7


@dataclass(frozen=True)
class ChordToneReport:
    """Outcome of checking one fingering against its chord.

    Parameters
    ----------
    expected : frozenset[int]
        Pitch classes the chord calls for, slash bass included.
    sounding : frozenset[int]
        Pitch classes the fingering sounds.
    missing : frozenset[int]
        Expected pitch classes that do not sound.
    extra : frozenset[int]
        Sounding pitch classes that are not chord tones.
    ok : bool
        No extra tones, and nothing missing except possibly the perfect fifth.
    """

    expected: frozenset[int]
    sounding: frozenset[int]
    missing: frozenset[int]
    extra: frozenset[int]
    ok: bool

    def describe(self) -> str:
        """Short human-readable summary of the discrepancies."""
        if self.ok:
            return "ok"
        parts = []
        if self.missing:
            parts.append("missing " + ", ".join(pc_to_note(pc) for pc in sorted(self.missing)))
        if self.extra:
            parts.append("extra " + ", ".join(pc_to_note(pc) for pc in sorted(self.extra)))
        return "; ".join(parts)


def verify_chord_tones(name: str, fingering: Fingering) -> ChordToneReport:
    """Check that a fingering sounds the tones of a chord.

    Parameters
    ----------
    name : str
        Chord name the fingering claims to voice.
    fingering : Fingering
        Fingering to check.

    Returns
    -------
    ChordToneReport
        Expected, sounding, missing and extra pitch classes.

    Raises
    ------
    ValueError
        If the chord name cannot be parsed.
    """
    symbol = parse_chord_name(name)
    if symbol is None:
        msg = f"Cannot verify unparsable chord name: {name!r}"
        raise ValueError(msg)

    expected = chord_pitch_classes(symbol.root, symbol.quality, symbol.bass)
    sounding = fingering_pitch_classes(fingering)
    missing = expected - sounding
    extra = sounding - expected
    tolerated = frozenset({(symbol.root_pc + PERFECT_FIFTH) % 12})
    return ChordToneReport(
        expected=expected,
        sounding=sounding,
        missing=missing,
        extra=extra,
        ok=bool(sounding) and not extra and missing <= tolerated,
    )


def iter_curated_fingerings() -> Iterator[tuple[str, Fingering]]:
    """Every fingering every curated source can produce, with its chord name.

    Covers all database entries, the standard library, and each root-keyed
    generator over all twelve roots and the qualities it supports.
    """
    for name in get_all_chord_names():
        for fingering in get_database_fingerings(name):
            yield name, fingering

    for name, fingerings in STANDARD_LIBRARY.items():
        for fingering in fingerings:
            yield name, fingering

    for root in NOTES:
        for quality in CAGED_QUALITIES:
            name = build_chord_name(root, quality)
            for fingering in get_caged_fingerings(name):
                yield name, fingering

        for quality, fingerings in (
            ("5", get_power_chord_fingerings(root)),
            ("sus2", get_sus2_fingerings(root)),
            ("m7b5", get_half_diminished_fingerings(root)),
        ):
            for fingering in fingerings:
                yield build_chord_name(root, quality), fingering

        for quality in SYMMETRIC_QUALITIES:
            for fingering in get_symmetric_fingerings(root, quality):
                yield build_chord_name(root, quality), fingering

        for quality in EXTENDED_QUALITIES:
            for fingering in get_extended_fingerings(root, quality):
                yield build_chord_name(root, quality), fingering
