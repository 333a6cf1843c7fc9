"""Chord fingering library for six-string guitar in standard tuning.

This library turns chord names such as "Am7", "F#m7b5" or "D/F#" into
ranked, playable fretboard fingerings. Hand-authored fingerings, CAGED
shapes and shape libraries are merged with a fretboard search for
anything they do not cover, and every fingering returned fits a
five-fret diagram.

Examples
--------
>>> from chord_fingering import generate_chord_fingerings, generate_chord_fingering

>>> # Ranked fingerings, the default first
>>> fingerings = generate_chord_fingerings("C")
>>> fingerings[0].shape
'x32010'
>>> fingerings[0].is_default
True

>>> # Only the default
>>> generate_chord_fingering("Am").shape
'x02210'

>>> # Transposition keeps the quality as written
>>> from chord_fingering import transpose_chord
>>> transpose_chord("Bbmaj7", 2)
'Cmaj7'
"""

from chord_fingering.config import DEFAULT_CONFIG, EngineConfig, ScoreWeights
from chord_fingering.fretboard import generate_tab_notation, parse_tab
from chord_fingering.generator import (
    finalize_fingerings,
    generate_chord_fingering,
    generate_chord_fingerings,
)
from chord_fingering.intervals import get_chord_intervals, normalize_quality, resolve_intervals
from chord_fingering.models import ChordDefinition, ChordSymbol, Fingering, FingeringSource
from chord_fingering.parser import build_chord_name, parse_chord_name
from chord_fingering.transpose import guess_key_from_chords, transpose_chord
from chord_fingering.verification import ChordToneReport, verify_chord_tones

__all__ = [
    "DEFAULT_CONFIG",
    "ChordDefinition",
    "ChordSymbol",
    "ChordToneReport",
    "EngineConfig",
    "Fingering",
    "FingeringSource",
    "ScoreWeights",
    "build_chord_name",
    "finalize_fingerings",
    "generate_chord_fingering",
    "generate_chord_fingerings",
    "generate_tab_notation",
    "get_chord_intervals",
    "guess_key_from_chords",
    "normalize_quality",
    "parse_chord_name",
    "parse_tab",
    "resolve_intervals",
    "transpose_chord",
    "verify_chord_tones",
]
