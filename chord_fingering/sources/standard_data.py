"""Curated shape tables for the standard chord library.

Movable templates are listed per canonical quality; every template has
been checked to sound only chord tones (the fifth may be omitted).
Open voicings are exact chord names with hand-picked open-position shapes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from chord_fingering.fretboard import A_STRING, LOW_E_STRING
from chord_fingering.models import Difficulty
from chord_fingering.shapes import ShapeTemplate, shape


class OpenVoicing(NamedTuple):
    label: str
    tab: str
    difficulty: Difficulty


# Offsets from the root fret, low E string first
STANDARD_TEMPLATES: MappingProxyType[str, tuple[ShapeTemplate, ...]] = MappingProxyType(
    {
        # Shell voicings: root, seventh or sixth, third and fifth on four strings
        "7": (shape("E-shell", LOW_E_STRING, "0 x 0 1 0 x"),),
        "m7": (shape("E-shell", LOW_E_STRING, "0 x 0 0 0 x"),),
        "M7": (shape("E-shell", LOW_E_STRING, "0 x 1 1 0 x"),),
        "6": (shape("E-shell", LOW_E_STRING, "0 x -1 1 0 x"),),
        "m6": (shape("E-shell", LOW_E_STRING, "0 x -1 0 0 x"),),
        # Sixth-ninth
        "69": (
            shape("A-root", A_STRING, "x 0 -1 -1 0 0"),
            shape("E-root", LOW_E_STRING, "0 x -1 1 0 2"),
        ),
        "m69": (shape("A-root", A_STRING, "x 0 -2 -1 0 0"),),
        # Elevenths and thirteenths
        "11": (
            shape("A-root", A_STRING, "x 0 -1 0 0 -2"),
            shape("E-root", LOW_E_STRING, "0 0 0 1 x 2"),
        ),
        "m11": (
            shape("A-root", A_STRING, "x 0 -2 0 0 -2"),
            shape("E-root", LOW_E_STRING, "0 0 0 0 x 2"),
        ),
        "13": (
            shape("A-root", A_STRING, "x 0 -1 0 0 2"),
            shape("E-root", LOW_E_STRING, "0 x 0 1 2 2"),
        ),
        "M13": (
            shape("A-root", A_STRING, "x 0 -1 1 0 2"),
            shape("E-root", LOW_E_STRING, "0 x 1 1 2 2"),
        ),
        "m13": (
            shape("A-root", A_STRING, "x 0 -2 0 0 2"),
            shape("E-root", LOW_E_STRING, "0 x 0 0 2 2"),
        ),
        # Altered dominants
        "7#9": (shape("A-root", A_STRING, "x 0 -1 0 1 x"),),
        "7b9": (shape("A-root", A_STRING, "x 0 -1 0 -1 0"),),
        "7#11": (
            shape("A-root", A_STRING, "x 0 -1 0 x -1"),
            shape("E-root", LOW_E_STRING, "0 x 0 1 -1 x"),
        ),
        "7b13": (shape("E-root", LOW_E_STRING, "0 x 0 1 1 x"),),
        "alt": (shape("A-root", A_STRING, "x 0 -1 0 -1 1"),),
        "7b5": (
            shape("A-root", A_STRING, "x 0 1 0 2 x"),
            shape("E-root", LOW_E_STRING, "0 x 0 1 -1 x"),
        ),
        "M7#5": (shape("A-root", A_STRING, "x 0 3 1 2 x"),),
        # Diminished and augmented
        "dim": (shape("A-root", A_STRING, "x 0 1 2 1 x"),),
        "dim7": (shape("E-root", LOW_E_STRING, "0 x -1 0 -1 x"),),
        "m7b5": (shape("E-shell", LOW_E_STRING, "0 x 0 0 -1 x"),),
        "aug": (shape("E-root", LOW_E_STRING, "0 3 2 1 1 0"),),
        "aug7": (shape("A-root", A_STRING, "x 0 -1 0 x 1"),),
        # Blackadder: whole-tone cluster over the root
        "blk": (
            shape("A-root", A_STRING, "x 0 1 0 0 x"),
            shape("E-root", LOW_E_STRING, "0 x 0 -1 -1 x"),
        ),
    }
)

# Keyed by sharp root plus canonical quality; tabs run low E to high e
OPEN_VOICINGS: MappingProxyType[str, tuple[OpenVoicing, ...]] = MappingProxyType(
    {
        "Cadd9": (OpenVoicing("open", "x32033", "easy"),),
        "Esus2": (OpenVoicing("open", "024400", "medium"),),
        "C9": (OpenVoicing("open", "x32333", "medium"),),
        "E9": (OpenVoicing("open", "020102", "easy"),),
        "A9": (OpenVoicing("open", "x02423", "medium"),),
        "CM9": (OpenVoicing("open", "x32430", "medium"),),
        "Am9": (OpenVoicing("open", "x02413", "medium"),),
        "Em9": (OpenVoicing("open", "022032", "easy"),),
        "E7#9": (OpenVoicing("open", "076780", "medium"),),
        "A7sus4": (OpenVoicing("open", "x02030", "easy"),),
        "D7sus4": (OpenVoicing("open", "xx0213", "easy"),),
        "B7sus4": (OpenVoicing("open", "x22200", "easy"),),
        "F6": (OpenVoicing("open", "xx3231", "medium"),),
        "F#m7b5": (OpenVoicing("open", "2x221x", "medium"),),
        "Caug": (OpenVoicing("open", "x32110", "easy"),),
        "Eaug": (OpenVoicing("open", "032110", "easy"),),
        "Gaug": (OpenVoicing("open", "321003", "easy"),),
        "Cdim7": (OpenVoicing("open", "x3424x", "medium"),),
    }
)
