"""CAGED system fingering generator.

The five open chord shapes (C, A, G, E and D) are moved along the neck by
the fret of the chord's root on the shape's root string. The E and A forms
become the familiar full barre chords; when the root falls on an open
string the open-position shape is used instead. The C, G and D forms give
alternative voicings higher up the neck.

Examples
--------
>>> [f.shape for f in get_caged_fingerings("A")][:2]
['577655', 'x02220']
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING, fret_for_pitch
from chord_fingering.intervals import resolve_intervals
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import parse_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, shape

logger = logging.getLogger(__name__)

CAGED_QUALITIES: tuple[str, ...] = ("", "m", "7", "m7", "M7", "m6", "6", "mM7", "sus4")

# Offsets from the root fret, low E string first
E_FORM: MappingProxyType[str, ShapeTemplate] = MappingProxyType(
    {
        "": shape("E-form", LOW_E_STRING, "0 2 2 1 0 0"),
        "m": shape("E-form", LOW_E_STRING, "0 2 2 0 0 0"),
        "7": shape("E-form", LOW_E_STRING, "0 2 0 1 0 0"),
        "m7": shape("E-form", LOW_E_STRING, "0 2 0 0 0 0"),
        "M7": shape("E-form", LOW_E_STRING, "0 2 1 1 0 0"),
        "m6": shape("E-form", LOW_E_STRING, "0 2 2 0 2 0"),
        "6": shape("E-form", LOW_E_STRING, "0 2 2 1 2 0"),
        "mM7": shape("E-form", LOW_E_STRING, "0 2 1 0 0 0"),
        "sus4": shape("E-form", LOW_E_STRING, "0 2 2 2 0 0"),
    }
)

A_FORM: MappingProxyType[str, ShapeTemplate] = MappingProxyType(
    {
        "": shape("A-form", A_STRING, "x 0 2 2 2 0"),
        "m": shape("A-form", A_STRING, "x 0 2 2 1 0"),
        "7": shape("A-form", A_STRING, "x 0 2 0 2 0"),
        "m7": shape("A-form", A_STRING, "x 0 2 0 1 0"),
        "M7": shape("A-form", A_STRING, "x 0 2 1 2 0"),
        "m6": shape("A-form", A_STRING, "x 0 2 -1 1 x", barre=False),
        "6": shape("A-form", A_STRING, "x 0 2 2 2 2"),
        "mM7": shape("A-form", A_STRING, "x 0 2 1 1 0"),
        "sus4": shape("A-form", A_STRING, "x 0 2 2 3 0"),
    }
)

# Open-position shapes that differ from the movable form at the nut
OPEN_OVERRIDES: MappingProxyType[tuple[str, str], ShapeTemplate] = MappingProxyType(
    {
        ("A-form", "m6"): shape("A-form", A_STRING, "x 0 2 2 1 2"),
    }
)

# C form: root on the A string under the ring finger
C_FORM: MappingProxyType[str, ShapeTemplate] = MappingProxyType(
    {
        "": shape("C-form", A_STRING, "x 0 -1 -3 -2 -3", "hard"),
        "m": shape("C-form", A_STRING, "x 0 -2 -3 -2 x", "hard"),
        "7": shape("C-form", A_STRING, "x 0 -1 0 -2 -3", "hard"),
        "m7": shape("C-form", A_STRING, "x 0 -2 0 -2 0", "hard"),
        "M7": shape("C-form", A_STRING, "x 0 -1 -3 -3 -3", "hard"),
        "m6": shape("C-form", A_STRING, "x 0 -2 -1 -2 x", "hard"),
        "6": shape("C-form", A_STRING, "x 0 -1 -1 -2 -3", "hard"),
        "mM7": shape("C-form", A_STRING, "x 0 -2 -3 -3 x", "hard"),
        "sus4": shape("C-form", A_STRING, "x 0 0 -3 -2 -2", "hard"),
    }
)

# G form: root on the low E string under the ring finger
G_FORM: MappingProxyType[str, ShapeTemplate] = MappingProxyType(
    {
        "": shape("G-form", LOW_E_STRING, "0 -1 -3 -3 -3 0", "hard"),
        "m": shape("G-form", LOW_E_STRING, "0 -2 -3 -3 0 0", "hard"),
        "7": shape("G-form", LOW_E_STRING, "0 -1 -3 -3 -3 -2", "hard"),
        "m7": shape("G-form", LOW_E_STRING, "0 -2 -3 -3 0 -2", "hard"),
        "M7": shape("G-form", LOW_E_STRING, "0 -1 -3 -3 -3 -1", "hard"),
        "m6": shape("G-form", LOW_E_STRING, "0 -2 -3 -3 0 -3", "hard"),
        "6": shape("G-form", LOW_E_STRING, "0 -1 -3 -3 -3 -3", "hard"),
        "mM7": shape("G-form", LOW_E_STRING, "0 -2 -3 -3 0 -1", "hard"),
        "sus4": shape("G-form", LOW_E_STRING, "0 0 -3 -3 -2 0", "hard"),
    }
)

# D form: root on the open-position D string
D_FORM: MappingProxyType[str, ShapeTemplate] = MappingProxyType(
    {
        "": shape("D-form", D_STRING, "x x 0 2 3 2", "hard"),
        "m": shape("D-form", D_STRING, "x x 0 2 3 1", "hard"),
        "7": shape("D-form", D_STRING, "x x 0 2 1 2", "hard"),
        "m7": shape("D-form", D_STRING, "x x 0 2 1 1", "hard"),
        "M7": shape("D-form", D_STRING, "x x 0 2 2 2", "hard"),
        "m6": shape("D-form", D_STRING, "x x 0 2 0 1", "hard"),
        "6": shape("D-form", D_STRING, "x x 0 2 0 2", "hard"),
        "mM7": shape("D-form", D_STRING, "x x 0 2 2 1", "hard"),
        "sus4": shape("D-form", D_STRING, "x x 0 2 3 3", "hard"),
    }
)

# Barre forms first, then the alternative forms in CAGED order
CAGED_FORMS: tuple[MappingProxyType[str, ShapeTemplate], ...] = (
    E_FORM,
    A_FORM,
    C_FORM,
    G_FORM,
    D_FORM,
)


def is_caged_supported(quality: str) -> bool:
    """Whether a quality (any alias spelling) has CAGED shapes.

    >>> is_caged_supported("maj7")
    True
    >>> is_caged_supported("9")
    False
    """
    return resolve_intervals(quality).canonical in CAGED_QUALITIES


def _form_template(
    form: MappingProxyType[str, ShapeTemplate], quality: str, root_pc: int
) -> ShapeTemplate:
    template = form[quality]
    override = OPEN_OVERRIDES.get((template.label, quality))
    if override is not None and fret_for_pitch(template.root_string, root_pc) == 0:
        return override
    return template


def get_caged_fingerings(name: str) -> list[Fingering]:
    """CAGED fingerings for a chord name.

    Slash chords and unsupported qualities return an empty list.

    Parameters
    ----------
    name : str
        Chord name.

    Returns
    -------
    list[Fingering]
        E, A, C, G and D form fingerings, without repeated fret patterns.
    """
    symbol = parse_chord_name(name)
    if symbol is None or symbol.is_slash:
        return []
    quality = resolve_intervals(symbol.quality).canonical
    if quality not in CAGED_QUALITIES:
        return []

    templates = tuple(_form_template(form, quality, symbol.root_pc) for form in CAGED_FORMS)
    fingerings = realize_all(templates, symbol.root_pc, name, FingeringSource.CAGED)

    logger.debug("CAGED produced %d fingerings for %s", len(fingerings), name)
    return mark_default(fingerings)
