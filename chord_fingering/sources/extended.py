"""Generator for ninths, added-tone and suspended seventh chords.

Examples
--------
>>> [f.shape for f in get_extended_fingerings("E", "9")]
['x76777', '020102', 'xx2132']
>>> [f.shape for f in get_extended_fingerings("E", "9") if f.is_default]
['020102']
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING
from chord_fingering.intervals import resolve_intervals
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import build_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, root_pitch_class, shape

logger = logging.getLogger(__name__)

_ADD9_SHAPES: tuple[ShapeTemplate, ...] = (
    shape("A-root", A_STRING, "x 0 2 4 2 0"),
    shape("E-root", LOW_E_STRING, "0 2 2 1 0 2"),
    shape("C-form", A_STRING, "x 0 -1 -3 0 -3"),
)

# Offsets low E to high e from the root fret
EXTENDED_SHAPES: MappingProxyType[str, tuple[ShapeTemplate, ...]] = MappingProxyType(
    {
        "9": (
            shape("A-root", A_STRING, "x 0 -1 0 0 0"),
            shape("E-root", LOW_E_STRING, "0 2 0 1 0 2"),
            shape("D-root", D_STRING, "x x 0 -1 1 0"),
        ),
        "M9": (
            shape("A-root", A_STRING, "x 0 -1 1 0 x"),
            shape("E-root", LOW_E_STRING, "0 x 1 1 0 2"),
            shape("D-root", D_STRING, "x x 0 -1 2 0"),
        ),
        "m9": (
            shape("A-root", A_STRING, "x 0 -2 0 0 x"),
            shape("E-root", LOW_E_STRING, "0 2 0 0 0 2"),
            shape("D-root", D_STRING, "x x 0 -2 1 0"),
        ),
        "add9": _ADD9_SHAPES,
        "add2": (*_ADD9_SHAPES, shape("E-close", LOW_E_STRING, "0 2 4 1 0 0")),
        "madd9": (
            shape("A-root", A_STRING, "x 0 2 4 1 0"),
            shape("E-root", LOW_E_STRING, "0 2 2 0 0 2"),
        ),
        "7sus4": (
            shape("E-root", LOW_E_STRING, "0 2 0 2 0 0"),
            shape("A-root", A_STRING, "x 0 2 0 3 0"),
            shape("D-root", D_STRING, "x x 0 2 1 3"),
        ),
        "7sus2": (
            shape("A-root", A_STRING, "x 0 2 0 0 0"),
            shape("D-root", D_STRING, "x x 0 2 1 0"),
        ),
        "add4": (
            shape("A-root", A_STRING, "x 0 2 2 2 -2"),
            shape("E-root", LOW_E_STRING, "0 0 2 1 0 0"),
        ),
        "9sus4": (
            shape("A-root", A_STRING, "x 0 0 0 0 0"),
            shape("E-root", LOW_E_STRING, "0 0 0 x 0 2"),
        ),
        "M7b5": (
            shape("A-root", A_STRING, "x 0 1 1 2 x"),
            shape("E-root", LOW_E_STRING, "0 x 1 1 -1 x"),
        ),
    }
)

EXTENDED_QUALITIES: tuple[str, ...] = tuple(EXTENDED_SHAPES)


def get_extended_fingerings(root: str, quality: str) -> list[Fingering]:
    """Fingerings for extended and added-tone chords.

    Parameters
    ----------
    root : str
        Root note name.
    quality : str
        Chord quality, any alias spelling (e.g., "maj9", "7sus").

    Returns
    -------
    list[Fingering]
        Fingerings, empty for qualities without extended shapes or an
        invalid root.
    """
    root_pc = root_pitch_class(root)
    canonical = resolve_intervals(quality).canonical
    if root_pc is None or canonical not in EXTENDED_QUALITIES:
        return []
    name = build_chord_name(root, canonical)
    fingerings = realize_all(EXTENDED_SHAPES[canonical], root_pc, name, FingeringSource.EXTENDED)
    logger.debug("Extended shapes produced %d fingerings for %s", len(fingerings), name)
    return mark_default(fingerings)
