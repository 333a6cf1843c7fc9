"""Power chord (root and fifth) generator.

Examples
--------
>>> [f.shape for f in get_power_chord_fingerings("A")]
['577xxx', '57xxxx', 'x022xx', 'x-x-7-9-10-x']
>>> [f.shape for f in get_power_chord_fingerings("A") if f.is_default]
['x022xx']
"""

from __future__ import annotations

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import build_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, root_pitch_class, shape

POWER_CHORD_SHAPES: tuple[ShapeTemplate, ...] = (
    shape("E-root", LOW_E_STRING, "0 2 2 x x x"),
    shape("E-compact", LOW_E_STRING, "0 2 x x x x"),
    shape("A-root", A_STRING, "x 0 2 2 x x"),
    shape("D-root", D_STRING, "x x 0 2 3 x"),
)


def get_power_chord_fingerings(root: str) -> list[Fingering]:
    """Power chord fingerings for a root; empty if the root is not a note."""
    root_pc = root_pitch_class(root)
    if root_pc is None:
        return []
    name = build_chord_name(root, "5")
    return mark_default(realize_all(POWER_CHORD_SHAPES, root_pc, name, FingeringSource.POWER_CHORD))
