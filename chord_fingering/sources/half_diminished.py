"""Half-diminished (m7b5) chord generator."""

from __future__ import annotations

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import build_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, root_pitch_class, shape

HALF_DIMINISHED_SHAPES: tuple[ShapeTemplate, ...] = (
    shape("A-root", A_STRING, "x 0 1 0 1 x"),
    shape("D-root", D_STRING, "x x 0 1 1 1"),
    shape("E-root", LOW_E_STRING, "0 1 0 0 x x"),
    shape("E-shell", LOW_E_STRING, "0 x 0 0 -1 x"),
)


def get_half_diminished_fingerings(root: str) -> list[Fingering]:
    """m7b5 fingerings for a root; empty if the root is not a note.

    Examples
    --------
    >>> [f.shape for f in get_half_diminished_fingerings("B")][:2]
    ['x2323x', 'x-x-9-10-10-10']
    """
    root_pc = root_pitch_class(root)
    if root_pc is None:
        return []
    name = build_chord_name(root, "m7b5")
    return mark_default(
        realize_all(HALF_DIMINISHED_SHAPES, root_pc, name, FingeringSource.HALF_DIMINISHED)
    )
