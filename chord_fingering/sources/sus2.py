"""Suspended second chord generator.

Open voicings exist for the five roots that sit comfortably at the nut;
every root also gets the three movable forms.

Examples
--------
>>> get_sus2_fingerings("G")[0].shape
'300233'
"""

from __future__ import annotations

from types import MappingProxyType

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING, build_fingering, parse_tab
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import build_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, root_pitch_class, shape

# Keyed by root pitch class; tabs run low E to high e
SUS2_OPEN_SHAPES: MappingProxyType[int, str] = MappingProxyType(
    {
        0: "x30033",
        2: "xx0230",
        4: "024400",
        7: "300233",
        9: "x02200",
    }
)

SUS2_SHAPES: tuple[ShapeTemplate, ...] = (
    shape("A-root", A_STRING, "x 0 2 2 0 0"),
    shape("D-root", D_STRING, "x x 0 2 3 0"),
    shape("E-root", LOW_E_STRING, "0 2 4 4 0 0"),
)


def get_sus2_fingerings(root: str) -> list[Fingering]:
    """Sus2 fingerings for a root; empty if the root is not a note."""
    root_pc = root_pitch_class(root)
    if root_pc is None:
        return []
    name = build_chord_name(root, "sus2")

    fingerings: list[Fingering] = []
    open_tab = SUS2_OPEN_SHAPES.get(root_pc)
    if open_tab is not None:
        fingerings.append(
            build_fingering(
                f"{FingeringSource.SUS2.value}-{name}-open",
                parse_tab(open_tab),
                FingeringSource.SUS2,
                barre=False,
            )
        )
    seen = {fingering.frets for fingering in fingerings}
    for fingering in realize_all(SUS2_SHAPES, root_pc, name, FingeringSource.SUS2):
        if fingering.frets not in seen:
            seen.add(fingering.frets)
            fingerings.append(fingering)
    return mark_default(fingerings)
