"""Generator for diminished and augmented chords.

A diminished seventh chord divides the octave into minor thirds and an
augmented triad into major thirds, so one shape repeats every three or
four frets and names several chords at once. Each chord gets the lowest
placement of its repeating shape and the copies above it, followed by
fixed-root movable forms.

Examples
--------
>>> [f.shape for f in get_symmetric_fingerings("C", "dim7")][:4]
['xx1212', 'xx4545', 'xx7878', 'x-x-10-11-10-11']
>>> get_symmetric_fingerings("C", "m7")
[]
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import NamedTuple

from chord_fingering.fretboard import A_STRING, D_STRING, LOW_E_STRING, build_fingering, fret_for_pitch
from chord_fingering.intervals import resolve_intervals
from chord_fingering.models import Fingering, FingeringSource, FretValue
from chord_fingering.parser import build_chord_name
from chord_fingering.shapes import ShapeTemplate, mark_default, realize_all, root_pitch_class, shape

logger = logging.getLogger(__name__)

HIGHEST_REPEAT_FRET = 12


class RepeatingShape(NamedTuple):
    """A D-string shape that repeats every ``period`` frets."""

    offsets: tuple[int | None, ...]
    period: int


# Offsets low E to high e from the D-string fret
REPEATING_SHAPES: MappingProxyType[str, RepeatingShape] = MappingProxyType(
    {
        "dim7": RepeatingShape((None, None, 0, 1, 0, 1), 3),
        "aug": RepeatingShape((None, None, 0, 3, 3, 2), 4),
    }
)

SYMMETRIC_SHAPES: MappingProxyType[str, tuple[ShapeTemplate, ...]] = MappingProxyType(
    {
        "dim": (
            shape("A-root", A_STRING, "x 0 1 2 1 x"),
            shape("D-root", D_STRING, "x x 0 1 3 1"),
            shape("E-root", LOW_E_STRING, "0 1 2 0 x x"),
        ),
        "dim7": (shape("A-root", A_STRING, "x 0 1 -1 1 x"),),
        "aug": (
            shape("A-root", A_STRING, "x 0 3 2 2 x"),
            shape("E-root", LOW_E_STRING, "0 3 2 1 1 0"),
        ),
        "aug7": (
            shape("A-root", A_STRING, "x 0 -1 0 x 1"),
            shape("E-root", LOW_E_STRING, "0 x 0 1 1 x"),
        ),
    }
)

SYMMETRIC_QUALITIES: tuple[str, ...] = tuple(SYMMETRIC_SHAPES)


def _repeat_frets(repeating: RepeatingShape, root_pc: int) -> list[tuple[FretValue, ...]]:
    first = fret_for_pitch(D_STRING, root_pc) % repeating.period
    patterns = []
    for fret in range(first, HIGHEST_REPEAT_FRET, repeating.period):
        low_to_high = [None if offset is None else fret + offset for offset in repeating.offsets]
        patterns.append(tuple(reversed(low_to_high)))
    return patterns


def get_symmetric_fingerings(root: str, quality: str) -> list[Fingering]:
    """Fingerings for dim, dim7, aug and aug7 chords.

    Parameters
    ----------
    root : str
        Root note name.
    quality : str
        Chord quality, any alias spelling (e.g., "°7", "+").

    Returns
    -------
    list[Fingering]
        Fingerings, empty for other qualities or an invalid root.
    """
    root_pc = root_pitch_class(root)
    canonical = resolve_intervals(quality).canonical
    if root_pc is None or canonical not in SYMMETRIC_QUALITIES:
        return []
    name = build_chord_name(root, canonical)

    fingerings: list[Fingering] = []
    repeating = REPEATING_SHAPES.get(canonical)
    if repeating is not None:
        for frets in _repeat_frets(repeating, root_pc):
            fingerings.append(
                build_fingering(
                    f"{FingeringSource.SYMMETRIC.value}-{name}-repeat-{frets[3]}",
                    frets,
                    FingeringSource.SYMMETRIC,
                    barre=False,
                )
            )

    seen = {fingering.frets for fingering in fingerings}
    for fingering in realize_all(SYMMETRIC_SHAPES[canonical], root_pc, name, FingeringSource.SYMMETRIC):
        if fingering.frets not in seen:
            seen.add(fingering.frets)
            fingerings.append(fingering)

    logger.debug("Symmetric shapes produced %d fingerings for %s", len(fingerings), name)
    return mark_default(fingerings)
