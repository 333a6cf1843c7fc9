"""Movable chord shape templates.

A template stores fret offsets relative to the root's fret on its root
string. Placing it for a root pitch class yields a concrete fret pattern;
offsets that would fall below the nut move the whole shape up an octave.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from chord_fingering.fretboard import STANDARD_TUNING, build_fingering
from chord_fingering.models import Difficulty, Fingering, FingeringSource, FretValue
from chord_fingering.pitch_class import normalize_accidentals, note_to_pc


@dataclass(frozen=True)
class ShapeTemplate:
    """A chord shape that can be moved along the neck.

    Parameters
    ----------
    label : str
        Short name used in fingering ids (e.g., "A-form").
    root_string : int
        String index carrying the root (5 = low E, 4 = A, 3 = D).
    offsets : tuple[int | None, ...]
        Fret offsets from the root fret, low E string first; None mutes.
    difficulty : Difficulty | None
        Label for moved placements; derived from the placement when None.
    barre : bool
        Whether a moved placement may be held with a barre.
    """

    label: str
    root_string: int
    offsets: tuple[int | None, ...]
    difficulty: Difficulty | None = None
    barre: bool = True

    def root_fret(self, root_pc: int) -> int:
        """Fret of the root on the root string, raised an octave if needed."""
        fret = (root_pc - STANDARD_TUNING[self.root_string]) % 12
        lowest = min(offset for offset in self.offsets if offset is not None)
        if fret + lowest < 0:
            fret += 12
        return fret

    def place(self, root_pc: int) -> tuple[FretValue, ...]:
        """High-to-low fret pattern for a root pitch class."""
        fret = self.root_fret(root_pc)
        low_to_high = [None if offset is None else fret + offset for offset in self.offsets]
        return tuple(reversed(low_to_high))


def shape(
    label: str,
    root_string: int,
    offsets: str,
    difficulty: Difficulty | None = None,
    barre: bool = True,
) -> ShapeTemplate:
    """Build a template from a space-separated offset string.

    Examples
    --------
    >>> shape("A-form", 4, "x 0 2 2 2 0").offsets
    (None, 0, 2, 2, 2, 0)
    """
    tokens = offsets.split()
    if len(tokens) != 6:
        msg = f"Shape {label!r} needs 6 offsets, got {len(tokens)}"
        raise ValueError(msg)
    values = tuple(None if token == "x" else int(token) for token in tokens)
    return ShapeTemplate(label, root_string, values, difficulty, barre)


def realize(
    template: ShapeTemplate,
    root_pc: int,
    chord_name: str,
    source: FingeringSource,
) -> Fingering:
    """Place a template and wrap the result in a Fingering.

    A placement that uses open strings is an open-position chord: it never
    carries a barre and its difficulty comes from its fret height.
    """
    frets = template.place(root_pc)
    is_open = 0 in frets
    return build_fingering(
        f"{source.value}-{chord_name}-{template.label}",
        frets,
        source,
        difficulty=None if is_open else template.difficulty,
        barre=template.barre and not is_open,
    )


def realize_all(
    templates: tuple[ShapeTemplate, ...],
    root_pc: int,
    chord_name: str,
    source: FingeringSource,
) -> list[Fingering]:
    """Realize several templates, skipping repeated fret patterns."""
    fingerings: list[Fingering] = []
    seen: set[tuple[FretValue, ...]] = set()
    for template in templates:
        fingering = realize(template, root_pc, chord_name, source)
        if fingering.frets in seen:
            continue
        seen.add(fingering.frets)
        fingerings.append(fingering)
    return fingerings


def mark_default(fingerings: list[Fingering]) -> list[Fingering]:
    """Flag the most open, lowest-position fingering as the source's default."""
    if not fingerings:
        return fingerings
    best = min(
        range(len(fingerings)),
        key=lambda i: (not fingerings[i].is_open_position, fingerings[i].base_fret),
    )
    return [replace(f, is_default=(i == best)) for i, f in enumerate(fingerings)]


def root_pitch_class(root: str) -> int | None:
    """Pitch class of a root name, or None when it is not a note.

    >>> root_pitch_class("B♭")
    10
    >>> root_pitch_class("H") is None
    True
    """
    try:
        return note_to_pc(normalize_accidentals(root).strip())
    except ValueError:
        return None
