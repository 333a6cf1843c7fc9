"""Data models for chord-fingering.

This module provides the parsed chord symbol and the fingering record
returned by every fingering source and by the generation pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from chord_fingering.pitch_class import note_to_pc

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTY_RANK: dict[str, int] = {"easy": 0, "medium": 1, "hard": 2}

# Strings are indexed from the highest-pitched (0, high e) to the lowest (5, low E)
STRING_COUNT = 6

FretValue = int | None


class FingeringSource(Enum):
    """Knowledge source that produced a fingering."""

    DATABASE = "database"
    CAGED = "caged"
    STANDARD = "standard"
    POWER_CHORD = "power"
    SUS2 = "sus2"
    SYMMETRIC = "symmetric"
    HALF_DIMINISHED = "half-diminished"
    EXTENDED = "extended"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ChordSymbol:
    """Parsed chord name.

    Parameters
    ----------
    root : str
        The root note as spelled in the input (e.g., "C", "F#", "Bb").
    quality : str
        Everything between the root and the optional slash bass
        (e.g., "", "m7", "maj7", "7b9").
    bass : str | None
        The bass note for slash chords.

    Examples
    --------
    >>> symbol = ChordSymbol(root="Bb", quality="m7")
    >>> symbol.root_pc
    10
    >>> ChordSymbol(root="C", quality="", bass="E").name
    'C/E'
    """

    root: str
    quality: str
    bass: str | None = None

    @property
    def root_pc(self) -> int:
        return note_to_pc(self.root)

    @property
    def bass_pc(self) -> int | None:
        if self.bass is None:
            return None
        return note_to_pc(self.bass)

    @property
    def is_slash(self) -> bool:
        return self.bass is not None

    @property
    def name(self) -> str:
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result


@dataclass(frozen=True)
class Fingering:
    """A playable fretboard fingering for one chord.

    Per-string tuples are indexed from the high e string (index 0) to the
    low E string (index 5).

    Parameters
    ----------
    id : str
        Opaque identifier encoding source and variant.
    frets : tuple[int | None, ...]
        Fret per string; 0 is an open string, None is not played.
    fingers : tuple[int | None, ...]
        Suggested finger (1-4) per string. Advisory only.
    muted : tuple[bool, ...]
        Whether each string is muted. A muted string never sounds.
    base_fret : int
        Display anchor; fretted notes lie in ``[base_fret, base_fret + 4]``.
    difficulty : Difficulty
        Coarse playability label.
    source : FingeringSource
        Knowledge source that produced this fingering.
    barre_at : int | None
        Fret of a single-finger barre, if any.
    barre_strings : tuple[int, int] | None
        Inclusive string-index range covered by the barre.
    is_default : bool
        Whether this is the recommended fingering of a result list.
    score : float | None
        Search score for dynamically generated fingerings.
    """

    id: str
    frets: tuple[FretValue, ...]
    fingers: tuple[int | None, ...]
    muted: tuple[bool, ...]
    base_fret: int
    difficulty: Difficulty
    source: FingeringSource
    barre_at: int | None = None
    barre_strings: tuple[int, int] | None = None
    is_default: bool = False
    score: float | None = None

    def __post_init__(self) -> None:
        for field_name in ("frets", "fingers", "muted"):
            if len(getattr(self, field_name)) != STRING_COUNT:
                msg = f"Fingering {self.id}: {field_name} must have {STRING_COUNT} entries"
                raise ValueError(msg)

    @property
    def dedup_key(self) -> tuple[tuple[FretValue, ...], tuple[bool, ...]]:
        """Key under which two fingerings count as the same fret pattern."""
        return (self.frets, self.muted)

    @property
    def sounding_frets(self) -> list[tuple[int, int]]:
        """(string index, fret) for every string that actually sounds."""
        return [
            (string, fret)
            for string, (fret, muted) in enumerate(zip(self.frets, self.muted))
            if not muted and fret is not None
        ]

    @property
    def is_open_position(self) -> bool:
        return self.barre_at is None and self.base_fret == 1

    @property
    def shape(self) -> str:
        """Conventional low-to-high tab string, e.g. ``"x32010"``.

        Frets above 9 switch the whole shape to dash-separated form
        (``"8-10-10-9-8-8"``).
        """
        tokens = [
            "x" if muted or fret is None else str(fret)
            for fret, muted in zip(reversed(self.frets), reversed(self.muted))
        ]
        if any(len(token) > 1 for token in tokens):
            return "-".join(tokens)
        return "".join(tokens)


@dataclass(frozen=True)
class ChordDefinition:
    """All curated fingerings stored for one chord name."""

    name: str
    fingerings: tuple[Fingering, ...]

    @property
    def default(self) -> Fingering | None:
        for fingering in self.fingerings:
            if fingering.is_default:
                return fingering
        return self.fingerings[0] if self.fingerings else None
