"""Fretboard geometry for a six-string guitar in standard tuning.

Strings are indexed from the high e string (0) to the low E string (5),
matching the per-string tuples of :class:`~chord_fingering.models.Fingering`.
Tab strings such as ``"x32010"`` are written the conventional way, from the
low E string to the high e string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from types import MappingProxyType

from chord_fingering.models import (
    STRING_COUNT,
    Difficulty,
    Fingering,
    FingeringSource,
    FretValue,
)
from chord_fingering.pitch_class import NOTE_TO_PC

# Open-string pitch classes, high e to low E
STANDARD_TUNING: tuple[int, ...] = (4, 11, 7, 2, 9, 4)
STRING_NAMES: tuple[str, ...] = ("e", "B", "G", "D", "A", "E")

LOW_E_STRING = 5
A_STRING = 4
D_STRING = 3
G_STRING = 2
B_STRING = 1
HIGH_E_STRING = 0

_TAB_TOKEN_RE = re.compile(r"^(?:x|X|\d{1,2})$")


def _root_fret_table(string: int) -> MappingProxyType[str, int]:
    open_pc = STANDARD_TUNING[string]
    return MappingProxyType({note: (pc - open_pc) % 12 for note, pc in NOTE_TO_PC.items()})


# Fret (0-11) of every note name on the three bass strings used as root strings
ROOT_FRETS: MappingProxyType[int, MappingProxyType[str, int]] = MappingProxyType(
    {string: _root_fret_table(string) for string in (LOW_E_STRING, A_STRING, D_STRING)}
)


def pitch_at(string: int, fret: int) -> int:
    """Pitch class sounded by a string at a fret.

    >>> pitch_at(4, 3)  # A string, 3rd fret
    0
    >>> pitch_at(0, 0)
    4
    """
    return (STANDARD_TUNING[string] + fret) % 12


def fret_for_pitch(string: int, pc: int) -> int:
    """Lowest fret (0-11) on ``string`` that sounds pitch class ``pc``.

    >>> fret_for_pitch(5, 7)  # G on the low E string
    3
    """
    return (pc - STANDARD_TUNING[string]) % 12


def root_fret(root: str, string: int) -> int:
    """Fret of ``root`` on one of the bass strings (3, 4 or 5).

    Raises
    ------
    KeyError
        If the note name is not known.
    """
    return ROOT_FRETS[string][root]


def sounding_pitch_classes(
    frets: Sequence[FretValue], muted: Sequence[bool] | None = None
) -> frozenset[int]:
    """Pitch classes sounded by a fret pattern, ignoring muted strings."""
    if muted is None:
        muted = [fret is None for fret in frets]
    return frozenset(
        pitch_at(string, fret)
        for string, (fret, is_muted) in enumerate(zip(frets, muted))
        if fret is not None and not is_muted
    )


def fingering_pitch_classes(fingering: Fingering) -> frozenset[int]:
    return sounding_pitch_classes(fingering.frets, fingering.muted)


def lowest_sounding_string(frets: Sequence[FretValue], muted: Sequence[bool] | None = None) -> int | None:
    """Index of the lowest-pitched string that sounds, or None."""
    for string in range(STRING_COUNT - 1, -1, -1):
        if frets[string] is not None and not (muted is not None and muted[string]):
            return string
    return None


def fretted(frets: Sequence[FretValue]) -> list[int]:
    """Non-open fret numbers of a pattern."""
    return [fret for fret in frets if fret is not None and fret > 0]


def stretch(frets: Sequence[FretValue]) -> int:
    """Span between the lowest and highest fretted notes."""
    pressed = fretted(frets)
    if not pressed:
        return 0
    return max(pressed) - min(pressed)


def anchor_base_fret(frets: Sequence[FretValue]) -> int:
    """Display anchor of a fret pattern.

    Shapes whose highest fretted note is at fret 4 or below are drawn from
    the nut; others are anchored at their lowest fretted note.

    >>> anchor_base_fret((0, 1, 0, 2, 3, None))
    1
    >>> anchor_base_fret((5, 5, 6, 7, 7, 5))
    5
    """
    pressed = fretted(frets)
    if not pressed or max(pressed) <= 4:
        return 1
    return min(pressed)


def is_displayable(fingering: Fingering, window: int = 4) -> bool:
    """Whether every sounding fretted note lies in ``[base_fret, base_fret + window]``."""
    low = fingering.base_fret
    high = fingering.base_fret + window
    return all(fret == 0 or low <= fret <= high for _, fret in fingering.sounding_frets)


def detect_barre(frets: Sequence[FretValue]) -> tuple[int, tuple[int, int]] | None:
    """Find a barre at the lowest fretted position.

    A barre needs at least two strings pressed at the minimum fret, and
    every string between the outermost two must be fretted at or above it.

    Returns
    -------
    tuple[int, tuple[int, int]] | None
        ``(fret, (first_string, last_string))`` or None.

    Examples
    --------
    >>> detect_barre((1, 1, 2, 3, 3, 1))
    (1, (0, 5))
    >>> detect_barre((0, 1, 0, 2, 3, None)) is None
    True
    """
    pressed = fretted(frets)
    if not pressed:
        return None
    barre_fret = min(pressed)
    strings = [string for string, fret in enumerate(frets) if fret == barre_fret]
    if len(strings) < 2:
        return None
    first, last = strings[0], strings[-1]
    for string in range(first, last + 1):
        fret = frets[string]
        if fret is None or fret < barre_fret:
            return None
    return barre_fret, (first, last)


def assign_fingers(
    frets: Sequence[FretValue],
    barre_at: int | None = None,
    barre_strings: tuple[int, int] | None = None,
) -> tuple[int | None, ...]:
    """Suggest a finger for each fretted string.

    Barred strings get the index finger. Remaining fretted strings are
    taken by ascending fret (lower strings first on ties) and given the next
    free finger up to the little finger; any further strings stay
    unassigned. The result is advisory.

    Examples
    --------
    >>> assign_fingers((0, 1, 0, 2, 3, None))
    (None, 1, None, 2, 3, None)
    >>> assign_fingers((1, 1, 2, 3, 3, 1), barre_at=1, barre_strings=(0, 5))
    (1, 1, 2, 4, 3, 1)
    """
    fingers: list[int | None] = [None] * STRING_COUNT
    barred: set[int] = set()
    if barre_at is not None and barre_strings is not None:
        first, last = barre_strings
        for string in range(first, last + 1):
            if frets[string] == barre_at:
                fingers[string] = 1
                barred.add(string)

    remaining = sorted(
        (fret, -string, string)
        for string, fret in enumerate(frets)
        if fret is not None and fret > 0 and string not in barred
    )
    next_finger = 2 if barred else 1
    for _, _, string in remaining:
        if next_finger > 4:
            break
        fingers[string] = next_finger
        next_finger += 1
    return tuple(fingers)


def difficulty_for(base_fret: int, has_barre: bool) -> Difficulty:
    """Heuristic difficulty from fret height and barre presence.

    >>> difficulty_for(1, has_barre=False)
    'easy'
    >>> difficulty_for(3, has_barre=True)
    'medium'
    >>> difficulty_for(7, has_barre=True)
    'hard'
    """
    if not has_barre and base_fret == 1:
        return "easy"
    if base_fret <= 4:
        return "medium"
    return "hard"


def parse_tab(shape: str) -> tuple[FretValue, ...]:
    """Parse a low-to-high tab string into a high-to-low fret tuple.

    Accepts the compact form (``"x32010"``) and a separated form for frets
    above 9 (``"8-10-10-9-8-8"`` or ``"8 10 10 9 8 8"``).

    Raises
    ------
    ValueError
        If the string does not describe exactly six strings.

    Examples
    --------
    >>> parse_tab("x32010")
    (0, 1, 0, 2, 3, None)
    >>> parse_tab("8-10-10-9-8-8")
    (8, 8, 9, 10, 10, 8)
    """
    text = shape.strip()
    tokens = re.split(r"[-\s,]+", text) if re.search(r"[-\s,]", text) else list(text)
    if len(tokens) != STRING_COUNT or not all(_TAB_TOKEN_RE.match(token) for token in tokens):
        msg = f"Invalid tab shape: {shape!r}"
        raise ValueError(msg)
    low_to_high = [None if token in ("x", "X") else int(token) for token in tokens]
    return tuple(reversed(low_to_high))


def build_fingering(
    id: str,
    frets: Sequence[FretValue],
    source: FingeringSource,
    *,
    difficulty: Difficulty | None = None,
    fingers: Sequence[int | None] | None = None,
    barre: bool = True,
    base_fret: int | None = None,
    score: float | None = None,
    is_default: bool = False,
) -> Fingering:
    """Assemble a Fingering from a fret pattern, deriving what is not given.

    Parameters
    ----------
    id : str
        Fingering identifier.
    frets : Sequence[int | None]
        High-to-low fret pattern; None marks a muted string.
    source : FingeringSource
        Producing source.
    difficulty : Difficulty | None
        Explicit label; derived with :func:`difficulty_for` when None.
    fingers : Sequence[int | None] | None
        Explicit fingers; derived with :func:`assign_fingers` when None.
    barre : bool
        Detect a barre at the lowest fret; False marks the shape as barre-free.
    base_fret : int | None
        Explicit display anchor; derived with :func:`anchor_base_fret` when None.
    score : float | None
        Search score.
    is_default : bool
        Default flag.
    """
    frets = tuple(frets)
    barre_at = None
    barre_strings = None
    if barre:
        detected = detect_barre(frets)
        if detected is not None:
            barre_at, barre_strings = detected

    if base_fret is None:
        base_fret = anchor_base_fret(frets)
    if fingers is None:
        fingers = assign_fingers(frets, barre_at, barre_strings)
    if difficulty is None:
        difficulty = difficulty_for(base_fret, barre_at is not None)

    return Fingering(
        id=id,
        frets=frets,
        fingers=tuple(fingers),
        muted=tuple(fret is None for fret in frets),
        base_fret=base_fret,
        difficulty=difficulty,
        source=source,
        barre_at=barre_at,
        barre_strings=barre_strings,
        is_default=is_default,
        score=score,
    )


def generate_tab_notation(fingering: Fingering) -> str:
    """Render a fingering as six lines of ASCII tab, high e first.

    Examples
    --------
    >>> from chord_fingering.models import FingeringSource
    >>> print(generate_tab_notation(build_fingering("c", parse_tab("x32010"), FingeringSource.DATABASE)))
    e|--0---
    B|--1---
    G|--0---
    D|--2---
    A|--3---
    E|--x---
    """
    lines = []
    for name, fret, muted in zip(STRING_NAMES, fingering.frets, fingering.muted):
        token = "x" if muted or fret is None else str(fret)
        lines.append(f"{name}|--{token.ljust(2, '-')}--")
    return "\n".join(lines)
