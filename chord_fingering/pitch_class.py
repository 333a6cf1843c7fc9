"""Pitch class arithmetic over the 12-tone equal-temperament space.

Note names map to pitch classes 0-11 (C=0). The canonical spelling of a
pitch class is its sharp name; flat spellings are available when a caller
asks for them. All arithmetic is performed mod 12.
"""

from __future__ import annotations

from collections.abc import Iterable

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Pitch class to note name, sharp-preferred (canonical) and flat-preferred
NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
NOTES_FLAT: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Unicode accidentals seen in lead sheets and copy-pasted chord charts
_ACCIDENTAL_GLYPHS: dict[str, str] = {
    "♯": "#",
    "♭": "b",
    "＃": "#",  # fullwidth number sign
}


def normalize_accidentals(text: str) -> str:
    """Replace Unicode sharp and flat glyphs with ASCII ``#`` and ``b``.

    Examples
    --------
    >>> normalize_accidentals("B♭7")
    'Bb7'
    >>> normalize_accidentals("F♯m")
    'F#m'
    """
    for glyph, ascii_char in _ACCIDENTAL_GLYPHS.items():
        text = text.replace(glyph, ascii_char)
    return text


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_to_note(pc: int, prefer_flat: bool = False) -> str:
    """Spell a pitch class as a note name.

    Parameters
    ----------
    pc : int
        Pitch class; reduced mod 12.
    prefer_flat : bool
        Spell black keys with flats instead of sharps.

    Returns
    -------
    str
        Note name.

    Examples
    --------
    >>> pc_to_note(1)
    'C#'
    >>> pc_to_note(1, prefer_flat=True)
    'Db'
    >>> pc_to_note(-1)
    'B'
    """
    names = NOTES_FLAT if prefer_flat else NOTES
    return names[pc % 12]


def normalize_note(note: str) -> str:
    """Return the canonical (sharp) spelling of a note name.

    >>> normalize_note("Bb")
    'A#'
    >>> normalize_note("Fb")
    'E'
    """
    return NOTES[note_to_pc(note)]


def is_flat_spelling(note: str) -> bool:
    """Whether a note name is spelled with a flat accidental."""
    return len(note) > 1 and note[1] == "b"


def transpose_note(note: str, semitones: int, prefer_flat: bool = False) -> str:
    """Transpose a note name by a number of semitones.

    Parameters
    ----------
    note : str
        Note name to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).
    prefer_flat : bool
        Spell the result with flats.

    Returns
    -------
    str
        Transposed note name.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> transpose_note("C", 2)
    'D'
    >>> transpose_note("A", 1, prefer_flat=True)
    'Bb'
    >>> transpose_note("C", -1)
    'B'
    """
    return pc_to_note(note_to_pc(note) + semitones, prefer_flat=prefer_flat)


def interval_between(low: str, high: str) -> int:
    """Ascending interval in semitones (0-11) from ``low`` to ``high``.

    >>> interval_between("C", "G")
    7
    >>> interval_between("G", "C")
    5
    """
    return (note_to_pc(high) - note_to_pc(low)) % 12


def pitch_classes_from_intervals(root_pc: int, intervals: Iterable[int]) -> frozenset[int]:
    """Reduce root-relative intervals (compound intervals allowed) to pitch classes.

    >>> sorted(pitch_classes_from_intervals(7, (0, 4, 7, 14)))
    [2, 7, 9, 11]
    """
    return frozenset((root_pc + interval) % 12 for interval in intervals)


def get_recommended_capo(original_capo: int, transpose: int) -> int:
    """Capo position that cancels a transposition of the chord names.

    Chord names moved up by ``n`` semitones sound at the original pitch
    with the capo ``n`` frets lower. When that would leave the 0-12 range
    the original capo is returned unchanged.

    Examples
    --------
    >>> get_recommended_capo(3, 2)
    1
    >>> get_recommended_capo(0, -2)
    2
    >>> get_recommended_capo(1, 3)
    1
    """
    new_capo = original_capo - transpose
    if 0 <= new_capo <= 12:
        return new_capo
    return original_capo
