"""Chord name transposition and key helpers."""

from __future__ import annotations

from collections.abc import Iterable

from chord_fingering.intervals import normalize_quality
from chord_fingering.models import ChordSymbol
from chord_fingering.parser import parse_chord_name
from chord_fingering.pitch_class import is_flat_spelling, transpose_note


def transpose_chord(name: str, semitones: int) -> str:
    """Transpose a chord name, keeping its quality suffix verbatim.

    The root and the slash bass move by ``semitones``. The result is spelled
    with flats when the input root or bass is spelled with a flat, with
    sharps otherwise. Names that cannot be parsed are returned unchanged.

    Only the name itself decides the spelling, so a flat spelling does not
    survive a stop on a natural root: "Db7" up 3 is "E7", and "E7" down 3
    is "C#7".

    Parameters
    ----------
    name : str
        Chord name.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        Transposed chord name.

    Examples
    --------
    >>> transpose_chord("Am7", 3)
    'Cm7'
    >>> transpose_chord("Bbmaj7", 2)
    'Cmaj7'
    >>> transpose_chord("Eb/G", 1)
    'E/Ab'
    >>> transpose_chord("D/F#", -2)
    'C/E'
    >>> transpose_chord("N.C.", 5)
    'N.C.'
    """
    if semitones == 0:
        return name
    symbol = parse_chord_name(name)
    if symbol is None:
        return name

    prefer_flat = is_flat_spelling(symbol.root) or (
        symbol.bass is not None and is_flat_spelling(symbol.bass)
    )
    root = transpose_note(symbol.root, semitones, prefer_flat=prefer_flat)
    bass = None
    if symbol.bass is not None:
        bass = transpose_note(symbol.bass, semitones, prefer_flat=prefer_flat)
    return ChordSymbol(root=root, quality=symbol.quality, bass=bass).name


def guess_key_from_chords(names: Iterable[str]) -> str | None:
    """Guess a song key from its chord names.

    Returns the root of the first major triad, falling back to the root of
    the first parsable chord, or None if nothing parses.

    Examples
    --------
    >>> guess_key_from_chords(["Am", "F", "C", "G"])
    'F'
    >>> guess_key_from_chords(["Em7", "Am"])
    'E'
    >>> guess_key_from_chords([]) is None
    True
    """
    first_root = None
    for name in names:
        symbol = parse_chord_name(name)
        if symbol is None:
            continue
        if first_root is None:
            first_root = symbol.root
        if normalize_quality(symbol.quality) == "":
            return symbol.root
    return first_root
