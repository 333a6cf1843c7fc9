"""Chord name parsing.

Splits a chord symbol into root, quality and optional slash bass. Parsing
failures are not errors: an input without a valid root yields ``None``.
"""

from __future__ import annotations

import re

from chord_fingering.intervals import normalize_quality
from chord_fingering.models import ChordSymbol
from chord_fingering.pitch_class import normalize_accidentals, normalize_note

# Root note with optional accidental, then everything else is the quality.
# A "b" starting "blk" belongs to the quality, so "Cblk" is C blackadder.
ROOT_RE = re.compile(r"^(?P<root>[A-G](?:#|b(?!lk))?)(?P<quality>.*)$")

# Trailing slash bass. "C6/9" keeps "6/9" as its quality because "9" is not a note.
SLASH_BASS_RE = re.compile(r"^(?P<chord>.+)/(?P<bass>[A-G][#b]?)$")


def parse_chord_name(name: str) -> ChordSymbol | None:
    """Parse a chord name into a ChordSymbol.

    Parameters
    ----------
    name : str
        Chord name such as "Am7", "F#m7b5", "B♭maj7" or "D/F#".

    Returns
    -------
    ChordSymbol | None
        The parsed symbol, or None when the name has no valid root.

    Examples
    --------
    >>> parse_chord_name("Am7")
    ChordSymbol(root='A', quality='m7', bass=None)
    >>> parse_chord_name("D/F♯")
    ChordSymbol(root='D', quality='', bass='F#')
    >>> parse_chord_name("C6/9")
    ChordSymbol(root='C', quality='6/9', bass=None)
    >>> parse_chord_name("Xyz") is None
    True
    """
    text = normalize_accidentals(name).strip()
    if not text:
        return None

    bass = None
    slash_match = SLASH_BASS_RE.match(text)
    if slash_match:
        text = slash_match.group("chord")
        bass = slash_match.group("bass")

    match = ROOT_RE.match(text)
    if match is None:
        return None
    return ChordSymbol(root=match.group("root"), quality=match.group("quality"), bass=bass)


def build_chord_name(root: str, quality: str = "", bass: str | None = None) -> str:
    """Assemble a chord name from its parts.

    >>> build_chord_name("C", "m7")
    'Cm7'
    >>> build_chord_name("G", "", bass="B")
    'G/B'
    """
    return ChordSymbol(root=root, quality=quality, bass=bass).name


def normalize_chord_name(name: str, canonical_root: bool = False) -> str | None:
    """Normalize a chord name for table lookups.

    Unicode accidentals and surrounding whitespace are normalized and the
    quality is mapped to its canonical token. With ``canonical_root`` the
    root and bass are respelled with sharps as well.

    Examples
    --------
    >>> normalize_chord_name("A♭maj7")
    'AbM7'
    >>> normalize_chord_name("Abmaj7", canonical_root=True)
    'G#M7'
    >>> normalize_chord_name("H7") is None
    True
    """
    symbol = parse_chord_name(name)
    if symbol is None:
        return None
    root, bass = symbol.root, symbol.bass
    if canonical_root:
        root = normalize_note(root)
        bass = normalize_note(bass) if bass is not None else None
    return build_chord_name(root, normalize_quality(symbol.quality), bass)
