"""Definition database of hand-authored fingerings.

Exact per-name fingerings for the open chords players expect first, the
common barre chords and the slash chords used in everyday songbooks.
Lookup is string equality after normalizing accidentals and the quality
spelling (``Cmaj7`` finds ``CM7``); there is no enharmonic or fuzzy match.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

from chord_fingering.fretboard import build_fingering, parse_tab
from chord_fingering.models import ChordDefinition, Difficulty, Fingering, FingeringSource
from chord_fingering.parser import normalize_chord_name


class _Entry(NamedTuple):
    label: str
    tab: str
    difficulty: Difficulty
    barre: bool = False


# Tabs run from the low E string to the high e string
_DEFINITIONS: dict[str, tuple[_Entry, ...]] = {
    # Major
    "C": (_Entry("open", "x32010", "easy"),),
    "D": (_Entry("open", "xx0232", "easy"),),
    "E": (_Entry("open", "022100", "easy"),),
    "F": (_Entry("barre", "133211", "hard", barre=True),),
    "G": (_Entry("open", "320003", "easy"),),
    "A": (_Entry("open", "x02220", "easy"),),
    "B": (_Entry("barre", "x24442", "medium", barre=True),),
    # Minor
    "Cm": (_Entry("barre", "x35543", "medium", barre=True),),
    "Dm": (_Entry("open", "xx0231", "easy"),),
    "Em": (_Entry("open", "022000", "easy"),),
    "Fm": (_Entry("barre", "133111", "hard", barre=True),),
    "Gm": (_Entry("barre", "355333", "hard", barre=True),),
    "Am": (_Entry("open", "x02210", "easy"),),
    "Bm": (_Entry("barre", "x24432", "medium", barre=True),),
    # Dominant seventh
    "C7": (_Entry("open", "x32310", "easy"),),
    "D7": (_Entry("open", "xx0212", "easy"),),
    "E7": (_Entry("open", "020100", "easy"),),
    "G7": (_Entry("open", "320001", "easy"),),
    "A7": (_Entry("open", "x02020", "easy"),),
    "B7": (_Entry("open", "x21202", "easy"),),
    # Minor seventh
    "Am7": (_Entry("open", "x02010", "easy"),),
    "Dm7": (_Entry("open", "xx0211", "easy"),),
    "Em7": (_Entry("open", "020000", "easy"), _Entry("open-d", "022030", "easy")),
    "Bm7": (_Entry("open", "x20202", "easy"),),
    # Major seventh
    "CM7": (_Entry("open", "x32000", "easy"),),
    "DM7": (_Entry("open", "xx0222", "easy"),),
    "EM7": (_Entry("open", "021100", "easy"),),
    "FM7": (_Entry("open", "xx3210", "easy"),),
    "GM7": (_Entry("open", "320002", "easy"),),
    "AM7": (_Entry("open", "x02120", "easy"),),
    # Suspended
    "Asus4": (_Entry("open", "x02230", "easy"),),
    "Dsus4": (_Entry("open", "xx0233", "easy"),),
    "Esus4": (_Entry("open", "022200", "easy"),),
    "Asus2": (_Entry("open", "x02200", "easy"),),
    "Dsus2": (_Entry("open", "xx0230", "easy"),),
    # Added ninth
    "Cadd9": (_Entry("open", "x32030", "easy"),),
    "Gadd9": (_Entry("open", "320203", "easy"),),
    # Slash chords
    "D/F#": (_Entry("open", "2x0232", "easy"),),
    "G/B": (_Entry("open", "x20003", "easy"),),
    "C/E": (_Entry("open", "032010", "easy"),),
    "C/G": (_Entry("open", "332010", "easy"),),
    "C/B": (_Entry("open", "x22010", "easy"),),
    "G/D": (_Entry("open", "xx0003", "easy"),),
    "G/F#": (_Entry("open", "2x0003", "easy"),),
    "D/A": (_Entry("open", "x00232", "easy"),),
    "D/C": (_Entry("open", "x30232", "easy"),),
    "Am/G": (_Entry("open", "3x2210", "easy"),),
    "Am/E": (_Entry("open", "002210", "easy"),),
    "Em/D": (_Entry("open", "xx0000", "easy"),),
    "A/C#": (_Entry("open", "x42220", "medium"),),
    "E/G#": (_Entry("open", "4x2100", "medium"),),
    "E7/G#": (_Entry("open", "4x0100", "medium"),),
    "Dm/F": (_Entry("open", "1x0231", "medium"),),
    "F/C": (_Entry("barre", "x33211", "medium", barre=True),),
    "F/A": (_Entry("barre", "x03211", "medium", barre=True),),
}


def _build_definition(name: str, entries: tuple[_Entry, ...]) -> ChordDefinition:
    fingerings = tuple(
        build_fingering(
            f"{FingeringSource.DATABASE.value}-{name}-{entry.label}",
            parse_tab(entry.tab),
            FingeringSource.DATABASE,
            difficulty=entry.difficulty,
            barre=entry.barre,
            is_default=(index == 0),
        )
        for index, entry in enumerate(entries)
    )
    return ChordDefinition(name=name, fingerings=fingerings)


CHORD_DATABASE: MappingProxyType[str, ChordDefinition] = MappingProxyType(
    {name: _build_definition(name, entries) for name, entries in _DEFINITIONS.items()}
)


def get_chord_definition(name: str) -> ChordDefinition | None:
    """Look up the stored definition for a chord name.

    Parameters
    ----------
    name : str
        Chord name; accidentals and quality aliases are normalized.

    Returns
    -------
    ChordDefinition | None
        The definition, or None if the name is not in the database.

    Examples
    --------
    >>> get_chord_definition("Cmaj7").name
    'CM7'
    >>> get_chord_definition("Db") is None
    True
    """
    key = normalize_chord_name(name)
    if key is None:
        return None
    return CHORD_DATABASE.get(key)


def get_database_fingerings(name: str) -> list[Fingering]:
    """Fingerings stored for a chord name; empty when there are none."""
    definition = get_chord_definition(name)
    if definition is None:
        return []
    return list(definition.fingerings)


def get_default_fingering(name: str) -> Fingering | None:
    """The stored default fingering for a chord name."""
    definition = get_chord_definition(name)
    if definition is None:
        return None
    return definition.default


def get_all_chord_names() -> list[str]:
    """All chord names in the database, sorted."""
    return sorted(CHORD_DATABASE)
