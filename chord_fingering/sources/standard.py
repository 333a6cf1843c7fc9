"""Standard chord library.

Hand-picked open voicings plus movable templates for the qualities the
CAGED forms do not cover (sixth-ninths, elevenths, thirteenths, altered
dominants, diminished and augmented chords) and four-string shell
voicings for sevenths and sixths. Entries are keyed by sharp root plus
canonical quality.

Lookup tries, in order: the name as given, the normalized symbol, the
enharmonic sharp root and finally the canonical quality alias.

Examples
--------
>>> get_standard_fingerings("Cadd9")[0].shape
'x32033'
>>> [f.shape for f in get_standard_fingerings("C13")]
['x32335', '8-x-8-9-10-10']
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from chord_fingering.fretboard import build_fingering, parse_tab
from chord_fingering.intervals import resolve_intervals
from chord_fingering.models import Fingering, FingeringSource
from chord_fingering.parser import build_chord_name, parse_chord_name
from chord_fingering.pitch_class import NOTES, normalize_note
from chord_fingering.shapes import mark_default, realize_all
from chord_fingering.sources.standard_data import OPEN_VOICINGS, STANDARD_TEMPLATES, OpenVoicing

logger = logging.getLogger(__name__)


def _open_fingering(name: str, voicing: OpenVoicing) -> Fingering:
    return build_fingering(
        f"{FingeringSource.STANDARD.value}-{name}-{voicing.label}",
        parse_tab(voicing.tab),
        FingeringSource.STANDARD,
        difficulty=voicing.difficulty,
        barre=False,
    )


def _build_library() -> MappingProxyType[str, tuple[Fingering, ...]]:
    library: dict[str, list[Fingering]] = {
        name: [_open_fingering(name, voicing) for voicing in voicings]
        for name, voicings in OPEN_VOICINGS.items()
    }
    for quality, templates in STANDARD_TEMPLATES.items():
        for root_pc, root in enumerate(NOTES):
            name = build_chord_name(root, quality)
            fingerings = library.setdefault(name, [])
            seen = {fingering.frets for fingering in fingerings}
            for fingering in realize_all(templates, root_pc, name, FingeringSource.STANDARD):
                if fingering.frets not in seen:
                    seen.add(fingering.frets)
                    fingerings.append(fingering)
    return MappingProxyType(
        {name: tuple(mark_default(fingerings)) for name, fingerings in library.items()}
    )


STANDARD_LIBRARY: MappingProxyType[str, tuple[Fingering, ...]] = _build_library()


def _lookup_keys(name: str) -> list[str]:
    symbol = parse_chord_name(name)
    if symbol is None:
        return [name]
    root = normalize_note(symbol.root)
    canonical = resolve_intervals(symbol.quality).canonical
    keys = [name, symbol.name, build_chord_name(root, symbol.quality)]
    if canonical is not None:
        keys.append(build_chord_name(root, canonical))
    return keys


def get_standard_fingerings(name: str) -> list[Fingering]:
    """Fingerings from the standard library.

    Parameters
    ----------
    name : str
        Chord name. Flat roots and alias qualities are accepted.

    Returns
    -------
    list[Fingering]
        Library fingerings; empty for slash chords and unknown names.
    """
    symbol = parse_chord_name(name)
    if symbol is None or symbol.is_slash:
        return []
    for key in _lookup_keys(name):
        fingerings = STANDARD_LIBRARY.get(key)
        if fingerings is not None:
            logger.debug("Standard library matched %s as %s", name, key)
            return list(fingerings)
    return []
