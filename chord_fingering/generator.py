"""Fingering generation pipeline.

Queries every curated source in a fixed order, merges their fingerings
without repeated fret patterns, falls back to the dynamic fretboard
search when the curated sources find too little, then drops anything
that does not fit the diagram window and ranks the rest.

Examples
--------
>>> generate_chord_fingering("C").shape
'x32010'
>>> generate_chord_fingerings("F")[0].barre_at
1
>>> generate_chord_fingerings("H7")
[]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import NamedTuple

from chord_fingering.config import DEFAULT_CONFIG, EngineConfig
from chord_fingering.fretboard import is_displayable
from chord_fingering.intervals import resolve_intervals
from chord_fingering.models import DIFFICULTY_RANK, ChordSymbol, Fingering, FingeringSource
from chord_fingering.parser import parse_chord_name
from chord_fingering.search import find_dynamic_fingerings
from chord_fingering.sources import (
    get_caged_fingerings,
    get_database_fingerings,
    get_extended_fingerings,
    get_half_diminished_fingerings,
    get_power_chord_fingerings,
    get_standard_fingerings,
    get_sus2_fingerings,
    get_symmetric_fingerings,
    is_caged_supported,
)

logger = logging.getLogger(__name__)

DedupKey = tuple[tuple[int | None, ...], tuple[bool, ...]]


class SourceSpec(NamedTuple):
    """A curated source and how to query it for a parsed chord."""

    source: FingeringSource
    fetch: Callable[[ChordSymbol, str], list[Fingering]]


def _canonical_quality(symbol: ChordSymbol) -> str | None:
    return resolve_intervals(symbol.quality).canonical


def _database(symbol: ChordSymbol, name: str) -> list[Fingering]:
    return get_database_fingerings(name)


def _caged(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if not is_caged_supported(symbol.quality):
        return []
    return get_caged_fingerings(name)


def _standard(symbol: ChordSymbol, name: str) -> list[Fingering]:
    return get_standard_fingerings(name)


# This adapter and the ones after it call root-keyed generators that have no
# slash bass, so slash chords get no specialized fingerings.
def _power_chord(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if symbol.is_slash or _canonical_quality(symbol) != "5":
        return []
    return get_power_chord_fingerings(symbol.root)


def _sus2(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if symbol.is_slash or _canonical_quality(symbol) != "sus2":
        return []
    return get_sus2_fingerings(symbol.root)


def _symmetric(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if symbol.is_slash:
        return []
    return get_symmetric_fingerings(symbol.root, symbol.quality)


def _half_diminished(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if symbol.is_slash or _canonical_quality(symbol) != "m7b5":
        return []
    return get_half_diminished_fingerings(symbol.root)


def _extended(symbol: ChordSymbol, name: str) -> list[Fingering]:
    if symbol.is_slash:
        return []
    return get_extended_fingerings(symbol.root, symbol.quality)


# Query order; earlier sources win when two produce the same fret pattern
CURATED_SOURCES: tuple[SourceSpec, ...] = (
    SourceSpec(FingeringSource.DATABASE, _database),
    SourceSpec(FingeringSource.CAGED, _caged),
    SourceSpec(FingeringSource.STANDARD, _standard),
    SourceSpec(FingeringSource.POWER_CHORD, _power_chord),
    SourceSpec(FingeringSource.SUS2, _sus2),
    SourceSpec(FingeringSource.SYMMETRIC, _symmetric),
    SourceSpec(FingeringSource.HALF_DIMINISHED, _half_diminished),
    SourceSpec(FingeringSource.EXTENDED, _extended),
)


def _merge(
    merged: list[Fingering],
    seen: set[DedupKey],
    fingerings: Iterable[Fingering],
    limit: int | None = None,
) -> int:
    """Append fingerings with unseen fret patterns; returns how many were added."""
    added = 0
    for fingering in fingerings:
        if limit is not None and len(merged) >= limit:
            break
        if fingering.dedup_key in seen:
            logger.debug("Dropping duplicate fingering %s", fingering.id)
            continue
        seen.add(fingering.dedup_key)
        merged.append(fingering)
        added += 1
    return added


def rank_key(fingering: Fingering) -> tuple[bool, bool, int, int]:
    """Sort key: curated before dynamic, open before barred, easy first, low first."""
    return (
        fingering.source is FingeringSource.DYNAMIC,
        not fingering.is_open_position,
        DIFFICULTY_RANK[fingering.difficulty],
        fingering.base_fret,
    )


def finalize_fingerings(
    candidates: Iterable[Fingering],
    config: EngineConfig | None = None,
) -> list[Fingering]:
    """Filter, rank and stamp the default on merged candidates.

    Fingerings that do not fit the display window are dropped with no
    fallback, the rest are sorted with :func:`rank_key` (stable), and only
    the first result is flagged as the default.

    Parameters
    ----------
    candidates : Iterable[Fingering]
        Merged fingerings from every source.
    config : EngineConfig | None
        Supplies the display window; None uses ``DEFAULT_CONFIG``.

    Returns
    -------
    list[Fingering]
        Ranked fingerings, possibly empty.
    """
    config = config or DEFAULT_CONFIG
    displayable = []
    for fingering in candidates:
        if is_displayable(fingering, config.display_window):
            displayable.append(fingering)
        else:
            logger.debug("Dropping undisplayable fingering %s (%s)", fingering.id, fingering.shape)

    ranked = sorted(displayable, key=rank_key)
    return [replace(fingering, is_default=(index == 0)) for index, fingering in enumerate(ranked)]


def collect_fingerings(
    symbol: ChordSymbol,
    name: str,
    config: EngineConfig | None = None,
) -> list[Fingering]:
    """Merged, unfiltered candidates from the curated sources and dynamic search."""
    config = config or DEFAULT_CONFIG
    merged: list[Fingering] = []
    seen: set[DedupKey] = set()

    for spec in CURATED_SOURCES:
        found = spec.fetch(symbol, name)
        if found:
            added = _merge(merged, seen, found)
            logger.debug(
                "%s gave %d fingerings for %s, %d new", spec.source.value, len(found), name, added
            )

    if len(merged) < config.dynamic_threshold:
        resolution = resolve_intervals(symbol.quality)
        if not resolution.resolved:
            logger.debug("Quality %r of %s is unresolved", symbol.quality, name)
        logger.debug("Running dynamic search for %s (%d curated fingerings)", name, len(merged))
        dynamic = find_dynamic_fingerings(symbol, resolution.intervals, config)
        _merge(merged, seen, dynamic, limit=config.max_results)

    return merged


def generate_chord_fingerings(name: str, config: EngineConfig | None = None) -> list[Fingering]:
    """Playable fingerings for a chord name, best first.

    Parameters
    ----------
    name : str
        Chord name such as "C", "F#m7b5", "B♭maj7" or "D/F#".
    config : EngineConfig | None
        Engine tunables; None uses ``DEFAULT_CONFIG``.

    Returns
    -------
    list[Fingering]
        Ranked fingerings with exactly one default at index 0, or an empty
        list when the name cannot be parsed or nothing fits the diagram.
    """
    symbol = parse_chord_name(name)
    if symbol is None:
        logger.debug("Could not parse chord name %r", name)
        return []
    return finalize_fingerings(collect_fingerings(symbol, name, config), config)


def generate_chord_fingering(name: str, config: EngineConfig | None = None) -> Fingering | None:
    """The default fingering for a chord name, or None."""
    fingerings = generate_chord_fingerings(name, config)
    return fingerings[0] if fingerings else None
