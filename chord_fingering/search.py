"""Dynamic fretboard search.

Fallback generator for chords the curated sources know little or nothing
about. Given the chord's resolved intervals it builds fingerings string by
string under a stretch limit and scores them for playability.

Slash chords first try four bass-aware heuristics:

1. Fifth-string bass: bass on the A string, chord tones barred on the
   middle strings (``x64 44x`` for B/D#).
2. Simple slash: bass on the G string with open treble strings above.
3. High-string slash: bass on the D string, chord tones near the bass fret.
4. Low-string slash: bass on the low E or A string under a barre.

Every chord then runs the position search, one attempt per window start
fret. Candidates are sorted by score (stable, so the first found wins
ties), deduplicated on their fret pattern and capped.

Examples
--------
>>> from chord_fingering.parser import parse_chord_name
>>> symbol = parse_chord_name("B/D#")
>>> [f.shape for f in find_dynamic_fingerings(symbol, (0, 4, 7))][0]
'x6444x'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from chord_fingering.config import DEFAULT_CONFIG, EngineConfig, StrategyWeights
from chord_fingering.fretboard import (
    A_STRING,
    D_STRING,
    G_STRING,
    LOW_E_STRING,
    build_fingering,
    detect_barre,
    fretted,
    pitch_at,
    sounding_pitch_classes,
    stretch,
)
from chord_fingering.models import (
    STRING_COUNT,
    ChordSymbol,
    Difficulty,
    Fingering,
    FingeringSource,
    FretValue,
)
from chord_fingering.pitch_class import pitch_classes_from_intervals

logger = logging.getLogger(__name__)

# Intervals that earn a bonus in four-note and larger chords: sixth and sevenths
COLOR_INTERVALS = frozenset({9, 10, 11})


@dataclass(frozen=True)
class SearchTarget:
    """Pitch content a dynamic search has to voice.

    Parameters
    ----------
    name : str
        Chord name, used in fingering ids.
    root_pc : int
        Root pitch class.
    bass_pc : int
        Bass pitch class; the root for chords without a slash bass.
    chord_pcs : frozenset[int]
        Chord tones above the bass.
    is_slash : bool
        Whether the chord names a separate bass note.
    """

    name: str
    root_pc: int
    bass_pc: int
    chord_pcs: frozenset[int]
    is_slash: bool

    @classmethod
    def from_symbol(cls, symbol: ChordSymbol, intervals: Sequence[int]) -> SearchTarget:
        root_pc = symbol.root_pc
        bass_pc = symbol.bass_pc
        return cls(
            name=symbol.name,
            root_pc=root_pc,
            bass_pc=root_pc if bass_pc is None else bass_pc,
            chord_pcs=pitch_classes_from_intervals(root_pc, intervals),
            is_slash=symbol.is_slash,
        )

    @property
    def is_extended(self) -> bool:
        return len(self.chord_pcs) >= 4

    def interval_of(self, pc: int) -> int:
        return (pc - self.root_pc) % 12

    def tone_bonus(self, pc: int, root: int, third: int, fifth: int) -> int:
        """Priority bonus for the root, third (major or minor) and perfect fifth."""
        interval = self.interval_of(pc)
        if interval == 0:
            return root
        if interval in (3, 4):
            return third
        if interval == 7:
            return fifth
        return 0


class Candidate(NamedTuple):
    """A scored fret pattern waiting to become a Fingering."""

    frets: tuple[FretValue, ...]
    score: float
    difficulty: Difficulty
    barre: bool


def _barre_size(frets: Sequence[FretValue]) -> int:
    detected = detect_barre(frets)
    if detected is None:
        return 0
    barre_fret, (first, last) = detected
    return sum(1 for string in range(first, last + 1) if frets[string] == barre_fret)


def _open_count(frets: Sequence[FretValue]) -> int:
    return sum(1 for fret in frets if fret == 0)


def _min_fret(frets: Sequence[FretValue]) -> int:
    pressed = fretted(frets)
    return min(pressed) if pressed else 0


def _score(
    weights: StrategyWeights,
    frets: Sequence[FretValue],
    *,
    bass_present: bool = False,
    barre: bool = False,
    bass_fret: int | None = None,
) -> float:
    score = weights.base
    score += weights.open_string * _open_count(frets)
    score -= weights.stretch * stretch(frets)
    score -= weights.min_fret * _min_fret(frets)
    if bass_present:
        score += weights.bass_present
    if barre:
        score += weights.barre
    if bass_fret is not None:
        score -= weights.bass_distance * abs(bass_fret - 4)
    return score


def _is_playable(frets: Sequence[FretValue], config: EngineConfig) -> bool:
    if len(sounding_pitch_classes(frets)) < config.min_pitch_classes:
        return False
    return stretch(frets) <= config.max_stretch


def _best_fret(
    string: int,
    frets_to_try: Sequence[int],
    allowed: frozenset[int],
    priority_of: Callable[[int, int, int], int],
) -> int | None:
    """Highest-priority fret on a string; the first one found wins ties."""
    best_fret = None
    best_priority = -1
    for fret in frets_to_try:
        pc = pitch_at(string, fret)
        if pc not in allowed:
            continue
        priority = priority_of(string, pc, fret)
        if priority > best_priority:
            best_priority = priority
            best_fret = fret
    return best_fret


def _bass_frets(string: int, bass_pc: int, highest: int) -> list[int]:
    return [fret for fret in range(highest + 1) if pitch_at(string, fret) == bass_pc]


# Slash chord strategies


def _fifth_string_bass(target: SearchTarget, bass_fret: int, config: EngineConfig) -> Candidate | None:
    frets: list[FretValue] = [None] * STRING_COUNT
    frets[A_STRING] = bass_fret

    possible = [
        fret
        for fret in range(1, 6)
        if sum(1 for string in (1, 2, 3) if pitch_at(string, fret) in target.chord_pcs) >= 2
    ]
    below_bass = [fret for fret in possible if fret < bass_fret]
    barre_fret = below_bass[0] if below_bass else (possible[0] if possible else None)

    if barre_fret is not None:
        for string in (1, 2, 3):
            if pitch_at(string, barre_fret) in target.chord_pcs:
                frets[string] = barre_fret

    for fret in range(6):
        if pitch_at(0, fret) in target.chord_pcs and fret in (0, barre_fret):
            frets[0] = fret
            break

    if not _is_playable(frets, config):
        return None
    barre = _barre_size(frets) >= 3
    score = _score(config.weights.fifth_string_bass, frets, barre=barre)
    return Candidate(tuple(frets), score, "medium" if barre else "easy", barre)


def _simple_slash(target: SearchTarget, config: EngineConfig) -> Candidate | None:
    bass_frets = _bass_frets(G_STRING, target.bass_pc, 5)
    if not bass_frets:
        return None
    frets: list[FretValue] = [None] * STRING_COUNT
    frets[G_STRING] = bass_frets[0]

    def priority(string: int, pc: int, fret: int) -> int:
        value = 1 + target.tone_bonus(pc, root=5, third=3, fifth=2)
        return value + 15 if fret == 0 else value

    for string in range(G_STRING - 1, -1, -1):
        frets[string] = _best_fret(string, range(6), target.chord_pcs, priority)

    if not _is_playable(frets, config):
        return None
    score = _score(config.weights.simple_slash, frets)
    difficulty: Difficulty = "easy" if _open_count(frets) >= 2 else "medium"
    return Candidate(tuple(frets), score, difficulty, False)


def _high_string_slash(target: SearchTarget, bass_fret: int, config: EngineConfig) -> Candidate | None:
    frets: list[FretValue] = [None] * STRING_COUNT
    frets[D_STRING] = bass_fret
    near_low = max(0, bass_fret - 1)
    near_high = bass_fret + 3

    def priority(string: int, pc: int, fret: int) -> int:
        value = 1 + target.tone_bonus(pc, root=4, third=3, fifth=2)
        if fret == 0:
            value += 8
        if near_low <= fret <= near_high:
            value += 3
            if fret == bass_fret:
                value += 2
        return value

    for string in range(D_STRING - 1, -1, -1):
        frets[string] = _best_fret(string, range(near_high + 1), target.chord_pcs, priority)

    if not _is_playable(frets, config):
        return None
    barre = _barre_size(frets) >= 3
    score = _score(config.weights.high_string_slash, frets)
    difficulty: Difficulty = "easy" if _open_count(frets) >= 2 else "medium"
    if stretch(frets) >= 3 or barre:
        difficulty = "medium"
    return Candidate(tuple(frets), score, difficulty, barre)


def _low_string_slash(
    target: SearchTarget, bass_string: int, bass_fret: int, config: EngineConfig
) -> Candidate | None:
    frets: list[FretValue] = [None] * STRING_COUNT
    frets[bass_string] = bass_fret
    position = bass_fret if bass_fret > 0 else 1

    def priority(string: int, pc: int, fret: int) -> int:
        value = 1 + target.tone_bonus(pc, root=5, third=3, fifth=2)
        return value + 2 if fret == position else value

    for string in range(bass_string - 1, -1, -1):
        frets[string] = _best_fret(string, range(position, position + 4), target.chord_pcs, priority)

    if not _is_playable(frets, config):
        return None
    barre = detect_barre(frets) is not None
    score = _score(config.weights.low_string_slash, frets, bass_fret=bass_fret)
    difficulty: Difficulty = "medium"
    if stretch(frets) >= 3 or _min_fret(frets) >= 7:
        difficulty = "hard"
    return Candidate(tuple(frets), score, difficulty, barre)


def _slash_candidates(target: SearchTarget, config: EngineConfig) -> list[Candidate]:
    attempts: list[Candidate | None] = []
    attempts.extend(
        _fifth_string_bass(target, fret, config) for fret in _bass_frets(A_STRING, target.bass_pc, 7)
    )
    attempts.append(_simple_slash(target, config))
    attempts.extend(
        _high_string_slash(target, fret, config) for fret in _bass_frets(D_STRING, target.bass_pc, 7)
    )
    for bass_string in (LOW_E_STRING, A_STRING):
        attempts.extend(
            _low_string_slash(target, bass_string, fret, config)
            for fret in _bass_frets(bass_string, target.bass_pc, 12)
        )
    return [candidate for candidate in attempts if candidate is not None]


# Position search


def _position_window(start: int) -> tuple[int, ...]:
    """Open strings plus the four-fret window starting at ``start``."""
    return (0, *range(max(start, 1), start + 5))


def _add_missing_tones(
    target: SearchTarget,
    frets: list[FretValue],
    muted: list[bool],
    window: tuple[int, ...],
) -> None:
    """Place chord tones the greedy pass left out, in place."""
    for missing in sorted(target.chord_pcs, key=target.interval_of):
        if missing in sounding_pitch_classes(frets, muted):
            continue

        placed = False
        for string in range(STRING_COUNT):
            if frets[string] is not None or muted[string]:
                continue
            fret = next((f for f in window if pitch_at(string, f) == missing), None)
            if fret is not None:
                frets[string] = fret
                placed = True
                break
        if placed:
            continue

        # Reuse the higher of two strings sounding the same pitch class
        strings_by_pc: dict[int, list[int]] = {}
        for string, fret in enumerate(frets):
            if fret is not None and not muted[string]:
                strings_by_pc.setdefault(pitch_at(string, fret), []).append(string)
        for pc in sorted(strings_by_pc):
            strings = strings_by_pc[pc]
            if len(strings) < 2:
                continue
            fret = next((f for f in window if pitch_at(strings[0], f) == missing), None)
            if fret is not None:
                frets[strings[0]] = fret
                break


def _try_position(target: SearchTarget, start: int, config: EngineConfig) -> Candidate | None:
    window = _position_window(start)
    frets: list[FretValue] = [None] * STRING_COUNT
    muted = [False] * STRING_COUNT

    def priority(string: int, pc: int, fret: int) -> int:
        value = 1
        if string >= A_STRING:
            if pc == target.bass_pc:
                value = 10
            elif pc == target.root_pc:
                value = 8
        if fret == 0:
            value += 2
        value += target.tone_bonus(pc, root=3, third=2, fifth=1)
        if target.is_extended and target.interval_of(pc) in COLOR_INTERVALS:
            value += 4
        return value

    for string in range(LOW_E_STRING, -1, -1):
        allowed = target.chord_pcs
        if string >= A_STRING:
            allowed = allowed | {target.bass_pc}
        fret = _best_fret(string, window, allowed, priority)
        if fret is None:
            # Unplayable bass strings are damped; treble strings are just left out
            muted[string] = string >= A_STRING
        else:
            frets[string] = fret

    if target.is_extended:
        _add_missing_tones(target, frets, muted, window)

    bass_present = False
    for string in (LOW_E_STRING, A_STRING, D_STRING):
        fret = frets[string]
        if fret is None or muted[string] or pitch_at(string, fret) != target.bass_pc:
            continue
        bass_present = True
        for lower in range(LOW_E_STRING, string, -1):
            lower_fret = frets[lower]
            if lower_fret is not None and pitch_at(lower, lower_fret) != target.bass_pc:
                muted[lower] = True
        break

    final = tuple(None if is_muted else fret for fret, is_muted in zip(frets, muted))
    if not _is_playable(final, config):
        return None

    barre = detect_barre(final) is not None
    difficulty: Difficulty = "medium" if barre else "easy"
    if stretch(final) >= 3 or _min_fret(final) >= 5:
        difficulty = "hard"
    score = _score(config.weights.position, final, bass_present=bass_present)
    return Candidate(final, score, difficulty, barre)


def find_dynamic_fingerings(
    symbol: ChordSymbol,
    intervals: Sequence[int],
    config: EngineConfig | None = None,
) -> list[Fingering]:
    """Search the fretboard for fingerings of a chord.

    Parameters
    ----------
    symbol : ChordSymbol
        Parsed chord; a slash bass enables the bass-aware strategies.
    intervals : Sequence[int]
        Resolved intervals of the chord quality.
    config : EngineConfig | None
        Search limits and score weights; None uses ``DEFAULT_CONFIG``.

    Returns
    -------
    list[Fingering]
        Up to ``config.max_dynamic_candidates`` fingerings, best score
        first. Empty when ``intervals`` is empty.
    """
    config = config or DEFAULT_CONFIG
    if not intervals:
        logger.debug("No intervals for %s, skipping dynamic search", symbol.name)
        return []

    target = SearchTarget.from_symbol(symbol, intervals)
    candidates: list[Candidate] = []
    if target.is_slash:
        candidates.extend(_slash_candidates(target, config))
    for start in config.search_start_frets:
        candidate = _try_position(target, start, config)
        if candidate is not None:
            candidates.append(candidate)

    candidates.sort(key=lambda candidate: candidate.score, reverse=True)

    fingerings: list[Fingering] = []
    seen: set[tuple[FretValue, ...]] = set()
    for candidate in candidates:
        if candidate.frets in seen:
            continue
        seen.add(candidate.frets)
        fingerings.append(
            build_fingering(
                f"{FingeringSource.DYNAMIC.value}-{target.name}-{len(fingerings)}",
                candidate.frets,
                FingeringSource.DYNAMIC,
                difficulty=candidate.difficulty,
                barre=candidate.barre,
                score=candidate.score,
                is_default=not fingerings,
            )
        )
        if len(fingerings) >= config.max_dynamic_candidates:
            break

    logger.debug(
        "Dynamic search found %d candidates for %s, kept %d",
        len(candidates),
        target.name,
        len(fingerings),
    )
    return fingerings
