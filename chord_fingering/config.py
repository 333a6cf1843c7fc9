"""Engine configuration.

Centralized tunables for fingering generation. Defaults reproduce the
engine's documented behavior; changing a score weight changes which
fingering becomes the default for many chords, so weights live here and
nowhere else.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class StrategyWeights:
    """Score constants for one dynamic search strategy.

    Attributes:
        base: Starting score of every candidate.
        open_string: Bonus per sounding open string.
        stretch: Penalty per fret between lowest and highest fretted note.
        min_fret: Penalty per fret of the lowest fretted note.
        bass_present: Bonus when the lowest sounding string carries the bass.
        barre: Bonus when the shape can be held with a barre.
        bass_distance: Penalty per fret the bass sits away from the 4th fret.
    """

    base: float
    open_string: float = 0.0
    stretch: float = 5.0
    min_fret: float = 2.0
    bass_present: float = 0.0
    barre: float = 0.0
    bass_distance: float = 0.0


@dataclass(frozen=True)
class ScoreWeights:
    """Score constants for every dynamic search strategy."""

    position: StrategyWeights = StrategyWeights(
        base=100.0, open_string=5.0, stretch=10.0, min_fret=2.0, bass_present=20.0
    )
    simple_slash: StrategyWeights = StrategyWeights(
        base=200.0, open_string=15.0, stretch=5.0, min_fret=3.0
    )
    fifth_string_bass: StrategyWeights = StrategyWeights(
        base=190.0, stretch=5.0, min_fret=2.0, barre=10.0
    )
    high_string_slash: StrategyWeights = StrategyWeights(
        base=180.0, open_string=10.0, stretch=5.0, min_fret=2.0
    )
    low_string_slash: StrategyWeights = StrategyWeights(
        base=150.0, stretch=5.0, min_fret=0.0, bass_distance=2.0
    )


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for fingering generation.

    Attributes:
        display_window: Fretted notes must lie in [base_fret, base_fret + display_window]
        max_stretch: Largest allowed span between fretted notes in dynamic search
        min_pitch_classes: Fewest distinct pitch classes a dynamic candidate may sound
        dynamic_threshold: Dynamic search runs when curated sources give fewer results
        max_results: Cap on merged results once dynamic search has run
        max_dynamic_candidates: Cap on candidates taken from dynamic search
        search_start_frets: Window start frets tried by the position search
        weights: Score constants for dynamic search
    """

    display_window: int = 4
    max_stretch: int = 4
    min_pitch_classes: int = 3
    dynamic_threshold: int = 4
    max_results: int = 6
    max_dynamic_candidates: int = 4
    search_start_frets: tuple[int, ...] = tuple(range(0, 11))
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    @classmethod
    def from_env(cls) -> EngineConfig:
        """
        Create config from environment variables.

        Environment Variables:
            CHORD_FINGERING_DISPLAY_WINDOW: Display window width in frets
            CHORD_FINGERING_MAX_STRETCH: Dynamic search stretch limit
            CHORD_FINGERING_DYNAMIC_THRESHOLD: Result count that skips dynamic search
            CHORD_FINGERING_MAX_RESULTS: Cap on merged results
        """
        return cls(
            display_window=_env_int("CHORD_FINGERING_DISPLAY_WINDOW", cls.display_window),
            max_stretch=_env_int("CHORD_FINGERING_MAX_STRETCH", cls.max_stretch),
            dynamic_threshold=_env_int("CHORD_FINGERING_DYNAMIC_THRESHOLD", cls.dynamic_threshold),
            max_results=_env_int("CHORD_FINGERING_MAX_RESULTS", cls.max_results),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from None


# Default configuration instance
DEFAULT_CONFIG = EngineConfig()
