"""Curated fingering sources.

Each source maps a chord name (or a root, for the specialized generators)
to a list of fingerings and returns an empty list when it has nothing for
the chord.

Examples
--------
>>> from chord_fingering.sources import get_database_fingerings
>>> get_database_fingerings("C")[0].shape
'x32010'
"""

from chord_fingering.sources.caged import get_caged_fingerings, is_caged_supported
from chord_fingering.sources.database import (
    get_all_chord_names,
    get_chord_definition,
    get_database_fingerings,
    get_default_fingering,
)
from chord_fingering.sources.extended import get_extended_fingerings
from chord_fingering.sources.half_diminished import get_half_diminished_fingerings
from chord_fingering.sources.power import get_power_chord_fingerings
from chord_fingering.sources.standard import get_standard_fingerings
from chord_fingering.sources.sus2 import get_sus2_fingerings
from chord_fingering.sources.symmetric import get_symmetric_fingerings

__all__ = [
    "get_all_chord_names",
    "get_caged_fingerings",
    "get_chord_definition",
    "get_database_fingerings",
    "get_default_fingering",
    "get_extended_fingerings",
    "get_half_diminished_fingerings",
    "get_power_chord_fingerings",
    "get_standard_fingerings",
    "get_sus2_fingerings",
    "get_symmetric_fingerings",
    "is_caged_supported",
]
