#!/usr/bin/env python3
"""CLI tool to list the fingerings of chord names and export them to JSON.

Usage:
    python examples/chord_fingerings.py <chord> [<chord> ...]

Examples:
    python examples/chord_fingerings.py C F "B/D#"
    python examples/chord_fingerings.py Cmaj9 --json --pretty
    python examples/chord_fingerings.py Am7 --transpose 3 --tab
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from chord_fingering import (
    EngineConfig,
    Fingering,
    generate_chord_fingerings,
    generate_tab_notation,
    transpose_chord,
)


def fingering_to_dict(fingering: Fingering) -> dict[str, Any]:
    """Convert a Fingering to a JSON-serializable dict."""
    return {
        "id": fingering.id,
        "shape": fingering.shape,
        "frets": list(fingering.frets),
        "fingers": list(fingering.fingers),
        "muted": list(fingering.muted),
        "base_fret": fingering.base_fret,
        "barre_at": fingering.barre_at,
        "barre_strings": list(fingering.barre_strings) if fingering.barre_strings else None,
        "difficulty": fingering.difficulty,
        "source": fingering.source.value,
        "is_default": fingering.is_default,
        "score": fingering.score,
    }


def chord_to_dict(name: str, config: EngineConfig) -> dict[str, Any]:
    """Convert a chord name and its fingerings to a JSON-serializable dict."""
    return {
        "chord": name,
        "fingerings": [fingering_to_dict(f) for f in generate_chord_fingerings(name, config)],
    }


def print_chord(name: str, config: EngineConfig, show_tab: bool) -> None:
    fingerings = generate_chord_fingerings(name, config)
    if not fingerings:
        print(f"{name}: no diagram available")
        return
    print(f"{name}:")
    for fingering in fingerings:
        marker = "*" if fingering.is_default else " "
        print(
            f"  {marker} {fingering.shape:<18} fret {fingering.base_fret:<2} "
            f"{fingering.difficulty:<6} {fingering.source.value}"
        )
    if show_tab:
        print(generate_tab_notation(fingerings[0]))
    print()


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="List playable fingerings for chord names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s C F "B/D#"
  %(prog)s Cmaj9 --json -o cmaj9.json
  %(prog)s Am7 --transpose 3 --tab
        """,
    )
    parser.add_argument(
        "chords",
        nargs="+",
        help="Chord names to look up",
    )
    parser.add_argument(
        "-t", "--transpose",
        type=int,
        default=0,
        help="Transpose every chord by this many semitones first",
    )
    parser.add_argument(
        "--tab",
        action="store_true",
        help="Print the default fingering as ASCII tab",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of a listing",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )

    args = parser.parse_args()

    try:
        config = EngineConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    names = [transpose_chord(name, args.transpose) for name in args.chords]

    if not args.json:
        for name in names:
            print_chord(name, config, args.tab)
        return 0

    data = [chord_to_dict(name, config) for name in names]
    indent = 2 if args.pretty else None
    json_output = json.dumps(data, indent=indent, ensure_ascii=False)

    if args.output:
        args.output.write_text(json_output)
        print(f"Wrote output to {args.output}")
    else:
        print(json_output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
