#!/usr/bin/env python3
"""Check that every curated fingering sounds the tones of its chord.

Usage:
    python scripts/verify_chord_tones.py
    python scripts/verify_chord_tones.py --dynamic
    python scripts/verify_chord_tones.py --chord "F#m7b5" --chord "B/D#"

Walks every fingering the curated sources can produce (all database
entries, the standard library, and the root-keyed generators over all
twelve roots) and reports any fingering whose sounding pitch classes are
not the chord's tones. A missing perfect fifth is tolerated. With
``--dynamic`` the full generation pipeline is also run for every root and
canonical quality.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from chord_fingering import generate_chord_fingerings, verify_chord_tones
from chord_fingering.intervals import CHORD_FORMULAS
from chord_fingering.parser import build_chord_name
from chord_fingering.pitch_class import NOTES
from chord_fingering.verification import iter_curated_fingerings

logger = logging.getLogger("verify_chord_tones")


def check(pairs) -> tuple[int, int]:
    """Verify (chord name, fingering) pairs and log every mismatch.

    Returns
    -------
    tuple[int, int]
        Number of fingerings checked and number of mismatches.
    """
    checked = 0
    failures = 0
    per_source: Counter[str] = Counter()
    for name, fingering in pairs:
        checked += 1
        report = verify_chord_tones(name, fingering)
        if report.ok:
            continue
        failures += 1
        per_source[fingering.source.value] += 1
        logger.info("%-10s %-22s %-18s %s", name, fingering.id, fingering.shape, report.describe())

    for source, count in sorted(per_source.items()):
        logger.info("%s: %d mismatches", source, count)
    return checked, failures


def pipeline_pairs(names):
    for name in names:
        for fingering in generate_chord_fingerings(name):
            yield name, fingering


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Verify chord tones of generated fingerings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --dynamic
  %(prog)s --chord Cmaj9 --chord "D/F#"
        """,
    )
    parser.add_argument(
        "--chord",
        action="append",
        default=None,
        help="Check the pipeline output for this chord only (repeatable)",
    )
    parser.add_argument(
        "--dynamic",
        action="store_true",
        help="Also check pipeline output for every root and canonical quality",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log engine debug output",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.chord:
        checked, failures = check(pipeline_pairs(args.chord))
    else:
        checked, failures = check(iter_curated_fingerings())
        if args.dynamic:
            names = [build_chord_name(root, quality) for root in NOTES for quality in CHORD_FORMULAS]
            more_checked, more_failures = check(pipeline_pairs(names))
            checked += more_checked
            failures += more_failures

    print(f"Checked {checked} fingerings, {failures} mismatches")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
