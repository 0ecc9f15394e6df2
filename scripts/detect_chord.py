"""CLI script: name the chord formed by a set of MIDI note numbers.

Usage:
    # Name a C major triad:
    python scripts/detect_chord.py 60 64 67

    # Flat spelling, every co-equal best name:
    python scripts/detect_chord.py 61 65 68 --flat --all

    # Keep "(9)(13)" instead of merging into "(9, 13)":
    python scripts/detect_chord.py 60 64 67 70 74 81 --no-merge

    # Also print degree notation in a key:
    python scripts/detect_chord.py 62 65 69 72 --tonic C --mode major

Output:
    One chord name per line (nothing matched → "(no chord)"), followed by
    the degree name when --tonic is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Name the chord formed by MIDI note numbers.")
    parser.add_argument(
        "pitches",
        type=int,
        nargs="+",
        metavar="MIDI",
        help="MIDI note numbers (0-127), in any order.",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        default=False,
        help="Spell accidentals with flats instead of sharps.",
    )
    parser.add_argument(
        "--all",
        dest="return_all",
        action="store_true",
        default=False,
        help="Print every co-equal best name, not just the first.",
    )
    parser.add_argument(
        "--no-merge",
        action="store_true",
        default=False,
        help="Keep separate tension parentheticals, e.g. C7(9)(13).",
    )
    parser.add_argument(
        "--tonic",
        type=str,
        default=None,
        help="Tonic for degree notation, e.g. C, F♯, B♭ (ASCII # and b also accepted).",
    )
    parser.add_argument(
        "--mode",
        choices=("major", "minor"),
        default="major",
        help="Key mode for degree notation (default: major).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    from core.chords import DetectionOptions, chord_to_degree, detect_chord, midi_to_note_name

    try:
        notes = [midi_to_note_name(p, "flat" if args.flat else "sharp") for p in sorted(set(args.pitches))]
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    logger.info("Notes: %s", " ".join(notes))

    options = DetectionOptions(
        accidental_notation="flat" if args.flat else "sharp",
        return_all=args.return_all,
        merge_parentheses=not args.no_merge,
    )
    result = detect_chord(args.pitches, options)

    if not result:
        print("(no chord)")
        return 1

    for name in result.names:
        if args.tonic:
            degree = chord_to_degree(name, args.tonic, args.mode)
            print(f"{name}\t{degree if degree is not None else '-'}")
        else:
            print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
