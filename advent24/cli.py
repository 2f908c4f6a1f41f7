"""Command line entry point: solve one puzzle from an input file into an output file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from . import day1, day2, day3, day4, day5

PUZZLES: dict[str, Callable[[str], int]] = {
    "d1a1": day1.total_distance,
    "d1a2": day1.similarity_score,
    "d2a1": day2.count_safe,
    "d2a2": day2.count_safe_with_dampener,
    "d3a1": day3.mul_sum,
    "d3a2": day3.enabled_mul_sum,
    "d4a1": day4.count_xmas,
    "d4a2": day4.count_x_mas,
    "d5a1": day5.sum_correct_middles,
    "d5a2": day5.sum_corrected_middles,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent24", description="Solve a puzzle and write the answer to a file."
    )
    parser.add_argument("puzzle", choices=sorted(PUZZLES), help="puzzle to solve")
    parser.add_argument("--input", default="input", type=Path, help="file to read")
    parser.add_argument("--output", default="output", type=Path, help="file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen puzzle; return 0 on success and 1 on failure."""
    args = _parser().parse_args(argv)
    try:
        text = args.input.read_text(encoding="utf-8")
        result = PUZZLES[args.puzzle](text)
        args.output.write_text(str(result), encoding="utf-8")
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())