"""Historian location lists: pairwise distance and similarity."""

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import List, Sequence, Tuple


def parse_lists(text: str) -> Tuple[List[int], List[int]]:
    """Split each line into a left and right integer; short lines are skipped."""
    firsts: List[int] = []
    seconds: List[int] = []
    for line in text.split("\n"):
        parts = line.split()
        if len(parts) >= 2:
            first, second = int(parts[0]), int(parts[1])
            firsts.append(first)
            seconds.append(second)
    return firsts, seconds


def total_distance(firsts: Sequence[int], seconds: Sequence[int]) -> int:
    """Sum of distances between the lists paired in sorted order."""
    return sum(abs(f - s) for f, s in zip(sorted(firsts), sorted(seconds)))


def similarity_score(firsts: Sequence[int], seconds: Sequence[int]) -> int:
    """Sum of each left value times how often it appears on the right."""
    counts = Counter(seconds)
    return sum(f * counts[f] for f in firsts)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day01")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 1 part 1"), ("part2", "Day 1 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        firsts, seconds = parse_lists(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(total_distance(firsts, seconds))
    else:
        print(similarity_score(firsts, seconds))
    return 0


if __name__ == "__main__":
    sys.exit(main())