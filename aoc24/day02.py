"""Reactor reports: counting safe level sequences."""

import argparse
import io
import sys
from pathlib import Path
from typing import List, Sequence

from aoc24.util import read_lines

_U32_LIMIT = 1 << 32


def _parse_level(word: str) -> int:
    value = int(word)
    if not 0 <= value < _U32_LIMIT or word.startswith("-"):
        raise ValueError(f"invalid level: {word!r}")
    return value


def parse_reports(text: str) -> List[List[int]]:
    """One report per line, each a list of non-negative levels."""
    return [
        [_parse_level(word) for word in line.split()]
        for line in read_lines(io.StringIO(text, newline="\n"))
    ]


def is_safe(report: Sequence[int]) -> bool:
    """True when levels move one way only, by steps of 1 to 3."""
    if len(report) < 2:
        return True
    increasing = report[1] > report[0]
    return all(
        1 <= (b - a if increasing else a - b) <= 3 for a, b in zip(report, report[1:])
    )


def is_safe_dampened(report: Sequence[int]) -> bool:
    """True when the report is safe as is or with one level removed."""
    if is_safe(report):
        return True
    return any(
        is_safe([*report[:skip], *report[skip + 1:]]) for skip in range(len(report))
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day02")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 2 part 1"), ("part2", "Day 2 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        reports = parse_reports(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    check = is_safe if args.part == "part1" else is_safe_dampened
    print(sum(1 for report in reports if check(report)))
    return 0


if __name__ == "__main__":
    sys.exit(main())