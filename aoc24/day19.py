"""Linen layout: building towel designs from available patterns."""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from aoc24.parser import Parser, take_eol, take_first, take_newline, take_separator, take_str

_COLOURS = frozenset("rwbgu")


@dataclass
class Towels:
    """Available patterns, longest-first in reverse order, and designs to check."""

    options: List[str] = field(default_factory=list)
    checks: List[str] = field(default_factory=list)


def take_pattern() -> Parser:
    """Parse a non-empty run of stripe colours."""

    def parse(text: str):
        length = 0
        for char in text:
            if char not in _COLOURS:
                break
            length += 1
        if length == 0:
            return None
        return text[:length], text[length:]

    return parse


def _take_file() -> Parser:
    options_line = take_first(take_separator(take_pattern(), take_str(", ")), take_newline())
    newline = take_newline()
    designs = take_separator(take_pattern(), take_newline())
    eol = take_eol()

    def parse(text: str):
        result = options_line(text)
        if result is None:
            return None
        options, rest = result
        result = newline(rest)
        if result is None:
            return None
        checks, rest = designs(result[1])
        result = eol(rest)
        if result is None:
            return None
        return Towels(sorted(options, reverse=True), checks), result[1]

    return parse


def parse_towels(text: str) -> Towels:
    """Parse the patterns line, a blank line and the designs; raises ValueError otherwise."""
    result = _take_file()(text)
    if result is None:
        raise ValueError("could not parse")
    towels, rest = result
    if rest:
        raise ValueError(f"could not parse: {rest}")
    return towels


def count_ways(patterns: Sequence[str], design: str) -> int:
    """Number of ways to build ``design`` from the patterns."""
    ways = [0] * (len(design) + 1)
    ways[len(design)] = 1
    for start in range(len(design) - 1, -1, -1):
        ways[start] = sum(
            ways[start + len(pattern)]
            for pattern in patterns
            if pattern and design.startswith(pattern, start)
        )
    return ways[0]


def can_make(patterns: Sequence[str], design: str) -> bool:
    """True when ``design`` can be built from the patterns."""
    possible = [False] * (len(design) + 1)
    possible[len(design)] = True
    for start in range(len(design) - 1, -1, -1):
        possible[start] = any(
            possible[start + len(pattern)]
            for pattern in patterns
            if pattern and design.startswith(pattern, start)
        )
    return possible[0]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day19")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 19 part 1"), ("part2", "Day 19 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        towels = parse_towels(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(sum(1 for design in towels.checks if can_make(towels.options, design)))
    else:
        print(sum(count_ways(towels.options, design) for design in towels.checks))
    return 0


if __name__ == "__main__":
    sys.exit(main())