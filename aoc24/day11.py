"""Plutonian pebbles: counting stones after repeated blinks."""

import argparse
import re
import sys
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

_STONE = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 1 << 64


def parse_stones(text: str) -> List[int]:
    """Whitespace separated non-negative integers; raises ValueError otherwise."""
    stones = []
    for word in text.split():
        if not _STONE.fullmatch(word):
            raise ValueError(f"invalid stone: {word!r}")
        value = int(word)
        if value >= _U64_LIMIT:
            raise ValueError(f"stone out of range: {word!r}")
        stones.append(value)
    return stones


def num_digits(value: int) -> int:
    """Decimal digit count; zero has none."""
    count = 0
    while value > 0:
        value //= 10
        count += 1
    return count


def blink(stone: int) -> Tuple[int, ...]:
    """The stones one stone turns into after a single blink."""
    if stone == 0:
        return (1,)
    digits = num_digits(stone)
    if digits % 2 == 0:
        return divmod(stone, 10 ** (digits // 2))
    return (stone * 2024,)


@lru_cache(maxsize=None)
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count(child, blinks - 1) for child in blink(stone))


def count_stones(stone: int, blinks: int) -> int:
    """How many stones one stone becomes after ``blinks`` blinks."""
    return _count(stone, blinks)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day11")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 11 part 1"), ("part2", "Day 11 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        stones = parse_stones(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    blinks = 25 if args.part == "part1" else 75
    print(sum(count_stones(stone, blinks) for stone in stones))
    return 0


if __name__ == "__main__":
    sys.exit(main())