"""Code chronicle: fitting key schematics into lock schematics."""

import argparse
import sys
from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from aoc24.parser import Parser, take_newline, take_separator

_WIDTH = 5
_HEIGHT = 7
_HASH = ord("#")

Schematic = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True, order=True)
class Puzzle:
    """A key or lock with its five pin heights."""

    is_key: bool
    pins: Tuple[int, ...]

    def matches(self, other: "Puzzle") -> bool:
        """True for a key and a lock whose pins do not overlap."""
        if self.is_key == other.is_key:
            return False
        key, lock = (self, other) if self.is_key else (other, self)
        return all(pin_match(k, l) for k, l in zip(key.pins, lock.pins))


def pin_match(key: int, lock: int) -> bool:
    """True when a key pin fits in the space left by a lock pin."""
    lock_space = (6 - lock) % 256
    return key < lock_space


def take_grid() -> Parser:
    """Parse seven newline-terminated rows of five cells."""

    def parse(text: str):
        rows = []
        rest = text
        for _ in range(_HEIGHT):
            prefix, sep, remainder = rest.partition("\n")
            if not sep:
                return None
            raw = prefix.encode("utf-8")
            if len(raw) != _WIDTH:
                return None
            rows.append(tuple(byte == _HASH for byte in raw))
            rest = remainder
        return tuple(rows), rest

    return parse


def parse_puzzle(grid: Schematic, is_key: bool) -> Optional[Puzzle]:
    """Read pin heights as a key (from the bottom) or a lock (from the top)."""
    rows = reversed(grid) if is_key else grid
    counts = [0] * _WIDTH
    done = [False] * _WIDTH
    for row in rows:
        for col, filled in enumerate(row[:_WIDTH]):
            if done[col]:
                if filled:
                    return None
                continue
            if filled:
                counts[col] += 1
            else:
                done[col] = True
    if any(count == 0 for count in counts):
        return None
    return Puzzle(is_key, tuple(count - 1 for count in counts))


def take_puzzle() -> Parser:
    """Parse one schematic as a key, or failing that as a lock."""
    grid_parser = take_grid()

    def parse(text: str):
        result = grid_parser(text)
        if result is None:
            return None
        grid, rest = result
        puzzle = parse_puzzle(grid, True) or parse_puzzle(grid, False)
        if puzzle is None:
            return None
        return puzzle, rest

    return parse


def parse_schematics(text: str) -> List[Puzzle]:
    """Parse blank-line separated schematics; raises ValueError on leftovers."""
    puzzles, rest = take_separator(take_puzzle(), take_newline())(text)
    if rest:
        raise ValueError(f"not empty: {rest!r}")
    return puzzles


def count_fits(puzzles: Sequence[Puzzle]) -> int:
    """Number of key and lock pairs that fit together."""
    keys = [p for p in puzzles if p.is_key]
    locks = [p for p in puzzles if not p.is_key]
    return sum(1 for key, lock in product(keys, locks) if key.matches(lock))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day25")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 25 part 1"), ("part2", "Day 25 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    if args.part == "part2":
        print(42)
        return 0
    try:
        puzzles = parse_schematics(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(count_fits(puzzles))
    return 0


if __name__ == "__main__":
    sys.exit(main())