"""Bridge repair: reaching a target by inserting operators."""

import argparse
import io
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List

from aoc24.parser import (
    Parser,
    take_eol,
    take_spacetab,
    take_separator,
    take_str,
    take_uint,
)
from aoc24.util import read_lines


def concat(lhs: int, rhs: int) -> int:
    """Append the decimal digits of ``rhs`` to ``lhs``; ``rhs`` of 0 adds nothing."""
    shifted = lhs
    cur = rhs
    while cur > 0:
        cur //= 10
        shifted *= 10
    return shifted + rhs


def _add(a: int, b: int) -> int:
    return a + b


def _mul(a: int, b: int) -> int:
    return a * b


def _reaches(target: int, values: List[int], ops: Iterable[Callable[[int, int], int]]) -> bool:
    if not values:
        return target == 0
    ops = tuple(ops)
    results = {values[0]}
    for value in values[1:]:
        results = {op(acc, value) for acc in results for op in ops}
    return target in results


@dataclass
class Equation:
    """A test value and the numbers that must combine into it."""

    lhs: int
    rhs: List[int] = field(default_factory=list)

    def solve(self) -> bool:
        """True when ``+`` and ``*`` evaluated left to right can reach ``lhs``."""
        return _reaches(self.lhs, self.rhs, (_add, _mul))

    def solve2(self) -> bool:
        """As ``solve``, also allowing digit concatenation."""
        return _reaches(self.lhs, self.rhs, (_add, _mul, concat))


def take_line() -> Parser:
    """Parse ``lhs: n1 n2 ...`` filling the whole input."""
    lhs_parser = take_uint()
    colon = take_str(": ")
    numbers = take_separator(take_uint(), take_spacetab())
    eol = take_eol()

    def parse(text: str):
        result = lhs_parser(text)
        if result is None:
            return None
        lhs, rest = result
        result = colon(rest)
        if result is None:
            return None
        rhs, rest = numbers(result[1])
        result = eol(rest)
        if result is None:
            return None
        return Equation(lhs, rhs), result[1]

    return parse


def parse_equations(text: str) -> List[Equation]:
    """Parse one equation per line; raises ValueError on any bad line."""
    line_parser = take_line()
    equations = []
    for line in read_lines(io.StringIO(text, newline="\n")):
        result = line_parser(line)
        if result is None:
            raise ValueError("could not parse file")
        equations.append(result[0])
    return equations


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day07")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 7 part 1"), ("part2", "Day 7 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        equations = parse_equations(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(sum(eq.lhs for eq in equations if eq.solve()))
    else:
        print(sum(eq.lhs for eq in equations if eq.solve2()))
    return 0


if __name__ == "__main__":
    sys.exit(main())