"""Claw contraption: fewest tokens to reach each prize."""

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from aoc24.grid import Index
from aoc24.parser import (
    Parser,
    map_value,
    take_char,
    take_eol,
    take_first,
    take_int,
    take_newline,
    take_second,
    take_separator,
    take_str,
    take_tuple3,
    take_tuple4,
)

PRIZE_OFFSET = 10000000000000
_MAX_PRESSES = 100
_TOLERANCE = 1e-4

Matrix = Tuple[Tuple[float, float], Tuple[float, float]]


@dataclass(frozen=True)
class Game:
    """Button A and B offsets and the prize position."""

    a: Index
    b: Index
    prize: Index


def _xy(prefix: Parser, x_label: str, y_label: str) -> Parser:
    coords = take_tuple4(take_int(), take_str(y_label), take_int(), take_newline())
    return map_value(take_second(take_first(prefix, take_str(x_label)), coords),
                     lambda t: (t[0], t[2]))


def take_button(chr: str) -> Parser:
    """Parse ``Button <chr>: X+a, Y+b`` and its newline."""
    prefix = take_tuple3(take_str("Button "), take_char(chr), take_str(":"))
    return _xy(prefix, " X+", ", Y+")


def take_prize() -> Parser:
    """Parse ``Prize: X=a, Y=b`` and its newline."""
    return _xy(take_str("Prize:"), " X=", ", Y=")


def take_game() -> Parser:
    """Parse the three lines describing one machine."""
    return map_value(
        take_tuple3(take_button("A"), take_button("B"), take_prize()),
        lambda t: Game(*t),
    )


def take_games() -> Parser:
    """Parse blank-line separated machines filling the whole input."""
    return take_first(take_separator(take_game(), take_newline()), take_eol())


def parse_games(text: str) -> List[Game]:
    """Parse every machine; raises ValueError when the input does not fit."""
    result = take_games()(text)
    if result is None:
        raise ValueError("could not parse")
    return result[0]


def _trunc_divmod(a: int, b: int) -> Tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def solutions(a: int, b: int, c: int) -> Iterator[Index]:
    """Press counts ``(x, y)``, each at most 100, with ``a*x + b*y == c``."""
    upper = min(_trunc_divmod(c, a)[0], _MAX_PRESSES)
    for x in range(upper + 1):
        quotient, remainder = _trunc_divmod(c - a * x, b)
        if remainder == 0 and quotient <= _MAX_PRESSES:
            yield x, quotient


def cost(solution) -> float:
    """Tokens spent: three per A press, one per B press."""
    a, b = solution
    return 3 * a + b


def solve(game: Game) -> Optional[Index]:
    """The cheapest press counts of at most 100 each, or None."""
    first = set(solutions(game.a[0], game.b[0], game.prize[0]))
    second = set(solutions(game.a[1], game.b[1], game.prize[1]))
    return min(sorted(first & second), key=cost, default=None)


def invert2x2(matrix: Matrix) -> Optional[Matrix]:
    """Inverse of a 2x2 matrix, or None when it is singular."""
    (a, b), (c, d) = matrix
    det = a * d - b * c
    if det == 0.0:
        return None
    return ((d / det, -b / det), (-c / det, a / det))


def _round(x: float) -> Optional[float]:
    nearest = float(round(x))
    return nearest if abs(x - nearest) < _TOLERANCE else None


def solve2(game: Game) -> Optional[Tuple[float, float]]:
    """Exact non-negative press counts by linear algebra, or None."""
    matrix = (
        (float(game.a[0]), float(game.b[0])),
        (float(game.a[1]), float(game.b[1])),
    )
    inverse = invert2x2(matrix)
    if inverse is None:
        return None
    px, py = float(game.prize[0]), float(game.prize[1])
    s0 = inverse[0][0] * px + inverse[0][1] * py
    s1 = inverse[1][0] * px + inverse[1][1] * py
    x, y = _round(s0), _round(s1)
    if x is None or y is None or x < 0.0 or y < 0.0:
        return None
    return x, y


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day13")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 13 part 1"), ("part2", "Day 13 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        games = parse_games(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        total = 0
        for i, game in enumerate(games):
            found = solve(game)
            if found is not None:
                print(f"id: {i} x: {found} game={game}")
                total += cost(found)
        print(total)
    else:
        total = 0.0
        for i, game in enumerate(games):
            shifted = Game(
                game.a,
                game.b,
                (game.prize[0] + PRIZE_OFFSET, game.prize[1] + PRIZE_OFFSET),
            )
            found = solve2(shifted)
            if found is not None:
                print(f"id: {i} x: {found} game={shifted}")
                total += cost(found)
        print(_format_number(total))
    return 0


if __name__ == "__main__":
    sys.exit(main())