"""Corrupted memory: summing ``mul(a,b)`` instructions."""

import argparse
import sys
from pathlib import Path

from aoc24.parser import (
    Parser,
    map_value,
    take_char,
    take_first,
    take_second,
    take_str,
    take_tuple3,
    take_uint,
)


def take_mul() -> Parser:
    """Parse ``mul(a,b)`` and yield the product."""
    args = take_tuple3(take_uint(), take_char(","), take_uint())
    call = take_first(take_second(take_str("mul("), args), take_char(")"))
    return map_value(call, lambda triple: triple[0] * triple[2])


def take_do() -> Parser:
    """Parse ``do()``, yielding True."""
    return map_value(take_str("do()"), lambda _: True)


def take_dont() -> Parser:
    """Parse ``don't()``, yielding False."""
    return map_value(take_str("don't()"), lambda _: False)


def sum_muls(text: str) -> int:
    """Sum the products of every well-formed ``mul`` in ``text``."""
    mul = take_mul()
    total = 0
    cur = text
    while (pos := cur.find("mul(")) != -1:
        result = mul(cur[pos:])
        if result is not None:
            product, cur = result
            total += product
        else:
            cur = cur[pos + 1:]
    return total


def sum_enabled_muls(text: str) -> int:
    """Sum products of ``mul`` instructions enabled by ``do()``/``don't()``."""
    do, dont, mul = take_do(), take_dont(), take_mul()
    enabled = True
    total = 0
    cur = text
    while cur:
        if (result := do(cur)) is not None:
            enabled, cur = result
        elif (result := dont(cur)) is not None:
            enabled, cur = result
        elif (result := mul(cur)) is not None:
            product, cur = result
            if enabled:
                total += product
        else:
            cur = cur[1:]
    return total


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day03")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 3 part 1"), ("part2", "Day 3 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(sum_muls(text))
    else:
        print(sum_enabled_muls(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())