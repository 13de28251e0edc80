"""Print queue: page ordering rules and update validation."""

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from aoc24.graph import CycleError
from aoc24.parser import (
    Parser,
    map_value,
    take_eol,
    take_int,
    take_separator,
    take_str,
    take_tuple3,
)
from aoc24.util import read_file_lines

OrderingMap = Dict[int, Set[int]]


@dataclass
class ParsedResult:
    """Ordering rules ``before|after`` and the updates to check."""

    orderings: List[Tuple[int, int]] = field(default_factory=list)
    inputs: List[List[int]] = field(default_factory=list)

    def ordering_map(self) -> OrderingMap:
        """Map each page to the pages that must come after it."""
        result: OrderingMap = {}
        for before, after in self.orderings:
            result.setdefault(before, set()).add(after)
        return result

    def iter_input(self, ords: OrderingMap) -> Iterator[Tuple[bool, List[int]]]:
        """Yield ``(valid, update)`` for every update."""

        def is_before(left: int, right: int):
            after = ords.get(left)
            return None if after is None else right in after

        def check(a: int, b: int) -> bool:
            result = is_before(a, b)
            if result is not None:
                return result
            return is_before(b, a) is not True

        for update in self.inputs:
            valid = all(
                check(a, b) for i, a in enumerate(update) for b in update[i + 1:]
            )
            yield valid, update


def take_ordering() -> Parser:
    """Parse ``a|b`` into the pair ``(a, b)``."""
    return map_value(
        take_tuple3(take_int(), take_str("|"), take_int()),
        lambda triple: (triple[0], triple[2]),
    )


def take_input_line() -> Parser:
    """Parse a comma separated list of integers."""
    return take_separator(take_int(), take_str(","))


def parse_input(lines: Iterable[str]) -> ParsedResult:
    """Parse rules, a blank line, then updates.

    Raises ValueError on a line that cannot be fully parsed.
    """
    ordering = take_ordering()
    input_line = take_input_line()
    eol = take_eol()
    parsed = ParsedResult()

    it = iter(lines)
    line = next(it, None)
    while line is not None:
        result = ordering(line)
        if result is None:
            break
        value, rest = result
        if rest:
            raise ValueError(f"could not finish parsing {line}")
        parsed.orderings.append(value)
        line = next(it, None)

    if line is None or eol(line) is None:
        raise ValueError(f"could not finish parsing {line}")

    for line in it:
        values, rest = input_line(line)
        if rest:
            raise ValueError(f"could not finish parsing {line}")
        parsed.inputs.append(values)

    return parsed


def toposort(orderings: OrderingMap, node_subset: Set[int]) -> List[int]:
    """Order ``node_subset`` consistently with the rules.

    Raises CycleError when the rules within the subset form a cycle.
    """
    result: List[int] = []
    visited: Dict[int, bool] = {}

    def visit(node: int) -> bool:
        state = visited.get(node)
        if state is not None:
            return state
        visited[node] = False
        for nxt in sorted(orderings.get(node, set()) & node_subset):
            if not visit(nxt):
                return False
        visited[node] = True
        result.append(node)
        return True

    pending = sorted(node_subset)
    while pending:
        node = pending.pop()
        if node in visited:
            continue
        if not visit(node):
            raise CycleError("cycle detected")

    result.reverse()
    return result


def middle_sum_valid(parsed: ParsedResult) -> int:
    """Sum of the middle pages of correctly ordered updates."""
    ords = parsed.ordering_map()
    return sum(
        update[len(update) // 2] for valid, update in parsed.iter_input(ords) if valid
    )


def middle_sum_fixed(parsed: ParsedResult) -> int:
    """Sum of the middle pages of misordered updates after reordering."""
    ords = parsed.ordering_map()
    total = 0
    for valid, update in parsed.iter_input(ords):
        if valid:
            continue
        try:
            order = toposort(ords, set(update))
        except CycleError:
            continue
        total += order[len(order) // 2]
    return total


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day05")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 5 part 1"), ("part2", "Day 5 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        parsed = parse_input(read_file_lines(args.file))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(middle_sum_valid(parsed))
    else:
        print(middle_sum_fixed(parsed))
    return 0


if __name__ == "__main__":
    sys.exit(main())