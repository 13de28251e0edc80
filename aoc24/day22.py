"""Monkey market: pseudorandom secrets and the best selling signal."""

import argparse
import io
import re
import sys
from collections.abc import Iterable, Iterator
from itertools import islice, pairwise
from pathlib import Path
from typing import Dict, List, Tuple

from aoc24.util import read_lines

_MODULUS = 16777216
_STEPS = 2000
_U64_LIMIT = 1 << 64
_NUMBER = re.compile(r"\+?[0-9]+")

Signal = Tuple[int, int, int, int]


def parse_secrets(text: str) -> List[int]:
    """One non-negative initial secret per line; raises ValueError otherwise."""
    secrets = []
    for line in read_lines(io.StringIO(text, newline="\n")):
        if not _NUMBER.fullmatch(line):
            raise ValueError(f"invalid secret: {line!r}")
        value = int(line)
        if value >= _U64_LIMIT:
            raise ValueError(f"secret out of range: {line!r}")
        secrets.append(value)
    return secrets


def mix(secret: int, value: int) -> int:
    """Mix a value into the secret."""
    return secret ^ value


def prune(value: int) -> int:
    """Keep the secret within 24 bits."""
    return value % _MODULUS


def next_secret(secret: int) -> int:
    """The secret that follows ``secret``."""
    secret = prune(mix(secret, secret * 64))
    secret = prune(mix(secret, secret // 32))
    secret = prune(mix(secret, secret * 2048))
    return secret


def secret_sequence(secret: int) -> Iterator[int]:
    """Yield ``secret`` and every secret after it, without end."""
    while True:
        yield secret
        secret = next_secret(secret)


def price(secret: int) -> int:
    """The price offered for a secret: its last digit."""
    return secret % 10


def changes(prices: Iterable[int]) -> Iterator[Tuple[int, Signal]]:
    """Yield each price with the four price changes leading up to it."""
    diffs = ((cur, cur - prev) for prev, cur in pairwise(prices))
    window = [0, 0, 0, 0]
    for _ in range(3):
        step = next(diffs, None)
        if step is None:
            return
        window = window[1:] + [step[1]]
    for cur, diff in diffs:
        window = window[1:] + [diff]
        yield cur, tuple(window)


def best_sequence(secrets: Iterable[int]) -> Tuple[Signal, List[int]]:
    """The change signal earning the most bananas, with each buyer's price for it."""
    totals: Dict[Signal, List[int]] = {}
    for secret in secrets:
        first_seen: Dict[Signal, int] = {}
        prices = map(price, islice(secret_sequence(secret), _STEPS))
        for value, signal in changes(prices):
            first_seen.setdefault(signal, value)
        for signal, value in first_seen.items():
            totals.setdefault(signal, []).append(value)

    best = None
    best_sum = None
    for signal in sorted(totals):
        total = sum(totals[signal])
        if best_sum is None or total >= best_sum:
            best, best_sum = signal, total
    if best is None:
        raise ValueError("could not find max")
    return best, totals[best]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day22")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 22 part 1"), ("part2", "Day 22 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        secrets = parse_secrets(Path(args.file).read_text(encoding="utf-8"))
        if args.part == "part2":
            signal, prices = best_sequence(secrets)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        total = 0
        for start in secrets:
            last = next(islice(secret_sequence(start), _STEPS - 1, None))
            print(f"{start}: {last}")
            total += last
        print(total)
    else:
        print(list(signal))
        print(prices)
        print(sum(prices))
    return 0


if __name__ == "__main__":
    sys.exit(main())