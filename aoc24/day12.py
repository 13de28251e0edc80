"""Garden groups: fencing regions by perimeter and by side count."""

import argparse
import sys
from collections import deque
from typing import List, Set

from aoc24.grid import (
    Direction,
    Grid,
    Index,
    copy_default,
    map_grid,
    neighbors,
    parse_grid,
)
from aoc24.grid import iter_pos

Polygon = Set[Index]


def get_polygons(grid: Grid[str]) -> List[Polygon]:
    """Connected regions of equal characters, in order of their first cell."""
    visited = copy_default(grid, False)
    results: List[Polygon] = []
    for pos, char in iter_pos(grid):
        if visited[pos[0]][pos[1]]:
            continue
        polygon: Polygon = set()
        queue = deque([pos])
        while queue:
            cur = queue.popleft()
            if visited[cur[0]][cur[1]]:
                continue
            visited[cur[0]][cur[1]] = True
            polygon.add(cur)
            queue.extend(n for n, other in neighbors(grid, cur) if other == char)
        results.append(polygon)
    return results


def _get_side(edge: Index, polygon: Polygon) -> Direction:
    return next(d for d in Direction.all_directions() if d.apply(edge) in polygon)


def num_sides(polygon: Polygon) -> int:
    """Number of straight fence sides around a region."""
    if not polygon:
        return 0
    scaled = {(2 * x + 1, 2 * y + 1) for x, y in polygon}
    edges = set()
    for pos in scaled:
        for direction in Direction.all_directions():
            edge = direction.apply(pos)
            if direction.apply(edge) not in scaled:
                edges.add(edge)

    visited: Set[Index] = set()
    sides = 0
    for pos in sorted(edges):
        if pos in visited:
            continue
        visited.add(pos)
        step = Direction.RIGHT if pos[0] % 2 == 0 else Direction.DOWN
        side = _get_side(pos, scaled)
        nxt = step.apply(step.apply(pos))
        while nxt in edges and _get_side(nxt, scaled) == side:
            visited.add(nxt)
            nxt = step.apply(step.apply(nxt))
        sides += 1
    return sides


def fence_price(grid: Grid[str]) -> int:
    """Sum over regions of area times perimeter."""
    partial = map_grid(
        grid,
        lambda pos, char: 4 - sum(1 for _, other in neighbors(grid, pos) if other == char),
    )
    return sum(
        len(polygon) * sum(partial[row][col] for row, col in polygon)
        for polygon in get_polygons(grid)
    )


def bulk_fence_price(grid: Grid[str]) -> int:
    """Sum over regions of area times number of sides."""
    return sum(num_sides(polygon) * len(polygon) for polygon in get_polygons(grid))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day12")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 12 part 1"), ("part2", "Day 12 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        grid = parse_grid(args.file)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(fence_price(grid))
    else:
        print(bulk_fence_price(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())