import copy

import pytest

from aoc24.day06 import (
    Loc,
    count_loop_obstructions,
    count_visited,
    fill_visited,
    parse_input,
)
from aoc24.grid import Direction

EXAMPLE = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]

LOOPING = [
    ".#...",
    "....#",
    ".^...",
    "#....",
    "...#.",
]


def test_parse_finds_start():
    lab = parse_input(EXAMPLE)
    assert lab.start == (6, 4)
    assert lab.grid[0][4] is Loc.HASH
    assert lab.grid[6][4] is Loc.SPACE


def test_example_part1():
    assert count_visited(parse_input(EXAMPLE)) == 41


def test_example_part2():
    assert count_loop_obstructions(parse_input(EXAMPLE)) == 6


@pytest.mark.parametrize("lines", [["...."], ["..x^"], ["^..", ""]])
def test_parse_errors(lines):
    with pytest.raises(ValueError):
        parse_input(lines)


def test_guard_walks_straight_out():
    assert fill_visited(parse_input(["^"])) == ([[int(Direction.UP)]], False)


def test_detects_cycle():
    _, cycle = fill_visited(parse_input(LOOPING))
    assert cycle is True


def test_example_has_no_cycle():
    _, cycle = fill_visited(parse_input(EXAMPLE))
    assert cycle is False


def test_loop_search_leaves_lab_unchanged():
    lab = parse_input(EXAMPLE)
    before = copy.deepcopy(lab.grid)
    count_loop_obstructions(lab)
    assert lab.grid == before


def test_visited_bounded_by_open_cells():
    lab = parse_input(EXAMPLE)
    spaces = sum(1 for row in lab.grid for loc in row if loc is Loc.SPACE)
    assert count_visited(lab) <= spaces