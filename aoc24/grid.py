"""Two-dimensional character grids addressed by (row, col)."""

from collections.abc import Callable, Iterable, Iterator
from enum import IntEnum
from typing import Any, List, Optional, Tuple, TypeVar

V = TypeVar("V")
W = TypeVar("W")

Grid = List[List[V]]
Index = Tuple[int, int]

from aoc24.util import read_file_lines, read_lines  # noqa: E402


class Direction(IntEnum):
    """A step direction; each value is a distinct bit."""

    UP = 1 << 0
    DOWN = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3

    @classmethod
    def all_directions(cls) -> Tuple["Direction", ...]:
        return (cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT)

    @classmethod
    def all_diagonals(cls) -> Tuple[Tuple["Direction", "Direction"], ...]:
        return (
            (cls.UP, cls.LEFT),
            (cls.UP, cls.RIGHT),
            (cls.DOWN, cls.LEFT),
            (cls.DOWN, cls.RIGHT),
        )

    def horizontal(self) -> Tuple["Direction", "Direction"]:
        return (Direction.LEFT, Direction.RIGHT)

    def vertical(self) -> Tuple["Direction", "Direction"]:
        return (Direction.UP, Direction.DOWN)

    def is_horizontal(self) -> bool:
        return self in self.horizontal()

    def is_vertical(self) -> bool:
        return self in self.vertical()

    def adjacent(self) -> Tuple["Direction", "Direction"]:
        """The two directions perpendicular to this one."""
        return self.vertical() if self.is_horizontal() else self.horizontal()

    def invert(self) -> "Direction":
        return _INVERSE[self]

    def rotate_90_right(self) -> "Direction":
        return _CLOCKWISE[self]

    def apply(self, pos: Index) -> Index:
        """Step once from ``pos`` in this direction."""
        d_row, d_col = _DELTAS[self]
        return pos[0] + d_row, pos[1] + d_col

    @classmethod
    def from_delta(cls, delta: Index) -> Optional["Direction"]:
        """The direction of a unit step, or None for any other delta."""
        return _FROM_DELTA.get(tuple(delta))

    def apply_inverse(self, pos: Index) -> Index:
        """Step once from ``pos`` against this direction."""
        return self.invert().apply(pos)


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.DOWN: (1, 0),
}
_FROM_DELTA = {delta: direction for direction, delta in _DELTAS.items()}
_INVERSE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.RIGHT: Direction.DOWN,
}


def read_grid(stream: Iterable[str]) -> Grid[str]:
    """Read a grid of characters, one row per line."""
    return [list(line) for line in read_lines(stream)]


def parse_grid(filename: str) -> Grid[str]:
    """Read a grid of characters from a file."""
    return [list(line) for line in read_file_lines(filename)]


def neighbors(grid: Grid[V], pos: Index) -> Iterator[Tuple[Index, V]]:
    """Yield in-bounds orthogonal neighbours of ``pos`` with their values."""
    for direction in Direction.all_directions():
        target = direction.apply(pos)
        if _in_bounds(grid, target):
            yield target, grid[target[0]][target[1]]


def map_grid(grid: Grid[V], func: Callable[[Index, V], W]) -> Grid[W]:
    """Build a grid of the same shape by calling ``func(pos, value)``."""
    return [
        [func((row, col), value) for col, value in enumerate(line)]
        for row, line in enumerate(grid)
    ]


def _in_bounds(grid: Grid[Any], pos: Index) -> bool:
    row, col = pos
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def get_at(grid: Grid[V], pos: Index) -> Optional[V]:
    """The value at ``pos``, or None when it lies outside the grid."""
    if not _in_bounds(grid, pos):
        return None
    return grid[pos[0]][pos[1]]


def set_at(grid: Grid[V], pos: Index, value: V) -> bool:
    """Store ``value`` at ``pos``; return False when it lies outside the grid."""
    if not _in_bounds(grid, pos):
        return False
    grid[pos[0]][pos[1]] = value
    return True


def copy_default(grid: Grid[Any], value: W) -> Grid[W]:
    """A grid of the same shape filled with ``value``."""
    return [[value for _ in line] for line in grid]


def vec_add(v: Index, v2: Index) -> Index:
    return v[0] + v2[0], v[1] + v2[1]


def vec_sub(v: Index, v2: Index) -> Index:
    return v[0] - v2[0], v[1] - v2[1]


def scale(v: Index, factor: int) -> Index:
    return v[0] * factor, v[1] * factor


def _gcd(x: int, y: int) -> int:
    while y != 0:
        x, y = y, x % y
    return x


def reduce_vec(v: Index) -> Index:
    """Divide both components by their greatest common divisor.

    Raises ZeroDivisionError for the zero vector.
    """
    a, b = v
    divisor = _gcd(abs(a), abs(b))
    return _trunc_div(a, divisor), _trunc_div(b, divisor)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def iter_pos(grid: Grid[V]) -> Iterator[Tuple[Index, V]]:
    """Yield every ``((row, col), value)`` in row-major order."""
    for row, line in enumerate(grid):
        for col, value in enumerate(line):
            yield (row, col), value