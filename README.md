# aoc24

Solvers for the 2024 Advent of Code puzzles. Each day is a small module with a
command-line entry point. The shared helpers can also be used on their own:

- `aoc24.parser`: tiny parser combinators (`take_int`, `take_uint`, `take_str`,
  `take_separator`, `take_many0`, `take_many1`, `take_or`, `take_either`,
  `map_value`, ...). A parser takes a string and returns `(value, rest)`, or
  `None` when it does not match.
- `aoc24.grid`: list-of-lists grids with `(row, col)` positions, the
  `Direction` enum, `get_at`, `set_at`, `neighbors`, `iter_pos`, `map_grid`,
  `read_grid` and `parse_grid`.
- `aoc24.graph`: weighted directed graphs kept as a mapping from a node to a set
  of `(neighbour, weight)` pairs, with `add_edge`, `remove_edge`, `dijkstras`,
  `all_pairs_shortest_paths`, `all_paths`, `paths_to_vecs`, `reverse_graph`
  and `toposort` (which raises `CycleError` on a cycle).
- `aoc24.util`: `read_lines` and `read_file_lines`, which yield lines without
  their line endings.

## Installing

```
pip install .
```

Add the `test` extra to get the test runner:

```
pip install ".[test]"
pytest
```

## Running a day

Every day has a command named `aoc24-dayNN`, with a `part1` and a `part2`
subcommand that take the path of your puzzle input:

```
aoc24-day01 part1 input.txt
aoc24-day01 part2 input.txt
```

The answer is the last line printed on standard output; a few days print
working lines before it (per-trailhead scores on day 10, solved machines on
day 13, the marked maze on day 16 part 2, the found groups on day 23). When the
input cannot be read or parsed, the command prints an error on standard error
and exits with status 1.

The available commands are `aoc24-day01` to `aoc24-day13`, `aoc24-day15`,
`aoc24-day16`, `aoc24-day18`, `aoc24-day19`, `aoc24-day20`, `aoc24-day22`,
`aoc24-day23` and `aoc24-day25`.

A few days take extra flags:

```
aoc24-day15 part2 --debug input.txt   # print the warehouse after every move
aoc24-day18 part2 --debug input.txt   # print the result of every drop count
aoc24-day20 --debug part1 input.txt   # list the cheats found for each saving
```

Day 18 always uses a 71 by 71 memory grid from the command line; the
`run_with_drops` and `first_blocking` functions take a `size` argument for
other grids. Day 20 counts cheats that save at least 100 steps. Day 25 has no
second puzzle; its `part2` just prints `42`.

## Using the helpers

```python
from aoc24 import graph, parser

take_pair = parser.take_tuple3(parser.take_int(), parser.take_str("|"), parser.take_int())
print(take_pair("47|53 rest"))   # ((47, '|', 53), ' rest')

g = {}
graph.add_edge(g, "a", "b", 2)
graph.add_edge(g, "b", "c", 3)
print(graph.dijkstras(g, "a"))   # {'a': 0, 'b': 2, 'c': 5}
```

## What is not included

There are no solvers for days 14, 17, 21 and 24; no `aoc24-day14`,
`aoc24-day17`, `aoc24-day21` or `aoc24-day24` command exists.