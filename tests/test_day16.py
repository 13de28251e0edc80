import pytest

from aoc24.day16 import (
    END_NODE,
    START_NODE,
    Item,
    all_nodes_in_paths,
    main,
    parse_maze,
    render_paths,
)
from aoc24.grid import Direction, iter_pos

CORRIDOR = "#####\n#S.E#\n#####\n"
TURN = "#####\n#..E#\n#S###\n#####\n"
FORK = "#####\n#...#\n#S#E#\n#...#\n#####\n"


def _open_tiles(maze):
    return {pos for pos, item in iter_pos(maze.grid) if item is not Item.WALL}


def test_parse_finds_start_and_end():
    maze = parse_maze(CORRIDOR)
    assert maze.start == (1, 1)
    assert maze.end == (1, 3)
    assert maze.grid[1] == [Item.WALL, Item.START, Item.SPACE, Item.END, Item.WALL]


def test_parse_rejects_bad_character():
    with pytest.raises(ValueError, match="invalid character"):
        parse_maze("#S?E#\n")


def test_parse_requires_start():
    with pytest.raises(ValueError, match="start"):
        parse_maze("#..E#\n")


def test_parse_requires_end():
    with pytest.raises(ValueError, match="end"):
        parse_maze("#S..#\n")


def test_graph_connects_sentinels():
    maze = parse_maze(CORRIDOR)
    graph = maze.create_graph()
    assert graph[START_NODE] == {((maze.start, Direction.RIGHT), 0)}
    for direction in Direction.all_directions():
        assert (END_NODE, 0) in graph[(maze.end, direction)]
    assert graph[((0, 0), Direction.UP)] == set()


def test_straight_corridor_costs_only_steps():
    maze = parse_maze(CORRIDOR)
    assert maze.shortest_path() == maze.end[1] - maze.start[1]


def test_turns_cost_a_thousand():
    assert parse_maze(TURN).shortest_path() == 2003


def test_fork_score():
    assert parse_maze(FORK).shortest_path() == 3004


def test_unreachable_end():
    assert parse_maze("#####\n#S#E#\n#####\n").shortest_path() is None


def test_fork_has_both_routes_on_best_paths():
    maze = parse_maze(FORK)
    nodes = all_nodes_in_paths(maze.all_shortest_paths())
    assert nodes == _open_tiles(maze)


def test_turn_paths_cover_open_tiles():
    maze = parse_maze(TURN)
    assert all_nodes_in_paths(maze.all_shortest_paths()) == _open_tiles(maze)


def test_render_marks_path():
    maze = parse_maze(CORRIDOR)
    nodes = all_nodes_in_paths(maze.all_shortest_paths())
    assert render_paths(maze, nodes) == "#####\n#OOO#\n#####\n"
    assert render_paths(maze, set()) == CORRIDOR


def test_main_part1(tmp_path, capsys):
    path = tmp_path / "maze.txt"
    path.write_text(CORRIDOR)
    assert main(["part1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "2"


def test_main_part1_unreachable_fails(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("#####\n#S#E#\n#####\n")
    assert main(["part1", str(path)]) == 1