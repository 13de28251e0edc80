import pytest

from aoc24.day18 import first_blocking, main, parse_bytes, run_with_drops, take_line

WALL_DROPS = [(0, 2), (1, 0), (1, 1), (1, 2)]


def _render(drops):
    return "".join(f"{x},{y}\n" for x, y in drops)


def test_take_line():
    assert take_line()("5,4\nrest") == ((5, 4), "rest")
    assert take_line()("5;4\n") is None


def test_parse_round_trip():
    drops = [(5, 4), (4, 2), (0, 6), (3, 0)]
    assert parse_bytes(_render(drops)) == drops


@pytest.mark.parametrize("text", ["", "1,2", "1,2\nx", "a,b\n"])
def test_parse_errors(text):
    with pytest.raises(ValueError):
        parse_bytes(text)


def test_open_grid_takes_manhattan_distance():
    size = 2
    assert run_with_drops([(1, 1)], 0, size) == 2 * size


def test_index_past_end_raises():
    with pytest.raises(IndexError):
        run_with_drops([(1, 1)], 1, 2)


def test_wall_blocks_exit():
    assert run_with_drops(WALL_DROPS, len(WALL_DROPS) - 1, 2) is None


def test_first_blocking_none_when_never_blocked():
    assert first_blocking([(1, 1), (0, 2)], 2) is None


def test_first_blocking_empty_raises():
    with pytest.raises(ValueError):
        first_blocking([], 2)


def test_main_part2_prints_blocking_byte(tmp_path, capsys):
    drops = [(1, j) for j in range(71)]
    path = tmp_path / "input.txt"
    path.write_text(_render(drops))
    assert main(["part2", str(path)]) == 0
    x, y = drops[first_blocking(drops)]
    assert capsys.readouterr().out.strip() == f"{x},{y}"