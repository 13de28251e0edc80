import pytest

from aoc24.day19 import can_make, count_ways, main, parse_towels, take_pattern

EXAMPLE = (
    "r, wr, b, g, bwu, rb, gb, br\n"
    "\n"
    "brwrr\n"
    "bggr\n"
    "gbbr\n"
    "rrbgbr\n"
    "ubwu\n"
    "bwurrg\n"
    "brgr\n"
    "bbrgwb\n"
)


def test_take_pattern_stops_at_other_characters():
    assert take_pattern()("rwx") == ("rw", "x")
    assert take_pattern()("x") is None


def test_parse_sorts_options_descending():
    towels = parse_towels(EXAMPLE)
    assert towels.options == sorted(["r", "wr", "b", "g", "bwu", "rb", "gb", "br"], reverse=True)
    assert towels.checks[0] == "brwrr"
    assert towels.checks[-1] == "bbrgwb"
    assert len(towels.checks) == 8


def test_parse_rejects_missing_blank_line():
    with pytest.raises(ValueError):
        parse_towels("r, wr\nrr\n")


def test_parse_rejects_garbage_design():
    with pytest.raises(ValueError):
        parse_towels("r, wr\n\nrr\nxx\n")


def test_example_possible_designs():
    towels = parse_towels(EXAMPLE)
    assert sum(1 for d in towels.checks if can_make(towels.options, d)) == 6


def test_example_total_ways():
    towels = parse_towels(EXAMPLE)
    assert sum(count_ways(towels.options, d) for d in towels.checks) == 16


def test_can_make_agrees_with_count():
    towels = parse_towels(EXAMPLE)
    for design in towels.checks:
        assert can_make(towels.options, design) == (count_ways(towels.options, design) > 0)


def test_empty_design_is_always_possible():
    assert can_make(["r"], "")
    assert count_ways(["r"], "") == 1


def test_impossible_design():
    assert not can_make(["r", "wr"], "ubwu")
    assert count_ways(["r", "wr"], "ubwu") == 0


def test_main_part2(tmp_path, capsys):
    path = tmp_path / "towels.txt"
    path.write_text(EXAMPLE)
    assert main(["part2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "16"