from aoc24.day04 import count_x_mas, count_xmas, parse_wordsearch

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def _transpose(grid):
    return [list(col) for col in zip(*grid)]


def test_parse_strips_line_endings():
    assert parse_wordsearch("AB\r\nCD\n") == [["A", "B"], ["C", "D"]]


def test_example_part1():
    assert count_xmas(parse_wordsearch(EXAMPLE)) == 18


def test_example_part2():
    assert count_x_mas(parse_wordsearch(EXAMPLE)) == 9


def test_single_word_in_each_orientation():
    for text in ("XMAS", "SAMX", "X\nM\nA\nS", "X...\n.M..\n..A.\n...S"):
        assert count_xmas(parse_wordsearch(text)) == 1


def test_transpose_invariance():
    grid = parse_wordsearch(EXAMPLE)
    assert count_xmas(_transpose(grid)) == count_xmas(grid)
    assert count_x_mas(_transpose(grid)) == count_x_mas(grid)


def test_mirror_invariance():
    grid = parse_wordsearch(EXAMPLE)
    mirrored = [list(reversed(row)) for row in grid]
    assert count_xmas(mirrored) == count_xmas(grid)
    assert count_x_mas(mirrored) == count_x_mas(grid)


def test_x_mas_needs_both_diagonals():
    good = parse_wordsearch("M.S\n.A.\nM.S")
    broken = parse_wordsearch("M.S\n.A.\nS.M")
    assert count_x_mas(broken) < count_x_mas(good)