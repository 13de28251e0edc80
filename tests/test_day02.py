import pytest

from aoc24.day02 import is_safe, is_safe_dampened, main, parse_reports

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert len(reports) == 6
    assert reports[0] == [7, 6, 4, 2, 1]


def test_parse_rejects_negative():
    with pytest.raises(ValueError):
        parse_reports("1 -2 3\n")


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_reports("1 x 3\n")


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], False),
        ([8, 6, 4, 4, 1], False),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe(report, expected):
    assert is_safe(report) is expected


@pytest.mark.parametrize(
    "report, expected",
    [
        ([7, 6, 4, 2, 1], True),
        ([1, 2, 7, 8, 9], False),
        ([9, 7, 6, 2, 1], False),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1, 3, 6, 7, 9], True),
    ],
)
def test_is_safe_dampened(report, expected):
    assert is_safe_dampened(report) is expected


def test_short_reports_are_safe():
    assert is_safe([])
    assert is_safe([5])
    assert is_safe_dampened([])


def test_safe_implies_dampened_safe():
    for report in parse_reports(EXAMPLE):
        if is_safe(report):
            assert is_safe_dampened(report)


def test_main_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    reports = parse_reports(EXAMPLE)
    assert main(["part1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(sum(map(is_safe, reports)))
    assert main(["part2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == str(sum(map(is_safe_dampened, reports)))


def test_main_missing_file(tmp_path):
    assert main(["part1", str(tmp_path / "missing.txt")]) == 1