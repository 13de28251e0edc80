import pytest

from aoc24.day13 import (
    PRIZE_OFFSET,
    Game,
    cost,
    invert2x2,
    main,
    parse_games,
    solutions,
    solve,
    solve2,
    take_button,
    take_prize,
)

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""


@pytest.fixture
def games():
    return parse_games(EXAMPLE)


def _satisfies(game, solution):
    x, y = (int(v) for v in solution)
    return (
        game.a[0] * x + game.b[0] * y == game.prize[0]
        and game.a[1] * x + game.b[1] * y == game.prize[1]
    )


def test_parse_games(games):
    assert len(games) == 4
    assert games[0] == Game((94, 34), (22, 67), (8400, 5400))
    assert games[3].prize == (18641, 10279)


def test_take_button_and_prize():
    assert take_button("B")("Button B: X+22, Y+67\nrest") == ((22, 67), "rest")
    assert take_button("A")("Button B: X+22, Y+67\n") is None
    assert take_prize()("Prize: X=5, Y=7\n") == ((5, 7), "")


def test_parse_rejects_trailing_text():
    with pytest.raises(ValueError):
        parse_games("Button A: X+1\n")


def test_solve_first_example(games):
    assert solve(games[0]) == (80, 40)


def test_example_total(games):
    total = sum(cost(found) for found in map(solve, games) if found is not None)
    assert total == 480


def test_solutions_satisfy_equations(games):
    for game in games:
        found = solve(game)
        if found is not None:
            assert _satisfies(game, found)
            assert max(found) <= 100


def test_solutions_generator_respects_bounds():
    for x, y in solutions(3, 5, 400):
        assert 3 * x + 5 * y == 400
        assert 0 <= x <= 100 and y <= 100


def test_solve2_agrees_with_solve(games):
    for game in games:
        exact = solve(game)
        linear = solve2(game)
        if exact is None:
            assert linear is None
        else:
            assert linear == (float(exact[0]), float(exact[1]))


def test_solve2_with_offset_satisfies_equations(games):
    shifted = [
        Game(g.a, g.b, (g.prize[0] + PRIZE_OFFSET, g.prize[1] + PRIZE_OFFSET))
        for g in games
    ]
    solved = [(g, solve2(g)) for g in shifted]
    solved = [(g, s) for g, s in solved if s is not None]
    assert solved
    assert all(_satisfies(g, s) for g, s in solved)


def test_invert_singular():
    assert invert2x2(((1.0, 2.0), (2.0, 4.0))) is None


def test_invert_gives_identity():
    matrix = ((94.0, 22.0), (34.0, 67.0))
    inv = invert2x2(matrix)
    product = [
        [sum(matrix[i][k] * inv[k][j] for k in range(2)) for j in range(2)]
        for i in range(2)
    ]
    assert product[0][0] == pytest.approx(1.0)
    assert product[1][1] == pytest.approx(1.0)
    assert product[0][1] == pytest.approx(0.0, abs=1e-12)
    assert product[1][0] == pytest.approx(0.0, abs=1e-12)


def test_main_part1(tmp_path, capsys, games):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main(["part1", str(path)]) == 0
    last = capsys.readouterr().out.splitlines()[-1]
    expected = sum(cost(s) for s in map(solve, games) if s is not None)
    assert last == str(expected)