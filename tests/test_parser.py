import pytest

from aoc24 import parser as p


def test_take_uint():
    assert p.take_uint()("123abc") == (123, "abc")
    assert p.take_uint()("7") == (7, "")
    assert p.take_uint()("abc") is None
    assert p.take_uint()("") is None
    assert p.take_uint()("-5") is None


def test_take_str():
    assert p.take_str("mul(")("mul(2") == ("mul(", "2")
    assert p.take_str("mul(")("mu") is None


def test_take_char():
    assert p.take_char(",")(",x") == (",", "x")
    assert p.take_char(",")("x,") is None
    assert p.take_char(",")("") is None


def test_take_any_char():
    assert p.take_any_char()("é!") == ("é", "!")
    assert p.take_any_char()("") is None


def test_take_any():
    assert p.take_any("ab")("bcd") == ("b", "cd")
    assert p.take_any("ab")("cd") is None


def test_take_any_func_finds_first_match():
    parse = p.take_any_func(str.isdigit)
    assert parse("7x") == ("7", "x")
    assert parse("xyz") is None


def test_take_any_func_consumes_from_front():
    parse = p.take_any_func(str.isdigit)
    assert parse("#5rest") == ("5", "5rest")


@pytest.mark.parametrize("char", ["\n", "\r"])
def test_take_newline(char):
    assert p.take_newline()(char + "rest") == (char, "rest")


def test_take_newline_rejects_space():
    assert p.take_newline()(" rest") is None


def test_take_whitespace_and_spacetab():
    assert p.take_whitespace()("\tx") == ("\t", "x")
    assert p.take_spacetab()("\nx") is None
    assert p.take_spacetab()(" x") == (" ", "x")


def test_take_eol():
    assert p.take_eol()("") == (None, "")
    assert p.take_eol()("x") is None


@pytest.mark.parametrize(
    "text, expected",
    [("-42x", (-42, "x")), ("+42x", (42, "x")), ("42", (42, ""))],
)
def test_take_int(text, expected):
    assert p.take_int()(text) == expected


def test_take_int_sign_without_digits():
    assert p.take_int()("-x") is None


def test_take_separator():
    parse = p.take_separator(p.take_int(), p.take_str(","))
    assert parse("1,2,3 rest") == ([1, 2, 3], " rest")
    assert parse("none") == ([], "none")


def test_take_separator_consumes_trailing_separator():
    parse = p.take_separator(p.take_int(), p.take_str(","))
    assert parse("1,2,x") == ([1, 2], "x")


def test_catch():
    parse = p.catch(p.take_str("ab"))
    assert parse("abc") == (None, "c")
    assert parse("xyz") == (None, "xyz")


def test_with_space():
    parse = p.with_space(p.take_int())
    assert parse("  \t12  rest") == (12, "rest")
    assert parse("12") == (12, "")
    assert parse("   ") is None
    assert parse("") is None


def test_take_first_and_second():
    first = p.take_first(p.take_int(), p.take_str(";"))
    second = p.take_second(p.take_str(";"), p.take_int())
    assert first("5;x") == (5, "x")
    assert first("5x") is None
    assert second(";5x") == (5, "x")


def test_tuples():
    assert p.take_tuple(p.take_int(), p.take_str("a"))("1ab") == ((1, "a"), "b")
    parse3 = p.take_tuple3(p.take_int(), p.take_str("|"), p.take_int())
    assert parse3("47|53") == ((47, "|", 53), "")
    assert parse3("47|") is None
    parse4 = p.take_tuple4(p.take_int(), p.take_str(","), p.take_int(), p.take_eol())
    assert parse4("1,2") == ((1, ",", 2, None), "")


def test_take_either():
    parse = p.take_either(p.take_int(), p.take_str("x"))
    assert parse("3z") == (p.Left(3), "z")
    assert parse("xz") == (p.Right("x"), "z")
    assert parse("z") is None


def test_take_many():
    digit = p.take_any("0123456789")
    assert p.take_many0(digit)("ab") == ([], "ab")
    assert p.take_many1(digit)("ab") is None
    assert p.take_many1(digit)("12ab") == (["1", "2"], "ab")


def test_take_or_variants():
    a, b, c, d = (p.take_str(s) for s in "abcd")
    assert p.take_or(a, b)("bx") == ("b", "x")
    assert p.take_or3(a, b, c)("cx") == ("c", "x")
    assert p.take_or4(a, b, c, d)("dx") == ("d", "x")
    assert p.take_or4(a, b, c, d)("ex") is None


def test_take_or_prefers_first():
    parse = p.take_or(p.take_str("ab"), p.take_str("a"))
    assert parse("abc") == ("ab", "c")


def test_map_value():
    parse = p.map_value(p.take_int(), lambda v: v * 2)
    assert parse("21!") == (42, "!")
    assert parse("!") is None