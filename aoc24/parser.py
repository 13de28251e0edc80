"""Small parser combinators over strings.

A parser is a callable taking the input text and returning either
``None`` when it does not match, or a ``(value, rest)`` pair.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional, Tuple

ParseResult = Optional[Tuple[Any, str]]
Parser = Callable[[str], ParseResult]

_UINT = re.compile(r"[0-9]+")
_BLANKS = " \t"


@dataclass(frozen=True)
class Left:
    """Value produced by the first alternative of take_either."""

    value: Any


@dataclass(frozen=True)
class Right:
    """Value produced by the second alternative of take_either."""

    value: Any


def take_uint() -> Parser:
    """Parse a run of ASCII digits as a non-negative integer."""

    def parse(text: str) -> ParseResult:
        match = _UINT.match(text)
        if match is None:
            return None
        return int(match.group()), text[match.end():]

    return parse


def take_str(expected: str) -> Parser:
    """Match an exact prefix."""

    def parse(text: str) -> ParseResult:
        if not text.startswith(expected):
            return None
        return expected, text[len(expected):]

    return parse


def take_char(expected: str) -> Parser:
    """Match one specific character."""

    def parse(text: str) -> ParseResult:
        if text and text[0] == expected:
            return text[0], text[1:]
        return None

    return parse


def take_any_char() -> Parser:
    """Take any single character."""

    def parse(text: str) -> ParseResult:
        if not text:
            return None
        return text[0], text[1:]

    return parse


def take_any(expected: str) -> Parser:
    """Take the leading character if it is one of ``expected``."""

    def parse(text: str) -> ParseResult:
        for char in expected:
            if text.startswith(char):
                return char, text[len(char):]
        return None

    return parse


def take_any_func(predicate: Callable[[str], bool]) -> Parser:
    """Find the first character satisfying ``predicate``.

    The returned rest drops as many UTF-8 bytes from the front of the
    input as the found character occupies.
    """

    def parse(text: str) -> ParseResult:
        found = next((char for char in text if predicate(char)), None)
        if found is None:
            return None
        width = len(found.encode("utf-8"))
        rest = text.encode("utf-8")[width:].decode("utf-8")
        return found, rest

    return parse


def take_newline() -> Parser:
    """Take one ``\\n`` or ``\\r``."""
    return take_any("\n\r")


def take_whitespace() -> Parser:
    """Take one space, tab, ``\\r`` or ``\\n``."""
    return take_any(" \t\r\n")


def take_spacetab() -> Parser:
    """Take one space or tab."""
    return take_any(" \t")


def take_eol() -> Parser:
    """Succeed with ``None`` only on empty input."""

    def parse(text: str) -> ParseResult:
        if not text:
            return None, text
        return None

    return parse


def take_int() -> Parser:
    """Parse an optionally signed integer."""
    uint = take_uint()

    def parse(text: str) -> ParseResult:
        sign = 1
        if text.startswith("-"):
            sign, text = -1, text[1:]
        elif text.startswith("+"):
            text = text[1:]
        result = uint(text)
        if result is None:
            return None
        value, rest = result
        return sign * value, rest

    return parse


def take_separator(item: Parser, separator: Parser) -> Parser:
    """Parse zero or more items separated by ``separator``; never fails."""

    def parse(text: str) -> ParseResult:
        values = []
        cur = text
        while (result := item(cur)) is not None:
            value, cur = result
            values.append(value)
            sep = separator(cur)
            if sep is None:
                break
            cur = sep[1]
        return values, cur

    return parse


def catch(parser: Parser) -> Parser:
    """Make ``parser`` optional, discarding its value."""

    def parse(text: str) -> ParseResult:
        result = parser(text)
        if result is not None:
            return None, result[1]
        return None, text

    return parse


def with_space(parser: Parser) -> Parser:
    """Skip spaces and tabs around ``parser``.

    Fails on input that is empty or holds only spaces and tabs.
    """

    def parse(text: str) -> ParseResult:
        stripped = text.lstrip(_BLANKS)
        if not stripped:
            return None
        result = parser(stripped)
        if result is None:
            return None
        value, rest = result
        return value, rest.lstrip(_BLANKS)

    return parse


def _sequence(*parsers: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        values = []
        cur = text
        for parser in parsers:
            result = parser(cur)
            if result is None:
                return None
            value, cur = result
            values.append(value)
        return tuple(values), cur

    return parse


def take_first(first: Parser, second: Parser) -> Parser:
    """Run both parsers, keep the first value."""
    return map_value(_sequence(first, second), lambda pair: pair[0])


def take_second(first: Parser, second: Parser) -> Parser:
    """Run both parsers, keep the second value."""
    return map_value(_sequence(first, second), lambda pair: pair[1])


def take_tuple(first: Parser, second: Parser) -> Parser:
    """Run both parsers, keep both values as a pair."""
    return _sequence(first, second)


def take_tuple3(first: Parser, second: Parser, third: Parser) -> Parser:
    """Run three parsers in turn, keep all three values."""
    return _sequence(first, second, third)


def take_tuple4(first: Parser, second: Parser, third: Parser, fourth: Parser) -> Parser:
    """Run four parsers in turn, keep all four values."""
    return _sequence(first, second, third, fourth)


def take_either(first: Parser, second: Parser) -> Parser:
    """Try ``first`` then ``second``, tagging the value Left or Right."""

    def parse(text: str) -> ParseResult:
        result = first(text)
        if result is not None:
            return Left(result[0]), result[1]
        result = second(text)
        if result is not None:
            return Right(result[0]), result[1]
        return None

    return parse


def take_many0(parser: Parser) -> Parser:
    """Apply ``parser`` as often as it matches; never fails."""

    def parse(text: str) -> ParseResult:
        values = []
        cur = text
        while (result := parser(cur)) is not None:
            value, cur = result
            values.append(value)
        return values, cur

    return parse


def take_many1(parser: Parser) -> Parser:
    """Apply ``parser`` as often as it matches, at least once."""
    many = take_many0(parser)

    def parse(text: str) -> ParseResult:
        values, rest = many(text)
        if not values:
            return None
        return values, rest

    return parse


def _alternatives(*parsers: Parser) -> Parser:
    def parse(text: str) -> ParseResult:
        for parser in parsers:
            result = parser(text)
            if result is not None:
                return result
        return None

    return parse


def take_or(first: Parser, second: Parser) -> Parser:
    """Return the first of two parsers that matches."""
    return _alternatives(first, second)


def take_or3(first: Parser, second: Parser, third: Parser) -> Parser:
    """Return the first of three parsers that matches."""
    return _alternatives(first, second, third)


def take_or4(first: Parser, second: Parser, third: Parser, fourth: Parser) -> Parser:
    """Return the first of four parsers that matches."""
    return _alternatives(first, second, third, fourth)


def map_value(parser: Parser, func: Callable[[Any], Any]) -> Parser:
    """Transform the value of a successful parse."""

    def parse(text: str) -> ParseResult:
        result = parser(text)
        if result is None:
            return None
        value, rest = result
        return func(value), rest

    return parse