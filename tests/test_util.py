import io

import pytest

from aoc24.util import read_file_lines, read_lines


def test_read_lines_strips_endings():
    stream = io.StringIO("a\r\nb\nc")
    assert list(read_lines(stream)) == ["a", "b", "c"]


def test_read_lines_no_trailing_empty_line():
    stream = io.StringIO("first\nsecond\n")
    assert list(read_lines(stream)) == ["first", "second"]


def test_read_lines_keeps_inner_empty_lines():
    stream = io.StringIO("x\n\ny\n")
    assert list(read_lines(stream)) == ["x", "", "y"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_file_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"one\r\ntwo\nthree\n")
    assert list(read_file_lines(str(path))) == ["one", "two", "three"]


def test_read_file_lines_missing_file_raises_on_call(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file_lines(str(tmp_path / "missing.txt"))


def test_read_file_lines_invalid_utf8(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        list(read_file_lines(str(path)))