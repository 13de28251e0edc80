"""Line-oriented reading helpers."""

from collections.abc import Iterable, Iterator
from typing import TextIO


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a text stream without their line endings."""
    for line in stream:
        yield _strip_eol(line)


def _lines_closing(handle: TextIO) -> Iterator[str]:
    with handle:
        yield from read_lines(handle)


def read_file_lines(filename: str) -> Iterator[str]:
    """Open a file at once and yield its lines without line endings.

    The file is closed once the lines are exhausted.
    """
    handle = open(filename, encoding="utf-8", newline="\n")
    return _lines_closing(handle)