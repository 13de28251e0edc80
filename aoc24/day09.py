"""Disk fragmenter: compacting a dense disk map."""

import argparse
import sys
from bisect import bisect_left, insort
from pathlib import Path
from typing import Dict, List, Tuple


def _digits(text: str) -> List[int]:
    return [int(char) for char in text if char in "0123456789"]


def files_and_spaces(text: str) -> Tuple[Dict[int, int], List[int]]:
    """Per block: file id by position, and the sorted free positions."""
    files: Dict[int, int] = {}
    spaces: List[int] = []
    pos = 0
    for i, size in enumerate(_digits(text)):
        for _ in range(size):
            if i % 2 == 0:
                files[pos] = i // 2
            else:
                spaces.append(pos)
            pos += 1
    return files, spaces


def files_and_spaces2(text: str) -> Tuple[Dict[int, Tuple[int, int]], List[Tuple[int, int]]]:
    """Per span: ``pos -> (id, size)`` for files, sorted ``(pos, size)`` for gaps."""
    files: Dict[int, Tuple[int, int]] = {}
    spaces: List[Tuple[int, int]] = []
    pos = 0
    for i, size in enumerate(_digits(text)):
        if i % 2 == 0:
            files[pos] = (i // 2, size)
        else:
            spaces.append((pos, size))
        pos += size
    return files, spaces


def compact_blocks(text: str) -> int:
    """Checksum after moving single blocks from the end into the first gaps."""
    files, spaces = files_and_spaces(text)
    layout: List = [None] * (len(files) + len(spaces))
    for pos, file_id in files.items():
        layout[pos] = file_id
    free = iter(spaces)
    tail = len(layout) - 1
    for gap in free:
        while tail >= 0 and layout[tail] is None:
            tail -= 1
        if tail <= gap:
            break
        layout[gap], layout[tail] = layout[tail], None
    return sum(pos * file_id for pos, file_id in enumerate(layout) if file_id is not None)


def _insert_unique(spaces: List[Tuple[int, int]], span: Tuple[int, int]) -> None:
    i = bisect_left(spaces, span)
    if i == len(spaces) or spaces[i] != span:
        spaces.insert(i, span)


def _insert_space(spaces: List[Tuple[int, int]], pos: int, size: int) -> None:
    _insert_unique(spaces, (pos, size))
    while True:
        i = bisect_left(spaces, (pos, size))
        if i > 0 and sum(spaces[i - 1]) == pos:
            prev_pos, prev_size = spaces[i - 1]
            del spaces[i - 1:i + 1]
            pos, size = prev_pos, prev_size + size
        elif i + 1 < len(spaces) and pos + size == spaces[i + 1][0]:
            next_size = spaces[i + 1][1]
            del spaces[i:i + 2]
            size += next_size
        else:
            return
        _insert_unique(spaces, (pos, size))


def compact_files(text: str) -> int:
    """Checksum after moving whole files, highest id first, into the first fitting gap."""
    files, spaces = files_and_spaces2(text)
    placed: Dict[int, Tuple[int, int]] = {}
    order = sorted(((file_id, pos, size) for pos, (file_id, size) in files.items()), reverse=True)
    for file_id, pos, size in order:
        space = next((span for span in spaces if span[1] >= size), None)
        if space is None or space[0] >= pos:
            placed[pos] = (file_id, size)
            continue
        space_pos, space_size = space
        placed[space_pos] = (file_id, size)
        spaces.remove(space)
        if space_size > size:
            _insert_space(spaces, space_pos + size, space_size - size)
        _insert_space(spaces, pos, size)
    return sum(
        (pos * size + (size - 1) * size // 2) * file_id
        for pos, (file_id, size) in placed.items()
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="day09")
    sub = parser.add_subparsers(dest="part", required=True)
    for name, help_text in (("part1", "Day 9 part 1"), ("part2", "Day 9 part 2")):
        sub.add_parser(name, help=help_text).add_argument("file")
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        text = Path(args.file).read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if args.part == "part1":
        print(compact_blocks(text))
    else:
        print(compact_files(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())