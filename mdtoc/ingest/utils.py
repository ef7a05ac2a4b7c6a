from __future__ import annotations

from typing import Iterable, Iterator


def count_markers(line: str, marker: str = "#") -> int:
    """Length of the run of heading markers at the very start of the line."""

    count = 0
    for char in line:
        if char != marker:
            break
        count += 1
    return count


def iter_lines(source: str | Iterable[str]) -> Iterator[str]:
    """Yield lines without their terminators from text or an iterable of lines."""

    lines = source.split("\n") if isinstance(source, str) else source
    for line in lines:
        yield line.rstrip("\r\n")


__all__ = ["count_markers", "iter_lines"]
