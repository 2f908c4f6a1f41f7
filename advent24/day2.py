"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import Enum

_ASCII_WORD = re.compile(r"[^ \t\n\f\r]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_MAX_STEP = 3


class _Direction(Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


def _lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping a trailing '\\r' and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_i32(word: str) -> int:
    if not _SIGNED.fullmatch(word):
        raise ValueError(f"Bad number: {word!r}")
    value = int(word)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"Bad number: {word!r}")
    return value


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of whitespace-separated levels per line."""
    return [[_parse_i32(word) for word in _ASCII_WORD.findall(line)] for line in _lines(text)]


def _first_unsafe_index(levels: Iterable[int]) -> int | None:
    """Index of the first level whose step to the next one is unsafe, if any."""
    direction: _Direction | None = None
    previous: int | None = None
    for index, value in enumerate(levels):
        if previous is not None:
            diff = value - previous
            if diff == 0 or abs(diff) > _MAX_STEP:
                return index - 1
            current = _Direction.INCREASING if diff > 0 else _Direction.DECREASING
            if direction is None:
                direction = current
            elif direction is not current:
                return index - 1
        previous = value
    return None


def is_strictly_safe(report: Sequence[int]) -> bool:
    """True if levels change monotonically by 1 to 3 at every step."""
    if not report:
        raise ValueError("empty report")
    return _first_unsafe_index(report) is None


def _without(report: Sequence[int], skip: int) -> Iterable[int]:
    return (value for index, value in enumerate(report) if index != skip)


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """True if the report is safe, or becomes safe by dropping a level near the fault."""
    unsafe = _first_unsafe_index(report)
    if unsafe is None:
        return True
    # A negative candidate removes nothing, leaving the report as it was.
    candidates = (unsafe - 1, unsafe, unsafe + 1)
    return any(_first_unsafe_index(_without(report, skip)) is None for skip in candidates)


def count_safe(text: str) -> int:
    """Number of strictly safe reports."""
    return sum(1 for report in parse_reports(text) if is_strictly_safe(report))


def count_safe_with_dampener(text: str) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for report in parse_reports(text) if is_safe_with_dampener(report))