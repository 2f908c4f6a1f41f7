"""Day 1: comparing two columns of location ids."""

from __future__ import annotations

import re
from collections import Counter

_ASCII_WORD = re.compile(r"[^ \t\n\f\r]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def _lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping a trailing '\\r' and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_u32(word: str) -> int:
    if not _UNSIGNED.fullmatch(word):
        raise ValueError(f"invalid unsigned number: {word!r}")
    value = int(word)
    if value > _U32_MAX:
        raise ValueError(f"number too large: {word!r}")
    return value


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Read the first two whitespace-separated columns of every line."""
    left: list[int] = []
    right: list[int] = []
    for line in _lines(text):
        words = _ASCII_WORD.findall(line)
        if not words:
            raise ValueError("Missing first col")
        if len(words) < 2:
            raise ValueError("Missing second col")
        left.append(_parse_u32(words[0]))
        right.append(_parse_u32(words[1]))
    return left, right


def total_distance(text: str) -> int:
    """Sum of distances between the columns after sorting each of them."""
    left, right = parse_columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(text: str) -> int:
    """Sum of each left value times how often it occurs in the right column."""
    left, right = parse_columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)