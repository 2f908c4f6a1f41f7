"""Day 3: summing mul(a,b) instructions from corrupted memory."""

from __future__ import annotations

import re

_SIGNED = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _lines(text: str) -> list[str]:
    """Split text into lines on '\\n', dropping a trailing '\\r' and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_i32(word: str) -> int | None:
    if not _SIGNED.fullmatch(word):
        return None
    value = int(word)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _product(body: str) -> int | None:
    parts = body.split(",")
    if len(parts) != 2:
        return None
    left, right = (_parse_i32(part) for part in parts)
    if left is None or right is None:
        return None
    return left * right


def mul_sum(text: str) -> int:
    """Sum of the products of all well-formed mul(a,b) instructions, line by line."""
    products = (
        _product(chunk.split(")")[0])
        for line in _lines(text)
        for chunk in line.split("mul(")[1:]
    )
    return sum(p for p in products if p is not None)


def enabled_mul_sum(text: str) -> int:
    """Like mul_sum, but only counting instructions enabled by do() and not disabled by don't()."""
    joined = "".join(_lines(text))
    return sum(mul_sum(section.split("don't()")[0]) for section in joined.split("do()"))