"""Day 5: checking and fixing print orders against page ordering rules."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import takewhile

from .day1 import _lines, _parse_u32

Rule = tuple[int, int]


def parse_rules_and_updates(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Parse 'a|b' rules up to a blank line, then comma-separated updates."""
    lines: Iterator[str] = iter(_lines(text))
    rules: list[Rule] = []
    for line in lines:
        if line == "":
            break
        parts = line.split("|")
        if len(parts) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        rules.append((_parse_u32(parts[0]), _parse_u32(parts[1])))
    else:
        raise ValueError("missing blank line after the rules")
    updates = [[_parse_u32(page) for page in line.split(",")] for line in lines]
    return rules, updates


def _is_ordered(update: Sequence[int], rules: Sequence[Rule]) -> bool:
    for first, second in rules:
        if first in update and second in update and update.index(first) > update.index(second):
            return False
    return True


def sum_correct_middles(text: str) -> int:
    """Sum of the middle pages of the updates that already follow every rule."""
    rules, updates = parse_rules_and_updates(text)
    total = 0
    for update in updates:
        if _is_ordered(update, rules):
            if not update:
                raise ValueError("empty update")
            total += update[len(update) // 2]
    return total


def _order_rules(rules: Sequence[Rule]) -> list[Rule]:
    """Arrange rules so those sharing a first page are grouped, earliest pages first."""
    ordered = list(rules)
    for start in range(len(ordered)):
        rest = ordered[start:]
        pick = None
        if start > 0:
            previous_first = ordered[start - 1][0]
            pick = next(
                (i for i, (first, _) in enumerate(rest) if first == previous_first), None
            )
        if pick is None:
            seconds = {second for _, second in rest}
            pick = next(
                (i for i, (first, _) in enumerate(rest) if first not in seconds), None
            )
        if pick is None:
            raise ValueError("ordering rules contain a cycle")
        ordered[start], ordered[start + pick] = ordered[start + pick], ordered[start]
    return ordered


def _chain(ordered: Sequence[Rule]) -> list[Rule]:
    """Keep only the rules that link consecutive pages of the sorted update."""
    kept = []
    for index, (first, second) in enumerate(ordered):
        following = takewhile(lambda rule, s=second: rule[0] != s, ordered[index + 1 :])
        if all(rule[0] == first for rule in following):
            kept.append((first, second))
    return kept


def _sorted_update(update: Sequence[int], rules: Sequence[Rule]) -> list[int]:
    relevant = [(a, b) for a, b in rules if a in update and b in update]
    chain = _chain(_order_rules(relevant))
    pages = [first for first, _ in chain]
    if chain:
        pages.append(chain[-1][1])
    return pages


def sum_corrected_middles(text: str) -> int:
    """Sum of the middle pages of misordered updates once put in rule order."""
    rules, updates = parse_rules_and_updates(text)
    if not updates:
        raise ValueError("no updates")
    total = 0
    for update in updates:
        pages = _sorted_update(update, rules)
        if list(update) != pages:
            middle = len(update) // 2
            if middle >= len(pages):
                raise ValueError(f"rules cannot order update {update!r}")
            total += pages[middle]
    return total