"""Report Repair: find entries in an expense report that sum to 2020."""

from __future__ import annotations

import re
from collections.abc import Iterable

TARGET = 2020

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _lines(stream: Iterable[str]) -> Iterable[str]:
    for raw in stream:
        yield raw.rstrip("\n").rstrip("\r")


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"failed to parse int: {text!r}")
    return int(text)


def _read_entries(stream: Iterable[str]) -> list[int]:
    return [_parse_int(line) for line in _lines(stream)]


def find_entries(expenses: list[int]) -> tuple[int, int, int]:
    """Return three entries of a sorted report that sum to 2020.

    Raises ValueError when no such triple exists.
    """
    for i, a in enumerate(expenses[:-2]):
        for b in expenses[i + 1 : -1]:
            for c in expenses[i + 2 :]:
                if a + b + c == TARGET and a != b and b != c:
                    return a, b, c
    raise ValueError("answer not found")


class Solution:
    """Solver for the 2020 day 1 puzzle."""

    year = "2020"
    day = "1"

    def part1(self, stream: Iterable[str]) -> str:
        """Product of the two entries that sum to 2020."""
        report = set(_read_entries(stream))
        a = b = 0
        for entry in report:
            a, b = entry, TARGET - entry
            if b in report:
                break
        return str(a * b)

    def part2(self, stream: Iterable[str]) -> str:
        """Product of the three entries that sum to 2020."""
        report = sorted(_read_entries(stream))
        a, b, c = find_entries(report)
        return str(a * b * c)