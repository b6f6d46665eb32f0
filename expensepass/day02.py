"""Password Philosophy: count passwords that satisfy their policies."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

_LINE_RE = re.compile(r"(\d{1,2})-(\d{1,2}) ([a-zA-Z]): (\w+)", re.ASCII | re.DOTALL)


@dataclass(frozen=True)
class PasswordPolicy:
    """Two numbers and a letter that a password is checked against."""

    first: int
    second: int
    char: str

    def allows_by_count(self, password: str) -> bool:
        """True if the letter occurs between first and second times."""
        return self.first <= password.count(self.char) <= self.second

    def allows_by_position(self, password: str) -> bool:
        """True if the letter is at exactly one of the two 1-based positions."""
        hits = sum(self._char_at(password, pos) == self.char for pos in (self.first, self.second))
        return hits == 1

    @staticmethod
    def _char_at(text: str, position: int) -> str:
        if not 1 <= position <= len(text):
            raise IndexError(f"position {position} out of range for password of length {len(text)}")
        return text[position - 1]


def parse_line(line: str) -> tuple[PasswordPolicy, str]:
    """Parse a line such as '1-3 a: abcde' into a policy and a password."""
    match = _LINE_RE.search(line)
    if match is None:
        raise ValueError(f"line {line!r} does not match the password format")
    first, second, char, candidate = match.groups()
    return PasswordPolicy(int(first), int(second), char), candidate


def _count_valid(
    stream: Iterable[str], check: Callable[[PasswordPolicy, str], bool]
) -> int:
    count = 0
    for raw in stream:
        policy, candidate = parse_line(raw.rstrip("\n").rstrip("\r"))
        if check(policy, candidate):
            count += 1
    return count


class Solution:
    """Solver for the 2020 day 2 puzzle."""

    year = "2020"
    day = "2"

    def part1(self, stream: Iterable[str]) -> str:
        """Number of passwords valid under the count rule."""
        return str(_count_valid(stream, PasswordPolicy.allows_by_count))

    def part2(self, stream: Iterable[str]) -> str:
        """Number of passwords valid under the position rule."""
        return str(_count_valid(stream, PasswordPolicy.allows_by_position))