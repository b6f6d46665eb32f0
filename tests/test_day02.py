import io

import pytest

from expensepass.day02 import PasswordPolicy, Solution, parse_line

EXAMPLE = "1-3 a: abcde\n1-3 b: cdefg\n2-9 c: ccccccccc"


class _FailingReader:
    def __iter__(self):
        raise OSError("custom error")


def test_part1_example():
    assert Solution().part1(io.StringIO(EXAMPLE)) == "2"


def test_part2_example():
    assert Solution().part2(io.StringIO(EXAMPLE)) == "1"


def test_part1_read_error():
    with pytest.raises(OSError, match="custom error"):
        Solution().part1(_FailingReader())


def test_part2_read_error():
    with pytest.raises(OSError, match="custom error"):
        Solution().part2(_FailingReader())


def test_parse_line():
    assert parse_line("1-3 a: abcde") == (PasswordPolicy(1, 3, "a"), "abcde")


def test_parse_line_two_digit_bounds():
    policy, candidate = parse_line("10-12 z: zzzzzzzzzzzzq")
    assert (policy.first, policy.second, policy.char, candidate) == (10, 12, "z", "zzzzzzzzzzzzq")


@pytest.mark.parametrize("line", ["", "1-3 a abcde", "a-b c: def", "1-3 1: abc"])
def test_parse_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_malformed_input_raises():
    with pytest.raises(ValueError):
        Solution().part1(io.StringIO("garbage\n"))


@pytest.mark.parametrize(
    ("line", "expected"),
    [("1-3 a: abcde", True), ("1-3 b: cdefg", False), ("2-9 c: ccccccccc", True)],
)
def test_allows_by_count(line, expected):
    policy, candidate = parse_line(line)
    assert policy.allows_by_count(candidate) is expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [("1-3 a: abcde", True), ("1-3 b: cdefg", False), ("2-9 c: ccccccccc", False)],
)
def test_allows_by_position(line, expected):
    policy, candidate = parse_line(line)
    assert policy.allows_by_position(candidate) is expected


def test_allows_by_position_out_of_range():
    with pytest.raises(IndexError):
        PasswordPolicy(1, 9, "a").allows_by_position("abc")