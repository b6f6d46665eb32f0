# expensepass

Solvers for two small text puzzles. Each solver is a `Solution` class with `year` and `day` attributes and two methods, `part1` and `part2`. Both methods take any iterable of text lines, such as an open file or an `io.StringIO`, and return the answer as a string.

## `expensepass.day01`: expense report

The input holds one integer per line.

- `Solution().part1(stream)` looks for two entries that sum to 2020 and returns their product. When no such pair exists, no error is raised and the result comes from whichever entry was checked last. An empty report gives `"0"`.
- `Solution().part2(stream)` sorts the entries, finds three that sum to 2020, and returns their product. It raises `ValueError("answer not found")` when there is no such triple.
- `find_entries(expenses)` runs that search on a list of integers that is already sorted. It returns the three entries as a tuple and raises `ValueError` when there is no answer.

A line that is not an integer, an empty line included, raises `ValueError`.

## `expensepass.day02`: password policies

Each line has the form `1-3 a: abcde`. That is two numbers of one or two digits, a letter, and a password.

- `parse_line(line)` returns a `(PasswordPolicy, password)` tuple. The pattern only has to occur somewhere in the line. When it does not occur, `ValueError` is raised.
- `PasswordPolicy` is a frozen dataclass with the fields `first`, `second` and `char`.
  - `allows_by_count(password)` is true when `char` occurs at least `first` and at most `second` times.
  - `allows_by_position(password)` is true when exactly one of the 1-based positions `first` and `second` holds `char`. A position beyond the end of the password raises `IndexError`.
- `Solution().part1(stream)` counts the lines that are valid under the count rule.
- `Solution().part2(stream)` counts the lines that are valid under the position rule.

## Example

```python
import io

from expensepass import day01, day02

report = io.StringIO("1721\n979\n366\n299\n675\n1456")
print(day01.Solution().part1(report))  # 514579

policies = io.StringIO("1-3 a: abcde\n1-3 b: cdefg\n2-9 c: ccccccccc")
print(day02.Solution().part1(policies))  # 2
```

An error raised while reading the stream is passed on to the caller.

## What it does not do

This package is a library only:

- It has no command-line program.
- It does not download puzzle inputs.
- It does not submit answers.
- It does not keep a registry of solvers across years and days.

You supply the input text yourself and call the solvers directly.

## Running the tests

```
pip install -e ".[test]"
pytest
```