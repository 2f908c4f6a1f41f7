# advent24

Solvers for days 1 to 5 of the 2024 Advent of Code puzzles, usable as a
library or from the command line.

## Installation

```
pip install .
```

## Command line

The `advent24` command solves one puzzle part. By default it reads the
puzzle input from a file named `input` in the current directory and writes
the answer to a file named `output`.

```
advent24 d1a1
advent24 d3a2 --input day3.txt --output answer.txt
```

Puzzle parts are named by day and part: `d1a1`, `d1a2`, `d2a1`, `d2a2`,
`d3a1`, `d3a2`, `d4a1`, `d4a2`, `d5a1` and `d5a2`.

Options:

- `--input PATH`: file to read the puzzle input from (default `input`)
- `--output PATH`: file to write the answer to (default `output`)

If the input file cannot be read, the output file cannot be written, or the
input is malformed, the command prints `Error: ...` to standard error and
exits with status 1. Run `advent24 --help` for a summary.

## Library

Every solver takes the puzzle input as a string and returns the answer as
an integer.

```python
from pathlib import Path

from advent24 import day1, day2, day3, day4, day5

text = Path("input").read_text()

day1.total_distance(text)             # day 1, part 1
day1.similarity_score(text)           # day 1, part 2
day2.count_safe(text)                 # day 2, part 1
day2.count_safe_with_dampener(text)   # day 2, part 2
day3.mul_sum(text)                    # day 3, part 1
day3.enabled_mul_sum(text)            # day 3, part 2
day4.count_xmas(text)                 # day 4, part 1
day4.count_x_mas(text)                # day 4, part 2
day5.sum_correct_middles(text)        # day 5, part 1
day5.sum_corrected_middles(text)      # day 5, part 2
```

Helpers available on their own:

- `day1.parse_columns(text)`: the two number columns as two lists
- `day2.parse_reports(text)`: one list of levels per line
- `day2.is_strictly_safe(report)` and `day2.is_safe_with_dampener(report)`:
  check a single report
- `day4.parse_grid(text)`: the letter grid as a list of character rows
- `day5.parse_rules_and_updates(text)`: the `a|b` rules and the
  comma-separated updates

Malformed input raises `ValueError`.

The solvers in `advent24.cli.PUZZLES` are keyed by the same names the
command line uses.

## Scope

Only days 1 to 5 are covered; there are no solvers for later days.

## Tests

```
pip install .[test]
pytest
```