# contestkit

Compact, tested solutions to a set of short competitive-programming
problems. Each problem is a plain Python function that takes the parsed
input and returns the answer. A small command-line tool reads a problem's
input in the usual contest format and prints the expected output.

Requires Python 3.10 or later and has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

The problems are grouped by difficulty letter:

- `contestkit.problems_a`: `again_twenty_five`, `next_beautiful_year`,
  `cover_in_water`, `good_array_operations`, `time_until_alarm`,
  `is_hard_problem`, `line_trip_fuel`, `lucky_year_wait`, `subset_mex_sum`,
  `two_permutations_possible`, `is_unimodal`, `min_upload_seconds`,
  `fix_word_case`
- `contestkit.problems_b`: `array_cancellation_cost`, `card_game_wins`,
  `chip_ribbon_operations`, `even_array_moves`, `k_sort_cost`,
  `is_large_sum`, `laura_survivors`, `dust_sweeper_operations`,
  `best_multiple_base`, `operations_to_one`, `perfect_number`,
  `queue_after`, `can_build_symmetric_square`
- `contestkit.problems_c`: `strings_intersect`

Example:

```python
from contestkit.problems_a import next_beautiful_year, fix_word_case
from contestkit.problems_b import perfect_number, operations_to_one

next_beautiful_year(1987)   # 2013, the next year with all digits distinct
fix_word_case("HoUse")      # "house"
perfect_number(1)           # 19, the smallest number whose digits sum to 10
operations_to_one(5)        # None: 5 cannot be turned into 1
```

Functions whose problem has no answer in some cases (`even_array_moves`,
`operations_to_one`) return `None` there. Arguments outside a problem's
domain, such as an empty list of stations for `line_trip_fuel` or a `k`
outside 1..10000 for `perfect_number`, raise `ValueError`.

## Command line

The `contestkit` command takes a problem name and reads that problem's
input from standard input, writing the answer to standard output in the
format the judge expects:

```
contestkit PROBLEM < input.txt
```

`python -m contestkit.cli PROBLEM` does the same. The accepted problem
names are:

```
again-twenty-five, beautiful-year, cover-in-water,
everybody-likes-good-arrays, everyone-loves-to-sleep,
in-search-of-an-easy-problem, line-trip, lucky-year, subset-mex,
two-permutations, unimodal-array, upload-more-ram, word,
array-cancellation, card-game, chip-and-ribbon, even-array, k-sort,
large-addition, laura-and-operations, mark-the-dust-sweeper,
maximum-multiple-sum, multiply-by-2-divide-by-6, perfect-number,
queue-at-the-school, symmetric-matrix, clock-and-strings
```

Input is read as whitespace-separated tokens. Problems with several test
cases start with the number of cases, and one line of output is written
per case.

The same work is available from Python through `contestkit.cli.solve`,
which takes the problem name and the full input text and returns the
output text:

```python
from contestkit.cli import solve

solve("clock-and-strings", "1\n2 9 10 6\n")   # "YES\n"
```

`solve` raises `ValueError` for an unknown problem name and for input that
runs out of tokens or has a non-numeric token where a number is expected.
The command reports such input errors on standard error and exits with
status 1; an unknown problem name is rejected by the argument parser.