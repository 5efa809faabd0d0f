"""Solutions to the division-A style problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise

_MINUTES_PER_DAY = 24 * 60
_MEX_LIMIT = 101


def again_twenty_five(n: int) -> int:
    """Return the last two digits of 5**n, which are always 25 for n >= 2.

    Raises ValueError for n below 2.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    return pow(5, n, 100)


def _has_distinct_digits(year: int) -> bool:
    digits = str(year)
    return len(set(digits)) == len(digits)


def next_beautiful_year(year: int) -> int:
    """Return the smallest year strictly after ``year`` whose digits are all distinct."""
    candidate = year + 1
    while not _has_distinct_digits(candidate):
        candidate += 1
    return candidate


def cover_in_water(cells: str) -> int:
    """Return how many water-filling actions are needed to cover every empty cell.

    Three consecutive empty cells let two actions fill an infinite source,
    so the answer is then 2; otherwise each empty cell needs its own action.
    """
    if "..." in cells:
        return 2
    return cells.count(".")


def good_array_operations(values: Iterable[int]) -> int:
    """Return how many adjacent pairs share a parity and must be merged."""
    return sum(1 for left, right in pairwise(values) if (left ^ right) & 1 == 0)


def time_until_alarm(
    hour: int, minute: int, alarms: Iterable[tuple[int, int]]
) -> tuple[int, int]:
    """Return (hours, minutes) of sleep before the nearest alarm rings.

    Raises ValueError when no alarm is given.
    """
    slept_at = hour * 60 + minute
    waits = [
        ((alarm_hour * 60 + alarm_minute) - slept_at) % _MINUTES_PER_DAY
        for alarm_hour, alarm_minute in alarms
    ]
    if not waits:
        raise ValueError("at least one alarm is required")
    return divmod(min(waits), 60)


def is_hard_problem(opinions: Iterable[int]) -> bool:
    """Return True when anyone considers the problem hard (any non-zero opinion)."""
    return any(opinions)


def line_trip_fuel(x: int, stations: Sequence[int]) -> int:
    """Return the minimal tank volume for a round trip from 0 to ``x`` and back.

    Stations are sorted positions strictly between 0 and ``x``; there is no
    station at ``x`` itself, so the last stretch is driven twice.
    Raises ValueError when there are no stations.
    """
    if not stations:
        raise ValueError("at least one station is required")
    gaps = (right - left for left, right in pairwise(stations))
    return max(2 * (x - stations[-1]), stations[0], *gaps)


def lucky_year_wait(year: int) -> int:
    """Return the years until the next year with at most one non-zero digit."""
    if year < 1:
        raise ValueError("year must be positive")
    digits = str(year)
    next_lucky = (int(digits[0]) + 1) * 10 ** (len(digits) - 1)
    return next_lucky - year


def _mex(counts: Counter[int], needed: int) -> int:
    return next(
        (value for value in range(_MEX_LIMIT) if counts[value] < needed),
        _MEX_LIMIT,
    )


def subset_mex_sum(values: Iterable[int]) -> int:
    """Return the largest mex(A) + mex(B) over splits of ``values`` into A and B.

    Values must lie in 0..100.
    """
    counts = Counter(values)
    out_of_range = [value for value in counts if not 0 <= value < _MEX_LIMIT]
    if out_of_range:
        raise ValueError(f"values out of range 0..100: {sorted(out_of_range)}")
    return _mex(counts, 1) + _mex(counts, 2)


def two_permutations_possible(n: int, a: int, b: int) -> bool:
    """Return whether two permutations of length ``n`` can share a common prefix
    of length ``a`` and a common suffix of length ``b`` and still differ."""
    if n == a == b:
        return True
    return n - a - b >= 2


def is_unimodal(values: Iterable[int]) -> bool:
    """Return whether the values strictly rise, then stay constant, then strictly fall."""
    increasing_done = False
    constant_done = False
    for left, right in pairwise(values):
        if (left < right and increasing_done) or (left == right and constant_done):
            return False
        if left == right:
            increasing_done = True
        elif left > right:
            increasing_done = True
            constant_done = True
    return True


def min_upload_seconds(n: int, k: int) -> int:
    """Return the seconds needed to upload ``n`` GB uploading at most 1 GB per ``k`` seconds."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    return (n - 1) * k + 1


def fix_word_case(word: str) -> str:
    """Return the word all upper case if it has more upper-case letters, else all lower case."""
    lowercase = sum(1 for char in word if "a" <= char <= "z")
    uppercase = len(word) - lowercase
    return word.upper() if uppercase > lowercase else word.lower()