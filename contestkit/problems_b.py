"""Solutions to the division-B style problems."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from itertools import count, pairwise

_PERFECT_LIMIT = 10_000
_PERFECT_DIGIT_SUM = 10


def array_cancellation_cost(values: Iterable[int]) -> int:
    """Return the coins needed to bring a zero-sum array to all zeros.

    Moving a unit from an earlier element to a later one is free; moving it
    backwards costs a coin per two units of imbalance left over.
    """
    positive = negative = 0
    for value in values:
        if value > 0:
            positive += value
        elif not positive:
            negative -= value
        elif positive >= -value:
            positive += value
        else:
            negative -= value + positive
            positive = 0
    return (positive + negative) // 2


def _compare(left: int, right: int) -> int:
    return (left > right) - (left < right)


def card_game_wins(a: int, b: int, c: int, d: int) -> int:
    """Return in how many of the four card orders the first player wins.

    The first player holds ``a`` and ``b``, the second ``c`` and ``d``; a game
    is won by winning strictly more of its two rounds.
    """
    games = (
        ((a, c), (b, d)),
        ((a, d), (b, c)),
        ((b, c), (a, d)),
        ((b, d), (a, c)),
    )
    return sum(
        1
        for first_round, second_round in games
        if _compare(*first_round) + _compare(*second_round) > 0
    )


def chip_ribbon_operations(counts: Iterable[int]) -> int:
    """Return the minimal teleports needed to write ``counts`` on the ribbon.

    Raises ValueError for an empty ribbon.
    """
    cells = list(counts)
    if not cells:
        raise ValueError("the ribbon needs at least one cell")
    rises = sum(max(right - left, 0) for left, right in pairwise([0, *cells]))
    return rises - 1


def even_array_moves(values: Iterable[int]) -> int | None:
    """Return the swaps needed so every value's parity matches its index's.

    Returns None when no sequence of swaps can do it.
    """
    misplaced = [0, 0]
    for index, value in enumerate(values):
        if value % 2 != index % 2:
            misplaced[index % 2] += 1
    even_slots, odd_slots = misplaced
    return even_slots if even_slots == odd_slots else None


def k_sort_cost(values: Iterable[int]) -> int:
    """Return the coins needed to make the array non-decreasing."""
    prefix_max = 0
    total = 0
    largest = 0
    for value in values:
        prefix_max = max(prefix_max, value)
        gap = prefix_max - value
        total += gap
        largest = max(largest, gap)
    return total + largest


def is_large_sum(number: int | str) -> bool:
    """Return whether ``number`` is the sum of two equally long numbers made of digits 5-9."""
    digits = str(number)
    if not digits.isdigit():
        raise ValueError(f"not a non-negative integer: {number!r}")
    return digits[0] == "1" and digits[-1] != "9" and "0" not in digits[1:-1]


def laura_survivors(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Return, for each of the three kinds of number, 1 if it can be the last left."""
    first, second, third = a % 2, b % 2, c % 2
    if first == second == third:
        return (1, 1, 1)
    if first == second:
        return (0, 0, 1)
    if second == third:
        return (1, 0, 0)
    return (0, 1, 0)


def dust_sweeper_operations(values: Iterable[int]) -> int:
    """Return the operations needed to sweep all dust into the last room.

    Raises ValueError when there are no rooms.
    """
    rooms = list(values)
    if not rooms:
        raise ValueError("at least one room is required")
    operations = 0
    for dust in rooms[:-1]:
        if dust:
            operations += dust
        elif operations:
            operations += 1
    return operations


def _multiples_sum(base: int, n: int) -> int:
    terms = n // base
    return base * terms * (terms + 1) // 2


def best_multiple_base(n: int) -> int:
    """Return the base x in 2..n whose multiples up to ``n`` have the largest sum.

    Raises ValueError when ``n`` is below 2.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    return max(range(2, n + 1), key=lambda base: _multiples_sum(base, n))


def operations_to_one(n: int) -> int | None:
    """Return the moves (multiply by 2 or divide by 6) that turn ``n`` into 1.

    Returns None when it cannot be done.
    """
    if n < 1:
        raise ValueError("n must be positive")
    twos = threes = 0
    while n % 2 == 0:
        n //= 2
        twos += 1
    while n % 3 == 0:
        n //= 3
        threes += 1
    if n != 1 or threes < twos:
        return None
    return 2 * threes - twos


def _digit_sum(number: int) -> int:
    return sum(int(digit) for digit in str(number))


@lru_cache(maxsize=1)
def _perfect_numbers() -> tuple[int, ...]:
    found: list[int] = []
    for number in count(19, 9):
        if _digit_sum(number) == _PERFECT_DIGIT_SUM:
            found.append(number)
            if len(found) == _PERFECT_LIMIT:
                break
    return tuple(found)


def perfect_number(k: int) -> int:
    """Return the k-th smallest positive integer whose digits sum to 10 (k in 1..10000)."""
    if not 1 <= k <= _PERFECT_LIMIT:
        raise ValueError(f"k must be between 1 and {_PERFECT_LIMIT}")
    return _perfect_numbers()[k - 1]


def queue_after(queue: str, seconds: int) -> str:
    """Return the queue after each boy standing before a girl lets her pass, every second."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    for _ in range(seconds):
        updated = queue.replace("BG", "GB")
        if updated == queue:
            break
        queue = updated
    return queue


def can_build_symmetric_square(m: int, tiles: Iterable[tuple[int, int, int, int]]) -> bool:
    """Return whether an m-by-m symmetric matrix can be tiled with the 2x2 tiles.

    Each tile is given row by row as (top-left, top-right, bottom-left, bottom-right).
    """
    has_symmetric_tile = any(top_right == bottom_left for _tl, top_right, bottom_left, _br in tiles)
    return has_symmetric_tile and m % 2 == 0