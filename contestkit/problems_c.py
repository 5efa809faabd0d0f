"""Solutions to the division-C style problems."""

from __future__ import annotations


def strings_intersect(a: int, b: int, c: int, d: int) -> bool:
    """Return whether the string between clock hours a-b crosses the one between c-d."""
    low, high = sorted((a, b))

    def outside(hour: int) -> bool:
        return hour < low or hour > high

    return outside(c) != outside(d)