from itertools import permutations

import pytest

from contestkit.problems_c import strings_intersect

ALL_CHORD_PAIRS = list(permutations(range(1, 13), 4))


def _rotate(hour):
    return hour % 12 + 1


def test_disjoint_strings():
    assert strings_intersect(1, 2, 3, 4) is False


def test_crossing_strings():
    assert strings_intersect(1, 3, 2, 4) is True


def test_nested_strings():
    assert strings_intersect(1, 6, 2, 5) is False


def test_symmetric_in_the_two_strings():
    for a, b, c, d in ALL_CHORD_PAIRS:
        assert strings_intersect(a, b, c, d) == strings_intersect(c, d, a, b)


def test_endpoint_order_does_not_matter():
    for a, b, c, d in ALL_CHORD_PAIRS:
        result = strings_intersect(a, b, c, d)
        assert strings_intersect(b, a, c, d) == result
        assert strings_intersect(a, b, d, c) == result


def test_rotating_the_clock_keeps_answer():
    for a, b, c, d in ALL_CHORD_PAIRS:
        rotated = tuple(_rotate(h) for h in (a, b, c, d))
        assert strings_intersect(*rotated) == strings_intersect(a, b, c, d)


@pytest.mark.parametrize("hours", [(2, 9, 10, 6), (3, 8, 9, 1), (12, 1, 6, 7)])
def test_crossing_matches_arc_interleaving(hours):
    a, b, c, d = hours
    low, high = sorted((a, b))
    inside = [low < h < high for h in (c, d)]
    assert strings_intersect(a, b, c, d) == (inside.count(True) == 1)