"""Command-line front end: answer a problem's input read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from . import problems_a, problems_b, problems_c

_Handler = Callable[["_Tokens"], Iterator[str]]
_Case = Callable[["_Tokens"], str]


class _Tokens:
    """Whitespace-separated tokens of a problem input."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, amount: int) -> list[int]:
        return [self.number() for _ in range(amount)]

    def sized(self) -> list[int]:
        return self.numbers(self.number())


def _per_case(case: _Case) -> _Handler:
    def run(tokens: _Tokens) -> Iterator[str]:
        for _ in range(tokens.number()):
            yield case(tokens)

    return run


def _single(case: _Case) -> _Handler:
    def run(tokens: _Tokens) -> Iterator[str]:
        yield case(tokens)

    return run


def _from_sized(solver: Callable[[list[int]], int]) -> _Case:
    def case(tokens: _Tokens) -> str:
        return str(solver(tokens.sized()))

    return case


def _flag(value: bool, yes: str = "YES", no: str = "NO") -> str:
    return yes if value else no


def _optional(value: int | None) -> str:
    return "-1" if value is None else str(value)


def _again_twenty_five(tokens: _Tokens) -> str:
    return str(problems_a.again_twenty_five(tokens.number()))


def _beautiful_year(tokens: _Tokens) -> str:
    return str(problems_a.next_beautiful_year(tokens.number()))


def _cover_in_water(tokens: _Tokens) -> str:
    tokens.number()
    return str(problems_a.cover_in_water(tokens.word()))


def _sleep(tokens: _Tokens) -> str:
    count, hour, minute = tokens.numbers(3)
    alarms = [(tokens.number(), tokens.number()) for _ in range(count)]
    hours, minutes = problems_a.time_until_alarm(hour, minute, alarms)
    return f"{hours} {minutes}"


def _easy_problem(tokens: _Tokens) -> str:
    return _flag(problems_a.is_hard_problem(tokens.sized()), "HARD", "EASY")


def _line_trip(tokens: _Tokens) -> str:
    count, x = tokens.numbers(2)
    return str(problems_a.line_trip_fuel(x, tokens.numbers(count)))


def _lucky_year(tokens: _Tokens) -> str:
    return str(problems_a.lucky_year_wait(tokens.number()))


def _two_permutations(tokens: _Tokens) -> str:
    return _flag(problems_a.two_permutations_possible(*tokens.numbers(3)), "Yes", "No")


def _unimodal(tokens: _Tokens) -> str:
    return _flag(problems_a.is_unimodal(tokens.sized()))


def _upload(tokens: _Tokens) -> str:
    return str(problems_a.min_upload_seconds(*tokens.numbers(2)))


def _word(tokens: _Tokens) -> str:
    return problems_a.fix_word_case(tokens.word())


def _card_game(tokens: _Tokens) -> str:
    return str(problems_b.card_game_wins(*tokens.numbers(4)))


def _even_array(tokens: _Tokens) -> str:
    return _optional(problems_b.even_array_moves(tokens.sized()))


def _large_addition(tokens: _Tokens) -> str:
    return _flag(problems_b.is_large_sum(tokens.word()))


def _laura(tokens: _Tokens) -> str:
    return " ".join(str(flag) for flag in problems_b.laura_survivors(*tokens.numbers(3)))


def _maximum_multiple(tokens: _Tokens) -> str:
    return str(problems_b.best_multiple_base(tokens.number()))


def _multiply_divide(tokens: _Tokens) -> str:
    return _optional(problems_b.operations_to_one(tokens.number()))


def _perfect_number(tokens: _Tokens) -> str:
    return str(problems_b.perfect_number(tokens.number()))


def _queue(tokens: _Tokens) -> str:
    _length, seconds = tokens.numbers(2)
    return problems_b.queue_after(tokens.word(), seconds)


def _symmetric(tokens: _Tokens) -> str:
    count, side = tokens.numbers(2)
    tiles = [tuple(tokens.numbers(4)) for _ in range(count)]
    return _flag(problems_b.can_build_symmetric_square(side, tiles))


def _clock(tokens: _Tokens) -> str:
    return _flag(problems_c.strings_intersect(*tokens.numbers(4)))


_PROBLEMS: dict[str, _Handler] = {
    "again-twenty-five": _single(_again_twenty_five),
    "beautiful-year": _single(_beautiful_year),
    "cover-in-water": _per_case(_cover_in_water),
    "everybody-likes-good-arrays": _per_case(_from_sized(problems_a.good_array_operations)),
    "everyone-loves-to-sleep": _per_case(_sleep),
    "in-search-of-an-easy-problem": _single(_easy_problem),
    "line-trip": _per_case(_line_trip),
    "lucky-year": _single(_lucky_year),
    "subset-mex": _per_case(_from_sized(problems_a.subset_mex_sum)),
    "two-permutations": _per_case(_two_permutations),
    "unimodal-array": _single(_unimodal),
    "upload-more-ram": _per_case(_upload),
    "word": _single(_word),
    "array-cancellation": _per_case(_from_sized(problems_b.array_cancellation_cost)),
    "card-game": _per_case(_card_game),
    "chip-and-ribbon": _per_case(_from_sized(problems_b.chip_ribbon_operations)),
    "even-array": _per_case(_even_array),
    "k-sort": _per_case(_from_sized(problems_b.k_sort_cost)),
    "large-addition": _per_case(_large_addition),
    "laura-and-operations": _per_case(_laura),
    "mark-the-dust-sweeper": _per_case(_from_sized(problems_b.dust_sweeper_operations)),
    "maximum-multiple-sum": _per_case(_maximum_multiple),
    "multiply-by-2-divide-by-6": _per_case(_multiply_divide),
    "perfect-number": _single(_perfect_number),
    "queue-at-the-school": _single(_queue),
    "symmetric-matrix": _per_case(_symmetric),
    "clock-and-strings": _per_case(_clock),
}


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` of ``problem`` and return the output text.

    Raises ValueError for an unknown problem or malformed input.
    """
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return "".join(f"{line}\n" for line in handler(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and write its answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve a contest problem from its input on standard input.",
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as error:
        parser.exit(1, f"{parser.prog}: error: {error}\n")
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())