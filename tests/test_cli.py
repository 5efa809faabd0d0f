import io

import pytest

from contestkit.cli import main, solve
from contestkit.problems_b import even_array_moves, queue_after
from contestkit.problems_c import strings_intersect


def test_again_twenty_five():
    assert solve("again-twenty-five", "1000\n") == "25\n"


def test_even_array_lines_follow_library():
    cases = [[0, 1], [1, 0], [1, 1]]
    text = f"{len(cases)}\n" + "".join(
        f"{len(case)}\n{' '.join(map(str, case))}\n" for case in cases
    )
    lines = solve("even-array", text).splitlines()
    assert len(lines) == len(cases)
    assert lines[0] == str(even_array_moves(cases[0]))
    assert lines[1] == str(even_array_moves(cases[1]))
    assert lines[2] == "-1"


def test_clock_lines_follow_library():
    cases = [(2, 9, 10, 6), (3, 8, 9, 1), (1, 2, 3, 4)]
    text = f"{len(cases)}\n" + "".join(" ".join(map(str, c)) + "\n" for c in cases)
    lines = solve("clock-and-strings", text).splitlines()
    assert lines == ["YES" if strings_intersect(*c) else "NO" for c in cases]


def test_laura_output_format():
    assert solve("laura-and-operations", "1\n2 2 2\n") == "1 1 1\n"


def test_multiply_impossible_prints_minus_one():
    assert solve("multiply-by-2-divide-by-6", "1\n2\n") == "-1\n"


def test_perfect_number_first():
    assert solve("perfect-number", "1\n") == "19\n"


def test_queue_follows_library():
    assert solve("queue-at-the-school", "5 1\nBGGBG\n") == queue_after("BGGBG", 1) + "\n"


def test_unknown_problem():
    with pytest.raises(ValueError, match="unknown problem"):
        solve("no-such-problem", "1\n")


def test_truncated_input():
    with pytest.raises(ValueError, match="unexpected end of input"):
        solve("clock-and-strings", "3\n2 9\n")


def test_non_integer_input():
    with pytest.raises(ValueError, match="expected an integer"):
        solve("card-game", "1\n1 2 x 4\n")


def test_main_writes_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main(["again-twenty-five"]) == 0
    assert capsys.readouterr().out == "25\n"


def test_main_rejects_unknown_problem(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["no-such-problem"])
    assert excinfo.value.code == 2


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 2\n"))
    with pytest.raises(SystemExit) as excinfo:
        main(["clock-and-strings"])
    assert excinfo.value.code == 1
    assert "unexpected end of input" in capsys.readouterr().err