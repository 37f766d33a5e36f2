import pytest

from bnb_kp.solvers.dispatch import Solution
from bnb_kp.solvers.errors import InvalidInstanceError
from bnb_kp.utils.problem_io import format_solution, read_problem, read_problem_file


def test_read_problem():
    n, capacity, items = read_problem("3 50\n60 10\n100 20\n120 30\n")
    assert n == 3
    assert capacity == 50
    assert items == [(60, 10), (100, 20), (120, 30)]


def test_read_problem_ignores_layout():
    assert read_problem("2 7 1 2\n3 4") == (2, 7, [(1, 2), (3, 4)])


def test_read_empty_problem():
    assert read_problem("0 10\n") == (0, 10, [])


@pytest.mark.parametrize("text", [
    "",
    "3",
    "2 10\n1 2\n",
    "1 10\n1 2 3\n",
    "1 ten\n1 2\n",
    "-1 10\n",
])
def test_read_problem_rejects_malformed_input(text):
    with pytest.raises(InvalidInstanceError):
        read_problem(text)


def test_read_problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text("1 5\n60 10\n", encoding="utf-8")
    assert read_problem_file(str(path)) == (1, 5, [(60, 10)])


def test_format_solution():
    solution = Solution(value=220, take=[False, True, True], strategy="bnb")
    assert format_solution(solution) == "220 1\n0 1 1\n"
