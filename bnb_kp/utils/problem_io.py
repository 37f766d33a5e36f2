# bnb_kp/utils/problem_io.py
# -*- coding: utf-8 -*-
"""
Plain-text problem format used by the solve command.

Input:
    n k
    value_1 weight_1
    ...
    value_n weight_n

Output:
    <optimal value> 1
    <n space-separated 0/1 decisions in input order>

The '1' after the value marks the result as proven optimal.
"""

from __future__ import annotations
from typing import List, Tuple

from bnb_kp.solvers.dispatch import Solution
from bnb_kp.solvers.errors import InvalidInstanceError


def read_problem(text: str) -> Tuple[int, int, List[Tuple[int, int]]]:
    """
    Parse a problem from text.

    Returns
    -------
    (n, capacity, items) where items is a list of (value, weight) pairs.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidInstanceError("Expected 'n k' on the first line.")
    try:
        numbers = [int(tok) for tok in tokens]
    except ValueError as e:
        raise InvalidInstanceError(f"Non-integer token in input: {e}") from e

    n, capacity = numbers[0], numbers[1]
    if n < 0:
        raise InvalidInstanceError(f"Item count must be >= 0, got {n}.")
    body = numbers[2:]
    if len(body) != 2 * n:
        raise InvalidInstanceError(
            f"Expected {n} (value, weight) pairs, got {len(body)} numbers after the header."
        )
    items = [(body[2 * i], body[2 * i + 1]) for i in range(n)]
    return n, capacity, items


def read_problem_file(path: str) -> Tuple[int, int, List[Tuple[int, int]]]:
    with open(path, "r", encoding="utf-8") as f:
        return read_problem(f.read())


def format_solution(solution: Solution) -> str:
    """Render a solution in the output format, with a trailing newline."""
    decisions = " ".join(str(int(t)) for t in solution.take)
    return f"{solution.value} 1\n{decisions}\n"
