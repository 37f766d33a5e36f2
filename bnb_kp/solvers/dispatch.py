# bnb_kp/solvers/dispatch.py
# -*- coding: utf-8 -*-

'''
Solve entry point: picks DP for small n * k and branch-and-bound otherwise.
'''

import time
import logging
from dataclasses import dataclass
from typing import Dict, Any, Iterable, List, Optional, Tuple

from bnb_kp.solvers.classic.bnb_solver import solve_bnb
from bnb_kp.solvers.classic.dp_solver import solve_dp
from bnb_kp.solvers.errors import InfeasibleProblemError
from bnb_kp.solvers.interface import SolverInterface
from bnb_kp.solvers.items import check_capacity, make_items
from bnb_kp.utils.generator import load_instance_from_file

logger = logging.getLogger(__name__)

DEFAULT_DP_THRESHOLD = 100 * 1000 * 1000
STRATEGIES = ("auto", "dp", "bnb")


@dataclass(frozen=True)
class Solution:
    """
    Result of one solve.

    Attributes
    ----------
    value : int
        The optimal total value.
    take : list[bool]
        One decision per item, in input order.
    strategy : str
        "dp" or "bnb", whichever produced the result.
    """
    value: int
    take: List[bool]
    strategy: str


def choose_strategy(n: int, capacity: int, dp_threshold: int = DEFAULT_DP_THRESHOLD) -> str:
    """DP when the table has at most `dp_threshold` cells, BnB otherwise."""
    if n * capacity <= dp_threshold:
        return "dp"
    return "bnb"


def solve(
    items: Iterable[Tuple[int, int]],
    capacity: int,
    n: Optional[int] = None,
    strategy: str = "auto",
    dp_threshold: int = DEFAULT_DP_THRESHOLD,
    tie_break: str = "shallow",
) -> Solution:
    """
    Solves a 0/1 knapsack instance exactly.

    Args:
        items: Ordered (value, weight) pairs.
        capacity: The knapsack capacity.
        n: Optional declared number of items, checked against `items`.
        strategy: "auto", "dp" or "bnb".
        dp_threshold: Largest n * capacity solved by DP under "auto".
        tie_break: Depth tie-break used by branch-and-bound.

    Returns:
        Solution: The optimal value and the decisions in input order.

    Raises:
        InvalidInstanceError: If the instance is malformed.
        InfeasibleProblemError: If the capacity is negative.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}', expected one of {STRATEGIES}.")

    item_list = make_items(items, n=n)
    capacity = check_capacity(capacity)
    if capacity < 0:
        raise InfeasibleProblemError(f"Capacity {capacity} is negative; no selection is feasible.")

    if strategy == "auto":
        strategy = choose_strategy(len(item_list), capacity, dp_threshold)
        if strategy == "dp":
            logger.info(f"n * k = {len(item_list) * capacity} <= {dp_threshold}; using DP")
        else:
            logger.info(f"n * k = {len(item_list) * capacity} > {dp_threshold}; using BnB")

    if strategy == "dp":
        value, take = solve_dp(item_list, capacity)
    else:
        value, take = solve_bnb(item_list, capacity, tie_break=tie_break)

    return Solution(value=value, take=take, strategy=strategy)


class AutoSolver(SolverInterface):
    """
    Exact solver that selects DP or Branch and Bound by the size of n * k.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Auto"
        self.dp_threshold = self.config.get("dp_threshold", DEFAULT_DP_THRESHOLD)
        self.tie_break = self.config.get("tie_break", "shallow")

    def solve(self, instance_path: str) -> Dict[str, Any]:
        weights, values, capacity = load_instance_from_file(instance_path)
        start_time = time.time()

        solution = solve(
            zip(values, weights),
            capacity,
            dp_threshold=self.dp_threshold,
            tie_break=self.tie_break,
        )

        end_time = time.time()
        return {
            "value": solution.value,
            "time": end_time - start_time,
            "solution": [int(t) for t in solution.take],
            "strategy": solution.strategy,
        }
