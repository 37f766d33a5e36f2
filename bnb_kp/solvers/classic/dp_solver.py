# bnb_kp/solvers/classic/dp_solver.py
import time
import logging
from typing import Dict, Any, List, Sequence, Tuple

import numpy as np

from bnb_kp.solvers.errors import InfeasibleProblemError
from bnb_kp.solvers.interface import SolverInterface
from bnb_kp.solvers.items import Item, check_capacity, make_items
from bnb_kp.utils.generator import load_instance_from_file

logger = logging.getLogger(__name__)

INT64_MAX = np.iinfo(np.int64).max


def solve_dp(items: Sequence[Item], capacity: int) -> Tuple[int, List[bool]]:
    """
    Solves the 0/1 knapsack problem with an O(n * k) dynamic programming table.

    best[j] holds the maximum value for capacity j using the items seen so far.
    keep[i][j] records whether item i improved best[j], which is all the
    backtrace needs, so only one row of values is kept in memory.

    Args:
        items (Sequence[Item]): The items, in any order.
        capacity (int): The knapsack capacity.

    Returns:
        Tuple[int, List[bool]]: The optimal value and the take decision of each
            item, indexed by original_index.
    """
    capacity = check_capacity(capacity)
    if capacity < 0:
        raise InfeasibleProblemError(f"Capacity {capacity} is negative; no selection is feasible.")

    n = len(items)
    # Python ints once the total value may not fit in int64
    total_value = sum(item.value for item in items)
    dtype = np.int64 if total_value <= INT64_MAX else object
    best = np.zeros(capacity + 1, dtype=dtype)
    keep = np.zeros((n, capacity + 1), dtype=bool)

    for i, item in enumerate(items):
        w = item.weight
        if w > capacity:
            continue
        # Compare against the previous row: candidate[j] uses best[j - w]
        # before this item touched it.
        candidate = best[:capacity + 1 - w] + item.value
        improved = candidate > best[w:]
        keep[i, w:] = improved
        best[w:] = np.where(improved, candidate, best[w:])

    take = [False] * n
    j = capacity
    for i in range(n - 1, -1, -1):
        if keep[i, j]:
            take[items[i].original_index] = True
            j -= items[i].weight

    return int(best[capacity]), take


class DPSolver(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using a Dynamic Programming table
    with backtracking of the chosen item set.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "DP"

    def solve(self, instance_path: str) -> Dict[str, Any]:
        weights, values, capacity = load_instance_from_file(instance_path)
        items = make_items(zip(values, weights))
        start_time = time.time()

        value, take = solve_dp(items, capacity)

        end_time = time.time()
        return {
            "value": value,
            "time": end_time - start_time,
            "solution": [int(t) for t in take],
        }
