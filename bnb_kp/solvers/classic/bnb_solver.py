# bnb_kp/solvers/classic/bnb_solver.py
import time
import logging
from typing import Dict, Any, List, Sequence, Tuple

from bnb_kp.solvers.classic.bnb import BestFirstSearch
from bnb_kp.solvers.classic.knapsack_state import KnapsackState, build_context
from bnb_kp.solvers.errors import InfeasibleProblemError
from bnb_kp.solvers.interface import SolverInterface
from bnb_kp.solvers.items import Item, check_capacity, make_items
from bnb_kp.utils.generator import load_instance_from_file

logger = logging.getLogger(__name__)


def solve_bnb(items: Sequence[Item], capacity: int, tie_break: str = "shallow") -> Tuple[int, List[bool]]:
    """
    Solves the 0/1 knapsack problem exactly with best-first branch-and-bound.

    Args:
        items (Sequence[Item]): The items, in any order.
        capacity (int): The knapsack capacity.
        tie_break (str): Frontier depth tie-break, "shallow" or "deep".

    Returns:
        Tuple[int, List[bool]]: The optimal value and the take decision of each
            item, indexed by original_index.

    Raises:
        InfeasibleProblemError: If the empty selection already exceeds the capacity.
    """
    capacity = check_capacity(capacity)
    context = build_context(items, capacity)
    initial = KnapsackState(context=context)

    search = BestFirstSearch(tie_break=tie_break)
    best = search.run(initial)
    if best is None:
        raise InfeasibleProblemError(f"Capacity {capacity} admits no feasible selection.")

    stats = search.stats
    logger.debug(
        f"BnB n={context.n}, k={capacity}: value {best.value()}, "
        f"{stats.expanded} nodes expanded, {stats.pruned_by_bound} pruned by bound, "
        f"peak frontier {stats.max_frontier}"
    )
    # best.taken is indexed by sorted position; map it back to input order
    return best.value(), best.to_take_list()


class BranchAndBoundSolver(SolverInterface):
    """
    An exact solver for the 0-1 Knapsack Problem using best-first Branch and
    Bound with a fractional-knapsack bound.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Branch and Bound"
        self.tie_break = self.config.get("tie_break", "shallow")

    def solve(self, instance_path: str) -> Dict[str, Any]:
        weights, values, capacity = load_instance_from_file(instance_path)
        items = make_items(zip(values, weights))
        start_time = time.time()

        value, take = solve_bnb(items, capacity, tie_break=self.tie_break)

        end_time = time.time()
        return {
            "value": value,
            "time": end_time - start_time,
            "solution": [int(t) for t in take],
        }
