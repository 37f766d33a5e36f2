# -*- coding: utf-8 -*-
"""
Exact 0/1 knapsack solving: DP for small n * k, best-first branch-and-bound otherwise.
"""

from .solvers.dispatch import Solution, solve
from .solvers.errors import InfeasibleProblemError, InvalidInstanceError, KnapsackError

__all__ = [
    "solve",
    "Solution",
    "KnapsackError",
    "InvalidInstanceError",
    "InfeasibleProblemError",
]
