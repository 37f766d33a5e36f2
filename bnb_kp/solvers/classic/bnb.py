# bnb_kp/solvers/classic/bnb.py
# -*- coding: utf-8 -*-

'''
Generic best-first branch-and-bound.

The engine works on any state type that satisfies the SearchState protocol:
a node of a binary decision tree that knows whether it is feasible, whether
it is a leaf, its exact value, an admissible upper bound on the value of any
completion, its depth, and how to build its two children.
'''

from __future__ import annotations
import functools
import heapq
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Protocol, Tuple, TypeVar

logger = logging.getLogger(__name__)

TIE_BREAKS = ("shallow", "deep")


class SearchState(Protocol):
    def feasible(self) -> bool: ...

    def leaf(self) -> bool: ...

    def value(self) -> int: ...

    def bound(self) -> int: ...

    def depth(self) -> int: ...

    def left(self) -> "SearchState": ...

    def right(self) -> "SearchState": ...


S = TypeVar("S", bound=SearchState)


def compare_priority(x: SearchState, y: SearchState, tie_break: str = "shallow") -> int:
    """
    Three-way frontier comparison.

    Returns a negative number when x must be expanded before y, a positive
    number when y goes first and 0 when the two are interchangeable.

    Order: leaves before non-leaves, then higher bound first, then depth
    according to `tie_break` ("shallow" pops shallower states first, "deep"
    pops deeper states first).
    """
    if x.leaf() != y.leaf():
        return -1 if x.leaf() else 1

    if x.bound() != y.bound():
        return -1 if x.bound() > y.bound() else 1

    if x.depth() == y.depth():
        return 0
    shallower_first = -1 if x.depth() < y.depth() else 1
    if tie_break == "shallow":
        return shallower_first
    return -shallower_first


@dataclass
class SearchStats:
    """Counters collected over one search."""
    popped: int = 0
    expanded: int = 0
    pruned_by_bound: int = 0
    pruned_by_weight: int = 0
    incumbent_updates: int = 0
    max_frontier: int = 0


class BestFirstSearch(Generic[S]):
    """
    Best-first branch-and-bound over a binary decision tree.

    A state is discarded only when an incumbent exists and the state's bound
    cannot beat it. With an admissible bound, the incumbent left when the
    frontier empties is optimal.
    """

    def __init__(self, tie_break: str = "shallow"):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"Unknown tie-break '{tie_break}', expected one of {TIE_BREAKS}.")
        self.tie_break = tie_break
        self.stats = SearchStats()
        self._priority: Callable = functools.cmp_to_key(
            functools.partial(compare_priority, tie_break=tie_break)
        )

    def run(self, initial: S) -> Optional[S]:
        """
        Searches from `initial` and returns the best leaf, or None if the
        initial state is infeasible.
        """
        self.stats = SearchStats()
        if not initial.feasible():
            logger.debug("Initial state is infeasible; no solution.")
            return None

        # (priority key, insertion counter, state); the counter settles ties
        # in insertion order and keeps states out of the comparison.
        frontier: List[Tuple[object, int, S]] = []
        counter = itertools.count()
        heapq.heappush(frontier, (self._priority(initial), next(counter), initial))

        best: Optional[S] = None

        while frontier:
            self.stats.max_frontier = max(self.stats.max_frontier, len(frontier))
            _, _, state = heapq.heappop(frontier)
            self.stats.popped += 1

            assert state.feasible(), "popped an infeasible state"

            if state.leaf():
                if best is None or best.value() < state.value():
                    best = state
                    self.stats.incumbent_updates += 1
                continue

            if best is not None and state.bound() <= best.value():
                self.stats.pruned_by_bound += 1
                continue

            self.stats.expanded += 1
            for child in (state.left(), state.right()):
                if child.feasible():
                    heapq.heappush(frontier, (self._priority(child), next(counter), child))
                else:
                    self.stats.pruned_by_weight += 1

        logger.debug(f"Search finished: {self.stats}")
        return best


def bnb_optimize(initial: S, tie_break: str = "shallow") -> Optional[S]:
    """Convenience wrapper: run a fresh BestFirstSearch from `initial`."""
    return BestFirstSearch(tie_break=tie_break).run(initial)
