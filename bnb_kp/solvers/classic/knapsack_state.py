# bnb_kp/solvers/classic/knapsack_state.py
# -*- coding: utf-8 -*-

'''
Knapsack-specific pieces of the branch-and-bound search:
- build_context: sorts items by value density and precomputes prefix sums
- upper_bound: fractional-knapsack relaxation, O(log n) per call
- KnapsackState: a node of the take/skip decision tree
'''

from __future__ import annotations
import bisect
import functools
import itertools
from dataclasses import dataclass, field
from typing import FrozenSet, List, Sequence, Tuple

from bnb_kp.solvers.items import Item


@dataclass(frozen=True)
class ProblemContext:
    """
    Read-only data shared by every state of one solve.

    prefix_value[i] and prefix_weight[i] hold the totals of the first i
    sorted items, so both lists have n + 1 entries and start at 0.
    """
    capacity: int
    items: Tuple[Item, ...]
    prefix_value: Tuple[int, ...]
    prefix_weight: Tuple[int, ...]

    @property
    def n(self) -> int:
        return len(self.items)


def compare_density(a: Item, b: Item) -> int:
    """
    Three-way comparison putting the denser item first.

    Compares a.value / a.weight with b.value / b.weight by cross-multiplying,
    so the order stays exact for integers of any size. Weightless items come
    before every weighted item.
    """
    if a.weight == 0 or b.weight == 0:
        return (b.weight == 0) - (a.weight == 0)
    lhs = a.value * b.weight
    rhs = b.value * a.weight
    if lhs == rhs:
        return 0
    return -1 if lhs > rhs else 1


def build_context(items: Sequence[Item], capacity: int) -> ProblemContext:
    """
    Sorts a working copy of `items` by descending value density and packs
    them with their prefix sums into a ProblemContext.
    """
    # stable sort keeps input order among equally dense items
    sorted_items = tuple(sorted(items, key=functools.cmp_to_key(compare_density)))

    # plain ints: the sums may exceed any fixed-width integer
    prefix_value = tuple(itertools.accumulate((item.value for item in sorted_items), initial=0))
    prefix_weight = tuple(itertools.accumulate((item.weight for item in sorted_items), initial=0))

    return ProblemContext(
        capacity=capacity,
        items=sorted_items,
        prefix_value=prefix_value,
        prefix_weight=prefix_weight,
    )


def upper_bound(context: ProblemContext, considered: int, value: int, weight: int) -> int:
    """
    Upper bound on the value reachable from a partial decision.

    Items before `considered` are decided and contribute `value` and `weight`.
    The remaining items are filled greedily in density order; the first one
    that does not fit entirely is taken fractionally. The fractional optimum is
    rounded up, which keeps the bound admissible since real values are integral.

    Args:
        context: The shared problem data.
        considered: Number of sorted items already decided.
        value: Value of the items taken so far.
        weight: Weight of the items taken so far.

    Returns:
        int: An admissible upper bound.
    """
    remaining = context.capacity - weight
    if remaining < 0:
        # overweight states are never expanded
        return value

    n = context.n
    pv = context.prefix_value
    pw = context.prefix_weight

    # Largest right with pw[right] - pw[considered] <= remaining, i.e. every
    # item in [considered, right) fits.
    goal_weight = pw[considered] + remaining
    right = bisect.bisect_right(pw, goal_weight, lo=considered, hi=n + 1) - 1

    bound = value + (pv[right] - pv[considered])
    remaining -= pw[right] - pw[considered]
    assert remaining >= 0

    if right < n and remaining > 0:
        item = context.items[right]
        assert remaining < item.weight, "leftover capacity must not fit the next item"
        # ceil(remaining * value / weight) in exact integer arithmetic
        bound += -(-remaining * item.value // item.weight)

    return bound


@dataclass(frozen=True)
class KnapsackState:
    """
    A node of the binary take/skip tree over the density-sorted items.

    Attributes
    ----------
    context : ProblemContext
        Shared, read-only problem data.
    considered : int
        Number of sorted items decided so far (the depth of the node).
    accumulated_value : int
        Total value of the taken items.
    accumulated_weight : int
        Total weight of the taken items.
    taken : frozenset[int]
        Sorted positions of the taken items.
    """
    context: ProblemContext = field(repr=False, compare=False)
    considered: int = 0
    accumulated_value: int = 0
    accumulated_weight: int = 0
    taken: FrozenSet[int] = frozenset()
    _bound: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_bound",
            upper_bound(self.context, self.considered, self.accumulated_value, self.accumulated_weight),
        )

    def value(self) -> int:
        return self.accumulated_value

    def bound(self) -> int:
        return self._bound

    def depth(self) -> int:
        return self.considered

    def leaf(self) -> bool:
        return self.considered == self.context.n

    def feasible(self) -> bool:
        return self.accumulated_weight <= self.context.capacity

    def left(self) -> "KnapsackState":
        """Child that skips the next item."""
        assert not self.leaf()
        assert self.feasible()
        return KnapsackState(
            context=self.context,
            considered=self.considered + 1,
            accumulated_value=self.accumulated_value,
            accumulated_weight=self.accumulated_weight,
            taken=self.taken,
        )

    def right(self) -> "KnapsackState":
        """Child that takes the next item."""
        assert not self.leaf()
        assert self.feasible()
        index = self.considered
        item = self.context.items[index]
        return KnapsackState(
            context=self.context,
            considered=index + 1,
            accumulated_value=self.accumulated_value + item.value,
            accumulated_weight=self.accumulated_weight + item.weight,
            taken=self.taken | {index},
        )

    def to_take_list(self) -> List[bool]:
        """Take/skip decisions mapped back to the items' original order."""
        take = [False] * self.context.n
        for position in self.taken:
            take[self.context.items[position].original_index] = True
        return take
