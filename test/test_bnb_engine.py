from dataclasses import dataclass
from typing import Tuple

import pytest

from bnb_kp.solvers.classic.bnb import BestFirstSearch, SearchStats, bnb_optimize, compare_priority
from bnb_kp.solvers.classic.knapsack_state import KnapsackState, build_context
from bnb_kp.solvers.items import make_items


@dataclass(frozen=True)
class StubState:
    """Only what compare_priority looks at."""
    is_leaf: bool
    bound_value: int
    level: int

    def leaf(self):
        return self.is_leaf

    def bound(self):
        return self.bound_value

    def depth(self):
        return self.level


@dataclass(frozen=True)
class PayoffState:
    """
    Pick a subset of payoffs (which may be negative) using at most `budget`
    picks. Unrelated to knapsack on purpose: the engine must only rely on the
    search-state methods.
    """
    payoffs: Tuple[int, ...]
    budget: int
    level: int = 0
    total: int = 0
    picks: int = 0

    def feasible(self):
        return self.picks <= self.budget

    def leaf(self):
        return self.level == len(self.payoffs)

    def value(self):
        return self.total

    def bound(self):
        return self.total + sum(p for p in self.payoffs[self.level:] if p > 0)

    def depth(self):
        return self.level

    def left(self):
        return PayoffState(self.payoffs, self.budget, self.level + 1, self.total, self.picks)

    def right(self):
        return PayoffState(self.payoffs, self.budget, self.level + 1,
                           self.total + self.payoffs[self.level], self.picks + 1)


class TestComparePriority:

    def test_leaf_before_non_leaf_even_with_lower_bound(self):
        leaf = StubState(True, 5, 3)
        inner = StubState(False, 50, 1)
        assert compare_priority(leaf, inner) < 0
        assert compare_priority(inner, leaf) > 0

    def test_higher_bound_first(self):
        high = StubState(False, 10, 4)
        low = StubState(False, 9, 1)
        assert compare_priority(high, low) < 0
        assert compare_priority(low, high) > 0

    def test_shallow_tie_break(self):
        shallow = StubState(False, 10, 1)
        deep = StubState(False, 10, 4)
        assert compare_priority(shallow, deep, tie_break="shallow") < 0
        assert compare_priority(deep, shallow, tie_break="shallow") > 0

    def test_deep_tie_break(self):
        shallow = StubState(False, 10, 1)
        deep = StubState(False, 10, 4)
        assert compare_priority(deep, shallow, tie_break="deep") < 0
        assert compare_priority(shallow, deep, tie_break="deep") > 0

    def test_full_tie(self):
        a = StubState(False, 10, 2)
        b = StubState(False, 10, 2)
        assert compare_priority(a, b) == 0
        assert compare_priority(a, b, tie_break="deep") == 0

    def test_leaves_ordered_by_bound(self):
        better = StubState(True, 12, 3)
        worse = StubState(True, 11, 3)
        assert compare_priority(better, worse) < 0


class TestBestFirstSearch:

    def test_unknown_tie_break_rejected(self):
        with pytest.raises(ValueError):
            BestFirstSearch(tie_break="random")

    def test_infeasible_initial_state_has_no_solution(self):
        state = PayoffState(payoffs=(1, 2), budget=-1)
        assert bnb_optimize(state) is None

    @pytest.mark.parametrize("tie_break", ["shallow", "deep"])
    def test_generic_state_type(self, tie_break):
        state = PayoffState(payoffs=(4, -3, 7, 2, -1, 5), budget=2)
        best = bnb_optimize(state, tie_break=tie_break)
        assert best.leaf()
        assert best.value() == 12

    def test_optimal_on_knapsack(self, classic_pairs):
        initial = KnapsackState(context=build_context(make_items(classic_pairs), capacity=50))
        best = bnb_optimize(initial)
        assert best.value() == 220
        assert best.to_take_list() == [False, True, True]

    def test_stats_are_collected(self, classic_pairs):
        initial = KnapsackState(context=build_context(make_items(classic_pairs), capacity=50))
        search = BestFirstSearch()
        search.run(initial)
        stats = search.stats
        assert isinstance(stats, SearchStats)
        assert stats.popped >= stats.expanded >= 1
        assert stats.incumbent_updates >= 1
        assert stats.max_frontier >= 1
        # taking all three items is over capacity somewhere in the tree
        assert stats.pruned_by_weight >= 1

    def test_stats_reset_between_runs(self, classic_pairs):
        initial = KnapsackState(context=build_context(make_items(classic_pairs), capacity=50))
        search = BestFirstSearch()
        search.run(initial)
        first = search.stats
        search.run(initial)
        assert search.stats == first
        assert search.stats is not first

    def test_bound_pruning_skips_dominated_nodes(self):
        # A dominant first item: after its leaf is found nothing else can beat it.
        pairs = [(1000, 10)] + [(1, 10)] * 8
        initial = KnapsackState(context=build_context(make_items(pairs), capacity=10))
        search = BestFirstSearch()
        best = search.run(initial)
        assert best.value() == 1000
        assert search.stats.expanded < 2 ** len(pairs)
        assert search.stats.pruned_by_bound >= 1
