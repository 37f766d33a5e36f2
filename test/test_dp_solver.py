import random

import pytest

from bnb_kp.solvers.classic.dp_solver import DPSolver, solve_dp
from bnb_kp.solvers.errors import InfeasibleProblemError
from bnb_kp.solvers.items import make_items
from bnb_kp.utils.generator import save_instance_to_file
from conftest import brute_force


def test_classic_instance(classic_pairs):
    value, take = solve_dp(make_items(classic_pairs), 50)
    assert value == 220
    assert take == [False, True, True]


def test_single_item_too_heavy():
    assert solve_dp(make_items([(60, 10)]), 5) == (0, [False])


def test_single_item_fits():
    assert solve_dp(make_items([(60, 10)]), 10) == (60, [True])


def test_zero_capacity():
    value, take = solve_dp(make_items([(5, 1), (6, 2)]), 0)
    assert value == 0
    assert take == [False, False]


def test_weightless_item_is_taken():
    value, take = solve_dp(make_items([(5, 0), (3, 2)]), 1)
    assert value == 5
    assert take == [True, False]


def test_negative_capacity_is_infeasible():
    with pytest.raises(InfeasibleProblemError):
        solve_dp(make_items([(1, 1)]), -1)


def test_empty_instance():
    assert solve_dp([], 10) == (0, [])


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    pairs = [(rng.randint(1, 50), rng.randint(1, 20)) for _ in range(10)]
    capacity = rng.randint(0, 80)
    value, take = solve_dp(make_items(pairs), capacity)

    assert value == brute_force(pairs, capacity)
    assert sum(v for (v, _), t in zip(pairs, take) if t) == value
    assert sum(w for (_, w), t in zip(pairs, take) if t) <= capacity


def test_solver_class_reads_instance_file(tmp_path, classic_pairs):
    path = tmp_path / "instance_n3_uncorrelated_1.csv"
    save_instance_to_file(classic_pairs, 50, str(path))

    result = DPSolver().solve(str(path))
    assert result["value"] == 220
    assert result["solution"] == [0, 1, 1]
    assert result["time"] >= 0
