import sys
import itertools
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def brute_force(pairs, capacity):
    """Best value over every subset of (value, weight) pairs."""
    best = 0
    for mask in itertools.product((False, True), repeat=len(pairs)):
        weight = sum(w for (_, w), t in zip(pairs, mask) if t)
        if weight <= capacity:
            best = max(best, sum(v for (v, _), t in zip(pairs, mask) if t))
    return best


@pytest.fixture
def classic_pairs():
    """The textbook instance: optimum 220 with items 2 and 3 at capacity 50."""
    return [(60, 10), (100, 20), (120, 30)]
