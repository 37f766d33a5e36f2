# bnb_kp/solvers/items.py
# -*- coding: utf-8 -*-
"""
Item model shared by the DP and branch-and-bound solvers.
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from bnb_kp.solvers.errors import InvalidInstanceError


@dataclass(frozen=True)
class Item:
    """
    A single knapsack item.

    Attributes
    ----------
    value : int
        Nonnegative objective contribution if taken.
    weight : int
        Nonnegative capacity consumption.
    original_index : int
        Position of the item in the caller's input order. Solvers sort items
        internally; this index maps decisions back to the input.
    """
    value: int
    weight: int
    original_index: int

    def __post_init__(self) -> None:  # type: ignore[override]
        for name in ("value", "weight"):
            attr = getattr(self, name)
            if isinstance(attr, bool) or not isinstance(attr, numbers.Integral):
                raise InvalidInstanceError(
                    f"Item[{self.original_index}] {name} must be an integer, got {attr!r}."
                )
            if attr < 0:
                raise InvalidInstanceError(f"Item[{self.original_index}] {name} must be >= 0.")
            object.__setattr__(self, name, int(attr))


def make_items(pairs: Iterable[Tuple[int, int]], n: Optional[int] = None) -> List[Item]:
    """
    Build Items from ordered (value, weight) pairs.

    Args:
        pairs: The items in input order.
        n: Optional declared item count, checked against the pairs.

    Returns:
        List[Item]: One item per pair, with original_index set to its position.
    """
    items = [Item(value=v, weight=w, original_index=i) for i, (v, w) in enumerate(pairs)]
    if n is not None and n != len(items):
        raise InvalidInstanceError(f"Declared {n} items, but {len(items)} were given.")
    return items


def check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise InvalidInstanceError(f"Capacity must be an integer, got {capacity!r}.")
    return int(capacity)
