# bnb_kp/solvers/errors.py
# -*- coding: utf-8 -*-
"""
Common exceptions for the solver layer.
"""


class KnapsackError(ValueError):
    """Base class for every caller-visible knapsack failure."""


class InvalidInstanceError(KnapsackError):
    """Raised when an instance (items, capacity or input text) is malformed."""


class InfeasibleProblemError(KnapsackError):
    """Raised when even the empty selection violates the capacity."""
