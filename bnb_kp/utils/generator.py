# bnb_kp/utils/generator.py
# -*- coding: utf-8 -*-


'''
This module provides functions to generate instances of the 0/1 knapsack problem
and to save them to / load them from csv files.
'''

import random
from typing import List, Optional, Tuple
import os
import csv
import logging

from bnb_kp.solvers.errors import InvalidInstanceError

logger = logging.getLogger(__name__)

CORRELATION_TYPES = ('uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum')


# Function to generate a knapsack instance with one constraint
def generate_knapsack_instance(
    n: int,
    correlation: str = 'uncorrelated',
    max_weight: int = 1000,
    max_value: int = 1000,
    capacity_ratio: float = 0.5,
    seed: Optional[int] = None
) -> Tuple[List[Tuple[int, int]], int]:

    """
    Generate an instance of the 0/1 knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all items (between 0.0 and 1.0).
        seed (int, optional): Seed for a private random generator, for reproducible instances.

    Returns:
        Tuple[List[Tuple[int, int]], int]:
            - A list of items, each represented as a tuple (value, weight).
            - The computed knapsack capacity.
    """

    if correlation not in CORRELATION_TYPES:
        raise ValueError(f"Correlation type must be one of {CORRELATION_TYPES}")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")

    rng = random.Random(seed)
    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            # noise of about 25% of the maximum value
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            # noise of about 10% of the maximum value
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        else:
            # subset sum: value equals weight
            value = weight

        items.append((value, weight))
        total_weight += weight

    capacity = int(total_weight * capacity_ratio)

    return items, capacity



def save_instance_to_file(items: List[Tuple[int, int]], capacity: int, filename: str):
    """Saves the instance to a csv file."""
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', newline='') as f:
        # first line: number of items and capacity
        f.write(f"{len(items)} {capacity}\n")
        writer = csv.writer(f)
        writer.writerow(['value', 'weight'])
        for value, weight in items:
            writer.writerow([value, weight])

    logger.debug(f"Instance successfully saved to {filename}")



def load_instance_from_file(filename: str) -> Tuple[List[int], List[int], int]:
    """
    Loads a knapsack instance from a csv file.
    Assumes first line is 'num_items capacity', then a 'value,weight' header,
    then one 'value,weight' row per item.

    Returns:
        Tuple[List[int], List[int], int]: (weights_list, values_list, capacity)
    """
    weights = []
    values = []

    with open(filename, 'r', newline='') as f:
        meta_line = f.readline().strip()
        try:
            num_items_str, capacity_str = meta_line.split()
            capacity = int(capacity_str)
            expected_num_items = int(num_items_str)
        except ValueError as e:
            raise InvalidInstanceError(f"{filename}: bad header line {meta_line!r}") from e

        reader = csv.reader(f)

        try:
            next(reader)
        except StopIteration:
            logger.warning(f"File '{filename}' contains no data rows.")

        for line_no, row in enumerate(reader, start=3):
            if not row:
                continue
            try:
                values.append(int(row[0]))
                weights.append(int(row[1]))
            except (ValueError, IndexError) as e:
                raise InvalidInstanceError(f"{filename}:{line_no}: bad item row {row!r}") from e

    actual_num_items = len(values)
    if actual_num_items != expected_num_items:
        logger.warning(f"Inconsistent data in '{filename}'. "
                       f"Header specified {expected_num_items} items, but file contained {actual_num_items} items.")

    logger.debug(f"Instance successfully loaded from {filename} ({actual_num_items} items).")
    return weights, values, capacity
