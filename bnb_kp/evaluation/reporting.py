# bnb_kp/evaluation/reporting.py
import os
import logging
from typing import List, Optional

import pandas as pd

logger = logging.getLogger(__name__)


def check_take_vector(values: List[int], weights: List[int], capacity: int,
                      value: int, solution: List[int]) -> Optional[str]:
    """
    Verifies a reported solution against its instance.

    Returns:
        Optional[str]: None when the solution is consistent, otherwise a
            description of the first problem found.
    """
    if len(solution) != len(values):
        return f"solution has {len(solution)} decisions for {len(values)} items"
    total_value = sum(v for v, t in zip(values, solution) if t)
    total_weight = sum(w for w, t in zip(weights, solution) if t)
    if total_weight > capacity:
        return f"taken weight {total_weight} exceeds capacity {capacity}"
    if total_value != value:
        return f"taken value {total_value} differs from reported value {value}"
    return None


def find_disagreements(results_df: pd.DataFrame, baseline_name: str) -> pd.DataFrame:
    """
    Rows (instance, solver) whose value differs from the baseline solver's
    value on the same instance. All registry solvers are exact, so any row
    returned here is a bug.
    """
    pivot = results_df.pivot_table(index='instance', columns='solver', values='value')
    pivot.columns.name = None
    if baseline_name not in pivot.columns:
        logger.warning(f"Baseline '{baseline_name}' has no results; skipping cross-validation.")
        return pd.DataFrame(columns=['instance', 'solver', 'value', 'baseline_value'])

    melted = pivot.reset_index().melt(id_vars=['instance', baseline_name], var_name='solver', value_name='value')
    melted = melted.rename(columns={baseline_name: 'baseline_value'}).dropna()
    return melted[melted['value'] != melted['baseline_value']].reset_index(drop=True)


def aggregate_results(results_df: pd.DataFrame) -> pd.DataFrame:
    """Average value and time (ms) per solver and problem size."""
    return results_df.groupby(['solver', 'n']).agg(
        avg_value=('value', 'mean'),
        avg_time_ms=('time_seconds', lambda x: x.mean() * 1000)
    ).reset_index()


def save_results_to_csv(df: pd.DataFrame, csv_path: str):
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df.to_csv(csv_path, index=False)
    logger.info(f"Results saved to {csv_path}")
