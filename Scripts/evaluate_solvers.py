# Scripts/evaluate_solvers.py
import logging
import os
import sys
import argparse
import pandas as pd
from tqdm import tqdm

from bnb_kp.utils.config_loader import cfg, ALGORITHM_REGISTRY
from bnb_kp.utils.generator import load_instance_from_file
from bnb_kp.utils.logger import setup_logger
from bnb_kp.utils.run_utils import create_run_name
from bnb_kp.evaluation.plotting import plot_evaluation_times
from bnb_kp.evaluation.reporting import (
    aggregate_results,
    check_take_vector,
    find_disagreements,
    save_results_to_csv,
)


def _instance_size(instance_file: str) -> int:
    return int(os.path.basename(instance_file).split('_n')[1].split('_')[0])


def run_evaluation(instance_files: list, solvers: dict, solver_config: dict) -> pd.DataFrame:
    """
    Runs every solver on every instance and checks each reported take vector.

    Returns:
        pd.DataFrame: One row per (solver, instance) with value, time and
            whether the reported solution is consistent with the instance.
    """
    logger = logging.getLogger(__name__)
    raw_results = []

    for name, SolverClass in solvers.items():
        logger.info(f"--- Evaluating Solver: {name} ---")
        solver_instance = SolverClass(config=dict(solver_config))

        for instance_file in tqdm(instance_files, desc=f"Solving with {name}"):
            result = solver_instance.solve(instance_file)
            weights, values, capacity = load_instance_from_file(instance_file)
            problem = check_take_vector(values, weights, capacity, result["value"], result["solution"])
            if problem:
                logger.error(f"{name} on {os.path.basename(instance_file)}: {problem}")

            raw_results.append({
                "solver": name,
                "instance": os.path.basename(instance_file),
                "n": _instance_size(instance_file),
                "value": result["value"],
                "time_seconds": result["time"],
                "valid": problem is None,
            })

    return pd.DataFrame(raw_results)


def main():
    """
    Evaluates all configured solvers, cross-validates their optimal values
    against the baseline, then writes a summary csv and a timing plot.
    """
    parser = argparse.ArgumentParser(description="Evaluate exact knapsack solvers.")
    parser.add_argument("--data-dir", type=str, default=None,
                        help="Directory of instance csv files. Defaults to paths.data_testing.")
    parser.add_argument("--limit", type=int, default=None,
                        help="Limit the number of test instances to run (for quick testing).")
    args = parser.parse_args()

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg)
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir)
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    # --- 2. Setup Solvers ---
    solvers_to_evaluate = dict(cfg.evaluation.algorithms_to_test)
    if not solvers_to_evaluate:
        logger.critical("No solvers are configured in evaluation.algorithms_to_test. Exiting.")
        sys.exit(1)
    logger.info(f"Solvers to be evaluated: {list(solvers_to_evaluate.keys())}")

    baseline_name = None
    for name, solver_class in ALGORITHM_REGISTRY.items():
        if solver_class == cfg.evaluation.baseline_algorithm:
            baseline_name = name
            break
    if baseline_name not in solvers_to_evaluate:
        solvers_to_evaluate[baseline_name] = cfg.evaluation.baseline_algorithm

    # --- 3. Data Loading ---
    test_data_dir = args.data_dir or cfg.paths.data_testing
    if not os.path.exists(test_data_dir) or not os.listdir(test_data_dir):
        logger.error(f"Test data directory is empty or does not exist: {test_data_dir}")
        logger.error("Please run 'bnbkp-generate' to create test instances first.")
        sys.exit(1)
    instance_files = sorted(
        (os.path.join(test_data_dir, f) for f in os.listdir(test_data_dir) if f.endswith('.csv')),
        key=_instance_size
    )
    if args.limit is not None and args.limit > 0:
        logger.info(f"--- Running in limited mode. Processing only the first {args.limit} instances. ---")
        instance_files = instance_files[:args.limit]

    # --- 4. Run Evaluation Loop ---
    solver_config = {
        "dp_threshold": cfg.solver.dp_threshold,
        "tie_break": cfg.solver.tie_break,
    }
    results_df = run_evaluation(instance_files, solvers_to_evaluate, solver_config)
    if results_df.empty:
        logger.critical("CRITICAL: No results were generated from any solver. Exiting.")
        sys.exit(1)

    # --- 5. Cross-validate and Aggregate ---
    failures = 0
    disagreements = find_disagreements(results_df, baseline_name)
    for row in disagreements.itertuples():
        logger.error(f"{row.solver} reports {row.value} on {row.instance}, baseline '{baseline_name}' reports {row.baseline_value}")
    failures += len(disagreements)
    failures += int((~results_df['valid']).sum())

    agg_df = aggregate_results(results_df)

    # --- 6. Save Reports and Generate Plots ---
    logger.info("--- Finalizing Results and Plots ---")
    save_results_to_csv(results_df, os.path.join(run_dir, "evaluation_raw_results.csv"))
    save_results_to_csv(agg_df, os.path.join(run_dir, "evaluation_full_summary.csv"))
    plot_evaluation_times(agg_df, os.path.join(run_dir, "evaluation_times_vs_n.png"))

    if failures:
        logger.error(f"--- Evaluation finished with {failures} inconsistent results. ---")
        sys.exit(1)
    logger.info("--- Evaluation script finished successfully! All solvers agree. ---")


if __name__ == '__main__':
    main()
