# Scripts/solve.py
# -*- coding: utf-8 -*-

"""
Solves one knapsack problem given in the text format

    n k
    value weight   (n lines)

read from a file or from stdin, and prints the optimal value followed by the
take/skip decision of every item. Logs go to stderr and to the log directory.
"""

import argparse
import logging
import sys

from bnb_kp.solvers.classic.bnb import TIE_BREAKS
from bnb_kp.solvers.dispatch import STRATEGIES, solve
from bnb_kp.solvers.errors import KnapsackError
from bnb_kp.utils.config_loader import cfg, load_config
from bnb_kp.utils.logger import setup_logger
from bnb_kp.utils.problem_io import format_solution, read_problem, read_problem_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a 0/1 knapsack problem exactly.")
    parser.add_argument("input", nargs="?", default=None,
                        help="Path to the problem file. Reads stdin when omitted.")
    parser.add_argument("--strategy", choices=STRATEGIES, default=None,
                        help="Force DP or branch-and-bound instead of choosing by n * k.")
    parser.add_argument("--tie-break", choices=TIE_BREAKS, default=None,
                        help="Depth tie-break for frontier nodes with equal bounds.")
    parser.add_argument("--dp-threshold", type=int, default=None,
                        help="Largest n * k solved with DP under the 'auto' strategy.")
    parser.add_argument("--config", type=str, default=None,
                        help="Alternative YAML config, relative to the project root.")
    parser.add_argument("--verbose", action="store_true",
                        help="Show DEBUG logs on stderr.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config) if args.config else cfg

    setup_logger(run_name="solve", log_dir=config.paths.logs,
                 level=logging.DEBUG if args.verbose else logging.INFO,
                 console_stream=sys.stderr)
    logger = logging.getLogger(__name__)

    strategy = args.strategy or config.solver.default_strategy
    tie_break = args.tie_break or config.solver.tie_break
    dp_threshold = args.dp_threshold if args.dp_threshold is not None else config.solver.dp_threshold

    try:
        if args.input:
            n, capacity, items = read_problem_file(args.input)
        else:
            n, capacity, items = read_problem(sys.stdin.read())
        logger.info(f"Read problem with n={n}, k={capacity}")

        solution = solve(items, capacity, n=n, strategy=strategy,
                         dp_threshold=dp_threshold, tie_break=tie_break)
    except (KnapsackError, OSError) as e:
        logger.error(f"Cannot solve problem: {e}")
        return 1

    sys.stdout.write(format_solution(solution))
    logger.info(f"Optimal value {solution.value} found with {solution.strategy}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
