# bnb_kp/utils/config_loader.py
import yaml
import os
from types import SimpleNamespace
from typing import Dict, Any

# --- Import solver CLASSes here ---
from bnb_kp.solvers.classic.bnb import TIE_BREAKS
from bnb_kp.solvers.classic.bnb_solver import BranchAndBoundSolver
from bnb_kp.solvers.classic.dp_solver import DPSolver
from bnb_kp.solvers.dispatch import AutoSolver, STRATEGIES

# The registry maps a name to a Solver Class.
ALGORITHM_REGISTRY = {
    "DP": DPSolver,
    "Branch and Bound": BranchAndBoundSolver,
    "Auto": AutoSolver,
}

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))


def _post_process_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Processes the raw config dict to add absolute paths, validate solver
    options and resolve solver names to classes.
    """
    # --- 1. Build absolute paths for all entries in the 'paths' section ---
    for key, rel_path in config_dict['paths'].items():
        config_dict['paths'][key] = os.path.join(PROJECT_ROOT, rel_path)
    config_dict['paths']['root'] = PROJECT_ROOT

    # --- 2. Validate solver options ---
    solver_cfg = config_dict['solver']
    if solver_cfg['tie_break'] not in TIE_BREAKS:
        raise ValueError(f"solver.tie_break must be one of {TIE_BREAKS}, got '{solver_cfg['tie_break']}'.")
    if solver_cfg['default_strategy'] not in STRATEGIES:
        raise ValueError(f"solver.default_strategy must be one of {STRATEGIES}, got '{solver_cfg['default_strategy']}'.")
    solver_cfg['dp_threshold'] = int(solver_cfg['dp_threshold'])

    # --- 3. Map Algorithm Names to Classes ---
    eval_cfg = config_dict['evaluation']
    try:
        eval_cfg['algorithms_to_test'] = {
            name: ALGORITHM_REGISTRY[name] for name in eval_cfg['algorithms_to_test']
        }
        eval_cfg['baseline_algorithm'] = ALGORITHM_REGISTRY[eval_cfg['baseline_algorithm']]
    except KeyError as e:
        raise ValueError(f"Algorithm '{e.args[0]}' is defined in config.yaml but not found in ALGORITHM_REGISTRY in config_loader.py.") from e

    return config_dict


def load_config(config_path: str = 'configs/config.yaml') -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.
    Relative paths are resolved against the project root.
    """
    full_config_path = os.path.join(PROJECT_ROOT, config_path)

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {full_config_path}")

    processed_config = _post_process_config(config_dict)

    def dict_to_namespace(d: Dict) -> SimpleNamespace:
        for k, v in d.items():
            if isinstance(v, dict) and not _is_registry_mapping(v):
                d[k] = dict_to_namespace(v)
        return SimpleNamespace(**d)

    return dict_to_namespace(processed_config)


def _is_registry_mapping(d: Dict) -> bool:
    # name -> solver class tables stay plain dicts
    return bool(d) and all(isinstance(v, type) for v in d.values())


# --- Create a single, global config instance for easy import across the project ---
# Other modules can simply use: from bnb_kp.utils.config_loader import cfg
cfg = load_config()
