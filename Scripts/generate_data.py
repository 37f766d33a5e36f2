# Scripts/generate_data.py
# -*- coding: utf-8 -*-

"""
Generates the testing set of knapsack instances described by the 'data_gen'
section of 'configs/config.yaml'.
"""

import os
import argparse
import logging
from tqdm import tqdm

from bnb_kp.utils.config_loader import cfg
from bnb_kp.utils.logger import setup_logger
import bnb_kp.utils.generator as gen


def create_dataset(
    dataset_name: str,
    output_dir: str,
    instance_params: dict,
    n_range: tuple = None,
    n_fixed: int = None,
    num_instances: int = 1,
    seed: int = None
) -> list:
    """
    A generic function to create a dataset of knapsack instances.

    Args:
        dataset_name (str): A name for the generation task (e.g., 'Testing-Set').
        output_dir (str): The directory to save the instance files.
        instance_params (dict): Parameters for the instance generator.
        n_range (tuple): A tuple for varied sizes (start, stop, step), stop inclusive.
        n_fixed (int): A fixed size for all instances.
        num_instances (int): The number of instances to generate for each size 'n'.
        seed (int): Base seed; each instance gets its own derived seed.

    Returns:
        list: Paths of the written instance files.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting dataset generation: '{dataset_name}' ---")
    os.makedirs(output_dir, exist_ok=True)

    if n_range:
        range_of_n = range(n_range[0], n_range[1] + 1, n_range[2])
    elif n_fixed:
        range_of_n = [n_fixed]
    else:
        raise ValueError("Either n_range or n_fixed must be provided.")
    total_tasks = len(range_of_n) * num_instances

    written = []
    task = 0
    with tqdm(total=total_tasks, desc=f"Generating {dataset_name}") as pbar:
        for n in range_of_n:
            for i in range(num_instances):
                items, capacity = gen.generate_knapsack_instance(
                    n=n,
                    correlation=instance_params['correlation'],
                    max_weight=instance_params['max_weight'],
                    max_value=instance_params['max_value'],
                    capacity_ratio=instance_params['capacity_ratio'],
                    seed=None if seed is None else seed + task
                )
                task += 1

                filename = os.path.join(output_dir, f"instance_n{n}_{instance_params['correlation']}_{i+1}.csv")
                gen.save_instance_to_file(items, capacity, filename)
                written.append(filename)
                pbar.update(1)

    logger.info(f"--- Dataset generation '{dataset_name}' complete. {len(written)} files saved in '{output_dir}'. ---")
    return written


def main():
    parser = argparse.ArgumentParser(description="Generate knapsack test instances.")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for the instance files. Defaults to paths.data_testing.")
    parser.add_argument("--num-instances", type=int, default=None,
                        help="Instances per size n. Defaults to data_gen.num_instances.")
    args = parser.parse_args()

    setup_logger(run_name="data_generation", log_dir=cfg.paths.logs)

    shared_instance_params = {
        'correlation': cfg.data_gen.correlation_type,
        'max_weight': cfg.data_gen.max_weight,
        'max_value': cfg.data_gen.max_value,
        'capacity_ratio': cfg.data_gen.capacity_ratio,
    }

    create_dataset(
        dataset_name="Testing-Set",
        output_dir=args.output_dir or cfg.paths.data_testing,
        instance_params=shared_instance_params,
        n_range=tuple(cfg.data_gen.n_range),
        num_instances=args.num_instances or cfg.data_gen.num_instances,
        seed=cfg.data_gen.seed
    )


if __name__ == '__main__':
    main()
