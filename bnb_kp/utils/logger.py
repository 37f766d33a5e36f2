# bnb_kp/utils/logger.py
import logging
import sys
import os
from datetime import datetime


def setup_logger(run_name: str, log_dir: str, level=logging.INFO, console_stream=sys.stdout):
    """
    Configures the root logger for the entire application.
    This should be called only ONCE at the application's entry point.

    Args:
        run_name (str): Prefix of the log file name, e.g. 'solve' or 'evaluation_session'.
        log_dir (str): Directory the timestamped log file is written to.
        level: Level of the console handler.
        console_stream: Stream of the console handler. The solve command passes
            sys.stderr so that stdout only carries the solution.
    """
    logger = logging.getLogger()

    # already configured by an earlier call
    if logger.hasHandlers():
        return

    logger.setLevel(logging.DEBUG)

    # 1. file handler, records DEBUG and above
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = f"{run_name}_{timestamp}.log"
    log_filepath = os.path.join(log_dir, log_filename)

    file_handler = logging.FileHandler(log_filepath, mode='w')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # 2. console handler
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.debug(f"Logger initialized. All subsequent logs will be saved to: {log_filepath}")

