# bnb_kp/evaluation/plotting.py
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import logging

logger = logging.getLogger(__name__)


def plot_evaluation_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers."""
    if results_df is None or results_df.empty:
        logger.warning("No time data available to plot.")
        return

    logger.info("Generating evaluation time comparison plot...")
    sns.set_theme(style="whitegrid")
    plt.figure(figsize=(12, 7))

    sns.lineplot(data=results_df, x='n', y='avg_time_ms', hue='solver', style='solver', markers=True, dashes=False)

    plt.title('Solver Performance: Time vs. Problem Size (n)', fontsize=16)
    plt.xlabel('Number of Items (n)', fontsize=12)
    plt.ylabel('Average Time per Instance (ms)', fontsize=12)
    plt.yscale('log') # Use a log scale for time, as it can vary greatly
    plt.legend(title='Solver')
    plt.grid(True, which="both", ls="--")
    plt.tight_layout()

    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Time comparison plot saved to {save_path}")
    except Exception as e:
        logger.error(f"Failed to save time plot: {e}")
    finally:
        plt.close()
