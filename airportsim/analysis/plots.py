"""Charts of a finished run."""

from __future__ import annotations

import logging
from pathlib import Path

from airportsim.result import SimulationResult

logger = logging.getLogger(__name__)


def plot_queue_depths(result: SimulationResult, path: str | Path) -> Path:
    """Save a chart of queue depth and runway use per reported tick.

    The top panel shows the departures and arrivals backlog left after each
    tick's allocation; the bottom panel shows how many runways were used.

    Args:
        result: A completed run.
        path: Destination PNG. Parent directories are created.

    Returns:
        The path written.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = result.to_dataframe()
    runways_used = df["runway_a"].notna().astype(int) + df["runway_b"].notna().astype(int)

    fig, (ax_q, ax_r) = plt.subplots(2, 1, figsize=(10, 6), sharex=True)

    ax_q.step(df["tick"], df["departures_depth"], where="post", label="departures")
    ax_q.step(df["tick"], df["arrivals_depth"], where="post", label="arrivals")
    ax_q.set_ylabel("Queued aircraft")
    ax_q.legend()
    ax_q.grid(True, alpha=0.2)

    ax_r.bar(df["tick"], runways_used, color="steelblue", alpha=0.8)
    ax_r.set_ylim(0, 2.5)
    ax_r.set_xlabel("Tick")
    ax_r.set_ylabel("Runways used")
    ax_r.grid(True, alpha=0.2)

    fig.suptitle("Runway allocation")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)

    logger.info("Saved queue depth chart to %s", path)
    return path
