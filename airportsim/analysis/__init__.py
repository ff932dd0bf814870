"""Post-run analysis helpers."""

from airportsim.analysis.plots import plot_queue_depths

__all__ = [
    "plot_queue_depths",
]
