"""Run summaries and statistics."""

from airportsim.instrumentation.summary import QueueStats, SimulationSummary

__all__ = [
    "QueueStats",
    "SimulationSummary",
]
