"""Summary generated after a simulation run completes.

SimulationSummary is attached to the SimulationResult returned by
Simulation.run() and is what the CLI prints with ``--summary``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class QueueStats:
    """Per-queue counters for one run."""
    peak_depth: int = 0
    total_admitted: int = 0
    total_allocated: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "peak_depth": self.peak_depth,
            "total_admitted": self.total_admitted,
            "total_allocated": self.total_allocated,
        }


@dataclass
class SimulationSummary:
    """Auto-generated summary of a simulation run."""
    ticks_elapsed: int
    active_ticks: int
    wall_clock_seconds: float
    departures: QueueStats
    arrivals: QueueStats

    @property
    def aircraft_admitted(self) -> int:
        return self.departures.total_admitted + self.arrivals.total_admitted

    @property
    def aircraft_allocated(self) -> int:
        return self.departures.total_allocated + self.arrivals.total_allocated

    def __str__(self) -> str:
        lines = [
            "Simulation Summary",
            f"  Ticks: {self.ticks_elapsed} elapsed / {self.active_ticks} active"
            f" ({self.wall_clock_seconds:.3f}s wall)",
            f"  Aircraft: {self.aircraft_admitted} admitted, {self.aircraft_allocated} allocated",
        ]
        for name, qs in (("departures", self.departures), ("arrivals", self.arrivals)):
            lines.append(
                f"    {name}: peak={qs.peak_depth}, admitted={qs.total_admitted},"
                f" allocated={qs.total_allocated}"
            )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticks_elapsed": self.ticks_elapsed,
            "active_ticks": self.active_ticks,
            "wall_clock_seconds": self.wall_clock_seconds,
            "aircraft_admitted": self.aircraft_admitted,
            "aircraft_allocated": self.aircraft_allocated,
            "queues": {
                "departures": self.departures.to_dict(),
                "arrivals": self.arrivals.to_dict(),
            },
        }
