"""Per-tick reports and the result of a full run."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from airportsim.core.aircraft import Aircraft
from airportsim.core.runway import RunwaySlot
from airportsim.instrumentation.summary import SimulationSummary

COLUMNS = [
    "tick",
    "admitted",
    "runway_a",
    "runway_b",
    "departures_depth",
    "arrivals_depth",
]


@dataclass(frozen=True)
class TickReport:
    """Everything that happened on one non-idle tick.

    Attributes:
        tick: The tick number.
        admitted: Aircraft that entered a queue this tick, in input order.
        runway_a: Slot for runway A after allocation.
        runway_b: Slot for runway B after allocation.
        departures_depth: Departures still queued after allocation.
        arrivals_depth: Arrivals still queued after allocation.
    """

    tick: int
    admitted: tuple[Aircraft, ...]
    runway_a: RunwaySlot
    runway_b: RunwaySlot
    departures_depth: int = 0
    arrivals_depth: int = 0

    @property
    def slots(self) -> tuple[RunwaySlot, RunwaySlot]:
        return (self.runway_a, self.runway_b)

    @property
    def allocated(self) -> list[Aircraft]:
        """Aircraft placed on a runway this tick (A first)."""
        return [slot.aircraft for slot in self.slots if slot.occupied]


@dataclass
class SimulationResult:
    """Reports for every non-idle tick plus the run summary."""

    reports: list[TickReport] = field(default_factory=list)
    summary: SimulationSummary | None = None

    @property
    def allocation_order(self) -> list[Aircraft]:
        """Every allocated aircraft, tick by tick, runway A before runway B."""
        return [aircraft for report in self.reports for aircraft in report.allocated]

    def to_dataframe(self) -> pd.DataFrame:
        """One row per reported tick; empty runways hold None."""
        rows = [
            (
                r.tick,
                len(r.admitted),
                r.runway_a.aircraft.id if r.runway_a.occupied else None,
                r.runway_b.aircraft.id if r.runway_b.occupied else None,
                r.departures_depth,
                r.arrivals_depth,
            )
            for r in self.reports
        ]
        df = pd.DataFrame.from_records(rows, columns=COLUMNS)
        # Nullable ints keep ids integral when a runway is empty.
        return df.astype({"runway_a": "Int64", "runway_b": "Int64"})
