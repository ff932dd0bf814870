"""Discrete-time runway allocation loop.

Each tick the simulation:

1. Admits every pending aircraft whose ``entry_time`` equals the tick into
   ``departures`` or ``arrivals``, in input order.
2. Skips the tick silently if nothing was admitted and both queues are empty.
3. Otherwise clears both runways and fills them:

   - both queues non-empty: A <- departures, B <- arrivals
   - only departures: A <- departures, then B <- departures if any remain
   - only arrivals: B <- arrivals, then A <- arrivals if any remain

   At most two aircraft leave the queues per tick; the rest wait.
4. Records a TickReport.

The run ends once the pending pool and both queues are empty.

Example:
    from airportsim import Aircraft, Heading, Simulation

    sim = Simulation([
        Aircraft(0, 1, Heading.DEPARTING, 5),
        Aircraft(0, 2, Heading.ARRIVING, 5),
    ])
    result = sim.run()
    result.reports[0].runway_a.aircraft.id   # 1
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from typing import Iterable, Iterator

from airportsim.core.aircraft import Aircraft
from airportsim.core.ordering import Comparator, comes_before
from airportsim.core.priority_queue import PriorityQueue
from airportsim.core.runway import Runway, RunwaySlot
from airportsim.instrumentation.summary import QueueStats, SimulationSummary
from airportsim.result import SimulationResult, TickReport

logger = logging.getLogger(__name__)


class Simulation:
    """Assigns aircraft to runways A and B one tick at a time.

    Args:
        aircraft: Every aircraft of the run, in input order.
        comes_before: Ordering policy for both queues.
        start_tick: First simulated tick.

    Raises:
        ValueError: If an aircraft enters before ``start_tick``.
    """

    def __init__(
        self,
        aircraft: Iterable[Aircraft],
        comes_before: Comparator = comes_before,
        start_tick: int = 0,
    ):
        self._start_tick = start_tick
        self._tick = start_tick

        # Pending pool bucketed by entry tick; list order is input order.
        self._pending: dict[int, list[Aircraft]] = defaultdict(list)
        for a in aircraft:
            if a.entry_time < start_tick:
                raise ValueError(
                    f"aircraft {a.id} enters at tick {a.entry_time}, before start tick {start_tick}"
                )
            self._pending[a.entry_time].append(a)
        self._pending_count = sum(len(bucket) for bucket in self._pending.values())

        self._departures: PriorityQueue[Aircraft] = PriorityQueue(comes_before=comes_before)
        self._arrivals: PriorityQueue[Aircraft] = PriorityQueue(comes_before=comes_before)

        self._runway_a = RunwaySlot.empty(Runway.A)
        self._runway_b = RunwaySlot.empty(Runway.B)

        self._departure_stats = QueueStats()
        self._arrival_stats = QueueStats()
        self._active_ticks = 0
        self._wall_clock_seconds = 0.0

    # === State ===

    @property
    def tick(self) -> int:
        """The next tick to be simulated."""
        return self._tick

    @property
    def departures(self) -> PriorityQueue[Aircraft]:
        return self._departures

    @property
    def arrivals(self) -> PriorityQueue[Aircraft]:
        return self._arrivals

    @property
    def pending_count(self) -> int:
        """Aircraft that have not yet entered a queue."""
        return self._pending_count

    @property
    def runways(self) -> tuple[RunwaySlot, RunwaySlot]:
        """Runway slots as of the last allocated tick."""
        return (self._runway_a, self._runway_b)

    @property
    def is_complete(self) -> bool:
        return self._pending_count == 0 and not self._departures and not self._arrivals

    @property
    def summary(self) -> SimulationSummary:
        return SimulationSummary(
            ticks_elapsed=self._tick - self._start_tick,
            active_ticks=self._active_ticks,
            wall_clock_seconds=self._wall_clock_seconds,
            departures=self._departure_stats,
            arrivals=self._arrival_stats,
        )

    # === Stepping ===

    def step(self) -> TickReport | None:
        """Simulate the current tick.

        Returns:
            The tick's report, or None if the tick was idle (or the run is
            already complete). An idle step moves the clock straight to the
            next tick at which an aircraft enters, since the ticks in between
            are idle too.
        """
        if self.is_complete:
            return None

        t = self._tick
        admitted = self._admit(t)

        if not admitted and not self._departures and not self._arrivals:
            self._tick = min(self._pending) if self._pending else t + 1
            logger.debug("Tick %d idle, next entry at tick %d", t, self._tick)
            return None

        self._record_depths()
        self._allocate()
        self._active_ticks += 1
        self._tick = t + 1

        report = TickReport(
            tick=t,
            admitted=tuple(admitted),
            runway_a=self._runway_a,
            runway_b=self._runway_b,
            departures_depth=len(self._departures),
            arrivals_depth=len(self._arrivals),
        )
        logger.debug(
            "Tick %d: admitted %d, A=%s, B=%s, queued %d/%d",
            t,
            len(admitted),
            self._runway_a.aircraft,
            self._runway_b.aircraft,
            report.departures_depth,
            report.arrivals_depth,
        )
        return report

    def iter_reports(self) -> Iterator[TickReport]:
        """Step until complete, yielding the report of every non-idle tick."""
        logger.info(
            "Simulation started at tick %d with %d aircraft", self._tick, self._pending_count
        )
        started = time.perf_counter()
        try:
            while not self.is_complete:
                report = self.step()
                if report is not None:
                    yield report
        finally:
            self._wall_clock_seconds += time.perf_counter() - started

        logger.info(
            "Simulation finished at tick %d: %d active ticks",
            self._tick,
            self._active_ticks,
        )

    def run(self) -> SimulationResult:
        """Run to completion."""
        reports = list(self.iter_reports())
        return SimulationResult(reports=reports, summary=self.summary)

    # === Tick phases ===

    def _admit(self, t: int) -> list[Aircraft]:
        admitted = self._pending.pop(t, [])
        for aircraft in admitted:
            if aircraft.is_departing:
                self._departures.push(aircraft)
                self._departure_stats.total_admitted += 1
            else:
                self._arrivals.push(aircraft)
                self._arrival_stats.total_admitted += 1
        self._pending_count -= len(admitted)
        return admitted

    def _record_depths(self) -> None:
        self._departure_stats.peak_depth = max(
            self._departure_stats.peak_depth, len(self._departures)
        )
        self._arrival_stats.peak_depth = max(
            self._arrival_stats.peak_depth, len(self._arrivals)
        )

    def _allocate(self) -> None:
        runway_a: Aircraft | None = None
        runway_b: Aircraft | None = None

        if self._departures and self._arrivals:
            runway_a = self._departures.pop()
            runway_b = self._arrivals.pop()
            self._departure_stats.total_allocated += 1
            self._arrival_stats.total_allocated += 1
        elif self._departures:
            runway_a = self._departures.pop()
            runway_b = self._departures.pop()
            self._departure_stats.total_allocated += 1 if runway_b is None else 2
        elif self._arrivals:
            runway_b = self._arrivals.pop()
            runway_a = self._arrivals.pop()
            self._arrival_stats.total_allocated += 1 if runway_a is None else 2

        self._runway_a = RunwaySlot(Runway.A, runway_a)
        self._runway_b = RunwaySlot(Runway.B, runway_b)
