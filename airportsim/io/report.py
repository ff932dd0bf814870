r"""Render tick reports in the textual output scheme.

Each non-idle tick becomes::

    Time step 0
    \tEntering simulation
    \t\t0 1 departing 5
    \tRunway A
    \t\t0 1 departing 5
    \tRunway B

A runway label with no record line beneath it means the runway is empty.
"""

from __future__ import annotations

from typing import Iterable, TextIO

from airportsim.core.runway import RunwaySlot
from airportsim.result import TickReport

INDENT = "\t"


def _slot_lines(slot: RunwaySlot) -> list[str]:
    lines = [f"{INDENT}Runway {slot.runway.value}"]
    if slot.occupied:
        lines.append(f"{INDENT * 2}{slot.aircraft.stats()}")
    return lines


def format_report(report: TickReport) -> list[str]:
    """Output lines for one tick, without trailing newlines."""
    lines = [f"Time step {report.tick}", f"{INDENT}Entering simulation"]
    lines.extend(f"{INDENT * 2}{aircraft.stats()}" for aircraft in report.admitted)
    for slot in report.slots:
        lines.extend(_slot_lines(slot))
    return lines


def write_reports(reports: Iterable[TickReport], out: TextIO) -> int:
    """Write every report to ``out``; returns the number of ticks written."""
    written = 0
    for report in reports:
        for line in format_report(report):
            out.write(line + "\n")
        written += 1
    return written


def render(reports: Iterable[TickReport]) -> str:
    """The full output document as a single string."""
    return "".join(line + "\n" for report in reports for line in format_report(report))
