"""airportsim: two-runway airport scheduling on a discrete clock.

Aircraft enter at a tick, wait in a departures or arrivals priority queue and
are assigned to runway A or B, at most one per runway per tick.

Logging is silent by default; see ``airportsim.logging_config``.
"""

import logging

logging.getLogger("airportsim").addHandler(logging.NullHandler())

from airportsim.core import (
    Aircraft,
    Comparator,
    Heading,
    PriorityQueue,
    QueuePolicy,
    Runway,
    RunwaySlot,
    comes_before,
    service_key,
)
from airportsim.instrumentation import QueueStats, SimulationSummary
from airportsim.io import InputFormatError, format_report, parse_records, read_records, render
from airportsim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from airportsim.result import SimulationResult, TickReport
from airportsim.simulation import Simulation

__all__ = [
    # Core
    "Aircraft",
    "Comparator",
    "Heading",
    "PriorityQueue",
    "QueuePolicy",
    "Runway",
    "RunwaySlot",
    "comes_before",
    "service_key",
    # Simulation
    "Simulation",
    "SimulationResult",
    "TickReport",
    "QueueStats",
    "SimulationSummary",
    # I/O
    "InputFormatError",
    "format_report",
    "parse_records",
    "read_records",
    "render",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
