"""Command-line entry point.

Usage:
    airportsim [INPUT] [--output FILE] [--log-level LEVEL | --quiet] [--summary] [--csv FILE] [--plot FILE]
    python -m airportsim < input.txt

Reads the record count and records from INPUT (stdin by default), runs the
simulation and writes the per-tick report to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from airportsim.core.aircraft import Aircraft
from airportsim.io.parser import InputFormatError, read_records
from airportsim.io.report import write_reports
from airportsim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
)
from airportsim.result import SimulationResult
from airportsim.simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airportsim",
        description="Assign arriving and departing aircraft to two runways, tick by tick",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="Record file (default: stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Where to write the tick report (default: stdout)",
    )
    logging_group = parser.add_mutually_exclusive_group()
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log to stderr at this level (overrides AIRPORTSIM_LOGGING)",
    )
    logging_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Disable all logging, including AIRPORTSIM_* configuration",
    )
    parser.add_argument("--summary", action="store_true", help="Print a run summary to stderr")
    parser.add_argument("--csv", type=str, default=None, help="Write the tick table as CSV")
    parser.add_argument("--plot", type=str, default=None, help="Save a queue depth chart (PNG)")
    return parser


def _run(aircraft: list[Aircraft], out: TextIO) -> SimulationResult:
    """Simulate, streaming each tick's report to ``out`` as it happens."""
    sim = Simulation(aircraft)
    reports = []
    for report in sim.iter_reports():
        write_reports([report], out)
        reports.append(report)
    out.flush()
    return SimulationResult(reports=reports, summary=sim.summary)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.quiet:
        disable_logging()
    elif args.log_level is not None:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        aircraft = read_records(args.input)
    except InputFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read input: {e}", file=sys.stderr)
        return 1
    finally:
        if args.input is not sys.stdin:
            args.input.close()

    # The output file is only opened once the input has parsed.
    try:
        if args.output is None:
            result = _run(aircraft, sys.stdout)
        else:
            with open(args.output, "w") as out:
                result = _run(aircraft, out)
    except OSError as e:
        print(f"error: cannot write output: {e}", file=sys.stderr)
        return 1

    if args.summary:
        print(result.summary, file=sys.stderr)

    try:
        if args.csv:
            result.to_dataframe().to_csv(args.csv, index=False)
            logger.info("Wrote tick table to %s", args.csv)
        if args.plot:
            from airportsim.analysis.plots import plot_queue_depths

            plot_queue_depths(result, args.plot)
    except OSError as e:
        print(f"error: cannot write output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
