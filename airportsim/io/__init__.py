"""Text input parsing and report formatting."""

from airportsim.io.parser import (
    InputFormatError,
    iter_records,
    parse_record,
    parse_records,
    read_records,
)
from airportsim.io.report import format_report, render, write_reports

__all__ = [
    "InputFormatError",
    "format_report",
    "iter_records",
    "parse_record",
    "parse_records",
    "read_records",
    "render",
    "write_reports",
]
