"""Parse the textual aircraft record scheme.

The input is a count ``n`` followed by ``n`` records of four
whitespace-separated fields::

    3
    0 1 departing 1
    0 2 arriving 2
    4 3 departing 1

Line breaks carry no meaning; only the token sequence does.
"""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from airportsim.core.aircraft import Aircraft, Heading

logger = logging.getLogger(__name__)

FIELDS_PER_RECORD = 4


class InputFormatError(ValueError):
    """Raised when the input text does not follow the record scheme.

    Attributes:
        record: Zero-based index of the offending record, or None when the
            count itself is at fault.
    """

    def __init__(self, message: str, record: int | None = None):
        self.record = record
        if record is not None:
            message = f"record {record}: {message}"
        super().__init__(message)


def _parse_int(token: str, name: str, record: int | None) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"{name} must be an integer, got {token!r}", record) from None


def parse_record(tokens: list[str], record: int | None = None) -> Aircraft:
    """Build one Aircraft from its four tokens."""
    if len(tokens) != FIELDS_PER_RECORD:
        raise InputFormatError(
            f"expected {FIELDS_PER_RECORD} fields, got {len(tokens)}", record
        )

    entry_time = _parse_int(tokens[0], "entry_time", record)
    aircraft_id = _parse_int(tokens[1], "id", record)
    priority = _parse_int(tokens[3], "priority", record)
    try:
        heading = Heading.from_token(tokens[2])
        return Aircraft(
            entry_time=entry_time, id=aircraft_id, heading=heading, priority=priority
        )
    except ValueError as e:
        raise InputFormatError(str(e), record) from None


def iter_records(tokens: Iterator[str]) -> Iterator[Aircraft]:
    """Yield the aircraft described by a token stream (count first)."""
    count_token = next(tokens, None)
    if count_token is None:
        raise InputFormatError("missing aircraft count")
    count = _parse_int(count_token, "aircraft count", None)
    if count < 0:
        raise InputFormatError(f"aircraft count must be >= 0, got {count}")

    for i in range(count):
        fields = [tok for _, tok in zip(range(FIELDS_PER_RECORD), tokens)]
        if len(fields) < FIELDS_PER_RECORD:
            raise InputFormatError(
                f"input ended after {len(fields)} of {FIELDS_PER_RECORD} fields"
                f" ({i} of {count} records read)",
                i,
            )
        yield parse_record(fields, i)

    leftover = sum(1 for _ in tokens)
    if leftover:
        logger.warning("Ignoring %d tokens after the last of %d records", leftover, count)


def parse_records(text: str) -> list[Aircraft]:
    """Parse a whole input document into aircraft, in input order."""
    return list(iter_records(iter(text.split())))


def read_records(stream: TextIO) -> list[Aircraft]:
    """Read and parse every record from an open text stream."""
    return parse_records(stream.read())
