"""Service order for aircraft.

The order is a strict weak ordering decided by a cascade:

1. Lower ``priority`` first.
2. On equal priority, a departing aircraft before an arriving one.
3. Lower ``id`` first.
4. Otherwise the two are tied and neither comes before the other.

``comes_before`` is the policy handed to ``PriorityQueue``; ``service_key``
is the equivalent sort key for ``sorted()``.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from airportsim.core.aircraft import Aircraft, Heading

T = TypeVar("T")

Comparator = Callable[[T, T], bool]

# Rank used for the heading step of the cascade.
_HEADING_RANK = {
    Heading.DEPARTING: 0,
    Heading.ARRIVING: 1,
}


def comes_before(x: Aircraft, y: Aircraft) -> bool:
    """Return True if ``x`` is served strictly before ``y``."""
    if x.priority != y.priority:
        return x.priority < y.priority

    if x.heading is Heading.DEPARTING and y.heading is Heading.ARRIVING:
        return True
    if x.heading is Heading.ARRIVING and y.heading is Heading.DEPARTING:
        return False

    return x.id < y.id


def service_key(aircraft: Aircraft) -> tuple[int, int, int]:
    """Sort key that orders aircraft the same way as ``comes_before``."""
    return (aircraft.priority, _HEADING_RANK[aircraft.heading], aircraft.id)
