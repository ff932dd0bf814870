"""Runway slots filled by the allocation step."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from airportsim.core.aircraft import Aircraft


class Runway(Enum):
    A = "A"
    B = "B"


@dataclass(frozen=True)
class RunwaySlot:
    """What one runway holds for one tick: an aircraft, or nothing.

    A fresh slot is made for every allocated tick; slots never carry over.
    """

    runway: Runway
    aircraft: Aircraft | None = None

    @property
    def occupied(self) -> bool:
        return self.aircraft is not None

    @classmethod
    def empty(cls, runway: Runway) -> RunwaySlot:
        return cls(runway=runway)

    def __str__(self) -> str:
        held = self.aircraft.stats() if self.aircraft is not None else "empty"
        return f"Runway {self.runway.value}: {held}"
