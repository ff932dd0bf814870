"""Aircraft records handed to the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Heading(Enum):
    """Whether an aircraft wants to land or take off."""

    ARRIVING = "arriving"
    DEPARTING = "departing"

    @classmethod
    def from_token(cls, token: str) -> Heading:
        """Parse an input token such as ``"departing"``.

        Raises:
            ValueError: If the token names neither heading.
        """
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise ValueError(
                f"heading must be 'arriving' or 'departing', got {token!r}"
            ) from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Aircraft:
    """One aircraft waiting to use a runway.

    Records are immutable: the queues reorder and move them but never
    change their fields.

    Attributes:
        entry_time: Tick at which the aircraft becomes eligible for queuing.
        id: Identifier, used as the last tie-breaker.
        heading: Arriving or departing; decides which queue it joins.
        priority: Lower values are served first.
    """

    entry_time: int
    id: int
    heading: Heading
    priority: int

    def __post_init__(self):
        if isinstance(self.heading, str):
            object.__setattr__(self, "heading", Heading.from_token(self.heading))
        elif not isinstance(self.heading, Heading):
            raise ValueError(f"heading must be a Heading, got {self.heading!r}")
        if self.entry_time < 0:
            raise ValueError(f"entry_time must be >= 0, got {self.entry_time}")
        if self.priority < 0:
            raise ValueError(f"priority must be >= 0, got {self.priority}")

    @property
    def is_departing(self) -> bool:
        return self.heading is Heading.DEPARTING

    def stats(self) -> str:
        """All attributes as ``"entry_time id heading priority"``."""
        return f"{self.entry_time} {self.id} {self.heading} {self.priority}"

    def __str__(self) -> str:
        return self.stats()
