"""Abstract queue interface shared by the simulation's queues."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class QueuePolicy(ABC, Generic[T]):
    """Ordering policy for a buffer of items.

    An empty queue is a normal state: ``pop()`` and ``peek()`` return None
    instead of raising.
    """

    @abstractmethod
    def push(self, item: T) -> None:
        """Add an item to the queue."""

    @abstractmethod
    def pop(self) -> T | None:
        """Remove and return the next item, or None if empty."""

    @abstractmethod
    def peek(self) -> T | None:
        """Return the next item without removing it, or None if empty."""

    @abstractmethod
    def __len__(self) -> int: ...

    def is_empty(self) -> bool:
        return len(self) == 0

    def size(self) -> int:
        return len(self)

    def __bool__(self) -> bool:
        return not self.is_empty()
