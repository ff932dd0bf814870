"""Binary min-heap priority queue with an injectable ordering policy.

Unlike ``heapq``, the order is not taken from the items' ``__lt__`` but from a
``comes_before(x, y)`` callable, so the same container serves any element
type and any strict weak ordering.

Example:
    from airportsim.core import PriorityQueue, comes_before

    queue = PriorityQueue(comes_before=comes_before)
    queue.push(Aircraft(0, 7, Heading.DEPARTING, 2))
    queue.push(Aircraft(0, 3, Heading.ARRIVING, 1))
    queue.pop()   # the id=3 aircraft (priority 1)
    queue.pop()   # the id=7 aircraft
    queue.pop()   # None
"""

from __future__ import annotations

import operator
from typing import Iterable, Iterator, TypeVar

from airportsim.core.ordering import Comparator
from airportsim.core.queue_policy import QueuePolicy

T = TypeVar("T")


def _parent(i: int) -> int:
    return (i - 1) // 2


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


class PriorityQueue(QueuePolicy[T]):
    """Heap-ordered queue; the root is always the item served first.

    Heap invariant: no element comes strictly before its parent under
    ``comes_before``.

    Args:
        items: Optional initial items, pushed one at a time in order.
        comes_before: Strict weak ordering; ``comes_before(x, y)`` is True when
            ``x`` must be served before ``y``. Defaults to ``<``.
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        comes_before: Comparator = operator.lt,
    ):
        self._comes_before = comes_before
        self._heap: list[T] = []
        if items is not None:
            for item in items:
                self.push(item)

    @property
    def comes_before(self) -> Comparator:
        """The ordering policy this queue was built with."""
        return self._comes_before

    def push(self, item: T) -> None:
        """Insert ``item`` and sift it up. O(log n)."""
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> T | None:
        """Remove and return the root, or None if the queue is empty. O(log n)."""
        if not self._heap:
            return None

        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> T | None:
        """Return the root without removing it, or None if empty."""
        if not self._heap:
            return None
        return self._heap[0]

    def drain(self) -> Iterator[T]:
        """Pop every item in service order."""
        while self._heap:
            yield self.pop()

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    # === Heap maintenance ===

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            p = _parent(i)
            if not self._comes_before(heap[i], heap[p]):
                break
            heap[i], heap[p] = heap[p], heap[i]
            i = p

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            first = i
            l, r = _left(i), _right(i)

            if l < n and self._comes_before(heap[l], heap[first]):
                first = l
            # Compared against the best so far, so when both children beat the
            # parent the one that comes before the other wins.
            if r < n and self._comes_before(heap[r], heap[first]):
                first = r

            if first == i:
                return
            heap[i], heap[first] = heap[first], heap[i]
            i = first
