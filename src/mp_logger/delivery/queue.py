"""Delivery – BoundedQueue.

FIFO buffer with a hard capacity.  Appending past capacity evicts the
oldest item, never the newest.
"""
from __future__ import annotations

import collections
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class BoundedQueue(Generic[T]):
    """Oldest-first evicting FIFO queue.

    Parameters
    ----------
    maxsize:
        Maximum number of retained items.  Must be at least 1.
    """

    def __init__(self, maxsize: int) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be >= 1")
        self._maxsize = maxsize
        self._items: collections.deque[T] = collections.deque()
        self._evicted = 0

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def maxsize(self) -> int:
        return self._maxsize

    @property
    def evicted(self) -> int:
        """Total number of items dropped to make room for newer ones."""
        return self._evicted

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def full(self) -> bool:
        return len(self._items) >= self._maxsize

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, item: T) -> T | None:
        """Add *item* at the tail and return the evicted item, if any."""
        evicted: T | None = None
        if self.full():
            evicted = self._items.popleft()
            self._evicted += 1
        self._items.append(item)
        return evicted

    def push_front(self, item: T) -> T | None:
        """Re-queue *item* at the head.

        When the queue is full the head is the oldest item, so *item* itself
        is the one evicted and returned.
        """
        if self.full():
            self._evicted += 1
            return item
        self._items.appendleft(item)
        return None

    def popleft(self) -> T:
        return self._items.popleft()

    def peek(self, n: int) -> list[T]:
        """Return up to *n* items from the head without removing them."""
        return [item for _, item in zip(range(n), self._items)]

    def remove_leading(self, items: Iterable[T]) -> int:
        """Remove *items* from the head, matching by identity.

        Items already evicted are skipped.  Returns the number removed.
        """
        removed = 0
        for item in items:
            if self._items and self._items[0] is item:
                self._items.popleft()
                removed += 1
        return removed


__all__ = ["BoundedQueue"]
