"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any


class EmptyQueueError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class Queue:
    """First-in, first-out queue of arbitrary items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise EmptyQueueError("cannot dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise EmptyQueueError("cannot peek in an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"