"""Fixed-capacity circular queue."""

from __future__ import annotations

from typing import Any


class ArrayQueue:
    """A first-in first-out queue stored in a ring of ``capacity`` slots."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Maximum number of elements held at once."""
        return len(self._slots)

    def push(self, value: Any) -> None:
        """Append ``value`` at the back. Raises OverflowError when full."""
        if self._size == len(self._slots):
            raise OverflowError("queue is full")
        end = (self._start + self._size) % len(self._slots)
        self._slots[end] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front element. Raises IndexError when empty."""
        if not self._size:
            raise IndexError("queue is empty")
        value = self._slots[self._start]
        self._slots[self._start] = None
        self._size -= 1
        self._start = 0 if not self._size else (self._start + 1) % len(self._slots)
        return value

    def top(self) -> Any:
        """Return the front element. Raises IndexError when empty."""
        if not self._size:
            raise IndexError("queue is empty")
        return self._slots[self._start]

    def __len__(self) -> int:
        return self._size