"""Fixed-capacity stack backed by an array."""

from __future__ import annotations

from typing import Any


class ArrayStack:
    """A last-in first-out stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Maximum number of elements held at once."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Push ``value``. Raises OverflowError when the stack is full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element. Raises IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)