"""Several stacks sharing one fixed-size backing array."""

from __future__ import annotations

from typing import Any

_NONE = -1


class NStack:
    """``stacks`` independent stacks that share ``capacity`` slots.

    Stacks are numbered from 1. Free slots are kept on a linked free list,
    so any stack may grow until the shared space is used up.
    """

    def __init__(self, stacks: int, capacity: int) -> None:
        if stacks < 1:
            raise ValueError("need at least one stack")
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._values: list[Any] = [None] * capacity
        self._tops = [_NONE] * stacks
        self._next = [*range(1, capacity), _NONE]
        self._free = 0

    @property
    def stacks(self) -> int:
        """Number of stacks."""
        return len(self._tops)

    @property
    def capacity(self) -> int:
        """Total number of slots shared by all stacks."""
        return len(self._values)

    def _slot(self, stack: int) -> int:
        if not 1 <= stack <= len(self._tops):
            raise IndexError(f"no stack numbered {stack}")
        return stack - 1

    def push(self, value: Any, stack: int) -> None:
        """Push ``value`` onto stack number ``stack``.

        Raises OverflowError when no slot is left.
        """
        slot = self._slot(stack)
        if self._free == _NONE:
            raise OverflowError("no free space left")
        index = self._free
        self._free = self._next[index]
        self._values[index] = value
        self._next[index] = self._tops[slot]
        self._tops[slot] = index

    def pop(self, stack: int) -> Any:
        """Remove and return the top of stack number ``stack``.

        Raises IndexError when that stack is empty.
        """
        slot = self._slot(stack)
        index = self._tops[slot]
        if index == _NONE:
            raise IndexError(f"stack {stack} is empty")
        self._tops[slot] = self._next[index]
        self._next[index] = self._free
        self._free = index
        value = self._values[index]
        self._values[index] = None
        return value