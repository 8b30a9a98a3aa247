"""Classic stack exercises on Python lists, where the end of the list is the top."""

from __future__ import annotations

from typing import Any

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing and popping its characters."""
    stack = list(text)
    out = []
    while stack:
        out.append(stack.pop())
    return "".join(out)


def delete_middle(stack: list[Any]) -> None:
    """Remove the middle element of ``stack`` in place.

    The middle is the element ``len(stack) // 2`` places below the top.
    Raises IndexError on an empty stack.
    """
    if not stack:
        raise IndexError("cannot delete the middle of an empty stack")
    del stack[len(stack) - 1 - len(stack) // 2]


def is_valid_parenthesis(text: str) -> bool:
    """Return True if ``text`` is a balanced sequence of (), {} and [].

    Any character that is not an opening bracket is treated as a closing
    one, so other characters make the text invalid.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENING:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def insert_at_bottom(stack: list[Any], value: Any) -> None:
    """Put ``value`` at the bottom of ``stack`` in place."""
    stack.insert(0, value)


def reverse_stack(stack: list[Any]) -> None:
    """Reverse ``stack`` in place."""
    stack.reverse()


def sort_stack(stack: list[Any]) -> None:
    """Sort ``stack`` in place so that the largest element is on top."""
    stack.sort()