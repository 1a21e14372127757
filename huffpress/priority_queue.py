"""An ordered queue driven by a caller-supplied relation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Keeps elements in order; the front is returned by :meth:`top`.

    A new element is inserted in front of the first stored element ``x`` for
    which ``relation(x, element)`` holds, or at the end if there is none.
    A relation that is always true makes the queue behave as a stack.
    """

    def __init__(self, relation: Callable[[T, T], bool]) -> None:
        self._relation = relation
        self._elements: list[T] = []

    def push(self, element: T) -> None:
        """Insert ``element`` at its place in the order."""
        position = next(
            (i for i, existing in enumerate(self._elements) if self._relation(existing, element)),
            len(self._elements),
        )
        self._elements.insert(position, element)

    def top(self) -> T:
        """Return the front element without removing it."""
        if not self._elements:
            raise IndexError("top of an empty queue")
        return self._elements[0]

    def pop(self) -> T:
        """Remove and return the front element."""
        if not self._elements:
            raise IndexError("pop from an empty queue")
        return self._elements.pop(0)

    def is_empty(self) -> bool:
        """Whether the queue holds no elements."""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)