"""An unbounded last-in, first-out stack."""

from __future__ import annotations

from typing import Any


class StackEmptyError(Exception):
    """Raised when reading from an empty stack."""


class Stack:
    """A LIFO stack with no fixed limit."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.empty():
            raise StackEmptyError("Pilha vazia!")
        return self._items.pop()

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        """A stack grows as memory allows, so it is never full."""
        return False

    def clear(self) -> None:
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.empty():
            raise StackEmptyError("Pilha vazia")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)