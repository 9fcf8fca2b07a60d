"""A first-in, first-out queue with a fixed capacity, holding people."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 2
SEPARATOR = "--------------------------------------------"


@dataclass
class Person:
    """A patient registered for vaccination."""

    name: str
    cpf: str
    address: str
    age: int


class QueueFullError(Exception):
    """Raised when appending to a queue that has reached its capacity."""


class QueueEmptyError(Exception):
    """Raised when reading from a queue that holds nothing."""


def format_person(person: Person) -> str:
    """Return the printed block describing one person, separator included."""
    return (
        f"Nome: {person.name}\n"
        f"CPF: {person.cpf}\n"
        f"Endereço: {person.address}\n"
        f"idade: {person.age}\n"
        f"{SEPARATOR}\n"
    )


class BoundedQueue:
    """A FIFO queue that refuses new entries once it holds `capacity` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def append(self, item: Any) -> None:
        """Add an item at the rear of the queue."""
        if self.full():
            raise QueueFullError("fila cheia")
        self._items.append(item)

    def serve(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self.empty():
            raise QueueEmptyError("Fila vazia!")
        return self._items.popleft()

    def empty(self) -> bool:
        return not self._items

    def full(self) -> bool:
        return len(self._items) == self.capacity

    def clear(self) -> None:
        self._items.clear()

    def size(self) -> int:
        return len(self._items)

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        if self.empty():
            raise QueueEmptyError("Lista vazia!")
        return self._items[0]

    def rear(self) -> Any:
        """Return the item at the rear without removing it."""
        if self.empty():
            raise QueueEmptyError("Lista vazia!")
        return self._items[-1]

    def describe(self) -> str:
        """Return the printed listing of every person, front first."""
        return "".join(format_person(person) for person in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)