"""A simple last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """An unbounded LIFO stack."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def full(self) -> bool:
        """Return True when no more items can be pushed; the stack never fills."""
        return False

    def copy(self) -> "Stack[T]":
        """Return an independent stack with the same items in the same order."""
        return Stack(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"