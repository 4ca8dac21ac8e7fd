"""Bounded stack of material tree entries."""

from __future__ import annotations

from typing import Any

STACK_CAPACITY = 500


class MaterialStack:
    """Last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = STACK_CAPACITY) -> None:
        self._capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, node: Any) -> None:
        """Push *node*; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(node)

    def pop(self) -> Any:
        """Pop the top item; raise IndexError when the stack is empty."""
        if self.is_empty():
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)