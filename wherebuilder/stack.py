"""LIFO stack of clauses owned by one builder; no locking, a builder has a single writer."""

from typing import Generic, TypeVar

T = TypeVar("T")


class ClauseStack(Generic[T]):
    """Push, pop and peek only."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty ClauseStack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty ClauseStack")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ClauseStack({self._items!r})"
