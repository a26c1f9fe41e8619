"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("content", "next")

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list supporting front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front."""
        node = _Node(item)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: Any) -> None:
        """Append ``item`` at the back."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """The last item; IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each item to ``delete`` first if given."""
        if delete is not None:
            for item in self:
                delete(item)
        self._head = None
        self._tail = None
        self._size = 0

    def foreach(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item in order."""
        for item in self:
            func(item)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """A new list of ``func(item)`` for each item.

        If ``func`` fails, the items built so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        try:
            for item in self:
                result.push_back(func(item))
        except Exception:
            result.clear(delete)
            raise
        return result

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"