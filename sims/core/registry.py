"""Ordered entity registry backed by a doubly linked node chain."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: _Node[T] | None = None
        self.next: _Node[T] | None = None


class EntityRegistry(Generic[T]):
    """Insertion-ordered collection that supports removal while traversing.

    Removal unlinks a node in O(1) and never shifts other elements, so a
    traversal that captures ``next`` before deciding on the current node
    visits every element exactly once.
    """

    __slots__ = ("_head", "_tail", "_len")

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._len: int = 0

    def __len__(self) -> int:
        return self._len

    def length(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def append(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._len += 1

    def for_each(self, visit: Callable[[T], None]) -> None:
        """Call *visit* on every element in insertion order."""
        node = self._head
        while node is not None:
            visit(node.value)
            node = node.next

    def for_each_removable(self, decide: Callable[[T], bool]) -> int:
        """Visit every element once, removing those for which *decide* is True.

        Returns the number of removed elements.
        """
        removed = 0
        node = self._head
        while node is not None:
            nxt = node.next
            if decide(node.value):
                self._unlink(node)
                removed += 1
            node = nxt
        return removed

    def _unlink(self, node: _Node[T]) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._len -= 1
