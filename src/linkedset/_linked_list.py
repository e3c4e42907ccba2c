from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

_T = TypeVar("_T")


class Node(Generic[_T]):
    """One slot of a :class:`LinkedList`. Only the list that created it may relink it."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: _T):
        self.value = value
        self.prev: Node[_T] | None = None
        self.next: Node[_T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class LinkedList(Generic[_T]):
    """
    Doubly linked sequence supporting O(1) insertion at both ends and O(1) removal of a known node.

    Nodes act as handles: :meth:`append` and :meth:`appendleft` return the node they created, which
    can later be passed to :meth:`unlink`.
    """

    def __init__(self) -> None:
        self.head: Node[_T] | None = None
        self.tail: Node[_T] | None = None
        self.size = 0

    def __len__(self) -> int:
        return self.size

    def append(self, value: _T) -> Node[_T]:
        node = Node(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            node.prev = self.tail
            self.tail.next = node
            self.tail = node
        self.size += 1
        return node

    def appendleft(self, value: _T) -> Node[_T]:
        node = Node(value)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.size += 1
        return node

    def unlink(self, node: Node[_T]) -> None:
        """
        Removes ``node`` from the list in O(1).

        :param node: A node currently linked in this list.
        """

        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next

        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev

        node.prev = node.next = None
        self.size -= 1

    def clear(self) -> None:
        # Dropping the ends is enough, the detached chain is reclaimed by the garbage collector.
        self.head = self.tail = None
        self.size = 0

    def nodes(self) -> Iterator[Node[_T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def reversed_nodes(self) -> Iterator[Node[_T]]:
        node = self.tail
        while node is not None:
            yield node
            node = node.prev
