from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, MutableSequence, MutableSet
from typing import TypeVar

from ._comparer import DefaultEqualityComparer, EqualityComparer, make_key_function
from ._errors import InvalidArgumentError
from ._linked_list import LinkedList, Node
from ._utils import check_destination, check_not_none

_T = TypeVar("_T")


class OrderedSet(MutableSet[_T]):
    """
    Collection of distinct elements that remembers the order in which they were inserted at its
    front or at its back.

    Membership tests, insertion at either end and removal (by value or from either end) all run in
    O(1) on average. The container combines a mapping from each element to its node in a doubly
    linked list, and the linked list itself, which holds the elements in iteration order.

    ``None`` is used as the absent value: it is returned by queries that find nothing and can never
    be an element.

    :param elements: Elements to insert at the back, in order. Later duplicates of an element are
        ignored.
    :param comparer: The :class:`~linkedset.EqualityComparer` deciding when two elements are the
        same. Defaults to the natural ``==`` and ``hash`` of the elements.

    .. warning::
        Adding or removing elements while iterating over the set makes the iteration raise a
        ``RuntimeError``. The container is not thread-safe.

    .. admonition::
        Example

        The following code snippet showcases insertion at both ends and removal from both ends.

            >>> from linkedset import OrderedSet
            >>>
            >>> s = OrderedSet(["B", "C", "B"])
            >>> s.add_first("A")
            True
            >>> s.add_last("C")
            False
            >>> s.to_list()
            ['A', 'B', 'C']
            >>> s.remove_first()
            'A'
            >>> s.remove_last()
            'C'
            >>> s
            OrderedSet(['B'])
    """

    def __init__(
        self, elements: Iterable[_T] = (), comparer: EqualityComparer[_T] | None = None
    ) -> None:
        check_not_none(elements, "elements")
        if comparer is None:
            comparer = DefaultEqualityComparer()
        elif not isinstance(comparer, EqualityComparer):
            raise InvalidArgumentError(
                f"`comparer` should be an `EqualityComparer`. (got {type(comparer).__name__})"
            )

        self._comparer = comparer
        self._key = make_key_function(comparer)
        self._nodes: dict[Hashable, Node[_T]] = {}
        self._list: LinkedList[_T] = LinkedList()
        self._version = 0

        for element in elements:
            self.add_last(element)

    @property
    def comparer(self) -> EqualityComparer[_T]:
        """The equality strategy used for membership."""

        return self._comparer

    @property
    def is_read_only(self) -> bool:
        """Always ``False``: an :class:`OrderedSet` can always be modified."""

        return False

    @property
    def first(self) -> _T | None:
        """The element at the front, or ``None`` if the set is empty."""

        head = self._list.head
        return None if head is None else head.value

    @property
    def last(self) -> _T | None:
        """The element at the back, or ``None`` if the set is empty."""

        tail = self._list.tail
        return None if tail is None else tail.value

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, value: object) -> bool:
        if value is None:
            return False
        return self._key(value) in self._nodes

    def __iter__(self) -> Iterator[_T]:
        version = self._version
        node = self._list.head
        while node is not None:
            yield node.value
            self._check_not_mutated(version)
            node = node.next

    def __reversed__(self) -> Iterator[_T]:
        version = self._version
        node = self._list.tail
        while node is not None:
            yield node.value
            self._check_not_mutated(version)
            node = node.prev

    def _check_not_mutated(self, version: int) -> None:
        if self._version != version:
            raise RuntimeError("OrderedSet mutated during iteration")

    def add_first(self, value: _T) -> bool:
        """
        Inserts ``value`` at the front, unless it is already present.

        :param value: The element to insert. Must not be ``None``.
        :returns: Whether ``value`` was inserted. If ``False``, the set is left unchanged.
        """

        return self._insert(value, at_front=True)

    def add_last(self, value: _T) -> bool:
        """
        Inserts ``value`` at the back, unless it is already present.

        :param value: The element to insert. Must not be ``None``.
        :returns: Whether ``value`` was inserted. If ``False``, the set is left unchanged.
        """

        return self._insert(value, at_front=False)

    def add(self, value: _T) -> None:
        """Inserts ``value`` at the back, unless it is already present."""

        self.add_last(value)

    def _insert(self, value: _T, at_front: bool) -> bool:
        check_not_none(value, "value")

        key = self._key(value)
        if key in self._nodes:
            return False

        node = self._list.appendleft(value) if at_front else self._list.append(value)
        self._nodes[key] = node
        self._version += 1
        return True

    def remove(self, value: _T) -> bool:  # type: ignore[override]
        """
        Removes ``value`` if it is present.

        Unlike :meth:`set.remove`, this does not raise when ``value`` is absent.

        :param value: The element to remove. Must not be ``None``.
        :returns: Whether ``value`` was removed.
        """

        check_not_none(value, "value")

        node = self._nodes.pop(self._key(value), None)
        if node is None:
            return False

        self._list.unlink(node)
        self._version += 1
        return True

    def discard(self, value: _T) -> None:
        self.remove(value)

    def remove_first(self) -> _T | None:
        """Removes and returns the element at the front, or returns ``None`` if the set is empty."""

        return self._remove_node(self._list.head)

    def remove_last(self) -> _T | None:
        """Removes and returns the element at the back, or returns ``None`` if the set is empty."""

        return self._remove_node(self._list.tail)

    def _remove_node(self, node: Node[_T] | None) -> _T | None:
        if node is None:
            return None

        value = node.value
        del self._nodes[self._key(value)]
        self._list.unlink(node)
        self._version += 1
        return value

    def clear(self) -> None:
        self._nodes = {}
        self._list.clear()
        self._version += 1

    def to_list(self) -> list[_T]:
        """Returns a new list of the elements, from front to back."""

        return [node.value for node in self._list.nodes()]

    def copy_into(self, destination: MutableSequence[_T | None], start_offset: int = 0) -> None:
        """
        Writes the elements, from front to back, into ``destination``, starting at index
        ``start_offset``. The other entries of ``destination`` are left untouched.

        :param destination: A sequence with at least ``len(self)`` entries after ``start_offset``.
            It is never resized.
        :param start_offset: The index of ``destination`` receiving the first element. Defaults to
            ``0``.
        """

        check_destination(destination, start_offset, len(self))

        for i, node in enumerate(self._list.nodes(), start=start_offset):
            destination[i] = node.value

    def copy(self) -> OrderedSet[_T]:
        """Returns a shallow copy, with the same order and the same comparer."""

        return OrderedSet(self, comparer=self._comparer)

    __copy__ = copy

    def _from_iterable(self, elements: Iterable[_T]) -> OrderedSet[_T]:
        # Results and wrapped operands of the operators inherited from Set use the comparer of self.
        return OrderedSet(elements, comparer=self._comparer)

    def difference_update(self, elements: Iterable[_T]) -> None:
        """Removes all specified elements from the OrderedSet."""

        for element in elements:
            self.discard(element)

    def __add__(self, other: Iterable[_T]) -> OrderedSet[_T]:
        """
        Creates a new OrderedSet with the elements of self followed by the elements of other that
        are not already in self.
        """

        result = self.copy()
        for element in other:
            result.add_last(element)
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
