from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

_T = TypeVar("_T")


class EqualityComparer(ABC, Generic[_T]):
    """
    Abstract base class for equality strategies. An equality strategy decides when two elements are
    considered to be the same element of an :class:`~linkedset.OrderedSet`.

    Implementations must keep :meth:`hash` consistent with :meth:`equals`: whenever
    ``equals(a, b)`` is ``True``, ``hash(a) == hash(b)`` must hold.
    """

    @abstractmethod
    def equals(self, a: _T, b: _T) -> bool:
        """Returns whether ``a`` and ``b`` are the same element."""

    @abstractmethod
    def hash(self, value: _T) -> int:
        """Returns a hash of ``value`` that is consistent with :meth:`equals`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultEqualityComparer(EqualityComparer[Hashable]):
    """:class:`EqualityComparer` relying on the natural ``==`` and ``hash`` of the elements."""

    def equals(self, a: Hashable, b: Hashable) -> bool:
        return a == b

    def hash(self, value: Hashable) -> int:
        return hash(value)


class KeyEqualityComparer(EqualityComparer[_T]):
    """
    :class:`EqualityComparer` considering two elements equal when their keys are equal.

    :param key: Function mapping each element to a hashable key, e.g. ``str.casefold``.
    """

    def __init__(self, key: Callable[[_T], Hashable]):
        self.key = key

    def equals(self, a: _T, b: _T) -> bool:
        return self.key(a) == self.key(b)

    def hash(self, value: _T) -> int:
        return hash(self.key(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class _ComparerKey(Generic[_T]):
    """Mapping key delegating equality and hashing of ``value`` to ``comparer``."""

    __slots__ = ("value", "comparer", "_hash")

    def __init__(self, value: _T, comparer: EqualityComparer[_T]):
        self.value = value
        self.comparer = comparer
        self._hash = comparer.hash(value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ComparerKey):
            return NotImplemented
        return self.comparer.equals(self.value, other.value)


def make_key_function(comparer: EqualityComparer | None) -> Callable[[object], Hashable]:
    """
    Returns the function turning an element into its key in the membership mapping of a container
    using ``comparer``.

    Elements are their own keys under the default equality, so that no wrapper is allocated.
    """

    if comparer is None or type(comparer) is DefaultEqualityComparer:
        return _identity

    def to_key(value: object) -> Hashable:
        return _ComparerKey(value, comparer)

    return to_key


def _identity(value: object) -> Hashable:
    return value  # type: ignore[return-value]
