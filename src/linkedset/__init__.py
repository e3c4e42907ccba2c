"""
Ordered set container: a set of distinct elements whose iteration order is the order in which they
were inserted at its front or at its back.
"""

from ._comparer import DefaultEqualityComparer, EqualityComparer, KeyEqualityComparer
from ._errors import InvalidArgumentError, OutOfRangeError
from ._ordered_set import OrderedSet

__all__ = [
    "DefaultEqualityComparer",
    "EqualityComparer",
    "InvalidArgumentError",
    "KeyEqualityComparer",
    "OrderedSet",
    "OutOfRangeError",
]
