from collections.abc import Sized

from ._errors import InvalidArgumentError, OutOfRangeError


def check_not_none(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"`{name}` should not be `None`.")


def check_destination(destination: Sized | None, start_offset: int, n_elements: int) -> None:
    """
    Checks that ``n_elements`` elements can be written into ``destination`` starting at index
    ``start_offset``.

    :param destination: The fixed-size sequence to write into.
    :param start_offset: The index of ``destination`` at which the first element is written.
    :param n_elements: The number of elements to write.
    """

    check_not_none(destination, "destination")

    size = len(destination)
    if start_offset < 0:
        raise OutOfRangeError(f"`start_offset` should be non-negative. (got {start_offset})")
    if start_offset > size:
        raise OutOfRangeError(
            f"`start_offset` should be at most the length of `destination` ({size}). (got "
            f"{start_offset})"
        )
    if size - start_offset < n_elements:
        raise OutOfRangeError(
            f"`destination` has room for {size - start_offset} elements after `start_offset`, but "
            f"{n_elements} elements should be copied."
        )
