class InvalidArgumentError(ValueError):
    """A required argument is missing (``None``) or is not of an acceptable kind."""

    pass


class OutOfRangeError(IndexError):
    """An offset or a destination size does not fit the contents of the container."""

    pass
