"""Exceptions raised by walkpath."""

import numbers


class InvalidArgument(ValueError):
    """A constructor or setter received a value outside its valid domain."""


class OutOfRange(IndexError):
    """A walker index does not exist in the simulation."""


def require_positive_count(name: str, value) -> int:
    """Return ``value`` as an int, or raise if it is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return int(value)
