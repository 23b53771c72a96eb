"""
Type predicates used to validate subscribe and unsubscribe arguments.

These mirror the small helper set the dispatcher relies on: a callable
check for handlers, a numeric check for handler ids and a sequence check
for subscription buckets.
"""

import math
from typing import Any


def is_callable(subject: Any) -> bool:
    """Return True if subject can be invoked as a handler."""
    return callable(subject)


def is_number(subject: Any) -> bool:
    """
    Return True if subject is a usable number.

    ``bool`` is excluded even though it subclasses ``int``, and so is NaN,
    which never compares equal to anything.

    Args:
        subject: Value to check

    Returns:
        True for ints and non-NaN floats
    """
    if isinstance(subject, bool):
        return False
    if isinstance(subject, int):
        return True
    if isinstance(subject, float):
        return not math.isnan(subject)
    return False


def is_array_sequence(subject: Any) -> bool:
    """Return True if subject is a list or tuple."""
    return isinstance(subject, (list, tuple))


__all__ = [
    "is_array_sequence",
    "is_callable",
    "is_number",
]
