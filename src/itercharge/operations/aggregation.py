"""Sum and average of values projected out of a sequence."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from ..errors import InvalidArgumentError, require_callable

__all__ = ["average_by", "sum_by", "sum_by_double"]

T = TypeVar("T")


def sum_by(sequence: Iterable[T], selector: Callable[[T], int]) -> int:
    """Return the sum of ``selector(element)`` over the sequence.

    Example::

        sum_by([2, 4, 6], lambda n: n)             # 12
        sum_by(["hello", "world!"], len)           # 11

    Selected values must be ``int`` (``bool`` excluded); anything else raises
    :class:`~itercharge.errors.InvalidArgumentError` naming ``selector``. Use
    :func:`sum_by_double` for real numbers.
    """

    require_callable(selector, "selector")
    total = 0
    for element in sequence:
        value = selector(element)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                "selector", f"must return an int for sum_by, got {type(value).__name__}"
            )
        total += value
    return total


def sum_by_double(sequence: Iterable[T], selector: Callable[[T], float]) -> float:
    """Floating point variant of :func:`sum_by`; an empty sequence sums to ``0.0``."""

    require_callable(selector, "selector")
    total = 0.0
    for element in sequence:
        total += selector(element)
    return total


def average_by(sequence: Iterable[T], selector: Callable[[T], float]) -> float | None:
    """Return the arithmetic mean of ``selector(element)``.

    ``None`` is returned for an empty sequence instead of a numeric zero, so
    "no elements" can be told apart from "the average is 0.0".

    Example::

        average_by([1, 2, 3], float)               # 2.0
        average_by(["cat", "horse"], len)          # 4.0
        average_by([], float)                      # None
    """

    require_callable(selector, "selector")
    # Same accumulation order as sum_by_double so both agree bit for bit.
    total = 0.0
    length = 0
    for element in sequence:
        total += selector(element)
        length += 1

    if length == 0:
        return None
    return total / length
