"""Positional, first and last element access with a fallback."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
from typing import Callable, Iterable, TypeVar

from ..errors import require_callable, require_non_negative_int

__all__ = [
    "element_at_or_else",
    "element_at_or_none",
    "first_or_else",
    "first_or_none",
    "last_or_else",
    "last_or_none",
]

T = TypeVar("T")

_MISSING = object()


def element_at_or_else(sequence: Iterable[T], index: int, fallback: Callable[[], T]) -> T:
    """Return the element at ``index``, or ``fallback()`` when it is out of range.

    A negative index is rejected with :class:`~itercharge.errors.InvalidArgumentError`
    rather than counted from the end.

    Example::

        element_at_or_else(["a", "b"], 2, lambda: "")   # ""
    """

    position = require_non_negative_int(index, "index")
    require_callable(fallback, "fallback")

    if isinstance(sequence, Sequence):
        if position < len(sequence):
            return sequence[position]
        return fallback()

    element = next(islice(sequence, position, None), _MISSING)
    if element is _MISSING:
        return fallback()
    return element  # type: ignore[return-value]


def element_at_or_none(sequence: Iterable[T], index: int) -> T | None:
    return element_at_or_else(sequence, index, lambda: None)


def first_or_else(sequence: Iterable[T], fallback: Callable[[], T]) -> T:
    """Return the first element, or ``fallback()`` for an empty sequence."""

    require_callable(fallback, "fallback")
    for element in sequence:
        return element
    return fallback()


def first_or_none(sequence: Iterable[T]) -> T | None:
    return first_or_else(sequence, lambda: None)


def last_or_else(sequence: Iterable[T], fallback: Callable[[], T]) -> T:
    """Return the last element, or ``fallback()`` for an empty sequence.

    Non-indexable iterables are drained to find their last element.
    """

    require_callable(fallback, "fallback")

    if isinstance(sequence, Sequence):
        if sequence:
            return sequence[-1]
        return fallback()

    last: object = _MISSING
    for last in sequence:
        pass
    if last is _MISSING:
        return fallback()
    return last  # type: ignore[return-value]


def last_or_none(sequence: Iterable[T]) -> T | None:
    return last_or_else(sequence, lambda: None)
