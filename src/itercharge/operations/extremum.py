"""Minimum and maximum selection with a caller supplied comparator.

Both functions scan the sequence once and return what a *stable* sort with
``functools.cmp_to_key(comparator)`` would put first (``min_by``) or last
(``max_by``). For elements that compare equal this means:

* ``min_by`` returns the earliest of the minimal elements;
* ``max_by`` returns the latest of the maximal elements.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from ..errors import require_callable

__all__ = ["max_by", "min_by"]

T = TypeVar("T")

Comparator = Callable[[T, T], int]

_MISSING: Any = object()


def min_by(sequence: Iterable[T], comparator: Comparator[T]) -> T | None:
    """Return the smallest element according to ``comparator``, ``None`` if empty.

    Example::

        min_by([1, 0, 2], lambda a, b: a - b)                 # 0
        min_by(people, lambda a, b: a.age - b.age)            # the youngest person
    """

    require_callable(comparator, "comparator")
    iterator = iter(sequence)
    best = next(iterator, _MISSING)
    if best is _MISSING:
        return None
    for candidate in iterator:
        if comparator(candidate, best) < 0:
            best = candidate
    return best


def max_by(sequence: Iterable[T], comparator: Comparator[T]) -> T | None:
    """Return the largest element according to ``comparator``, ``None`` if empty.

    Example::

        max_by([90, 10, 20, 30], lambda a, b: a - b)          # 90
    """

    require_callable(comparator, "comparator")
    iterator = iter(sequence)
    best = next(iterator, _MISSING)
    if best is _MISSING:
        return None
    for candidate in iterator:
        if comparator(candidate, best) >= 0:
            best = candidate
    return best
