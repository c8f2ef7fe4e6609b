"""Predicate based counting and filtering."""

from __future__ import annotations

import builtins
from typing import Callable, Iterable, TypeVar

from ..errors import require_callable

__all__ = ["count", "filter"]

T = TypeVar("T")


def count(sequence: Iterable[T], predicate: Callable[[T], bool] | None = None) -> int:
    """Return the number of elements matching ``predicate``.

    Without a predicate every element is counted::

        count([1, 2, 3, 13, 14, 15])                     # 6
        count([1, 2, 3, 13, 14, 15], lambda n: n > 9)    # 3
    """

    if predicate is None:
        return sum(1 for _ in sequence)

    require_callable(predicate, "predicate")
    matched = 0
    for element in sequence:
        if predicate(element):
            matched += 1
    return matched


def filter(sequence: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:  # noqa: A001
    """Return the elements satisfying ``predicate``, in order.

    Alias of the builtin :func:`filter` that returns a list.
    """

    require_callable(predicate, "predicate")
    return list(builtins.filter(predicate, sequence))
