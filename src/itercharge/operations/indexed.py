"""Iteration with a running index."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from ..errors import require_callable

__all__ = ["for_each_indexed"]

T = TypeVar("T")


def for_each_indexed(sequence: Iterable[T], action: Callable[[int, T], object]) -> None:
    """Call ``action(index, element)`` for every element in iteration order.

    The index starts at 0. Single-pass iterators are consumed exactly once.
    """

    require_callable(action, "action")
    for index, element in enumerate(sequence):
        action(index, element)
