"""Method-style access to the sequence operations.

``Seq`` wraps any iterable so the operations read as method calls::

    Seq([1, 2, 3, 97, 98, 99]).group_by(lambda n: "small" if n < 10 else "large")
    Text("hello").chunked(2)
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .errors import InvalidArgumentError
from .operations import access, aggregation, chunk, counting, extremum, grouping, indexed, strings

__all__ = ["Seq", "Text"]

T = TypeVar("T")


class Seq(Generic[T]):
    """Read-only wrapper exposing the sequence operations as methods.

    The wrapped iterable is copied into a list once, so single-pass iterators can
    be wrapped and queried repeatedly. This is deliberately not a ``list``
    subclass: ``count`` takes a predicate here, not a value.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Seq):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def to_list(self) -> list[T]:
        return list(self._items)

    def sum_by(self, selector: Callable[[T], int]) -> int:
        return aggregation.sum_by(self._items, selector)

    def sum_by_double(self, selector: Callable[[T], float]) -> float:
        return aggregation.sum_by_double(self._items, selector)

    def average_by(self, selector: Callable[[T], float]) -> float | None:
        return aggregation.average_by(self._items, selector)

    def chunked(self, chunk_size: int) -> Iterator[list[T]]:
        return chunk.chunked(self._items, chunk_size)

    def count(self, predicate: Callable[[T], bool] | None = None) -> int:
        return counting.count(self._items, predicate)

    def filter(self, predicate: Callable[[T], bool]) -> Seq[T]:
        return Seq(counting.filter(self._items, predicate))

    def for_each_indexed(self, action: Callable[[int, T], object]) -> None:
        indexed.for_each_indexed(self._items, action)

    def element_at_or_else(self, index: int, fallback: Callable[[], T]) -> T:
        return access.element_at_or_else(self._items, index, fallback)

    def element_at_or_none(self, index: int) -> T | None:
        return access.element_at_or_none(self._items, index)

    def first_or_else(self, fallback: Callable[[], T]) -> T:
        return access.first_or_else(self._items, fallback)

    def first_or_none(self) -> T | None:
        return access.first_or_none(self._items)

    def last_or_else(self, fallback: Callable[[], T]) -> T:
        return access.last_or_else(self._items, fallback)

    def last_or_none(self) -> T | None:
        return access.last_or_none(self._items)

    def group_by(
        self,
        key_selector: Callable[[T], Any],
        value_transform: Callable[[T], Any] | None = None,
    ) -> dict[Any, list[Any]]:
        if value_transform is None:
            return grouping.group_by(self._items, key_selector)
        return grouping.group_by(self._items, key_selector, value_transform)

    def min_by(self, comparator: Callable[[T, T], int]) -> T | None:
        return extremum.min_by(self._items, comparator)

    def max_by(self, comparator: Callable[[T, T], int]) -> T | None:
        return extremum.max_by(self._items, comparator)


class Text(Seq[str]):
    """A :class:`Seq` over the characters of a string, plus string helpers."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise InvalidArgumentError("text", f"must be a string, got {type(text).__name__}")
        super().__init__(text)
        self._text = text

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Text({self._text!r})"

    def repeat(self, times: int, separator: str = "") -> str:
        return strings.repeat(self._text, times, separator)

    def reverse(self) -> str:
        return strings.reverse(self._text)

    def to_list(self) -> list[str]:
        return strings.to_list(self._text)
