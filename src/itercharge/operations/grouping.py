"""Key based grouping into an insertion ordered mapping."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, TypeVar, overload

from ..errors import require_callable

__all__ = ["group_by"]

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@overload
def group_by(sequence: Iterable[T], key_selector: Callable[[T], K]) -> dict[K, list[T]]: ...


@overload
def group_by(
    sequence: Iterable[T],
    key_selector: Callable[[T], K],
    value_transform: Callable[[T], V],
) -> dict[K, list[V]]: ...


def group_by(sequence, key_selector, value_transform=None):
    """Group elements into lists keyed by ``key_selector(element)``.

    Keys keep the order in which they first occur; each list keeps input order.
    ``value_transform`` remaps the grouped elements and defaults to the element
    itself.

    Example::

        group_by([1, 2, 3, 97, 98, 99], lambda n: "small" if n < 10 else "large")
        # {"small": [1, 2, 3], "large": [97, 98, 99]}

        group_by(people, lambda p: "young" if p.age < 40 else "old",
                 value_transform=lambda p: p.name)
        # {"young": ["John", "Carl"], "old": ["Peter", "Sarah"]}
    """

    require_callable(key_selector, "key_selector")
    if value_transform is not None:
        require_callable(value_transform, "value_transform")

    groups: dict = {}
    for element in sequence:
        key = key_selector(element)
        value = element if value_transform is None else value_transform(element)
        bucket = groups.get(key)
        if bucket is None:
            groups[key] = [value]
        else:
            bucket.append(value)
    return groups
