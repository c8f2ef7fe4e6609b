"""Batching of sequences into fixed-size lists."""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from ..errors import require_positive_int

__all__ = ["chunked"]

T = TypeVar("T")


def chunked(sequence: Iterable[T], chunk_size: int) -> Iterator[list[T]]:
    """Return an iterator over consecutive chunks of ``chunk_size`` items.

    Every chunk is a new list. The final chunk holds the remainder and is only
    shorter than ``chunk_size`` when the length is not a multiple of it. An empty
    input produces no chunks at all.

    ``chunk_size`` is checked immediately, before the first chunk is requested.
    """

    size = require_positive_int(chunk_size, "chunk_size")
    return _iter_chunks(sequence, size)


def _iter_chunks(sequence: Iterable[T], size: int) -> Iterator[list[T]]:
    bucket: list[T] = []
    for item in sequence:
        bucket.append(item)
        if len(bucket) == size:
            yield bucket
            bucket = []

    if bucket:
        yield bucket
