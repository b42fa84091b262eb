"""
Mapping combinators
===================

map and the running folds (scan / scan1).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._helpers import invoke
from .._types import AsyncIterableLike, IndexedSelector, Reducer
from ..seq import AsyncSeq
from ..source import END, async_iterable, cursor


def map[T, U](source: AsyncIterableLike[T], f: IndexedSelector[T, U]) -> AsyncSeq[U]:
    """f(element, index) for every element, awaited before it is yielded."""

    async def run() -> AsyncIterator[U]:
        i = 0
        async for element in async_iterable(source):
            yield await invoke(f, element, i)
            i += 1

    return AsyncSeq(run)


def scan[A, T](source: AsyncIterableLike[T], f: Reducer[A, T], initial: A) -> AsyncSeq[A]:
    """
    Like fold, but yields every intermediate accumulator.

    initial itself is not yielded: the output has one value per element.
    """

    async def run() -> AsyncIterator[A]:
        acc = initial
        i = 0
        async for element in async_iterable(source):
            acc = await invoke(f, acc, element, i)
            yield acc
            i += 1

    return AsyncSeq(run)


def scan1[T](source: AsyncIterableLike[T], f: Reducer[T, T]) -> AsyncSeq[T]:
    """
    Like fold1, but yields every intermediate accumulator.

    The first element is yielded as-is, index counting starts at 1 for the
    second element. An empty source yields nothing.
    """

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        acc = await c.pull()
        if acc is END:
            return
        yield acc
        i = 1
        async for element in c:
            acc = await invoke(f, acc, element, i)
            yield acc
            i += 1

    return AsyncSeq(run)


__all__ = ("map", "scan", "scan1")
