"""
Window combinators
==================

Take or drop a leading run of elements, by count or by predicate.

None of these pull past the last element they need: take(s, n) stops
after the n-th pull, take(s, 0) never pulls at all.
"""

from __future__ import annotations

import operator
from collections.abc import AsyncIterator

from .._helpers import invoke, negate
from .._types import AsyncIterableLike, IndexedPredicate
from ..seq import AsyncSeq
from ..source import END, async_iterable, cursor


def take[T](source: AsyncIterableLike[T], count: int) -> AsyncSeq[T]:
    """At most the first count elements."""
    count = operator.index(count)

    async def run() -> AsyncIterator[T]:
        if count <= 0:
            return
        taken = 0
        async for element in async_iterable(source):
            yield element
            taken += 1
            if taken >= count:
                return

    return AsyncSeq(run)


def drop[T](source: AsyncIterableLike[T], count: int) -> AsyncSeq[T]:
    """Everything after the first count elements."""
    count = operator.index(count)

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        for _ in range(count):
            if await c.pull() is END:
                return
        async for element in c:
            yield element

    return AsyncSeq(run)


def slice[T](source: AsyncIterableLike[T], start: int = 0, end: int | None = None) -> AsyncSeq[T]:
    """
    Elements with index in [start, end).

    end=None means "to the end of the sequence".
    """

    async def run() -> AsyncIterator[T]:
        first = max(start, 0)
        if end is not None and end <= first:
            return
        i = 0
        async for element in async_iterable(source):
            if i >= first:
                yield element
            i += 1
            if end is not None and i >= end:
                return

    return AsyncSeq(run)


def take_while[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """
    Leading run of elements for which predicate(element, index) holds.

    Stops for good at the first failure, later matches are never yielded.
    """

    async def run() -> AsyncIterator[T]:
        i = 0
        async for element in async_iterable(source):
            if not await invoke(predicate, element, i):
                return
            yield element
            i += 1

    return AsyncSeq(run)


def take_until[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """Leading run of elements before the first one matching predicate."""
    return take_while(source, negate(predicate))


def drop_while[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """
    Skip the leading run for which predicate holds, forward the rest.

    Everything from the first failing element on is forwarded, including
    later elements that would have matched.
    """

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        i = 0
        async for element in c:
            if not await invoke(predicate, element, i):
                yield element
                break
            i += 1
        async for element in c:
            yield element

    return AsyncSeq(run)


def drop_until[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """Skip everything before the first element matching predicate."""
    return drop_while(source, negate(predicate))


__all__ = ("drop", "drop_until", "drop_while", "slice", "take", "take_until", "take_while")
