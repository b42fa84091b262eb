"""
Shape combinators
=================

Add or drop elements at the ends of a sequence.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from .._types import AsyncIterableLike
from ..seq import AsyncSeq
from ..source import END, async_iterable, cursor


def tail[T](source: AsyncIterableLike[T]) -> AsyncSeq[T]:
    """Everything but the first element."""

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        await c.pull()
        async for element in c:
            yield element

    return AsyncSeq(run)


def initial[T](source: AsyncIterableLike[T]) -> AsyncSeq[T]:
    """
    Everything but the last element.

    Holds one element back: it is yielded only once a further pull proves
    it has a successor.
    """

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        held = await c.pull()
        if held is END:
            return
        async for element in c:
            yield held
            held = element

    return AsyncSeq(run)


def push[T](source: AsyncIterableLike[T], value: T) -> AsyncSeq[T]:
    """The whole source, then value."""

    async def run() -> AsyncIterator[T]:
        async for element in async_iterable(source):
            yield element
        yield value

    return AsyncSeq(run)


def push_fn[T](value: T) -> Callable[[AsyncIterableLike[T]], AsyncSeq[T]]:
    """Curried push."""
    return lambda source: push(source, value)


def unshift[T](source: AsyncIterableLike[T], value: T) -> AsyncSeq[T]:
    """value, then the whole source."""

    async def run() -> AsyncIterator[T]:
        yield value
        async for element in async_iterable(source):
            yield element

    return AsyncSeq(run)


def unshift_fn[T](value: T) -> Callable[[AsyncIterableLike[T]], AsyncSeq[T]]:
    """Curried unshift."""
    return lambda source: unshift(source, value)


__all__ = ("initial", "push", "push_fn", "tail", "unshift", "unshift_fn")
