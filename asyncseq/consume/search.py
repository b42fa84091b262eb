"""
Search consumers
================

Pull sequentially and stop the instant the answer is known.
"""

from __future__ import annotations

import math
import typing
from collections.abc import Coroutine

from .._errors import InvalidIndexError
from .._helpers import invoke
from .._types import AsyncIterableLike, IndexedPredicate
from ..source import async_iterable


def _valid_index(i: object) -> bool:
    if isinstance(i, bool):
        return False
    if isinstance(i, int):
        return i >= 0
    if isinstance(i, float):
        return math.isfinite(i) and i.is_integer() and i >= 0
    return False


def index[T](
    source: AsyncIterableLike[T],
    i: int,
) -> Coroutine[typing.Any, typing.Any, T | None]:
    """
    Element at zero-based position i, or None if the sequence is shorter.

    Raises InvalidIndexError right away (before any pull) if i is not a
    non-negative integer. The source is left untouched in that case, so a
    pending source coroutine is never awaited and Python reports it as
    such; close it yourself if that matters.
    """
    if not _valid_index(i):
        raise InvalidIndexError(i)
    position = int(i)

    async def run() -> T | None:
        current = 0
        async for element in async_iterable(source):
            if current == position:
                return element
            current += 1
        return None

    return run()


async def find_index[T](
    source: AsyncIterableLike[T],
    predicate: IndexedPredicate[T],
) -> int | None:
    """Position of the first element matching predicate(element, index)."""
    i = 0
    async for element in async_iterable(source):
        if await invoke(predicate, element, i):
            return i
        i += 1
    return None


async def find[T](
    source: AsyncIterableLike[T],
    predicate: IndexedPredicate[T],
) -> T | None:
    """First element matching predicate(element, index), or None."""
    i = 0
    async for element in async_iterable(source):
        if await invoke(predicate, element, i):
            return element
        i += 1
    return None


async def index_of[T](source: AsyncIterableLike[T], value: T) -> int | None:
    """Position of the first element equal to value, or None."""
    return await find_index(source, lambda element, _: element == value)


async def contains[T](source: AsyncIterableLike[T], value: T) -> bool:
    """True if some element equals value."""
    return await index_of(source, value) is not None


__all__ = ("contains", "find", "find_index", "index", "index_of")
