"""
Collecting consumers
====================

Drive a sequence (to the end, or as far as the answer needs) and return
a plain value.
"""

from __future__ import annotations

from .._types import AsyncIterableLike
from ..source import END, async_iterable, cursor


async def to_array[T](source: AsyncIterableLike[T]) -> list[T]:
    """Collect every element into a list, in order."""
    return [element async for element in async_iterable(source)]


to_list = to_array


async def to_set[T](source: AsyncIterableLike[T]) -> set[T]:
    """Collect every element into a set."""
    return {element async for element in async_iterable(source)}


async def first[T](source: AsyncIterableLike[T]) -> T | None:
    """First element or None. Pulls once."""
    element = await cursor(source).pull()
    return None if element is END else element


async def last[T](source: AsyncIterableLike[T]) -> T | None:
    """Last element or None. Pulls to exhaustion, keeps only the latest."""
    result: T | None = None
    async for element in async_iterable(source):
        result = element
    return result


async def only[T](source: AsyncIterableLike[T]) -> T | None:
    """
    The sole element, or None if there are zero or several.

    Never pulls a third time.
    """
    c = cursor(source)
    element = await c.pull()
    if element is END:
        return None
    if await c.pull() is END:
        return element
    return None


async def empty[T](source: AsyncIterableLike[T]) -> bool:
    """True if the sequence has no elements. Pulls once."""
    return await cursor(source).pull() is END


async def not_empty[T](source: AsyncIterableLike[T]) -> bool:
    """True if the sequence has at least one element. Pulls once."""
    return await cursor(source).pull() is not END


__all__ = (
    "empty",
    "first",
    "last",
    "not_empty",
    "only",
    "to_array",
    "to_list",
    "to_set",
)
