"""
Extrema reducers
================

Running extremal element with a strict comparison, so on ties the
first occurrence wins.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import default_compare, invoke
from .._types import AsyncIterableLike, Comparator, IndexedSelector
from ..source import END, cursor


async def _extreme[T](
    source: AsyncIterableLike[T],
    compare: Comparator[T],
    better: Callable[[int], bool],
) -> T | None:
    c = cursor(source)
    best = await c.pull()
    if best is END:
        return None
    async for element in c:
        if better(await invoke(compare, element, best)):
            best = element
    return best


async def _extreme_by[T](
    source: AsyncIterableLike[T],
    select: IndexedSelector[T, typing.Any],
    better: Callable[[typing.Any, typing.Any], bool],
) -> T | None:
    found = False
    best: T | None = None
    best_key: typing.Any = None
    i = 0
    async for element in cursor(source):
        key = await invoke(select, element, i)
        if not found or better(key, best_key):
            found, best, best_key = True, element, key
        i += 1
    return best


async def maximum[T](source: AsyncIterableLike[T], compare: Comparator[T] = default_compare) -> T | None:
    """Greatest element under compare, first one on ties. None if empty."""
    return await _extreme(source, compare, lambda order: order > 0)


async def minimum[T](source: AsyncIterableLike[T], compare: Comparator[T] = default_compare) -> T | None:
    """Least element under compare, first one on ties. None if empty."""
    return await _extreme(source, compare, lambda order: order < 0)


async def maximum_by[T](source: AsyncIterableLike[T], select: IndexedSelector[T, typing.Any]) -> T | None:
    """Element with the greatest select(element, index), first one on ties."""
    return await _extreme_by(source, select, lambda key, best: key > best)


async def minimum_by[T](source: AsyncIterableLike[T], select: IndexedSelector[T, typing.Any]) -> T | None:
    """Element with the least select(element, index), first one on ties."""
    return await _extreme_by(source, select, lambda key, best: key < best)


__all__ = ("maximum", "maximum_by", "minimum", "minimum_by")
