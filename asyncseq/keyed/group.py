"""
Keyed consumers
===============

Group a sequence into a dict by a key computed per element.

Keys keep first-encounter order (dict insertion order), group members
keep sequence order.
"""

from __future__ import annotations

from collections.abc import Hashable

from .._helpers import invoke
from .._types import AsyncIterableLike, IndexedSelector
from ..source import async_iterable


async def map_key_by[T, K: Hashable, V](
    source: AsyncIterableLike[T],
    f: IndexedSelector[T, tuple[K, V]],
) -> dict[K, list[V]]:
    """Group values by key, where f(element, index) returns (key, value)."""
    groups: dict[K, list[V]] = {}
    i = 0
    async for element in async_iterable(source):
        key, value = await invoke(f, element, i)
        groups.setdefault(key, []).append(value)
        i += 1
    return groups


async def map_key_first_by[T, K: Hashable, V](
    source: AsyncIterableLike[T],
    f: IndexedSelector[T, tuple[K, V]],
) -> dict[K, V]:
    """First value per key, where f(element, index) returns (key, value)."""
    result: dict[K, V] = {}
    i = 0
    async for element in async_iterable(source):
        key, value = await invoke(f, element, i)
        result.setdefault(key, value)
        i += 1
    return result


async def map_key_last_by[T, K: Hashable, V](
    source: AsyncIterableLike[T],
    f: IndexedSelector[T, tuple[K, V]],
) -> dict[K, V]:
    """Last value per key, where f(element, index) returns (key, value)."""
    result: dict[K, V] = {}
    i = 0
    async for element in async_iterable(source):
        key, value = await invoke(f, element, i)
        result[key] = value
        i += 1
    return result


def _keyed[T, K](f: IndexedSelector[T, K]) -> IndexedSelector[T, tuple[K, T]]:
    async def pair(element: T, index: int) -> tuple[K, T]:
        return await invoke(f, element, index), element
    return pair


async def key_by[T, K: Hashable](source: AsyncIterableLike[T], f: IndexedSelector[T, K]) -> dict[K, list[T]]:
    """Group elements by f(element, index)."""
    return await map_key_by(source, _keyed(f))


async def key_first_by[T, K: Hashable](source: AsyncIterableLike[T], f: IndexedSelector[T, K]) -> dict[K, T]:
    """First element per key."""
    return await map_key_first_by(source, _keyed(f))


async def key_last_by[T, K: Hashable](source: AsyncIterableLike[T], f: IndexedSelector[T, K]) -> dict[K, T]:
    """Last element per key."""
    return await map_key_last_by(source, _keyed(f))


__all__ = (
    "key_by",
    "key_first_by",
    "key_last_by",
    "map_key_by",
    "map_key_first_by",
    "map_key_last_by",
)
