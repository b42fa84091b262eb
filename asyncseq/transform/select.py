"""Select combinators

Keep or remove elements.

NOTE: exclude/remove drop EVERY match, exclude_first/remove_first drop
only the first one and forward later matches untouched."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._helpers import invoke, is_null, negate
from .._types import AsyncIterableLike, IndexedPredicate
from ..seq import AsyncSeq
from ..source import async_iterable, cursor


def filter[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """Elements for which predicate(element, index) holds."""

    async def run() -> AsyncIterator[T]:
        i = 0
        async for element in async_iterable(source):
            if await invoke(predicate, element, i):
                yield element
            i += 1

    return AsyncSeq(run)


def exclude[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """Elements for which predicate does NOT hold. Dual of filter."""
    return filter(source, negate(predicate))


def exclude_null[T](source: AsyncIterableLike[T | None]) -> AsyncSeq[T]:
    """Every element except None."""
    return filter(source, lambda element, _: not is_null(element))  # type: ignore[return-value]


def exclude_first[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> AsyncSeq[T]:
    """Skip the first element matching predicate, exactly once."""

    async def run() -> AsyncIterator[T]:
        c = cursor(source)
        i = 0
        async for element in c:
            if await invoke(predicate, element, i):
                break
            yield element
            i += 1
        async for element in c:
            yield element

    return AsyncSeq(run)


def remove[T](source: AsyncIterableLike[T], value: T) -> AsyncSeq[T]:
    """Every element except those equal to value."""
    return exclude(source, lambda element, _: element == value)


def remove_first[T](source: AsyncIterableLike[T], value: T) -> AsyncSeq[T]:
    """Skip the first element equal to value, exactly once."""
    return exclude_first(source, lambda element, _: element == value)


__all__ = ("exclude", "exclude_first", "exclude_null", "filter", "remove", "remove_first")
