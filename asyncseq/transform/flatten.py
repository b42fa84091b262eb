"""
Flatten combinators
===================

Concatenate sequences of sequences, one inner sequence at a time.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from .._types import AsyncIterableLike, IndexedSelector
from ..seq import AsyncSeq
from ..source import async_iterable


def concat[T](sources: AsyncIterableLike[AsyncIterableLike[T]]) -> AsyncSeq[T]:
    """
    Elements of every inner sequence, in order.

    Each inner sequence is exhausted before the next one is requested
    from the outer sequence. Empty inner sequences contribute nothing.
    """

    async def run() -> AsyncIterator[T]:
        async for inner in async_iterable(sources):
            async for element in async_iterable(inner):
                yield element

    return AsyncSeq(run)


def concat_map[T, U](
    source: AsyncIterableLike[T],
    f: IndexedSelector[T, AsyncIterableLike[U]],
) -> AsyncSeq[U]:
    """Map each element to a sub-sequence and flatten. concat(map(source, f))."""
    from .mapping import map
    return concat(map(source, f))


def prepend[T](before: AsyncIterableLike[T]) -> Callable[[AsyncIterableLike[T]], AsyncSeq[T]]:
    """Curried: returns fn that puts before in front of its argument."""
    return lambda source: concat([before, source])


def append[T](after: AsyncIterableLike[T]) -> Callable[[AsyncIterableLike[T]], AsyncSeq[T]]:
    """Curried: returns fn that puts after behind its argument."""
    return lambda source: concat([source, after])


__all__ = ("append", "concat", "concat_map", "prepend")
