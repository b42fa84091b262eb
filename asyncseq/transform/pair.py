"""Pair combinators

Walk two sequences in lockstep."""

from __future__ import annotations

from collections.abc import AsyncIterator

from .._types import AsyncIterableLike
from ..seq import AsyncSeq
from ..source import END, cursor

def zip[A, B](first: AsyncIterableLike[A], second: AsyncIterableLike[B]) -> AsyncSeq[tuple[A, B]]:
    """
    (a, b) pairs until either sequence runs out.

    Each step pulls first, then second. second is not pulled once first
    has ended.
    """

    async def run() -> AsyncIterator[tuple[A, B]]:
        a, b = cursor(first), cursor(second)
        while True:
            x = await a.pull()
            if x is END:
                return
            y = await b.pull()
            if y is END:
                return
            yield (x, y)

    return AsyncSeq(run)

__all__ = ("zip",)
