"""
Fold consumers
==============

Thread an accumulator through every element.
"""

from __future__ import annotations

from .._errors import EmptySequenceError
from .._helpers import invoke
from .._types import AsyncIterableLike, Reducer
from ..source import END, cursor


async def fold[A, T](
    source: AsyncIterableLike[T],
    f: Reducer[A, T],
    initial: A,
) -> A:
    """
    Left fold: acc = f(acc, element, index) for every element.

    Returns initial unchanged for an empty sequence.
    """
    acc = initial
    i = 0
    async for element in cursor(source):
        acc = await invoke(f, acc, element, i)
        i += 1
    return acc


async def fold1[T](source: AsyncIterableLike[T], f: Reducer[T, T]) -> T:
    """
    Left fold seeded with the first element.

    The index passed to f starts at 1 (the second element).
    Raises EmptySequenceError if the sequence has no elements.
    """
    c = cursor(source)
    acc = await c.pull()
    if acc is END:
        raise EmptySequenceError("fold1")
    i = 1
    async for element in c:
        acc = await invoke(f, acc, element, i)
        i += 1
    return acc


__all__ = ("fold", "fold1")
