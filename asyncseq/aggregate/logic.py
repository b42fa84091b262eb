"""
Boolean reducers
================

Built on find_index, so all of them stop pulling at the first decisive element.
"""

from __future__ import annotations

from .._helpers import negate
from .._types import AsyncIterableLike, IndexedPredicate
from ..consume import find_index


async def and_(source: AsyncIterableLike[object]) -> bool:
    """True if no element is falsy. True for an empty sequence."""
    return await find_index(source, lambda element, _: not element) is None


async def or_(source: AsyncIterableLike[object]) -> bool:
    """True if some element is truthy. False for an empty sequence."""
    return await find_index(source, lambda element, _: bool(element)) is not None


async def any[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> bool:
    """True if some element matches predicate(element, index)."""
    return await find_index(source, predicate) is not None


async def all[T](source: AsyncIterableLike[T], predicate: IndexedPredicate[T]) -> bool:
    """True if no element fails predicate(element, index)."""
    return not await any(source, negate(predicate))


__all__ = ("all", "and_", "any", "or_")
