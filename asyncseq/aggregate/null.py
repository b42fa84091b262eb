from __future__ import annotations

from .._helpers import is_null
from .._types import AsyncIterableLike
from ..source import async_iterable


async def none_null[T](source: AsyncIterableLike[T | None]) -> list[T] | None:
    """All elements as a list, or None (and stop pulling) at the first None element."""
    result: list[T] = []
    async for element in async_iterable(source):
        if is_null(element):
            return None
        result.append(element)
    return result


__all__ = ("none_null",)
