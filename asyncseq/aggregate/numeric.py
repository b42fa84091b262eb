"""
Numeric reducers
================

fold specialized to arithmetic identities.
"""

from __future__ import annotations

import typing

from .._types import AsyncIterableLike
from ..consume import fold


async def sum[N](source: AsyncIterableLike[N]) -> N | int:
    """Sum of all elements, 0 for an empty sequence."""
    return await fold(source, lambda acc, element, _: acc + element, typing.cast(N | int, 0))


async def product[N](source: AsyncIterableLike[N]) -> N | int:
    """Product of all elements, 1 for an empty sequence."""
    return await fold(source, lambda acc, element, _: acc * element, typing.cast(N | int, 1))


async def average[N](source: AsyncIterableLike[N]) -> N | float | None:
    """
    Arithmetic mean, or None for an empty sequence.

    Running (sum, count) pair; the division only happens when count > 0.
    """
    total, count = await fold(
        source,
        lambda acc, element, _: (acc[0] + element, acc[1] + 1),
        typing.cast(tuple[typing.Any, int], (0, 0)),
    )
    if count == 0:
        return None
    return total / count


__all__ = ("average", "product", "sum")
