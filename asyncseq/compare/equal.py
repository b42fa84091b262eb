"""
Equality comparators
====================

Pull two sequences in lockstep: every step pulls A, then B, then compares.
No pull happens once the answer is known.
"""

from __future__ import annotations

from .._helpers import default_equal, invoke
from .._types import AsyncIterableLike, Equality
from ..source import END, cursor


async def equal[A, B](
    a: AsyncIterableLike[A],
    b: AsyncIterableLike[B],
    elements_equal: Equality[A, B] = default_equal,
) -> bool:
    """
    True if both sequences have the same length and pairwise-equal elements.

    False the instant a pair differs or one sequence ends before the other.
    """
    ca, cb = cursor(a), cursor(b)
    while True:
        x = await ca.pull()
        y = await cb.pull()
        if x is END or y is END:
            return x is END and y is END
        if not await invoke(elements_equal, x, y):
            return False


async def not_equal[A, B](
    a: AsyncIterableLike[A],
    b: AsyncIterableLike[B],
    elements_equal: Equality[A, B] = default_equal,
) -> bool:
    """Negation of equal."""
    return not await equal(a, b, elements_equal)


async def prefix_match[A, B](
    a: AsyncIterableLike[A],
    prefix: AsyncIterableLike[B],
    elements_equal: Equality[A, B] = default_equal,
) -> bool:
    """
    True if prefix's elements match a's elements pairwise, up to prefix's length.

    An empty prefix always matches. a running out first means no match.
    """
    ca, cb = cursor(a), cursor(prefix)
    while True:
        x = await ca.pull()
        y = await cb.pull()
        if y is END:
            return True
        if x is END:
            return False
        if not await invoke(elements_equal, x, y):
            return False


__all__ = ("equal", "not_equal", "prefix_match")
