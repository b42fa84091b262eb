"""
Cursor protocol
===============

The single "pull next element or signal end" operation.

Used directly by combinators that need explicit lookahead or lockstep
pulls (only, initial, equal, prefix_match, zip).
"""

from __future__ import annotations

import enum
import typing
from collections.abc import AsyncIterator

from .._types import AsyncIterableLike
from .adapter import async_iterator


class _End(enum.Enum):
    END = enum.auto()

    def __repr__(self) -> str:
        return "END"


# End-of-sequence marker returned by Cursor.pull()
END: typing.Final = _End.END

# Pulled = next element or END
type Pulled[T] = T | typing.Literal[_End.END]


class Cursor[T]:
    """
    Live pull handle over an async iterator.

    Owned by exactly one consumer at a time. Once END has been returned,
    every following pull returns END without touching the iterator again.
    """

    __slots__ = ("_iterator", "_done")

    def __init__(self, iterator: AsyncIterator[T], /) -> None:
        self._iterator = iterator
        self._done = False

    @property
    def done(self) -> bool:
        """True once END has been returned."""
        return self._done

    async def pull(self) -> Pulled[T]:
        """Next element, or END if the sequence is exhausted."""
        if self._done:
            return END
        try:
            return await anext(self._iterator)
        except StopAsyncIteration:
            self._done = True
            return END

    def __aiter__(self) -> Cursor[T]:
        return self

    async def __anext__(self) -> T:
        element = await self.pull()
        if element is END:
            raise StopAsyncIteration
        return element


def cursor[T](source: AsyncIterableLike[T]) -> Cursor[T]:
    """Adapt a sequence-like value and open a cursor on it."""
    return Cursor(async_iterator(source))


__all__ = ("END", "Cursor", "Pulled", "cursor")
