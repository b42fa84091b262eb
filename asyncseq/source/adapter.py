"""
Sequence adapter
================

Normalizes every accepted sequence-like shape into one canonical
pull-based sequence (AsyncSeq).

Accepted shapes form a closed variant:
- NATIVE      - async iterable, forwarded element by element
- COLLECTION  - sync iterable of values and/or awaitables, walked in place
- PENDING     - awaitable resolving to one of the above, awaited once
"""

from __future__ import annotations

import enum
import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable

from .._helpers import resolve
from .._logging import get_logger
from .._types import AsyncIterableLike

if typing.TYPE_CHECKING:
    from ..seq import AsyncSeq

log = get_logger(__name__)


class SourceKind(enum.Enum):
    """Shape of a sequence-like value."""

    NATIVE = "native"
    COLLECTION = "collection"
    PENDING = "pending"


def classify(value: object) -> SourceKind:
    """
    Tell which shape a sequence-like value has.

    Async iterables win over sync iterables, sync iterables win over
    awaitables. Anything else is not a sequence.
    """
    if isinstance(value, AsyncIterable):
        return SourceKind.NATIVE
    if isinstance(value, Iterable):
        return SourceKind.COLLECTION
    if inspect.isawaitable(value):
        return SourceKind.PENDING
    raise TypeError(f"Not a sequence-like value: {type(value).__name__}")


def is_async_iterable(value: object) -> bool:
    """True if value is a native async sequence."""
    return isinstance(value, AsyncIterable)


async def _walk[T](source: AsyncIterableLike[T]) -> AsyncIterator[T]:
    kind = classify(source)
    pending = kind is SourceKind.PENDING
    if pending:
        source = await typing.cast(typing.Awaitable[typing.Any], source)
        kind = classify(source)
        if kind is SourceKind.PENDING:
            raise TypeError("Pending value resolved to another pending value, not a sequence")

    log.debug("sequence.resolved", kind=kind.value, pending=pending)

    if kind is SourceKind.NATIVE:
        async for element in typing.cast(AsyncIterable[T], source):
            yield element
    else:
        # Awaitable elements are awaited as their position is reached, one at a time
        for element in typing.cast(Iterable[typing.Any], source):
            yield await resolve(element)


def async_iterable[T](source: AsyncIterableLike[T]) -> AsyncSeq[T]:
    """
    Normalize any sequence-like value into an AsyncSeq.

    Nothing is awaited or iterated until the first pull. An AsyncSeq is
    already canonical and is returned unchanged.
    """
    from ..seq import AsyncSeq

    if isinstance(source, AsyncSeq):
        return typing.cast("AsyncSeq[T]", source)
    return AsyncSeq(lambda: _walk(source))


def async_iterator[T](source: AsyncIterableLike[T]) -> AsyncIterator[T]:
    """Cursor (async iterator) over a sequence-like value."""
    return aiter(async_iterable(source))


__all__ = (
    "SourceKind",
    "async_iterable",
    "async_iterator",
    "classify",
    "is_async_iterable",
)
