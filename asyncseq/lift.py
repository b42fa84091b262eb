"""
Result bridge
=============

Lift sequence operations into kungfu's LazyCoroResult, so asyncseq
pipelines plug into Result-based combinator code.

Only asyncseq's own errors (SequenceError) become Error values. Failures
raised by a pull or a user callback still propagate as exceptions.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from ._errors import SequenceError
from ._logging import get_logger
from ._types import AsyncIterableLike
from .source import async_iterable

log = get_logger(__name__)


def catching[T](
    consume: Callable[..., Awaitable[T]],
    *args: typing.Any,
    **kwargs: typing.Any,
) -> LazyCoroResult[T, SequenceError]:
    """
    Run a terminal operation lazily, SequenceError -> Error.

    Example:
        from asyncseq import fold1, lift

        result = await lift.catching(fold1, rows, merge)
        match result:
            case Ok(merged): ...
            case Error(EmptySequenceError()): ...

    NOTE: Nothing runs until the LazyCoroResult is awaited.
    """
    async def run() -> Result[T, SequenceError]:
        try:
            return Ok(await consume(*args, **kwargs))
        except SequenceError as exc:
            log.debug("lift.caught", operation=getattr(consume, "__name__", repr(consume)), error=str(exc))
            return Error(exc)

    return LazyCoroResult(run)


def traverse[A, T, E](
    source: AsyncIterableLike[A],
    handler: Callable[[A], LazyCoroResult[T, E]],
) -> LazyCoroResult[list[T], E]:
    """
    Monadic map over an async sequence. Sequential, pull-driven.

    Stops pulling at the first Error and returns it.
    """
    async def run() -> Result[list[T], E]:
        values: list[T] = []
        async for item in async_iterable(source):
            match await handler(item)():
                case Ok(value):
                    values.append(value)
                case Error(err):
                    return Error(err)
        return Ok(values)

    return LazyCoroResult(run)


__all__ = ("catching", "traverse")
