"""Internal helpers for asyncseq.

Common functions used across multiple modules.
These are not part of the public API but are handy when writing custom combinators."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from ._types import IndexedPredicate, MaybeAwaitable

async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it as-is."""
    if inspect.isawaitable(value):
        return await value
    return typing.cast(T, value)

async def invoke[R](fn: Callable[..., MaybeAwaitable[R]], *args: typing.Any) -> R:
    """
    Call a user callback and await its result.

    Callbacks may be plain functions or coroutine functions; the caller
    never has to care which one it got.
    """
    return await resolve(fn(*args))

def negate[T](predicate: IndexedPredicate[T]) -> IndexedPredicate[T]:
    """Predicate with its (awaited) result inverted."""
    async def negated(element: T, index: int) -> bool:
        return not await invoke(predicate, element, index)
    return negated

# Default policies (passed explicitly as keyword defaults, never looked up globally)
def default_equal(a: typing.Any, b: typing.Any) -> bool:
    """Value equality (==)."""
    return a == b

def default_compare(a: typing.Any, b: typing.Any) -> int:
    """Natural ordering as a three-way comparison."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

def is_null(value: object) -> bool:
    """Null check used by exclude_null / none_null."""
    return value is None

__all__ = (
    "default_compare",
    "default_equal",
    "invoke",
    "is_null",
    "negate",
    "resolve",
)
