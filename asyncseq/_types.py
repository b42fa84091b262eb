"""
Core type definitions for asyncseq.

Aliases used across the whole library.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Awaitable, Callable, Iterable

# ============================================================================
# Sequence-like inputs
# ============================================================================

# MaybeAwaitable = plain value or something that resolves to it
type MaybeAwaitable[T] = T | Awaitable[T]

# AsyncIterableLike = every shape accepted at a public entry point
type AsyncIterableLike[T] = (
    AsyncIterable[T]
    | Iterable[T | Awaitable[T]]
    | Awaitable[AsyncIterable[T]]
    | Awaitable[Iterable[T | Awaitable[T]]]
)

# ============================================================================
# Callbacks
# ============================================================================

# IndexedPredicate = (element, index) -> bool, sync or async
type IndexedPredicate[T] = Callable[[T, int], MaybeAwaitable[bool]]

# IndexedSelector = (element, index) -> key/value, sync or async
type IndexedSelector[T, K] = Callable[[T, int], MaybeAwaitable[K]]

# Reducer = (accumulator, element, index) -> accumulator
type Reducer[A, T] = Callable[[A, T, int], MaybeAwaitable[A]]

# Equality = (a, b) -> bool
type Equality[A, B] = Callable[[A, B], MaybeAwaitable[bool]]

# Comparator = (a, b) -> negative / zero / positive
type Comparator[T] = Callable[[T, T], MaybeAwaitable[int]]

__all__ = (
    "AsyncIterableLike",
    "Comparator",
    "Equality",
    "IndexedPredicate",
    "IndexedSelector",
    "MaybeAwaitable",
    "Reducer",
)
