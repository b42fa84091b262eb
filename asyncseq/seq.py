"""AsyncSeq

The canonical sequence: a lazy, single-pass async iterator.

Every combinator returns an AsyncSeq. The underlying cursor is created by
a zero-arg factory on the first pull, so building a pipeline performs no
work at all. Fluent methods mirror the module functions:

    await async_iterable(rows).map(parse).filter(valid).take(10).to_array()
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterator, Awaitable, Callable, Hashable

from ._helpers import default_compare, default_equal
from ._types import AsyncIterableLike, Comparator, Equality, IndexedPredicate, IndexedSelector, Reducer


class AsyncSeq[T]:
    """
    Lazy single-pass async sequence.

    Iterating twice continues the same cursor, it never restarts.
    """

    __slots__ = ("_factory", "_iterator")

    def __init__(self, factory: Callable[[], AsyncIterator[T]], /) -> None:
        """Create AsyncSeq from a fn returning the cursor."""
        self._factory = factory
        self._iterator: AsyncIterator[T] | None = None

    # Protocol methods

    def __aiter__(self) -> AsyncSeq[T]:
        return self

    def __anext__(self) -> Awaitable[T]:
        if self._iterator is None:
            self._iterator = self._factory()
        return self._iterator.__anext__()

    def __repr__(self) -> str:
        state = "pending" if self._iterator is None else "started"
        return f"AsyncSeq({state})"

    # Combinators

    def tail(self) -> AsyncSeq[T]:
        from .transform import tail
        return tail(self)

    def initial(self) -> AsyncSeq[T]:
        from .transform import initial
        return initial(self)

    def push(self, value: T, /) -> AsyncSeq[T]:
        from .transform import push
        return push(self, value)

    def unshift(self, value: T, /) -> AsyncSeq[T]:
        from .transform import unshift
        return unshift(self, value)

    def take(self, count: int, /) -> AsyncSeq[T]:
        from .transform import take
        return take(self, count)

    def drop(self, count: int, /) -> AsyncSeq[T]:
        from .transform import drop
        return drop(self, count)

    def slice(self, start: int = 0, end: int | None = None) -> AsyncSeq[T]:
        from .transform import slice
        return slice(self, start, end)

    def take_while(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import take_while
        return take_while(self, predicate)

    def take_until(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import take_until
        return take_until(self, predicate)

    def drop_while(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import drop_while
        return drop_while(self, predicate)

    def drop_until(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import drop_until
        return drop_until(self, predicate)

    def filter(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import filter
        return filter(self, predicate)

    def exclude(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import exclude
        return exclude(self, predicate)

    def exclude_null(self) -> AsyncSeq[T]:
        from .transform import exclude_null
        return exclude_null(self)

    def exclude_first(self, predicate: IndexedPredicate[T], /) -> AsyncSeq[T]:
        from .transform import exclude_first
        return exclude_first(self, predicate)

    def remove(self, value: T, /) -> AsyncSeq[T]:
        from .transform import remove
        return remove(self, value)

    def remove_first(self, value: T, /) -> AsyncSeq[T]:
        from .transform import remove_first
        return remove_first(self, value)

    def map[U](self, f: IndexedSelector[T, U], /) -> AsyncSeq[U]:
        from .transform import map
        return map(self, f)

    def scan[A](self, f: Reducer[A, T], initial: A, /) -> AsyncSeq[A]:
        from .transform import scan
        return scan(self, f, initial)

    def scan1(self, f: Reducer[T, T], /) -> AsyncSeq[T]:
        from .transform import scan1
        return scan1(self, f)

    def concat_map[U](self, f: IndexedSelector[T, AsyncIterableLike[U]], /) -> AsyncSeq[U]:
        from .transform import concat_map
        return concat_map(self, f)

    def prepend(self, other: AsyncIterableLike[T], /) -> AsyncSeq[T]:
        """other first, then this sequence."""
        from .transform import prepend
        return prepend(other)(self)

    def append(self, other: AsyncIterableLike[T], /) -> AsyncSeq[T]:
        """This sequence, then other."""
        from .transform import append
        return append(other)(self)

    def zip[U](self, other: AsyncIterableLike[U], /) -> AsyncSeq[tuple[T, U]]:
        from .transform import zip
        return zip(self, other)

    def pipe[R](self, f: Callable[..., R], /, *args: typing.Any, **kwargs: typing.Any) -> R:
        """f(self, *args, **kwargs) - plug any function into a fluent chain."""
        return f(self, *args, **kwargs)

    # Terminal consumers

    async def to_array(self) -> list[T]:
        from .consume import to_array
        return await to_array(self)

    to_list = to_array

    async def to_set(self) -> set[T]:
        from .consume import to_set
        return await to_set(self)

    async def first(self) -> T | None:
        from .consume import first
        return await first(self)

    async def last(self) -> T | None:
        from .consume import last
        return await last(self)

    async def only(self) -> T | None:
        from .consume import only
        return await only(self)

    async def empty(self) -> bool:
        from .consume import empty
        return await empty(self)

    async def not_empty(self) -> bool:
        from .consume import not_empty
        return await not_empty(self)

    async def contains(self, value: T, /) -> bool:
        from .consume import contains
        return await contains(self, value)

    async def index_of(self, value: T, /) -> int | None:
        from .consume import index_of
        return await index_of(self, value)

    def index(self, i: int, /) -> Awaitable[T | None]:
        from .consume import index
        return index(self, i)

    async def find_index(self, predicate: IndexedPredicate[T], /) -> int | None:
        from .consume import find_index
        return await find_index(self, predicate)

    async def find(self, predicate: IndexedPredicate[T], /) -> T | None:
        from .consume import find
        return await find(self, predicate)

    async def fold[A](self, f: Reducer[A, T], initial: A, /) -> A:
        from .consume import fold
        return await fold(self, f, initial)

    async def fold1(self, f: Reducer[T, T], /) -> T:
        from .consume import fold1
        return await fold1(self, f)

    # Comparators

    async def equal(
        self,
        other: AsyncIterableLike[T],
        /,
        elements_equal: Equality[T, T] = default_equal,
    ) -> bool:
        from .compare import equal
        return await equal(self, other, elements_equal)

    async def not_equal(
        self,
        other: AsyncIterableLike[T],
        /,
        elements_equal: Equality[T, T] = default_equal,
    ) -> bool:
        from .compare import not_equal
        return await not_equal(self, other, elements_equal)

    async def prefix_match(
        self,
        prefix: AsyncIterableLike[T],
        /,
        elements_equal: Equality[T, T] = default_equal,
    ) -> bool:
        from .compare import prefix_match
        return await prefix_match(self, prefix, elements_equal)

    # Reducers

    async def sum(self) -> typing.Any:
        from .aggregate import sum
        return await sum(typing.cast(AsyncSeq[typing.Any], self))

    async def product(self) -> typing.Any:
        from .aggregate import product
        return await product(typing.cast(AsyncSeq[typing.Any], self))

    async def average(self) -> typing.Any:
        from .aggregate import average
        return await average(typing.cast(AsyncSeq[typing.Any], self))

    async def and_(self) -> bool:
        from .aggregate import and_
        return await and_(self)

    async def or_(self) -> bool:
        from .aggregate import or_
        return await or_(self)

    async def any(self, predicate: IndexedPredicate[T], /) -> bool:
        from .aggregate import any
        return await any(self, predicate)

    async def all(self, predicate: IndexedPredicate[T], /) -> bool:
        from .aggregate import all
        return await all(self, predicate)

    async def maximum(self, compare: Comparator[T] = default_compare) -> T | None:
        from .aggregate import maximum
        return await maximum(self, compare)

    async def minimum(self, compare: Comparator[T] = default_compare) -> T | None:
        from .aggregate import minimum
        return await minimum(self, compare)

    async def maximum_by(self, select: IndexedSelector[T, typing.Any], /) -> T | None:
        from .aggregate import maximum_by
        return await maximum_by(self, select)

    async def minimum_by(self, select: IndexedSelector[T, typing.Any], /) -> T | None:
        from .aggregate import minimum_by
        return await minimum_by(self, select)

    async def none_null(self) -> list[T] | None:
        from .aggregate import none_null
        return await none_null(self)

    # Keyed consumers

    async def key_by[K: Hashable](self, f: IndexedSelector[T, K], /) -> dict[K, list[T]]:
        from .keyed import key_by
        return await key_by(self, f)

    async def key_first_by[K: Hashable](self, f: IndexedSelector[T, K], /) -> dict[K, T]:
        from .keyed import key_first_by
        return await key_first_by(self, f)

    async def key_last_by[K: Hashable](self, f: IndexedSelector[T, K], /) -> dict[K, T]:
        from .keyed import key_last_by
        return await key_last_by(self, f)

    async def map_key_by[K: Hashable, V](
        self,
        f: IndexedSelector[T, tuple[K, V]],
        /,
    ) -> dict[K, list[V]]:
        from .keyed import map_key_by
        return await map_key_by(self, f)

    async def map_key_first_by[K: Hashable, V](
        self,
        f: IndexedSelector[T, tuple[K, V]],
        /,
    ) -> dict[K, V]:
        from .keyed import map_key_first_by
        return await map_key_first_by(self, f)

    async def map_key_last_by[K: Hashable, V](
        self,
        f: IndexedSelector[T, tuple[K, V]],
        /,
    ) -> dict[K, V]:
        from .keyed import map_key_last_by
        return await map_key_last_by(self, f)


__all__ = ("AsyncSeq",)
