from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class Boom(Exception):
    """Failure raised by fake sources and callbacks."""


@dataclass
class Probe:
    """Async source that counts pulls.

    pulls   - every __anext__ call, including the one that signals the end
    yielded - elements actually handed out
    """

    items: list[Any]
    fail_at: int | None = None
    pulls: int = 0
    yielded: int = 0

    @classmethod
    def of(cls, items: Iterable[Any], *, fail_at: int | None = None) -> Probe:
        return cls(list(items), fail_at=fail_at)

    def __aiter__(self) -> Probe:
        return self

    async def __anext__(self) -> Any:
        self.pulls += 1
        await asyncio.sleep(0)
        if self.fail_at is not None and self.yielded == self.fail_at:
            raise Boom(f"pull {self.pulls} failed")
        if self.yielded >= len(self.items):
            raise StopAsyncIteration
        item = self.items[self.yielded]
        self.yielded += 1
        return item


async def later[T](value: T) -> T:
    """Pending element: resolves to value after one suspension."""
    await asyncio.sleep(0)
    return value


async def pending_list[T](values: list[T]) -> list[T]:
    """Pending wrapper around a plain collection."""
    await asyncio.sleep(0)
    return values


async def async_gen[T](values: Iterable[T]):
    for value in values:
        await asyncio.sleep(0)
        yield value
