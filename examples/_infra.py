from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    customer: str
    amount: float
    status: str = "paid"


def _sample_orders() -> list[Order]:
    return [
        Order(1, "ada", 120.0),
        Order(2, "bob", 35.5, status="refunded"),
        Order(3, "ada", 12.25),
        Order(4, "cyd", 310.0),
        Order(5, "bob", 99.99),
        Order(6, "ada", 5.0, status="pending"),
        Order(7, "dee", 42.0),
    ]


@dataclass(slots=True)
class FakeOrderAPI:
    """Paged order endpoint. Counts page requests so laziness is visible."""

    orders: list[Order] = field(default_factory=_sample_orders)
    page_size: int = 2
    delay_seconds: float = 0.0
    requests: int = 0

    async def fetch_page(self, page: int) -> list[Order]:
        await asyncio.sleep(self.delay_seconds)
        self.requests += 1
        start = page * self.page_size
        return self.orders[start : start + self.page_size]

    async def pages(self) -> AsyncIterator[list[Order]]:
        page = 0
        while True:
            batch = await self.fetch_page(page)
            if not batch:
                return
            yield batch
            page += 1


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
