from __future__ import annotations

from _infra import FakeOrderAPI, Order, banner, run

from asyncseq import async_iterable, concat


async def main() -> None:
    banner("01_quickstart: lazy pipeline over a paged API")

    api = FakeOrderAPI(page_size=2, delay_seconds=0.01)

    # Nothing is fetched while the pipeline is being built.
    big_paid = (
        concat(api.pages())
        .filter(lambda order, _: order.status == "paid")
        .filter(lambda order, _: order.amount >= 40)
        .map(lambda order, i: f"#{i} order {order.id}: {order.amount:.2f}")
        .take(2)
    )
    print(f"requests before pulling: {api.requests}")

    for line in await big_paid.to_array():
        print(f"  {line}")
    print(f"requests after take(2): {api.requests}")

    print("\n[Reducers]")
    totals = await concat(FakeOrderAPI().pages()).map(lambda order, _: order.amount).sum()
    print(f"  total amount: {totals:.2f}")

    by_customer = await concat(FakeOrderAPI().pages()).key_by(lambda order, _: order.customer)
    for customer, orders in by_customer.items():
        print(f"  {customer}: {[order.id for order in orders]}")

    biggest: Order | None = await concat(FakeOrderAPI().pages()).maximum_by(lambda order, _: order.amount)
    print(f"  biggest order: {biggest}")

    print("\n[Sync collections with pending elements]")

    async def price(sku: str) -> float:
        return {"tea": 3.5, "cake": 4.25}.get(sku, 0.0)

    basket = async_iterable([price("tea"), price("cake"), 1.0])
    print(f"  basket average: {await basket.average():.2f}")


if __name__ == "__main__":
    run(main)
