from __future__ import annotations

from _infra import FakeOrderAPI, Order, banner, run

from asyncseq import EmptySequenceError, concat, fold1, index, lift
from kungfu import Error, LazyCoroResult, Ok


def validate(order: Order) -> LazyCoroResult[Order, str]:
    if order.status == "refunded":
        return Error(f"order {order.id} was refunded").to_async()
    return LazyCoroResult.pure(order)


def largest(a: Order, b: Order, _: int) -> Order:
    return b if b.amount > a.amount else a


async def main() -> None:
    banner("02_result_bridge: sequence errors as kungfu Results")

    print("\n[lift.catching: fold1 on empty and non-empty input]")
    for orders in ([], FakeOrderAPI().orders):
        match await lift.catching(fold1, orders, largest):
            case Ok(order):
                print(f"  ✓ largest: {order}")
            case Error(EmptySequenceError() as err):
                print(f"  ✗ {err}")
            case Error(err):
                print(f"  ✗ unexpected: {err!r}")

    print("\n[lift.catching: invalid index]")
    match await lift.catching(index, FakeOrderAPI().orders, -1):
        case Ok(order):
            print(f"  ✓ {order}")
        case Error(err):
            print(f"  ✗ {err}")

    print("\n[lift.traverse: stops pulling pages at the first bad order]")
    api = FakeOrderAPI(page_size=1)
    match await lift.traverse(concat(api.pages()), validate):
        case Ok(orders):
            print(f"  ✓ {len(orders)} valid orders")
        case Error(reason):
            print(f"  ✗ {reason} (after {api.requests} page requests)")


if __name__ == "__main__":
    run(main)
