"""Tests for lazy transform combinators."""

from __future__ import annotations

import pytest

from asyncseq import (
    append,
    concat,
    concat_map,
    cursor,
    drop,
    drop_until,
    drop_while,
    exclude,
    exclude_first,
    exclude_null,
    filter,
    initial,
    map,
    prepend,
    push,
    push_fn,
    remove,
    remove_first,
    scan,
    scan1,
    slice,
    tail,
    take,
    take_until,
    take_while,
    to_array,
    unshift,
    unshift_fn,
    zip,
)
from fakes import Boom, Probe, later, pending_list


class TestShape:
    """Tests for tail / initial / push / unshift."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("items", "expected"),
        [([1, 2, 3, 4], [2, 3, 4]), ([1], []), ([], [])],
    )
    async def test_tail(self, items, expected):
        assert await to_array(tail(items)) == expected

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("items", "expected"),
        [([1, 2, 3, 4], [1, 2, 3]), ([1], []), ([], [])],
    )
    async def test_initial(self, items, expected):
        assert await to_array(initial(items)) == expected

    @pytest.mark.asyncio
    async def test_initial_holds_one_element_back(self):
        probe = Probe.of([1, 2, 3])
        c = cursor(initial(probe))
        assert await c.pull() == 1
        assert probe.pulls == 2

    @pytest.mark.asyncio
    async def test_building_pulls_nothing(self):
        probe = Probe.of([1, 2, 3])
        tail(initial(push(unshift(probe, 0), 4)))
        assert probe.pulls == 0

    @pytest.mark.asyncio
    async def test_push_and_unshift(self):
        assert await to_array(push([1, 2], 3)) == [1, 2, 3]
        assert await to_array(unshift([1, 2], 0)) == [0, 1, 2]
        assert await to_array(push([], 1)) == [1]

    @pytest.mark.asyncio
    async def test_curried_forms(self):
        assert await to_array(push_fn(9)([1])) == [1, 9]
        assert await to_array(unshift_fn(0)([1])) == [0, 1]

    @pytest.mark.asyncio
    async def test_unshift_yields_value_before_pulling(self):
        probe = Probe.of([1])
        c = cursor(unshift(probe, 0))
        assert await c.pull() == 0
        assert probe.pulls == 0


class TestWindow:
    """Tests for take / drop / slice / take_while / drop_while."""

    @pytest.mark.asyncio
    async def test_take(self):
        assert await to_array(take([1, 2, 3, 4, 5], 3)) == [1, 2, 3]
        assert await to_array(take([1, 2], 3)) == [1, 2]
        assert await to_array(take([1, 2, 3, 4, 5], 0)) == []

    @pytest.mark.asyncio
    async def test_take_never_pulls_past_count(self):
        probe = Probe.of([1, 2, 3, 4, 5])
        assert await to_array(take(probe, 3)) == [1, 2, 3]
        assert probe.pulls == 3

    @pytest.mark.asyncio
    async def test_take_zero_never_pulls(self):
        probe = Probe.of([1, 2])
        assert await to_array(take(probe, 0)) == []
        assert probe.pulls == 0

    @pytest.mark.asyncio
    async def test_drop(self):
        assert await to_array(drop([1, 2, 3, 4, 5], 2)) == [3, 4, 5]
        assert await to_array(drop([1, 2], 5)) == []
        assert await to_array(drop([1, 2], 0)) == [1, 2]

    @pytest.mark.parametrize("op", [take, drop])
    @pytest.mark.parametrize("bad", [2.0, "2", None])
    def test_non_integer_count_fails_before_any_pull(self, op, bad):
        probe = Probe.of([1, 2, 3])
        with pytest.raises(TypeError):
            op(probe, bad)
        assert probe.pulls == 0

    @pytest.mark.asyncio
    async def test_slice(self):
        probe = Probe.of(range(10))
        assert await to_array(slice(probe, 2, 5)) == [2, 3, 4]
        assert probe.pulls == 5
        assert await to_array(slice(range(5), 3)) == [3, 4]
        assert await to_array(slice(range(5), 3, 3)) == []

    @pytest.mark.asyncio
    async def test_take_while_stops_for_good(self):
        probe = Probe.of([1, 2, 3, 1, 2])
        assert await to_array(take_while(probe, lambda n, _: n < 3)) == [1, 2]
        assert probe.pulls == 3

    @pytest.mark.asyncio
    async def test_take_until(self):
        assert await to_array(take_until([1, 2, 3, 1], lambda n, _: n >= 3)) == [1, 2]

    @pytest.mark.asyncio
    async def test_drop_while_forwards_later_matches(self):
        assert await to_array(drop_while([1, 2, 3, 1, 2], lambda n, _: n < 3)) == [3, 1, 2]
        assert await to_array(drop_while([1, 2], lambda n, _: n < 3)) == []

    @pytest.mark.asyncio
    async def test_drop_until(self):
        assert await to_array(drop_until([1, 2, 3, 1], lambda n, _: n >= 3)) == [3, 1]

    @pytest.mark.asyncio
    async def test_predicate_indices(self):
        seen: list[int] = []

        async def small(n: int, i: int) -> bool:
            seen.append(i)
            return n < 3

        await to_array(drop_while([1, 2, 3, 4], small))
        assert seen == [0, 1, 2]


class TestSelect:
    """Tests for filter / exclude / remove and their first-only variants."""

    @pytest.mark.asyncio
    async def test_filter_with_index(self):
        assert await to_array(filter([10, 11, 12, 13], lambda _, i: i % 2 == 0)) == [10, 12]

    @pytest.mark.asyncio
    async def test_filter_with_async_predicate(self):
        async def odd(n: int, _: int) -> bool:
            return n % 2 == 1

        assert await to_array(filter(range(6), odd)) == [1, 3, 5]

    @pytest.mark.asyncio
    async def test_exclude(self):
        assert await to_array(exclude(range(6), lambda n, _: n % 2 == 1)) == [0, 2, 4]

    @pytest.mark.asyncio
    async def test_exclude_null_keeps_falsy_values(self):
        assert await to_array(exclude_null([0, None, False, "", None, 1])) == [0, False, "", 1]

    @pytest.mark.asyncio
    async def test_exclude_first_removes_exactly_one(self):
        result = await to_array(exclude_first([1, 2, 3, 4, 3, 2, 1], lambda n, _: n > 2))
        assert result == [1, 2, 4, 3, 2, 1]

    @pytest.mark.asyncio
    async def test_exclude_first_without_match(self):
        assert await to_array(exclude_first([1, 2], lambda n, _: n > 5)) == [1, 2]

    @pytest.mark.asyncio
    async def test_remove_every_occurrence(self):
        assert await to_array(remove([1, 2, 1, 3, 1], 1)) == [2, 3]

    @pytest.mark.asyncio
    async def test_remove_first_occurrence(self):
        assert await to_array(remove_first([1, 2, 1, 3, 1], 1)) == [2, 1, 3, 1]


class TestMapping:
    """Tests for map / scan / scan1."""

    @pytest.mark.asyncio
    async def test_map_with_index(self):
        assert await to_array(map(["a", "b"], lambda s, i: f"{i}:{s}")) == ["0:a", "1:b"]

    @pytest.mark.asyncio
    async def test_map_awaits_callback(self):
        async def double(n: int, _: int) -> int:
            return n * 2

        assert await to_array(map([1, 2, 3], double)) == [2, 4, 6]

    @pytest.mark.asyncio
    async def test_map_failure_stops_pipeline(self):
        probe = Probe.of([1, 2, 3, 4])

        def explode(n: int, _: int) -> int:
            if n == 2:
                raise Boom("map")
            return n

        with pytest.raises(Boom):
            await to_array(map(probe, explode))
        assert probe.pulls == 2

    @pytest.mark.asyncio
    async def test_scan(self):
        assert await to_array(scan([1, 2, 3], lambda acc, n, _: acc + n, 0)) == [1, 3, 6]
        assert await to_array(scan([], lambda acc, n, _: acc + n, 0)) == []

    @pytest.mark.asyncio
    async def test_scan1(self):
        indices: list[int] = []

        def add(acc: int, n: int, i: int) -> int:
            indices.append(i)
            return acc + n

        assert await to_array(scan1([1, 2, 3], add)) == [1, 3, 6]
        assert indices == [1, 2]
        assert await to_array(scan1([], add)) == []


class TestFlatten:
    """Tests for concat / concat_map / prepend / append."""

    @pytest.mark.asyncio
    async def test_concat_mixed_shapes(self):
        inner = [[1, 2], [], Probe.of([3]), pending_list([4]), [later(5)]]
        assert await to_array(concat(inner)) == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_concat_exhausts_inner_before_next_outer(self):
        first_inner = Probe.of([1, 2])
        second_inner = Probe.of([3])
        outer = Probe.of([first_inner, second_inner])

        c = cursor(concat(outer))
        assert await c.pull() == 1
        assert outer.pulls == 1
        assert await c.pull() == 2
        assert outer.pulls == 1
        assert await c.pull() == 3
        assert outer.pulls == 2
        assert first_inner.pulls == 3

    @pytest.mark.asyncio
    async def test_concat_map(self):
        assert await to_array(concat_map([1, 2, 3], lambda n, _: [n] * n)) == [1, 2, 2, 3, 3, 3]

    @pytest.mark.asyncio
    async def test_prepend_and_append(self):
        assert await to_array(prepend([0])([1, 2])) == [0, 1, 2]
        assert await to_array(append([3])([1, 2])) == [1, 2, 3]


class TestPair:
    """Tests for zip."""

    @pytest.mark.asyncio
    async def test_zip_stops_at_shorter(self):
        assert await to_array(zip([1, 2, 3], "ab")) == [(1, "a"), (2, "b")]
        assert await to_array(zip([], [1])) == []

    @pytest.mark.asyncio
    async def test_zip_leaves_second_alone_once_first_ends(self):
        a = Probe.of([1, 2])
        b = Probe.of("xyzw")
        assert await to_array(zip(a, b)) == [(1, "x"), (2, "y")]
        assert a.pulls == 3
        assert b.pulls == 2
        assert await to_array(b) == ["z", "w"]
