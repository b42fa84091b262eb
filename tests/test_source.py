"""Tests for the sequence adapter and the cursor protocol."""

from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from asyncseq import (
    END,
    AsyncSeq,
    Cursor,
    SourceKind,
    async_iterable,
    async_iterator,
    classify,
    cursor,
    is_async_iterable,
    to_array,
)
from fakes import Probe, async_gen, later, pending_list


class TestClassify:
    """Tests for the closed variant of sequence-like shapes."""

    def test_async_iterable_is_native(self):
        assert classify(Probe.of([])) is SourceKind.NATIVE

    def test_collections(self):
        assert classify([1, 2]) is SourceKind.COLLECTION
        assert classify((1, 2)) is SourceKind.COLLECTION
        assert classify(x for x in range(3)) is SourceKind.COLLECTION

    def test_awaitable_is_pending(self):
        coro = pending_list([1])
        try:
            assert classify(coro) is SourceKind.PENDING
        finally:
            coro.close()

    def test_not_a_sequence(self):
        with pytest.raises(TypeError):
            classify(42)

    def test_is_async_iterable(self):
        assert is_async_iterable(async_iterable([1]))
        assert not is_async_iterable([1])


class TestAdapter:
    """Tests for async_iterable normalization."""

    @pytest.mark.asyncio
    async def test_native_sequence(self):
        assert await to_array(async_gen([1, 2, 3])) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_plain_collection(self):
        assert await to_array([1, 2, 3]) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_collection_of_pending_elements(self):
        assert await to_array([later(1), 2, later(3)]) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_pending_collection(self):
        assert await to_array(pending_list([later(1), 2])) == [1, 2]

    @pytest.mark.asyncio
    async def test_pending_native_sequence(self):
        async def make():
            return async_gen("ab")

        assert await to_array(make()) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_async_seq_is_returned_unchanged(self):
        seq = async_iterable([1])
        assert async_iterable(seq) is seq

    @pytest.mark.asyncio
    async def test_pending_wrapper_resolved_lazily(self):
        resolved: list[str] = []

        async def source():
            resolved.append("source")
            return [1, 2]

        seq = async_iterable(source())
        await asyncio.sleep(0)
        assert resolved == []
        assert await to_array(seq) == [1, 2]
        assert resolved == ["source"]

    @pytest.mark.asyncio
    async def test_pending_elements_awaited_one_at_a_time(self):
        started: list[int] = []

        async def element(value: int) -> int:
            started.append(value)
            await asyncio.sleep(0)
            return value

        c = cursor([element(1), element(2), element(3)])
        assert await c.pull() == 1
        assert started == [1]
        assert await c.pull() == 2
        assert started == [1, 2]
        assert await c.pull() == 3
        assert await c.pull() is END

    @pytest.mark.asyncio
    async def test_sync_collection_walked_in_place(self):
        produced: list[int] = []

        def numbers():
            for n in range(3):
                produced.append(n)
                yield n

        c = cursor(numbers())
        assert await c.pull() == 0
        assert produced == [0]

    @pytest.mark.asyncio
    async def test_non_sequence_fails_at_first_pull(self):
        seq = async_iterable(42)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            await to_array(seq)

    @pytest.mark.asyncio
    async def test_logs_resolution(self):
        with capture_logs() as logs:
            await to_array(pending_list([1]))

        entries = [e for e in logs if e["event"] == "sequence.resolved"]
        assert len(entries) == 1
        assert entries[0]["kind"] == "collection"
        assert entries[0]["pending"] is True
        assert entries[0]["log_level"] == "debug"


class TestCursor:
    """Tests for the pull protocol."""

    @pytest.mark.asyncio
    async def test_pull_until_end(self):
        c = cursor([1, 2])
        assert await c.pull() == 1
        assert await c.pull() == 2
        assert await c.pull() is END
        assert c.done

    @pytest.mark.asyncio
    async def test_end_is_sticky(self):
        probe = Probe.of([1])
        c = Cursor(probe)
        assert await c.pull() == 1
        assert await c.pull() is END
        assert await c.pull() is END
        assert await c.pull() is END
        assert probe.pulls == 2

    @pytest.mark.asyncio
    async def test_cursor_is_async_iterator(self):
        c = cursor([1, 2, 3])
        await c.pull()
        assert [x async for x in c] == [2, 3]

    @pytest.mark.asyncio
    async def test_async_iterator(self):
        it = async_iterator([5])
        assert await anext(it) == 5
        with pytest.raises(StopAsyncIteration):
            await anext(it)

    def test_end_repr(self):
        assert repr(END) == "END"


class TestAsyncSeqProtocol:
    """Tests for the canonical sequence itself."""

    @pytest.mark.asyncio
    async def test_nothing_happens_until_pulled(self):
        probe = Probe.of([1, 2, 3])
        seq = async_iterable(probe)
        assert isinstance(seq, AsyncSeq)
        assert repr(seq) == "AsyncSeq(pending)"
        assert probe.pulls == 0
        await anext(seq)
        assert repr(seq) == "AsyncSeq(started)"

    @pytest.mark.asyncio
    async def test_single_pass(self):
        seq = async_iterable([1, 2, 3])
        assert await anext(seq) == 1
        assert [x async for x in seq] == [2, 3]
        assert [x async for x in seq] == []
