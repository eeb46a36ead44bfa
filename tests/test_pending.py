"""Tests for pending operation tracking and cancellation."""

import asyncio

import pytest

from parttime_jobs.core.errors import OperationCancelled, OperationPending
from parttime_jobs.services.pending import PendingOperations


def test_run_returns_result():
    async def scenario():
        ops = PendingOperations()

        async def work():
            return 42

        result = await ops.run("k", "profile", work())
        return result, ops.pending_keys()

    result, pending = asyncio.run(scenario())
    assert result == 42
    assert pending == []


def test_errors_propagate():
    async def scenario():
        ops = PendingOperations()

        async def work():
            raise ValueError("boom")

        await ops.run("k", "profile", work())

    with pytest.raises(ValueError, match="boom"):
        asyncio.run(scenario())


def test_double_submission_is_rejected():
    async def scenario():
        ops = PendingOperations()
        gate = asyncio.Event()

        async def work():
            await gate.wait()
            return "done"

        first = asyncio.ensure_future(ops.run("send", "job-details", work()))
        await asyncio.sleep(0)
        assert ops.is_pending("send")
        with pytest.raises(OperationPending):
            await ops.run("send", "job-details", work())
        gate.set()
        return await first

    assert asyncio.run(scenario()) == "done"


def test_cancel_scope_stops_only_that_scope():
    async def scenario():
        ops = PendingOperations()
        gate = asyncio.Event()

        async def work(value):
            await gate.wait()
            return value

        profile = asyncio.ensure_future(ops.run("save", "profile", work("p")))
        feed = asyncio.ensure_future(ops.run("other", "feed", work("f")))
        await asyncio.sleep(0)
        assert ops.pending_keys() == ["other", "save"]

        assert ops.cancel_scope("profile") == 1
        with pytest.raises(OperationCancelled):
            await profile

        gate.set()
        return await feed, ops.pending_keys()

    value, pending = asyncio.run(scenario())
    assert value == "f"
    assert pending == []


def test_cancel_all_and_key_reuse():
    async def scenario():
        ops = PendingOperations()

        async def slow():
            await asyncio.sleep(10)

        task = asyncio.ensure_future(ops.run("k", "s", slow()))
        await asyncio.sleep(0)
        assert ops.cancel_all() == 1
        with pytest.raises(OperationCancelled):
            await task

        async def quick():
            return "again"

        return await ops.run("k", "s", quick())

    assert asyncio.run(scenario()) == "again"


def test_cancel_unknown_key():
    assert PendingOperations().cancel("nothing") is False
