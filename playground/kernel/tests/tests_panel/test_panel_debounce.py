"""
Playground Debouncer Tests

Trailing-edge: the last call of a burst runs once the burst settles.
"""

import asyncio

from playground.kernel.debounce import Debouncer


async def test_burst_runs_once_with_last_arguments():
    calls = []
    debounced = Debouncer(20, calls.append)
    debounced("a")
    debounced("b")
    debounced("c")
    assert calls == []
    await asyncio.sleep(0.08)
    assert calls == ["c"]


async def test_separate_bursts_run_separately():
    calls = []
    debounced = Debouncer(10, calls.append)
    debounced(1)
    await asyncio.sleep(0.05)
    debounced(2)
    await asyncio.sleep(0.05)
    assert calls == [1, 2]


async def test_cancel():
    calls = []
    debounced = Debouncer(10, calls.append)
    debounced("x")
    assert debounced.pending
    debounced.cancel()
    assert not debounced.pending
    await asyncio.sleep(0.04)
    assert calls == []


async def test_flush_runs_pending_call_now():
    calls = []
    debounced = Debouncer(1000, calls.append)
    debounced("now")
    debounced.flush()
    assert calls == ["now"]
    assert not debounced.pending


async def test_flush_without_pending_call_does_nothing():
    calls = []
    Debouncer(10, calls.append).flush()
    assert calls == []
