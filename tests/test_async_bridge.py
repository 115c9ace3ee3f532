import asyncio
import threading

import pytest

from ir_learner.utils.async_helpers import AsyncBridge


async def _answer():
    await asyncio.sleep(0)
    return 42


async def _fail():
    raise ValueError("nope")


def test_submit_runs_on_background_thread():
    with AsyncBridge() as bridge:
        async def thread_name():
            return threading.current_thread().name

        assert bridge.run_blocking(thread_name()) == "AsyncBridge"


def test_submit_returns_future_and_logs_failures(caplog):
    with AsyncBridge() as bridge:
        ok = bridge.submit(_answer())
        failed = bridge.submit(_fail())

        assert ok.result(timeout=5) == 42
        assert isinstance(failed.exception(timeout=5), ValueError)

    assert "Error in async operation: nope" in caplog.text


def test_submit_when_stopped_returns_none():
    bridge = AsyncBridge()

    assert bridge.submit(_answer()) is None
    assert bridge.run_blocking(_answer()) is None
    assert not bridge.is_running


def test_run_blocking_propagates_errors():
    with AsyncBridge() as bridge:
        with pytest.raises(ValueError):
            bridge.run_blocking(_fail())
