"""Tests for RequestExecutor loading flag handling."""

import asyncio

import pytest

from transaction_feed.application.request_executor import RequestExecutor


class TestRequestExecutor:
    """Tests for RequestExecutor."""

    def test_when_idle_then_not_loading(self) -> None:
        """Given a new executor, when nothing runs, then loading is False."""
        assert RequestExecutor().loading is False

    @pytest.mark.asyncio
    async def test_when_running_then_loading_until_settled(self) -> None:
        """Given a pending operation, when observed mid-flight, then loading is True."""
        executor = RequestExecutor()
        observed: list[bool] = []

        async def operation() -> str:
            observed.append(executor.loading)
            await asyncio.sleep(0)
            return "done"

        result = await executor.run(operation)

        assert result == "done"
        assert observed == [True]
        assert executor.loading is False

    @pytest.mark.asyncio
    async def test_when_operation_fails_then_flag_is_reset(self) -> None:
        """Given a failing operation, when it raises, then the error propagates and loading resets."""
        executor = RequestExecutor()

        async def operation() -> None:
            raise RuntimeError("backend down")

        with pytest.raises(RuntimeError, match="backend down"):
            await executor.run(operation)

        assert executor.loading is False

    @pytest.mark.asyncio
    async def test_when_runs_overlap_then_loading_until_last_settles(self) -> None:
        """Given two overlapping runs, when the first finishes, then loading stays True."""
        executor = RequestExecutor()
        first_gate = asyncio.Event()
        second_gate = asyncio.Event()

        async def wait_for(gate: asyncio.Event) -> None:
            await gate.wait()

        first = asyncio.create_task(executor.run(lambda: wait_for(first_gate)))
        second = asyncio.create_task(executor.run(lambda: wait_for(second_gate)))
        await asyncio.sleep(0)

        first_gate.set()
        await first
        assert executor.loading is True

        second_gate.set()
        await second
        assert executor.loading is False
