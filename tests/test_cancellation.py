"""
Tests for the cancellation token
"""

import asyncio

import pytest

from goal_planner.planner import CancelToken, OracleTimeoutError, PlanCancelledError

from mocks import HangingOracle


async def answer(value):
    await asyncio.sleep(0)
    return value


class TestCancelToken:
    def test_initial_state(self):
        token = CancelToken()
        assert not token.cancelled
        assert token.reason is None
        token.raise_if_cancelled()

    def test_cancel_keeps_first_reason(self):
        token = CancelToken()
        token.cancel("first")
        token.cancel("second")

        assert token.cancelled
        assert token.reason == "first"
        with pytest.raises(PlanCancelledError, match="first"):
            token.raise_if_cancelled()

    @pytest.mark.asyncio
    async def test_guard_returns_result(self):
        assert await CancelToken().guard(answer(42)) == 42

    @pytest.mark.asyncio
    async def test_guard_propagates_errors(self):
        async def broken():
            raise ValueError("bad answer")

        with pytest.raises(ValueError, match="bad answer"):
            await CancelToken().guard(broken())

    @pytest.mark.asyncio
    async def test_guard_when_already_cancelled(self):
        token = CancelToken()
        token.cancel()
        call = answer(1)

        with pytest.raises(PlanCancelledError):
            await token.guard(call)
        # The coroutine was closed rather than left un-awaited
        assert call.cr_frame is None

    @pytest.mark.asyncio
    async def test_guard_timeout(self):
        with pytest.raises(OracleTimeoutError) as exc_info:
            await CancelToken().guard(HangingOracle().ask("prompt"), timeout_s=0.01)
        assert exc_info.value.timeout_s == 0.01
        assert "timed out after 0.01s" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_guard_cancels_pending_call(self):
        token = CancelToken()
        oracle = HangingOracle()
        guarded = asyncio.create_task(token.guard(oracle.ask("prompt")))

        await asyncio.wait_for(oracle.started.wait(), timeout=1)
        token.cancel("stop")

        with pytest.raises(PlanCancelledError, match="stop"):
            await guarded
        for _ in range(3):
            await asyncio.sleep(0)
        assert oracle.cancelled
