"""
Cancellation token threaded through every oracle call of a search
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from .errors import OracleTimeoutError, PlanCancelledError

T = TypeVar("T")


class CancelToken:
    """Cooperative cancellation signal for one planning run.

    The search checks the token before each frontier item and races every
    oracle call against it, so a hanging oracle no longer stalls a cancelled
    search.
    """

    def __init__(self):
        self._event = asyncio.Event()
        self.reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "cancelled") -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise PlanCancelledError(self.reason or "cancelled")

    async def guard(self, awaitable: Awaitable[T], timeout_s: Optional[float] = None) -> T:
        """Await `awaitable` unless the token fires or `timeout_s` elapses first.

        Raises:
            PlanCancelledError: token fired before the call finished
            OracleTimeoutError: call took longer than timeout_s
        """
        if self._event.is_set():
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise PlanCancelledError(self.reason or "cancelled")

        call = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait(
                {call, waiter}, timeout=timeout_s, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            call.cancel()
            raise
        finally:
            waiter.cancel()

        if call in done:
            return call.result()

        call.cancel()
        if waiter in done:
            raise PlanCancelledError(self.reason or "cancelled")
        raise OracleTimeoutError(timeout_s)
