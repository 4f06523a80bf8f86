"""
Cooperative cancellation for in-flight gateway calls.

The caller owns an AbortController and hands it to a payments client.
The client never cancels anything on its own; it only wires the controller's
signal around the network call so that abort() stops that one request.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Optional, TypeVar

T = TypeVar("T")


class AbortError(Exception):
    """Raised when an operation is stopped through its AbortSignal."""

    def __init__(self, reason: Optional[Any] = None) -> None:
        self.reason = reason
        super().__init__(str(reason) if reason is not None else "The operation was aborted.")


class AbortSignal:
    """Read side of an AbortController, observed by the transport layer."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Optional[Any] = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    def throw_if_aborted(self) -> None:
        if self.aborted:
            raise AbortError(self.reason)

    async def wait(self) -> None:
        await self._event.wait()

    def _trigger(self, reason: Optional[Any]) -> None:
        if self.aborted:
            return
        self.reason = reason
        self._event.set()

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """
        Await `awaitable` unless the signal fires first.

        When the signal wins, the pending work is cancelled and AbortError is
        raised. When both finish in the same tick the result wins.
        """
        if self.aborted:
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise AbortError(self.reason)

        work = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            done, _ = await asyncio.wait({work, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not work.done():
                work.cancel()
                await asyncio.gather(work, return_exceptions=True)

        if work in done:
            return work.result()
        raise AbortError(self.reason)


class AbortController:
    """Owns an AbortSignal and is the only thing allowed to fire it."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: Optional[Any] = None) -> None:
        self.signal._trigger(reason)
