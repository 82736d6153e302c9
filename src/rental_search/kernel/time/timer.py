"""Kernel time – cancellable delayed callbacks.

The debouncer never sleeps; it asks a :class:`TimerScheduler` to call it back
later and cancels the returned handle when the input changes again.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """A pending callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...
    def cancelled(self) -> bool: ...


class TimerScheduler(Protocol):
    """Port: schedule *callback* to run once after *delay_ms* milliseconds."""

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioTimerScheduler:
    """Schedules callbacks on an asyncio event loop via ``loop.call_later``.

    When no loop is given the running loop is looked up at schedule time,
    so the scheduler can be built outside of a coroutine and used inside one.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(delay_ms, 0) / 1000.0, callback)


__all__ = ["AsyncioTimerScheduler", "TimerHandle", "TimerScheduler"]
