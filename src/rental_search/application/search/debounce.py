"""Application search – Debouncer.

Holds a raw value and a settled copy that only catches up once the raw value
has stayed unchanged for ``delay_ms``. Each change cancels the pending timer
and schedules a new one, so at most one callback is ever outstanding and
superseded values are dropped.
"""
from __future__ import annotations

from typing import Callable, Generic, TypeVar

from rental_search.kernel.time import AsyncioTimerScheduler, TimerHandle, TimerScheduler

T = TypeVar("T")

__all__ = ["Debouncer"]


class Debouncer(Generic[T]):
    """Debounce a changing value.

    Parameters
    ----------
    initial:
        Starting value for both the raw and the settled side.
    delay_ms:
        Quiet period before a change settles. ``0`` settles synchronously.
    scheduler:
        Timer backend; defaults to :class:`AsyncioTimerScheduler`.
    on_settle:
        Called with the new settled value whenever it changes.
    """

    def __init__(
        self,
        initial: T,
        delay_ms: float,
        scheduler: TimerScheduler | None = None,
        on_settle: Callable[[T], None] | None = None,
    ) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self._delay_ms = delay_ms
        self._scheduler: TimerScheduler = scheduler or AsyncioTimerScheduler()
        self._on_settle = on_settle
        self._value = initial
        self._settled = initial
        self._pending: TimerHandle | None = None

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @property
    def value(self) -> T:
        """The most recent raw value."""
        return self._value

    @property
    def settled(self) -> T:
        """The debounced value; never ahead of :attr:`value`."""
        return self._settled

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    def set(self, value: T) -> None:
        """Record a new raw value and restart the quiet period."""
        self._value = value
        self._cancel_pending()
        if self._delay_ms == 0:
            self._settle(value)
        elif value != self._settled:
            self._pending = self._scheduler.schedule(self._delay_ms, self._fire)

    def flush(self) -> None:
        """Settle the current raw value now, skipping the remaining delay."""
        if self._pending is not None:
            self._cancel_pending()
            self._settle(self._value)

    def cancel(self) -> None:
        """Drop the pending settle, leaving the settled value where it is."""
        self._cancel_pending()

    def _fire(self) -> None:
        self._pending = None
        self._settle(self._value)

    def _settle(self, value: T) -> None:
        changed = value != self._settled
        self._settled = value
        if changed and self._on_settle is not None:
            self._on_settle(value)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
