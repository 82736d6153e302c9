"""Kernel time – Clock and timer ports + implementations."""
from rental_search.kernel.time.clock import Clock, FrozenClock
from rental_search.kernel.time.timer import AsyncioTimerScheduler, TimerHandle, TimerScheduler

__all__ = [
    "AsyncioTimerScheduler",
    "Clock",
    "FrozenClock",
    "TimerHandle",
    "TimerScheduler",
]
