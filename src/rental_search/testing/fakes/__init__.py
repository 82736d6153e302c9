"""Testing fakes – in-memory doubles for kernel ports."""
from rental_search.kernel.time import FrozenClock
from rental_search.testing.fakes.clock import DEFAULT_FAKE_NOW, FakeClock
from rental_search.testing.fakes.timer import ManualTimer, ManualTimerScheduler

__all__ = ["DEFAULT_FAKE_NOW", "FakeClock", "FrozenClock", "ManualTimer", "ManualTimerScheduler"]
