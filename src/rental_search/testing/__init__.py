"""Testing support – fakes, builders and Hypothesis strategies.

Fixtures live in :mod:`rental_search.testing.fixtures`; enable them with::

    pytest_plugins = ["rental_search.testing.fixtures"]
"""

from rental_search.testing.fakes import FakeClock, ManualTimer, ManualTimerScheduler
from rental_search.testing.generators import Builder, DataclassBuilder, RoomBuilder, make_rooms

__all__ = [
    "Builder",
    "DataclassBuilder",
    "FakeClock",
    "ManualTimer",
    "ManualTimerScheduler",
    "RoomBuilder",
    "make_rooms",
]
