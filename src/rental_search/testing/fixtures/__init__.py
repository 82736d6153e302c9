"""Testing fixtures – pytest fixtures for the search core.

Enable in ``conftest.py``::

    pytest_plugins = ["rental_search.testing.fixtures"]
"""
from __future__ import annotations

from typing import Iterator

import pytest

from rental_search.application.search import SearchController
from rental_search.kernel.types import Room
from rental_search.testing.fakes import FakeClock, FrozenClock, ManualTimerScheduler
from rental_search.testing.generators import RoomBuilder


@pytest.fixture
def fake_clock() -> FrozenClock:
    """A FakeClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def manual_timers(fake_clock: FrozenClock) -> ManualTimerScheduler:
    """Virtual-time timer scheduler sharing ``fake_clock``."""
    return ManualTimerScheduler(fake_clock)


@pytest.fixture
def sample_rooms() -> list[Room]:
    """``A101`` (occupied, Nguyen Van A), ``A102`` (vacant), ``B201`` (occupied, Tran Thi B)."""
    base = RoomBuilder()
    return [
        base.with_tenant("Nguyen Van A", tenant_id="t1").with_(
            id="1", room_code="A101", room_name="Deluxe Room A101", rental_price=3_000_000
        )(),
        base.with_(id="2", room_code="A102", room_name="Standard Room A102", rental_price=2_500_000)(),
        base.with_tenant("Tran Thi B", tenant_id="t2", phone="0907654321").with_(
            id="3", room_code="B201", room_name="Premium Room B201", rental_price=4_000_000
        )(),
    ]


@pytest.fixture
def search_controller(sample_rooms: list[Room], manual_timers: ManualTimerScheduler) -> Iterator[SearchController]:
    """Controller over ``sample_rooms`` with a 300 ms debounce on manual timers."""
    controller = SearchController(sample_rooms, debounce_ms=300, scheduler=manual_timers)
    yield controller
    controller.close()


__all__ = ["fake_clock", "manual_timers", "sample_rooms", "search_controller"]
