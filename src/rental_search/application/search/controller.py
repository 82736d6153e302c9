"""Application search – SearchController and the pure recompute step."""
from __future__ import annotations

import asyncio
import contextlib
import time
from typing import Any, Callable, Iterable, Iterator, Sequence

from rental_search.application.search.debounce import Debouncer
from rental_search.application.search.filters import filter_rooms
from rental_search.application.search.query import RoomFilters, normalize_query
from rental_search.application.search.ranking import sort_by_relevance
from rental_search.application.search.result import RoomSearchResult, SearchState
from rental_search.application.search.settings import DEFAULT_DEBOUNCE_MS, SearchSettings
from rental_search.config.validation import ConfigError
from rental_search.kernel.errors import ValidationError
from rental_search.kernel.time import AsyncioTimerScheduler, TimerScheduler
from rental_search.kernel.types import Room
from rental_search.observability.logging import get_logger

__all__ = ["SearchController", "StateListener", "recompute"]

StateListener = Callable[[SearchState], None]

_log = get_logger(__name__)


def recompute(
    rooms: Sequence[Room],
    debounced_query: str,
    filters: RoomFilters,
    max_results: int | None = None,
) -> RoomSearchResult:
    """Filter, rank and cap *rooms*.

    Pure: the output depends only on the arguments, and *rooms* is never
    modified. Ranking only applies when the debounced query is non-empty;
    the cap keeps the highest-ranked prefix.
    """
    q = normalize_query(debounced_query)
    matched = filter_rooms(rooms, filters.with_search(q))
    if q:
        matched = sort_by_relevance(matched, q)
    total = len(matched)
    if max_results is not None and total > max_results:
        matched = matched[:max_results]
    return RoomSearchResult(items=tuple(matched), total=total, query=q, max_results=max_results)


class SearchController:
    """Reactive search state for the room list.

    Owns the raw query, its debounced copy, the structured filters and the
    result cap; the derived result is recomputed lazily and cached until
    one of those inputs (or the room list) changes.

    Example::

        controller = SearchController(
            rooms, debounce_ms=300, max_results=50, scheduler=AsyncioTimerScheduler(loop)
        )
        controller.subscribe(render)
        controller.set_query("a1")      # is_searching -> True
        ...                             # 300 ms later: results re-ranked

    Without a *scheduler* the running event loop is used; constructing a
    debouncing controller outside of one raises :class:`ConfigError`.
    """

    def __init__(
        self,
        rooms: Iterable[Room] = (),
        *,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        max_results: int | None = None,
        scheduler: TimerScheduler | None = None,
    ) -> None:
        self._settings = SearchSettings(debounce_ms=debounce_ms, max_results=max_results)
        self._rooms: tuple[Room, ...] = tuple(rooms)
        self._rooms_version = 0
        self._filters = RoomFilters()
        if scheduler is None and debounce_ms > 0:
            scheduler = _running_loop_scheduler(debounce_ms)
        self._debouncer: Debouncer[str] = Debouncer(
            "", debounce_ms, scheduler=scheduler, on_settle=self._on_query_settled
        )
        self._updating = False
        self._listeners: list[StateListener] = []
        self._cache_key: tuple[Any, ...] | None = None
        self._cached: RoomSearchResult | None = None

    @classmethod
    def from_settings(
        cls,
        settings: SearchSettings,
        rooms: Iterable[Room] = (),
        *,
        scheduler: TimerScheduler | None = None,
    ) -> "SearchController":
        return cls(
            rooms,
            debounce_ms=settings.debounce_ms,
            max_results=settings.max_results,
            scheduler=scheduler,
        )

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def set_query(self, text: str | None) -> None:
        """Record a keystroke; the debounced query follows after the delay."""
        with self._batch():
            self._debouncer.set(text or "")
        self._notify()

    def update_filters(self, **changes: Any) -> None:
        """Merge *changes* into the current filters (``None`` clears a field)."""
        try:
            self._filters = self._filters.merge(**changes)
        except ValidationError as exc:
            _log.warning("search.filters_rejected", **exc.log_fields())
            raise
        _log.debug("search.filters_updated", **{k: _loggable(v) for k, v in changes.items()})
        self._notify()

    def set_filters(self, filters: RoomFilters) -> None:
        self._filters = filters
        self._notify()

    def clear_filters(self) -> None:
        """Reset the structured filters and the raw query together."""
        self._filters = RoomFilters()
        with self._batch():
            self._debouncer.set("")
        _log.debug("search.filters_cleared")
        self._notify()

    def set_rooms(self, rooms: Iterable[Room]) -> None:
        """Replace the input rooms; query and filters are kept."""
        self._rooms = tuple(rooms)
        self._rooms_version += 1
        self._notify()

    def flush(self) -> None:
        """Settle the pending query immediately (e.g. on submit)."""
        self._debouncer.flush()

    def close(self) -> None:
        """Cancel the pending debounce timer and drop all listeners."""
        self._debouncer.cancel()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._rooms

    @property
    def query(self) -> str:
        return self._debouncer.value

    @property
    def debounced_query(self) -> str:
        return self._debouncer.settled

    @property
    def filters(self) -> RoomFilters:
        return self._filters

    @property
    def max_results(self) -> int | None:
        return self._settings.max_results

    @property
    def debounce_ms(self) -> int:
        return self._settings.debounce_ms

    @property
    def result(self) -> RoomSearchResult:
        key = (self._rooms_version, self.debounced_query, self._filters, self.max_results)
        if self._cached is None or key != self._cache_key:
            started = time.monotonic()
            self._cached = recompute(self._rooms, self.debounced_query, self._filters, self.max_results)
            self._cache_key = key
            _log.debug(
                "search.recomputed",
                total=self._cached.total,
                returned=len(self._cached.items),
                took_ms=round((time.monotonic() - started) * 1000, 3),
            )
        return self._cached

    @property
    def results(self) -> tuple[Room, ...]:
        return self.result.items

    @property
    def has_active_filters(self) -> bool:
        return bool(self.query.strip()) or self._filters.has_structured

    @property
    def is_searching(self) -> bool:
        """True while the debounced query has not caught up with the raw one."""
        return self.query != self.debounced_query

    @property
    def state(self) -> SearchState:
        return SearchState(
            query=self.query,
            debounced_query=self.debounced_query,
            filters=self._filters,
            result=self.result,
            has_active_filters=self.has_active_filters,
            is_searching=self.is_searching,
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    @contextlib.contextmanager
    def _batch(self) -> Iterator[None]:
        # A zero-delay debouncer settles inside set(); the setter notifies once.
        self._updating = True
        try:
            yield
        finally:
            self._updating = False

    def _on_query_settled(self, query: str) -> None:
        _log.debug("search.query_settled", query=query)
        if not self._updating:
            self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)


def _loggable(value: Any) -> Any:
    return getattr(value, "value", value)


def _running_loop_scheduler(debounce_ms: int) -> AsyncioTimerScheduler:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as exc:
        raise ConfigError(
            "SearchController needs a scheduler when debounce_ms > 0 and no event loop is running",
            detail={"debounce_ms": debounce_ms},
            cause=exc,
        ) from exc
    return AsyncioTimerScheduler(loop)
