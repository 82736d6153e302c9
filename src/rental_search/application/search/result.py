"""Application search – result containers."""
from __future__ import annotations

from dataclasses import dataclass

from rental_search.application.search.query import RoomFilters
from rental_search.kernel.types import Room

__all__ = ["RoomSearchResult", "SearchState"]


@dataclass(frozen=True)
class RoomSearchResult:
    """Filtered, ranked and capped rooms plus the uncapped match count."""

    items: tuple[Room, ...]
    total: int
    query: str = ""
    max_results: int | None = None

    @property
    def truncated(self) -> bool:
        return self.total > len(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SearchState:
    """Snapshot of a :class:`SearchController` handed to listeners."""

    query: str
    debounced_query: str
    filters: RoomFilters
    result: RoomSearchResult
    has_active_filters: bool
    is_searching: bool

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self.result.items
