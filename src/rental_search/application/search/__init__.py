"""Application search – in-memory room search, filtering and ranking."""
from rental_search.application.search.controller import SearchController, StateListener, recompute
from rental_search.application.search.debounce import Debouncer
from rental_search.application.search.filters import (
    InProperty,
    MatchesQuery,
    PriceAtLeast,
    PriceAtMost,
    StatusIs,
    build_room_specification,
    filter_rooms,
)
from rental_search.application.search.highlight import HighlightSegment, highlight_room, highlight_text
from rental_search.application.search.matcher import find_first_matches, matches, search_rooms
from rental_search.application.search.query import RoomFilters, normalize_query
from rental_search.application.search.ranking import (
    RELEVANCE_TIERS,
    compare_relevance,
    relevance_key,
    relevance_tiers,
    sort_by_relevance,
)
from rental_search.application.search.result import RoomSearchResult, SearchState
from rental_search.application.search.settings import SearchSettings, configure_logging

__all__ = [
    "RELEVANCE_TIERS",
    "Debouncer",
    "HighlightSegment",
    "InProperty",
    "MatchesQuery",
    "PriceAtLeast",
    "PriceAtMost",
    "RoomFilters",
    "RoomSearchResult",
    "SearchController",
    "SearchSettings",
    "SearchState",
    "StateListener",
    "StatusIs",
    "build_room_specification",
    "compare_relevance",
    "configure_logging",
    "filter_rooms",
    "find_first_matches",
    "highlight_room",
    "highlight_text",
    "matches",
    "normalize_query",
    "recompute",
    "relevance_key",
    "relevance_tiers",
    "search_rooms",
    "sort_by_relevance",
]
