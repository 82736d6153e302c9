"""Property-based tests for the search core."""
from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from rental_search.application.search import (
    RoomFilters,
    compare_relevance,
    filter_rooms,
    highlight_text,
    normalize_query,
    recompute,
    relevance_key,
    search_rooms,
    sort_by_relevance,
)
from rental_search.testing.generators import (
    query_strategy,
    room_filters_strategy,
    room_strategy,
    rooms_strategy,
)

_SETTINGS = settings(max_examples=75, deadline=None)


@_SETTINGS
@given(rooms_strategy())
def test_empty_query_is_identity(rooms):
    assert filter_rooms(rooms, RoomFilters()) == rooms
    assert sort_by_relevance(rooms, "") == rooms


@_SETTINGS
@given(rooms_strategy(), query_strategy())
def test_every_match_contains_query(rooms, query):
    q = normalize_query(query)
    for room in search_rooms(rooms, query):
        fields = (room.room_code.lower(), room.room_name.lower(), room.tenant_name.lower())
        assert not q or any(q in f for f in fields)


@_SETTINGS
@given(rooms_strategy(), query_strategy())
def test_ranking_is_a_fixed_point(rooms, query):
    once = sort_by_relevance(rooms, query)
    assert sort_by_relevance(once, query) == once
    assert sorted(map(id, once)) == sorted(map(id, rooms))


@_SETTINGS
@given(rooms_strategy(), query_strategy())
def test_ranked_output_is_non_decreasing(rooms, query):
    q = normalize_query(query)
    ranked = sort_by_relevance(rooms, query)
    if q:
        keys = [relevance_key(r, q) for r in ranked]
        assert keys == sorted(keys)


@_SETTINGS
@given(room_strategy(), room_strategy(), room_strategy(), query_strategy())
def test_comparator_symmetric_and_transitive(a, b, c, query):
    q = normalize_query(query)
    assert compare_relevance(a, b, q) == -compare_relevance(b, a, q)
    if compare_relevance(a, b, q) <= 0 and compare_relevance(b, c, q) <= 0:
        assert compare_relevance(a, c, q) <= 0


@_SETTINGS
@given(st.text(max_size=40), st.text(max_size=6))
def test_segments_cover_text(text, query):
    segments = highlight_text(text, query)
    assert "".join(s.text for s in segments) == text
    assert sum(s.highlighted for s in segments) <= 1


@_SETTINGS
@given(rooms_strategy(), room_filters_strategy())
def test_filtering_only_selects(rooms, filters):
    result = filter_rooms(rooms, filters)
    positions = [rooms.index(r) for r in result]
    assert positions == sorted(positions)
    if filters.min_price is not None:
        assert all(r.rental_price >= filters.min_price for r in result)
    if filters.max_price is not None:
        assert all(r.rental_price <= filters.max_price for r in result)


@_SETTINGS
@given(rooms_strategy(), query_strategy(), room_filters_strategy(), st.integers(min_value=1, max_value=10))
def test_cap_is_prefix_of_uncapped(rooms, query, filters, cap):
    uncapped = recompute(rooms, query, filters)
    capped = recompute(rooms, query, filters, max_results=cap)
    assert len(capped.items) <= cap
    assert capped.items == uncapped.items[:cap]
    assert capped.total == uncapped.total
