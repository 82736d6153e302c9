"""Application search – multi-field substring matcher."""
from __future__ import annotations

from typing import Iterable

from rental_search.application.search.query import normalize_query
from rental_search.kernel.types import Room

__all__ = ["find_first_matches", "matches", "search_rooms"]

DEFAULT_FIRST_MATCHES_LIMIT = 100


def matches(room: Room, normalized_query: str) -> bool:
    """Return True if *normalized_query* is a substring of the room code,
    room name or tenant name. An empty query matches every room."""
    if not normalized_query:
        return True
    return (
        normalized_query in (room.room_code or "").lower()
        or normalized_query in (room.room_name or "").lower()
        or normalized_query in room.tenant_name.lower()
    )


def search_rooms(rooms: Iterable[Room], query: str | None) -> list[Room]:
    """Text-only search; returns a new list in input order."""
    q = normalize_query(query)
    if not q:
        return list(rooms)
    return [room for room in rooms if matches(room, q)]


def find_first_matches(
    rooms: Iterable[Room],
    query: str | None,
    limit: int = DEFAULT_FIRST_MATCHES_LIMIT,
) -> list[Room]:
    """Scan *rooms* and stop after *limit* matches (input order, no ranking).

    An empty query returns every room, uncapped.
    """
    q = normalize_query(query)
    if not q:
        return list(rooms)
    found: list[Room] = []
    for room in rooms:
        if len(found) >= limit:
            break
        if matches(room, q):
            found.append(room)
    return found
