"""Application search – tiered relevance ranking.

Tiers, evaluated top to bottom; the first tier that tells two rooms apart
decides their order, full ties keep input order:

1. room code equals the query
2. room code starts with the query
3. room name equals the query
4. room name starts with the query
5. tenant name contains the query
"""
from __future__ import annotations

from typing import Iterable

from rental_search.application.search.query import normalize_query
from rental_search.kernel.types import Room

__all__ = ["RELEVANCE_TIERS", "compare_relevance", "relevance_key", "relevance_tiers", "sort_by_relevance"]

RELEVANCE_TIERS: tuple[str, ...] = (
    "code_exact",
    "code_prefix",
    "name_exact",
    "name_prefix",
    "tenant_contains",
)


def relevance_tiers(room: Room, normalized_query: str) -> tuple[bool, ...]:
    """Which tiers *room* hits, in :data:`RELEVANCE_TIERS` order."""
    code = (room.room_code or "").lower()
    name = (room.room_name or "").lower()
    tenant = room.tenant_name.lower()
    q = normalized_query
    return (
        code == q,
        code.startswith(q),
        name == q,
        name.startswith(q),
        q in tenant,
    )


def relevance_key(room: Room, normalized_query: str) -> tuple[int, ...]:
    """Sort key: hits sort as 0, misses as 1, compared lexicographically."""
    return tuple(0 if hit else 1 for hit in relevance_tiers(room, normalized_query))


def compare_relevance(a: Room, b: Room, normalized_query: str) -> int:
    """Three-way comparison: negative when *a* ranks first, 0 on a full tie."""
    ka = relevance_key(a, normalized_query)
    kb = relevance_key(b, normalized_query)
    return (ka > kb) - (ka < kb)


def sort_by_relevance(rooms: Iterable[Room], query: str | None) -> list[Room]:
    """Return a new list ordered by relevance to *query*.

    An empty query leaves the order untouched. ``sorted`` is stable, so
    rooms that tie on every tier keep their relative input order.
    """
    q = normalize_query(query)
    if not q:
        return list(rooms)
    return sorted(rooms, key=lambda room: relevance_key(room, q))
