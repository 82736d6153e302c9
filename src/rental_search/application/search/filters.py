"""Application search – filter engine built from room specifications."""
from __future__ import annotations

from typing import Iterable

from rental_search.application.search.matcher import matches
from rental_search.application.search.query import RoomFilters, normalize_query
from rental_search.kernel.ddd import AllOf, BaseSpecification
from rental_search.kernel.types import Room, RoomStatus
from rental_search.observability.logging import get_logger

__all__ = [
    "InProperty",
    "MatchesQuery",
    "PriceAtLeast",
    "PriceAtMost",
    "StatusIs",
    "build_room_specification",
    "filter_rooms",
]

_log = get_logger(__name__)


class StatusIs(BaseSpecification[Room]):
    def __init__(self, status: RoomStatus) -> None:
        self.status = status

    def is_satisfied_by(self, candidate: Room) -> bool:
        return candidate.status == self.status


class InProperty(BaseSpecification[Room]):
    def __init__(self, property_id: str) -> None:
        self.property_id = property_id

    def is_satisfied_by(self, candidate: Room) -> bool:
        return candidate.property_id == self.property_id


class PriceAtLeast(BaseSpecification[Room]):
    """Inclusive lower bound on the rental price."""

    def __init__(self, amount: float) -> None:
        self.amount = amount

    def is_satisfied_by(self, candidate: Room) -> bool:
        return candidate.rental_price >= self.amount


class PriceAtMost(BaseSpecification[Room]):
    """Inclusive upper bound on the rental price."""

    def __init__(self, amount: float) -> None:
        self.amount = amount

    def is_satisfied_by(self, candidate: Room) -> bool:
        return candidate.rental_price <= self.amount


class MatchesQuery(BaseSpecification[Room]):
    """Text containment across code, name and tenant name."""

    def __init__(self, query: str) -> None:
        self.query = normalize_query(query)

    def is_satisfied_by(self, candidate: Room) -> bool:
        return matches(candidate, self.query)


def build_room_specification(filters: RoomFilters) -> AllOf[Room]:
    """Conjunction of the predicates *filters* activates (possibly empty)."""
    specs: list[BaseSpecification[Room]] = []
    if filters.property_id is not None:
        specs.append(InProperty(filters.property_id))
    if filters.status is not None:
        specs.append(StatusIs(filters.status))
    if filters.min_price is not None:
        specs.append(PriceAtLeast(filters.min_price))
    if filters.max_price is not None:
        specs.append(PriceAtMost(filters.max_price))
    if normalize_query(filters.search):
        specs.append(MatchesQuery(filters.search or ""))
    return AllOf(specs)


def filter_rooms(rooms: Iterable[Room], filters: RoomFilters) -> list[Room]:
    """Return the rooms passing every active filter, in input order.

    Never mutates *rooms*. With no active predicate the result holds the
    same rooms in the same order. ``min_price > max_price`` yields ``[]``.
    """
    if filters.payment_status is not None:
        _log.debug("search.payment_status_ignored", payment_status=filters.payment_status.value)
    spec = build_room_specification(filters)
    if not spec:
        return list(rooms)
    return spec.select(rooms)
