"""Testing generators – builders, datasets and Hypothesis strategies."""
from rental_search.testing.generators.builder import Builder, DataclassBuilder
from rental_search.testing.generators.rooms import RoomBuilder, make_rooms
from rental_search.testing.generators.strategies import (
    query_strategy,
    room_code_strategy,
    room_filters_strategy,
    room_strategy,
    rooms_strategy,
    tenant_strategy,
)

__all__ = [
    "Builder",
    "DataclassBuilder",
    "RoomBuilder",
    "make_rooms",
    "query_strategy",
    "room_code_strategy",
    "room_filters_strategy",
    "room_strategy",
    "rooms_strategy",
    "tenant_strategy",
]
