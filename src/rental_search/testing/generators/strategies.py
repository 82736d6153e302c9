"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "rental-search[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from rental_search.application.search import RoomFilters
    from rental_search.kernel.types import Room, TenantSummary

# Small alphabet so generated queries hit generated rooms often.
QUERY_ALPHABET = "AaBbRr0123 "
PROPERTY_IDS: tuple[str, ...] = ("prop-1", "prop-2")
MAX_AMOUNT = 100_000_000


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def room_code_strategy() -> "SearchStrategy[str]":
    """Upper-case alphanumeric codes of 3-10 characters, e.g. ``A101``."""
    st = _require_hypothesis()
    return st.from_regex(r"[A-Z0-9]{3,10}", fullmatch=True)


def tenant_strategy() -> "SearchStrategy[TenantSummary]":
    from rental_search.kernel.types import TenantSummary

    st = _require_hypothesis()
    return st.builds(
        TenantSummary,
        id=st.uuids().map(str),
        name=st.text(min_size=1, max_size=30),
        phone=st.from_regex(r"(0|\+84)[0-9]{9}", fullmatch=True),
    )


def room_strategy() -> "SearchStrategy[Room]":
    """Random valid rooms; only occupied rooms carry a tenant."""
    from rental_search.kernel.types import Room, RoomStatus

    st = _require_hypothesis()

    def _build(status: RoomStatus, tenant: Any, **fields: Any) -> Room:
        return Room(status=status, tenant=tenant if status is RoomStatus.OCCUPIED else None, **fields)

    amount = st.integers(min_value=0, max_value=MAX_AMOUNT)
    return st.builds(
        _build,
        status=st.sampled_from(list(RoomStatus)),
        tenant=st.none() | tenant_strategy(),
        id=st.uuids().map(str),
        property_id=st.sampled_from(PROPERTY_IDS),
        room_code=room_code_strategy(),
        room_name=st.text(min_size=1, max_size=40),
        rental_price=amount,
        electricity_fee=amount,
        water_fee=amount,
        garbage_fee=amount,
        parking_fee=amount,
    )


def rooms_strategy(max_size: int = 25) -> "SearchStrategy[list[Room]]":
    st = _require_hypothesis()
    return st.lists(room_strategy(), max_size=max_size)


def query_strategy() -> "SearchStrategy[str]":
    """Short queries over :data:`QUERY_ALPHABET`, including ``""`` and blanks."""
    st = _require_hypothesis()
    return st.text(alphabet=QUERY_ALPHABET, max_size=4)


def room_filters_strategy() -> "SearchStrategy[RoomFilters]":
    from rental_search.application.search import RoomFilters
    from rental_search.kernel.types import RoomStatus

    st = _require_hypothesis()
    bound = st.none() | st.integers(min_value=0, max_value=MAX_AMOUNT)
    return st.builds(
        RoomFilters,
        property_id=st.none() | st.sampled_from(PROPERTY_IDS),
        status=st.none() | st.sampled_from(list(RoomStatus)),
        min_price=bound,
        max_price=bound,
        search=st.none() | query_strategy(),
    )


__all__ = [
    "query_strategy",
    "room_code_strategy",
    "room_filters_strategy",
    "room_strategy",
    "rooms_strategy",
    "tenant_strategy",
]
