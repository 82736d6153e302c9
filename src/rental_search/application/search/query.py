"""Application search – RoomFilters value object and query normalisation."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from rental_search.kernel.errors import ValidationError
from rental_search.kernel.types import PaymentStatus, RoomStatus

__all__ = ["RoomFilters", "normalize_query"]


def normalize_query(query: str | None) -> str:
    """Trim and lower-case *query*; ``None`` becomes ``""``."""
    if not query:
        return ""
    return query.strip().lower()


@dataclass(frozen=True)
class RoomFilters:
    """Structured filters for the room list.

    Every field is optional; ``None`` means the predicate does not apply.
    Price bounds are inclusive. ``payment_status`` is accepted but has no
    effect on matching (rooms carry no payment data).
    """

    property_id: str | None = None
    status: RoomStatus | None = None
    payment_status: PaymentStatus | None = None
    min_price: float | None = None
    max_price: float | None = None
    search: str | None = None

    def __post_init__(self) -> None:
        if self.status is not None:
            object.__setattr__(self, "status", RoomStatus.parse(self.status))
        if self.payment_status is not None:
            object.__setattr__(self, "payment_status", PaymentStatus.parse(self.payment_status))
        for name in ("min_price", "max_price"):
            bound = getattr(self, name)
            if bound is not None and not isinstance(bound, (int, float, Decimal)):
                raise ValidationError.for_field(name, bound, "must be a number")

    def merge(self, **changes: Any) -> "RoomFilters":
        """Return a copy with *changes* applied; pass ``None`` to clear a field."""
        return dataclasses.replace(self, **changes)

    def with_search(self, search: str | None) -> "RoomFilters":
        return dataclasses.replace(self, search=search)

    @property
    def has_structured(self) -> bool:
        """True when any non-text filter is set."""
        return (
            self.property_id is not None
            or self.status is not None
            or self.payment_status is not None
            or self.min_price is not None
            or self.max_price is not None
        )

    @property
    def is_active(self) -> bool:
        return self.has_structured or bool(normalize_query(self.search))
