"""Room and tenant value objects – the unit of searchable data."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Final, Mapping

from rental_search.kernel.errors.domain import ValidationError

_FEE_FIELDS: Final = ("electricity_fee", "water_fee", "garbage_fee", "parking_fee")
_AMOUNT_FIELDS: Final = ("rental_price", *_FEE_FIELDS)


class RoomStatus(str, Enum):
    """Occupancy status of a room."""

    VACANT = "vacant"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"

    @classmethod
    def parse(cls, value: "RoomStatus | str") -> "RoomStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError.for_field(
                "status", value, f"must be one of {[s.value for s in cls]}"
            ) from None


class PaymentStatus(str, Enum):
    """Payment status accepted by room filters."""

    PAID = "paid"
    UNPAID = "unpaid"

    @classmethod
    def parse(cls, value: "PaymentStatus | str") -> "PaymentStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError.for_field(
                "payment_status", value, f"must be one of {[s.value for s in cls]}"
            ) from None


def _pick(data: Mapping[str, Any], snake: str, camel: str, default: Any = dataclasses.MISSING) -> Any:
    if snake in data:
        return data[snake]
    if camel in data:
        return data[camel]
    if default is dataclasses.MISSING:
        raise ValidationError.for_field(snake, None, "is required")
    return default


def _to_datetime(field: str, value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError.for_field(field, value, "must be an ISO-8601 timestamp") from None


@dataclasses.dataclass(frozen=True, slots=True)
class TenantSummary:
    """Tenant embedded in an occupied room."""

    id: str
    name: str
    phone: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TenantSummary":
        return cls(
            id=str(_pick(data, "id", "id")),
            name=str(_pick(data, "name", "name", "") or ""),
            phone=str(_pick(data, "phone", "phone", "") or ""),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Room:
    """A rental unit, read-only input to the search core.

    ``status`` accepts the plain string form and is normalised to
    :class:`RoomStatus`. Amounts must be non-negative.
    """

    id: str
    property_id: str
    room_code: str
    room_name: str
    status: RoomStatus
    rental_price: float
    electricity_fee: float = 0
    water_fee: float = 0
    garbage_fee: float = 0
    parking_fee: float = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tenant: TenantSummary | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", RoomStatus.parse(self.status))
        for name in _AMOUNT_FIELDS:
            amount = getattr(self, name)
            if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
                raise ValidationError.for_field(name, amount, "must be a number")
            if amount < 0:
                raise ValidationError.for_field(name, amount, "must be non-negative")

    @property
    def tenant_name(self) -> str:
        """Tenant display name, or ``""`` when the room has no tenant."""
        return self.tenant.name if self.tenant is not None else ""

    @property
    def monthly_charges(self) -> float:
        """Rental price plus the four recurring fees."""
        return self.rental_price + sum(getattr(self, name) for name in _FEE_FIELDS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Room":
        """Build a room from an API payload (camelCase) or a snake_case dict."""
        tenant_data = data.get("tenant")
        return cls(
            id=str(_pick(data, "id", "id")),
            property_id=str(_pick(data, "property_id", "propertyId")),
            room_code=str(_pick(data, "room_code", "roomCode", "") or ""),
            room_name=str(_pick(data, "room_name", "roomName", "") or ""),
            status=_pick(data, "status", "status"),
            rental_price=_pick(data, "rental_price", "rentalPrice"),
            electricity_fee=_pick(data, "electricity_fee", "electricityFee", 0),
            water_fee=_pick(data, "water_fee", "waterFee", 0),
            garbage_fee=_pick(data, "garbage_fee", "garbageFee", 0),
            parking_fee=_pick(data, "parking_fee", "parkingFee", 0),
            created_at=_to_datetime("created_at", _pick(data, "created_at", "createdAt", None)),
            updated_at=_to_datetime("updated_at", _pick(data, "updated_at", "updatedAt", None)),
            tenant=TenantSummary.from_mapping(tenant_data) if tenant_data else None,
        )


__all__ = ["PaymentStatus", "Room", "RoomStatus", "TenantSummary"]
