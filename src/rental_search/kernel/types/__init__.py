"""Kernel types – room value objects."""
from rental_search.kernel.types.room import PaymentStatus, Room, RoomStatus, TenantSummary

__all__ = ["PaymentStatus", "Room", "RoomStatus", "TenantSummary"]
