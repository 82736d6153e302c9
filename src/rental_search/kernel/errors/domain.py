"""Domain errors – invalid room records and filter values."""

from __future__ import annotations

from typing import Any

from rental_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a room record or filter breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level failures, each a dict with at least
    ``field`` and ``reason``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: Any, reason: str) -> "ValidationError":
        """Build a single-field error with a uniform message."""
        return cls(
            f"Invalid value for '{field}': {reason}",
            errors=[{"field": field, "value": value, "reason": reason}],
        )

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base

    def log_fields(self) -> dict[str, Any]:
        return {**super().log_fields(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
