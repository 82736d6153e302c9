"""Config settings – Settings base class.

A settings class is a dataclass whose fields map one-to-one onto environment
variables named ``<_prefix>_<FIELD>``; ``_validate`` runs after construction
whether the values came from the environment or from keyword arguments.
"""
from __future__ import annotations

import dataclasses

from rental_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject out-of-range values via :meth:`invalid`."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*, e.g. ``ROOM_SEARCH_DEBOUNCE_MS``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def invalid(self, field_name: str, reason: str) -> InvalidSettingValueError:
        """Build the error for *field_name*'s current value, tagged with its env key."""
        return InvalidSettingValueError(
            field_name,
            getattr(self, field_name),
            reason,
            env_key=self.env_key(field_name),
        )


__all__ = ["Settings"]
