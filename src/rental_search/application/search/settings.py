"""Application search – SearchSettings."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from rental_search.config.settings import EnvSettingsLoader, Settings
from rental_search.observability.logging import JsonLoggerFactory

__all__ = ["DEFAULT_DEBOUNCE_MS", "SearchSettings", "configure_logging"]

DEFAULT_DEBOUNCE_MS = 300


@dataclasses.dataclass
class SearchSettings(Settings):
    """Search tuning, loadable from ``ROOM_SEARCH_*`` environment variables.

    ``max_results`` of ``None`` disables the result cap.
    """

    _prefix: dataclasses.ClassVar[str] = "ROOM_SEARCH"

    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    max_results: int | None = None
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.debounce_ms < 0:
            raise self.invalid("debounce_ms", "must be >= 0")
        if self.max_results is not None and self.max_results <= 0:
            raise self.invalid("max_results", "must be a positive integer")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchSettings":
        return EnvSettingsLoader(environ).load(cls)


def configure_logging(settings: SearchSettings) -> None:
    """Install JSON structlog output at ``settings.log_level``."""
    JsonLoggerFactory.configure(settings.log_level)
