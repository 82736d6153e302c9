"""Config validation errors.

Each error carries a ``detail`` payload naming the setting (and, where known,
the environment variable it was read from) so a failed start-up can be logged
as structured fields.
"""
from __future__ import annotations

from rental_search.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration is invalid, incomplete or cannot drive the search."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but out of range (negative debounce, zero cap...)."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        detail: dict[str, object] = {"setting": setting_name, "value": value, "reason": reason}
        if env_key is not None:
            detail["env_key"] = env_key
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}", detail=detail)
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.env_key = env_key


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
