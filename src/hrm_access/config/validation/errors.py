"""Config validation errors – raised while reading ``HRM_ACCESS_*`` settings.

Each error names the environment variable at fault, so a bad deployment is
fixable from the message alone.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hrm_access.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable set."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"{env_key} must be set")
        self.env_key = env_key

    def context(self) -> dict[str, Any]:
        return {"env_key": self.env_key}


class InvalidSettingValueError(ConfigError):
    """An environment variable holds a value its setting does not accept.

    Pass *allowed* for closed vocabularies (log levels, boolean spellings);
    *expected* overrides the generated "one of ..." wording.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        env_key: str,
        value: str,
        *,
        allowed: Iterable[str] = (),
        expected: str | None = None,
    ) -> None:
        self.env_key = env_key
        self.value = value
        self.allowed = tuple(allowed)
        if expected is None:
            expected = "one of " + ", ".join(self.allowed)
        super().__init__(f"{env_key}={value!r}: expected {expected}")

    def context(self) -> dict[str, Any]:
        return {"env_key": self.env_key, "value": self.value, "allowed": list(self.allowed)}


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
