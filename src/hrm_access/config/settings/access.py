"""Config settings – AccessSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from hrm_access.config.settings.base import Settings
from hrm_access.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass(frozen=True)
class AccessSettings(Settings):
    """Runtime knobs for the evaluator's ambient behaviour.

    The static role table is not configurable here; it is fixed at import.
    """

    _prefix: ClassVar[str] = "HRM_ACCESS"

    log_level: str = "INFO"
    log_json: bool = True
    log_decisions: bool = False

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LEVELS:
            raise InvalidSettingValueError(self.env_key("log_level"), self.log_level, allowed=_LEVELS)
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["AccessSettings"]
