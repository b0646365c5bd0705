"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass(frozen=True)
class Settings:
    """Frozen settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction and should report problems under :meth:`env_key`.
    """

    _prefix: ClassVar[str] = ""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable backing *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
