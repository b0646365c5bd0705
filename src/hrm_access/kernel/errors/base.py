"""Root of the hrm-access error hierarchy.

Every error carries a stable ``code`` slug next to its message.  Subclasses
expose their structured fields (violations, permission, env key) through
:meth:`BaseError.context`, so :meth:`BaseError.to_dict` has one flat shape
for log records and API error bodies alike.
"""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root error.

    Args:
        message: Human-readable summary.
        code: Stable slug; defaults to the class's ``default_code``.
        detail: Free-form context merged under ``"detail"``.
        cause: Underlying exception, chained as ``__cause__``.
    """

    default_code: ClassVar[str] = "hrm_access_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    def context(self) -> dict[str, Any]:
        """Type-specific structured fields; empty for the root."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        payload.update(self.context())
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return payload

    def __str__(self) -> str:
        return f"{self.message} [{self.code}]"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.code}: {self.message!r}>"


__all__ = ["BaseError"]
