"""Guard errors – raised when a handler runs without enough access."""

from __future__ import annotations

from typing import Any

from hrm_access.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised at a use-case boundary; the evaluator itself never raises these."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """A guarded call ran with no principal in the security context."""

    default_code = "unauthorized"

    def __init__(self, message: str = "No authenticated principal in context", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ForbiddenError(ApplicationError):
    """The current principal lacks the permission or role a guard demands.

    ``requirement`` is the guard's label (alternatives joined with ``" | "``)
    and ``kind`` says whether it names permissions or roles.
    """

    default_code = "forbidden"

    def __init__(
        self,
        principal_id: Any = None,
        requirement: str | None = None,
        *,
        kind: str = "permission",
        **kwargs: Any,
    ) -> None:
        if requirement is None:
            message = "Access denied"
        else:
            message = f"principal {principal_id!r} lacks {kind} {requirement!r}"
        super().__init__(message, **kwargs)
        self.principal_id = principal_id
        self.requirement = requirement
        self.kind = kind

    def context(self) -> dict[str, Any]:
        return {"principal_id": self.principal_id, "kind": self.kind, "requirement": self.requirement}


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
