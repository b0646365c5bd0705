"""Domain errors – access-model invariants and malformed tokens."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from hrm_access.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an access-model rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """Static access configuration breaks one of its invariants."""

    default_code = "invariant_violation"

    def __init__(
        self,
        message: str,
        *,
        violations: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.violations: list[str] = list(violations)

    def context(self) -> dict[str, Any]:
        return {"violations": self.violations}


class ValidationError(DomainError):
    """A value crossing the string boundary cannot be parsed.

    ``value`` holds the offending input as received.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, value: Any = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.value = value

    def context(self) -> dict[str, Any]:
        return {"value": repr(self.value)}


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "ValidationError",
]
