"""Kernel – framework-agnostic access-control building blocks."""

from hrm_access.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InvariantViolationError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InvariantViolationError",
    "UnauthorizedError",
    "ValidationError",
]
