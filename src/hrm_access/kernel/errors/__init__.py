"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   └── ValidationError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        └── ForbiddenError
"""

from hrm_access.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from hrm_access.kernel.errors.base import BaseError
from hrm_access.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
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
