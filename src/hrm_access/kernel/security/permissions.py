"""Kernel security – Permission, AllPermissions and boundary parsing.

Permissions travel as plain strings between the session payload and the
evaluator.  Inside typed code a grant is either a concrete
:class:`Permission` or the :data:`ALL_PERMISSIONS` variant; the literal
``"*"`` only exists at the string boundary.
"""
from __future__ import annotations

import dataclasses
from typing import Final, Union

from hrm_access.kernel.errors import ValidationError

WILDCARD: Final[str] = "*"


@dataclasses.dataclass(frozen=True)
class Permission:
    """Opaque permission token (e.g. ``'hr.skills.view'`` or ``'read employees'``)."""

    value: str

    def __str__(self) -> str:
        return self.value


class AllPermissions:
    """Grant variant meaning "every permission".  Use :data:`ALL_PERMISSIONS`."""

    _instance: AllPermissions | None = None

    def __new__(cls) -> AllPermissions:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self) -> str:
        return WILDCARD

    def __repr__(self) -> str:
        return "ALL_PERMISSIONS"


ALL_PERMISSIONS: Final[AllPermissions] = AllPermissions()

Grant = Union[Permission, AllPermissions]


def parse_permission(raw: object) -> Grant:
    """Parse a boundary string into a typed grant.

    ``"*"`` becomes :data:`ALL_PERMISSIONS`; any other non-empty string
    becomes a :class:`Permission` with surrounding whitespace stripped.

    Raises
    ------
    ValidationError
        If *raw* is not a string or is blank.
    """
    if not isinstance(raw, str):
        raise ValidationError(
            f"Permission must be a string, got {type(raw).__name__}", value=raw
        )
    token = raw.strip()
    if not token:
        raise ValidationError("Permission must not be blank", value=raw)
    if token == WILDCARD:
        return ALL_PERMISSIONS
    return Permission(token)


def grant_to_str(grant: Grant) -> str:
    """Serialise a grant back to its boundary string."""
    return str(grant)


def compose_permission(action: str, resource: str) -> str:
    """Build the dotted ``"<resource>.<action>"`` permission name."""
    return f"{resource}.{action}"


__all__ = [
    "ALL_PERMISSIONS",
    "AllPermissions",
    "Grant",
    "Permission",
    "WILDCARD",
    "compose_permission",
    "grant_to_str",
    "parse_permission",
]
