"""Static role table for legacy single-role principals.

Simple principals only carry a ``role``/``userType`` string.  This module
maps those names to their grants.  The table is process-wide constant
configuration; it is validated once at import and cannot be changed at
runtime.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from hrm_access.kernel.errors import InvariantViolationError, ValidationError
from hrm_access.kernel.security.permissions import (
    ALL_PERMISSIONS,
    AllPermissions,
    Grant,
    Permission,
    parse_permission,
)


class LegacyRole(str, Enum):
    """Role names understood by the static table."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    HR_MANAGER = "hr_manager"
    MANAGER = "manager"
    EMPLOYEE = "employee"
    USER = "user"

    @classmethod
    def resolve(cls, name: str | None) -> LegacyRole:
        """Map *name* to a table key; unknown or missing names get :attr:`USER`."""
        if name:
            try:
                return cls(name)
            except ValueError:
                pass
        return FALLBACK_ROLE


FALLBACK_ROLE: Final[LegacyRole] = LegacyRole.USER

ADMIN_ROLE_NAMES: Final[frozenset[str]] = frozenset({
    LegacyRole.SUPER_ADMIN.value,
    LegacyRole.ADMIN.value,
})


def _grants(*names: str) -> tuple[Grant, ...]:
    return tuple(parse_permission(n) for n in names)


# Every non-wildcard entry holds at least the fallback bucket.
_BASELINE = (
    "dashboard.view",
    "profile.own.view",
)

_SELF_SERVICE = (
    *_BASELINE,
    "hr.self_service.view",
    "attendance.own.view",
    "attendance.own.punch",
    "leave.own.view",
    "leave.own.create",
    "profile.own.update",
)

STATIC_ROLE_TABLE: Final[Mapping[LegacyRole, tuple[Grant, ...]]] = MappingProxyType({
    LegacyRole.SUPER_ADMIN: (ALL_PERMISSIONS,),
    LegacyRole.ADMIN: _grants(
        *_BASELINE,
        "hr.view",
        "hr.edit",
        "hr.manage",
        "employees.view",
        "employees.create",
        "employees.update",
        "employees.delete",
        "employees.manage",
        "departments.view",
        "departments.manage",
        "designations.view",
        "designations.manage",
        "attendance.view",
        "attendance.manage",
        "leaves.view",
        "leaves.approve",
        "leave-settings.update",
        "holidays.view",
        "holidays.manage",
        "reports.view",
        "settings.view",
        "settings.update",
    ),
    LegacyRole.HR_MANAGER: _grants(
        *_BASELINE,
        "hr.view",
        "hr.edit",
        "employees.view",
        "employees.create",
        "employees.update",
        "leaves.view",
        "leaves.approve",
        "attendance.view",
        "holidays.view",
        "hr.skills.view",
        "hr.skills.create",
        "hr.skills.update",
        "hr.onboarding.view",
        "hr.onboarding.manage",
        "hr.offboarding.view",
        "performance-reviews.view",
        "performance-reviews.create",
        "performance-templates.view",
    ),
    LegacyRole.MANAGER: _grants(
        *_BASELINE,
        "hr.self_service.view",
        "employees.view",
        "leaves.view",
        "leaves.approve",
        "attendance.view",
        "daily-works.view",
        "daily-works.approve",
        "tasks.view",
        "tasks.assign",
    ),
    LegacyRole.EMPLOYEE: _grants(*_SELF_SERVICE),
    LegacyRole.USER: _grants(*_BASELINE),
})

# Lower is more senior.  Unknown names rank below every known role.
ROLE_HIERARCHY: Final[Mapping[LegacyRole, int]] = MappingProxyType({
    LegacyRole.SUPER_ADMIN: 1,
    LegacyRole.ADMIN: 2,
    LegacyRole.HR_MANAGER: 3,
    LegacyRole.MANAGER: 5,
    LegacyRole.EMPLOYEE: 10,
    LegacyRole.USER: 11,
})
UNKNOWN_ROLE_LEVEL: Final[int] = 999


def table_grants(
    role_name: str | None,
    table: Mapping[LegacyRole, tuple[Grant, ...]] = STATIC_ROLE_TABLE,
) -> tuple[Grant, ...]:
    """Return the grants for *role_name*, using the fallback bucket when unknown."""
    return table.get(LegacyRole.resolve(role_name), ())


def role_hierarchy_level(role_name: str | None) -> int:
    """Seniority of *role_name*; ``999`` for names outside the table."""
    if not role_name:
        return UNKNOWN_ROLE_LEVEL
    try:
        return ROLE_HIERARCHY[LegacyRole(role_name)]
    except ValueError:
        return UNKNOWN_ROLE_LEVEL


def validate_role_table(table: Mapping[LegacyRole, tuple[Grant, ...]]) -> None:
    """Check a role table's invariants.

    Raises
    ------
    InvariantViolationError
        Listing every violation found.
    """
    errors: list[str] = []

    fallback: frozenset[Permission] = frozenset()
    if FALLBACK_ROLE not in table:
        errors.append(f"Fallback role '{FALLBACK_ROLE.value}' has no entry")
    else:
        fallback = frozenset(g for g in table[FALLBACK_ROLE] if isinstance(g, Permission))

    for role, grants in table.items():
        if not isinstance(role, LegacyRole):
            errors.append(f"Invalid role key: {role!r}")
            continue
        held = {g for g in grants if isinstance(g, Permission)}
        if ALL_PERMISSIONS not in grants and not fallback <= held:
            missing = sorted(g.value for g in fallback - held)
            errors.append(
                f"Role '{role.value}' grants less than the fallback role: missing {missing}"
            )
        for grant in grants:
            if isinstance(grant, AllPermissions):
                continue
            if not isinstance(grant, Permission):
                errors.append(f"Role '{role.value}' has non-grant entry {grant!r}")
                continue
            try:
                parsed = parse_permission(grant.value)
            except ValidationError as exc:
                errors.append(f"Role '{role.value}' has invalid permission: {exc.message}")
                continue
            if isinstance(parsed, AllPermissions):
                errors.append(f"Role '{role.value}' spells the wildcard as a Permission")
        if any(isinstance(g, AllPermissions) for g in grants) and len(grants) > 1:
            errors.append(f"Role '{role.value}' mixes the wildcard with explicit grants")

    if errors:
        raise InvariantViolationError(
            "Static role table validation failed:\n" + "\n".join(f"  - {e}" for e in errors),
            violations=errors,
        )


validate_role_table(STATIC_ROLE_TABLE)


__all__ = [
    "ADMIN_ROLE_NAMES",
    "FALLBACK_ROLE",
    "LegacyRole",
    "ROLE_HIERARCHY",
    "STATIC_ROLE_TABLE",
    "UNKNOWN_ROLE_LEVEL",
    "role_hierarchy_level",
    "table_grants",
    "validate_role_table",
]
