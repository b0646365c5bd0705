"""Kernel security – AccessEvaluator.

Pure decision functions over a principal and a permission / role query.
A principal is granted a permission when ANY of these holds:

1. the permission is in ``principal.permissions``;
2. one of ``principal.roles`` carries it;
3. ``principal.is_super_admin`` is set;
4. the static table entry for the principal's legacy role is
   :data:`~hrm_access.kernel.security.permissions.ALL_PERMISSIONS`;
5. that table entry lists the permission.

When no principal is passed, the current one from
:class:`~hrm_access.kernel.security.security_context.SecurityContext` is
used.  With neither available every check answers "no".

Example::

    evaluator = AccessEvaluator()
    if evaluator.has_permission(["hr.skills.update", "hr.skills.delete"], user):
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from hrm_access.config.settings import AccessSettings, EnvSettingsLoader
from hrm_access.kernel.security.permissions import (
    AllPermissions,
    Grant,
    compose_permission,
    grant_to_str,
)
from hrm_access.kernel.security.principal import Principal, normalize_principal
from hrm_access.kernel.security.role_table import (
    ADMIN_ROLE_NAMES,
    STATIC_ROLE_TABLE,
    LegacyRole,
    role_hierarchy_level,
    table_grants,
)
from hrm_access.kernel.security.security_context import SecurityContext
from hrm_access.observability.logging.processors import get_logger

_log = get_logger(__name__)


def _as_names(query: Any, kind: str) -> tuple[str, ...]:
    """Coerce a ``str | Iterable[str]`` argument; malformed input yields ``()``."""
    if isinstance(query, str):
        return (query,)
    if isinstance(query, (bytes, Mapping)) or not isinstance(query, Iterable):
        _log.debug("access.malformed_query", kind=kind, type=type(query).__name__)
        return ()
    return tuple(q for q in query if isinstance(q, str))


class AccessEvaluator:
    """Stateless access-control evaluator.

    Holds only immutable configuration (the static role table and
    :class:`AccessSettings`); every call recomputes from its arguments.
    Without explicit *settings*, ``HRM_ACCESS_*`` environment variables are
    read once at construction.
    """

    def __init__(
        self,
        settings: AccessSettings | None = None,
        *,
        table: Mapping[LegacyRole, tuple[Grant, ...]] = STATIC_ROLE_TABLE,
    ) -> None:
        if settings is None:
            settings = EnvSettingsLoader().load(AccessSettings)
        self._settings = settings
        self._table = table

    @property
    def settings(self) -> AccessSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Principal resolution
    # ------------------------------------------------------------------

    def resolve_principal(self, principal: Any = None) -> Principal | None:
        """Normalize *principal*, falling back to the context principal."""
        if principal is None:
            return SecurityContext.get_current()
        return normalize_principal(principal)

    # ------------------------------------------------------------------
    # Permission checks
    # ------------------------------------------------------------------

    def _grants(self, principal: Principal, permission: str) -> bool:
        if permission in principal.permissions:
            return True
        if any(role.grants(permission) for role in principal.roles):
            return True
        if principal.is_super_admin:
            return True
        for grant in table_grants(principal.legacy_role, self._table):
            if isinstance(grant, AllPermissions) or grant.value == permission:
                return True
        return False

    def has_permission(self, permission: str | Iterable[str], principal: Any = None) -> bool:
        """True iff *principal* holds at least one of the requested permissions."""
        resolved = self.resolve_principal(principal)
        if resolved is None:
            return False
        requested = _as_names(permission, "permission")
        allowed = any(self._grants(resolved, p) for p in requested)
        if not allowed:
            self._log_denied(resolved, "permission", requested)
        return allowed

    def has_all_permissions(self, permissions: Iterable[str], principal: Any = None) -> bool:
        """True iff *principal* holds every requested permission.

        An empty request is denied.
        """
        resolved = self.resolve_principal(principal)
        if resolved is None:
            return False
        requested = _as_names(permissions, "permission")
        if not requested:
            return False
        allowed = all(self._grants(resolved, p) for p in requested)
        if not allowed:
            self._log_denied(resolved, "permission", requested)
        return allowed

    def can_perform_action(self, action: str, resource: str, principal: Any = None) -> bool:
        """Check ``"<resource>.<action>"`` via :meth:`has_permission`."""
        if not isinstance(action, str) or not isinstance(resource, str):
            return False
        return self.has_permission(compose_permission(action, resource), principal)

    def get_all_permissions(self, principal: Any = None) -> frozenset[str]:
        """Union of direct, role-inherited and table permissions.

        The table wildcard is kept as the literal ``"*"``.
        """
        resolved = self.resolve_principal(principal)
        if resolved is None:
            return frozenset()
        collected: set[str] = set(resolved.permissions)
        for role in resolved.roles:
            collected.update(role.permissions)
        collected.update(
            grant_to_str(g) for g in table_grants(resolved.legacy_role, self._table)
        )
        return frozenset(collected)

    # ------------------------------------------------------------------
    # Role checks
    # ------------------------------------------------------------------

    def has_role(self, role_names: str | Iterable[str], principal: Any = None) -> bool:
        """True iff *principal*'s role names intersect *role_names*."""
        resolved = self.resolve_principal(principal)
        if resolved is None:
            return False
        requested = _as_names(role_names, "role")
        allowed = not resolved.role_names.isdisjoint(requested)
        if not allowed:
            self._log_denied(resolved, "role", requested)
        return allowed

    def is_admin(self, principal: Any = None) -> bool:
        """Super-admin flag, admin legacy role, or an admin entry in ``roles``."""
        resolved = self.resolve_principal(principal)
        if resolved is None:
            return False
        return (
            resolved.is_super_admin
            or resolved.legacy_role in ADMIN_ROLE_NAMES
            or not resolved.role_names.isdisjoint(ADMIN_ROLE_NAMES)
        )

    def can_manage_role(self, manager_role: str, target_role: str) -> bool:
        """True iff *manager_role* is strictly more senior than *target_role*."""
        return role_hierarchy_level(manager_role) < role_hierarchy_level(target_role)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    def can_access_resource(self, resource: Any, principal: Any = None) -> bool:
        """Owner, assigned user, or administrator may access *resource*."""
        resolved = self.resolve_principal(principal)
        if resource is None or resolved is None:
            return False
        if resolved.id is not None:
            user_id = _field(resource, "user_id", "userId")
            owner_id = _field(resource, "owner_id", "ownerId")
            if user_id == resolved.id or owner_id == resolved.id:
                return True
        return self.is_admin(resolved)

    # ------------------------------------------------------------------

    def _log_denied(self, principal: Principal, kind: str, requested: tuple[str, ...]) -> None:
        if self._settings.log_decisions:
            _log.debug(
                "access.denied",
                kind=kind,
                principal_id=principal.id,
                requested=list(requested),
            )


def _field(source: Any, *names: str) -> Any:
    for name in names:
        if isinstance(source, Mapping):
            if source.get(name) is not None:
                return source[name]
        else:
            value = getattr(source, name, None)
            if value is not None:
                return value
    return None


# ---------------------------------------------------------------------------
# Module-level API backed by a default evaluator
# ---------------------------------------------------------------------------

default_evaluator = AccessEvaluator()


def has_permission(permission: str | Iterable[str], principal: Any = None) -> bool:
    return default_evaluator.has_permission(permission, principal)


def has_all_permissions(permissions: Iterable[str], principal: Any = None) -> bool:
    return default_evaluator.has_all_permissions(permissions, principal)


def has_role(role_names: str | Iterable[str], principal: Any = None) -> bool:
    return default_evaluator.has_role(role_names, principal)


def can_perform_action(action: str, resource: str, principal: Any = None) -> bool:
    return default_evaluator.can_perform_action(action, resource, principal)


def get_all_permissions(principal: Any = None) -> frozenset[str]:
    return default_evaluator.get_all_permissions(principal)


def is_admin(principal: Any = None) -> bool:
    return default_evaluator.is_admin(principal)


def can_access_resource(resource: Any, principal: Any = None) -> bool:
    return default_evaluator.can_access_resource(resource, principal)


def can_manage_role(manager_role: str, target_role: str) -> bool:
    return default_evaluator.can_manage_role(manager_role, target_role)


__all__ = [
    "AccessEvaluator",
    "can_access_resource",
    "can_manage_role",
    "can_perform_action",
    "default_evaluator",
    "get_all_permissions",
    "has_all_permissions",
    "has_permission",
    "has_role",
    "is_admin",
]
