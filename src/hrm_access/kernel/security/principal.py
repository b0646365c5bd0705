"""Kernel security – Principal, Role and boundary normalization.

The session layer hands over user payloads in whatever shape the host
produced (camelCase dicts from a JSON page prop, ORM objects, already
normalized records).  :func:`normalize_principal` turns any of those into
a :class:`Principal` once, so decision code never inspects raw shapes.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from hrm_access.observability.logging.processors import get_logger

_log = get_logger(__name__)

_MISSING = object()

_SCALARS = (str, bytes, bytearray, int, float)
_COLLECTIONS = (list, tuple, set, frozenset)


@dataclasses.dataclass(frozen=True)
class Role:
    """Named bundle of permissions held by a principal."""

    name: str
    permissions: frozenset[str] = frozenset()

    def __str__(self) -> str:
        return self.name

    def grants(self, permission: str) -> bool:
        return permission in self.permissions


@dataclasses.dataclass(frozen=True)
class Principal:
    """Normalized authenticated actor."""

    id: str | int | None = None
    permissions: frozenset[str] = frozenset()
    roles: tuple[Role, ...] = ()
    role: str | None = None
    user_type: str | None = None
    is_super_admin: bool = False

    @property
    def legacy_role(self) -> str | None:
        """Single legacy role name; ``role`` wins over ``user_type``."""
        return self.role or self.user_type

    @property
    def role_names(self) -> frozenset[str]:
        """Names from ``roles``, falling back to :attr:`legacy_role`."""
        if self.roles:
            return frozenset(r.name for r in self.roles)
        if self.legacy_role:
            return frozenset({self.legacy_role})
        return frozenset()


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def _read(source: Any, *names: str) -> Any:
    """Return the first present field among *names* on a mapping or object."""
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        else:
            value = getattr(source, name, _MISSING)
            if value is not _MISSING:
                return value
    return None


def _iter_entries(raw: Any, field: str) -> Iterable[Any]:
    if raw is None:
        return ()
    if isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        _log.debug("principal.field_dropped", field=field, type=type(raw).__name__)
        return ()
    return raw


def _permission_name(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry or None
    name = _read(entry, "name")
    if isinstance(name, str) and name:
        return name
    _log.debug("principal.permission_dropped", type=type(entry).__name__)
    return None


def _permission_set(raw: Any, field: str = "permissions") -> frozenset[str]:
    names = (_permission_name(e) for e in _iter_entries(raw, field))
    return frozenset(n for n in names if n is not None)


def _role(entry: Any) -> Role | None:
    if isinstance(entry, Role):
        return entry
    if isinstance(entry, str):
        return Role(entry) if entry else None
    name = _read(entry, "name")
    if not isinstance(name, str) or not name:
        _log.debug("principal.role_dropped", type=type(entry).__name__)
        return None
    return Role(name, _permission_set(_read(entry, "permissions"), f"roles[{name}].permissions"))


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def normalize_principal(source: Any) -> Principal | None:
    """Build a :class:`Principal` from a mapping, attribute object or record.

    Accepted fields: ``id``, ``permissions``, ``roles``, ``role``,
    ``userType``/``user_type`` and ``isSuperAdmin``/``is_super_admin``.
    Entries of the wrong type are dropped rather than rejected so a partial
    payload still yields a usable (less privileged) principal.  Scalars and
    plain collections are not principals and normalize to ``None``.
    """
    if source is None:
        return None
    if isinstance(source, Principal):
        return source
    if isinstance(source, _SCALARS) or type(source) in _COLLECTIONS:
        _log.debug("principal.rejected", type=type(source).__name__)
        return None

    roles = tuple(
        r for r in (_role(e) for e in _iter_entries(_read(source, "roles"), "roles"))
        if r is not None
    )
    return Principal(
        id=_read(source, "id"),
        permissions=_permission_set(_read(source, "permissions")),
        roles=roles,
        role=_optional_str(_read(source, "role")),
        user_type=_optional_str(_read(source, "userType", "user_type")),
        is_super_admin=_read(source, "isSuperAdmin", "is_super_admin") is True,
    )


__all__ = ["Principal", "Role", "normalize_principal"]
