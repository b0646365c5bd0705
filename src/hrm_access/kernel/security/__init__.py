"""Kernel security – Principal, Roles, Permissions, role table, evaluator, guards."""
from hrm_access.kernel.security.permissions import (
    ALL_PERMISSIONS,
    AllPermissions,
    Grant,
    Permission,
    parse_permission,
)
from hrm_access.kernel.security.principal import Principal, Role, normalize_principal
from hrm_access.kernel.security.role_table import (
    FALLBACK_ROLE,
    STATIC_ROLE_TABLE,
    LegacyRole,
    role_hierarchy_level,
    validate_role_table,
)
from hrm_access.kernel.security.security_context import SecurityContext, principal_scope
from hrm_access.kernel.security.evaluator import (
    AccessEvaluator,
    can_access_resource,
    can_manage_role,
    can_perform_action,
    default_evaluator,
    get_all_permissions,
    has_all_permissions,
    has_permission,
    has_role,
    is_admin,
)
from hrm_access.kernel.security.rbac import require_permission, require_role

__all__ = [
    "ALL_PERMISSIONS",
    "AccessEvaluator",
    "AllPermissions",
    "FALLBACK_ROLE",
    "Grant",
    "LegacyRole",
    "Permission",
    "Principal",
    "Role",
    "STATIC_ROLE_TABLE",
    "SecurityContext",
    "can_access_resource",
    "can_manage_role",
    "can_perform_action",
    "default_evaluator",
    "get_all_permissions",
    "has_all_permissions",
    "has_permission",
    "has_role",
    "is_admin",
    "normalize_principal",
    "parse_permission",
    "principal_scope",
    "require_permission",
    "require_role",
    "role_hierarchy_level",
    "validate_role_table",
]
