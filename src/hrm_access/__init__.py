"""
hrm_access – role and permission resolution for the HRM platform.

Import path convention::

    from hrm_access import has_permission, is_admin
    from hrm_access.kernel.security import AccessEvaluator, SecurityContext
    from hrm_access.config import AccessSettings, EnvSettingsLoader
"""

from hrm_access.kernel.security import (
    AccessEvaluator,
    Principal,
    Role,
    SecurityContext,
    can_access_resource,
    can_manage_role,
    can_perform_action,
    get_all_permissions,
    has_all_permissions,
    has_permission,
    has_role,
    is_admin,
    normalize_principal,
    principal_scope,
)

__version__ = "0.1.0"
__all__ = [
    "AccessEvaluator",
    "Principal",
    "Role",
    "SecurityContext",
    "__version__",
    "can_access_resource",
    "can_manage_role",
    "can_perform_action",
    "get_all_permissions",
    "has_all_permissions",
    "has_permission",
    "has_role",
    "is_admin",
    "normalize_principal",
    "principal_scope",
]
