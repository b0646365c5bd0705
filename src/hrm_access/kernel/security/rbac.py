"""Kernel security – handler guards.

:func:`require_permission` and :func:`require_role` enforce a check against
the principal in :class:`~hrm_access.kernel.security.security_context.SecurityContext`
before a command / query handler runs.  Both work on sync and async callables.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from hrm_access.kernel.errors import ForbiddenError
from hrm_access.kernel.security.evaluator import AccessEvaluator, default_evaluator
from hrm_access.kernel.security.principal import Principal
from hrm_access.kernel.security.security_context import SecurityContext

F = TypeVar("F", bound=Callable[..., Any])


def _describe(query: str | Iterable[str]) -> str:
    if isinstance(query, str):
        return query
    return " | ".join(query)


def _guard(check: Callable[[Principal], bool], label: str, kind: str) -> Callable[[F], F]:
    def enforce() -> None:
        principal = SecurityContext.require()  # raises UnauthorizedError if absent
        if not check(principal):
            raise ForbiddenError(principal.id, label, kind=kind)

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                enforce()
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            enforce()
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


def require_permission(
    perm: str | Iterable[str],
    *,
    evaluator: AccessEvaluator | None = None,
) -> Callable[[F], F]:
    """Decorator that enforces *perm* (any of, when several) on the current principal.

    Raises :class:`UnauthorizedError` if there is no principal in context,
    and :class:`ForbiddenError` if the principal lacks the permission.

    Example::

        @require_permission("hr.skills.create")
        async def create_skill(cmd: CreateSkill) -> None:
            ...
    """
    ev = evaluator or default_evaluator
    requested = perm if isinstance(perm, str) else tuple(perm)
    return _guard(
        lambda principal: ev.has_permission(requested, principal),
        _describe(requested),
        "permission",
    )


def require_role(
    role: str | Iterable[str],
    *,
    evaluator: AccessEvaluator | None = None,
) -> Callable[[F], F]:
    """Decorator that requires the current principal to hold *role* (any of)."""
    ev = evaluator or default_evaluator
    requested = role if isinstance(role, str) else tuple(role)
    return _guard(
        lambda principal: ev.has_role(requested, principal),
        _describe(requested),
        "role",
    )


__all__ = ["require_permission", "require_role"]
