"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextlib
import contextvars
from collections.abc import Iterator
from typing import Any

from hrm_access.kernel.errors import UnauthorizedError
from hrm_access.kernel.security.principal import Principal, normalize_principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_security_context", default=None
)


class SecurityContext:
    """Store and retrieve the current authenticated :class:`Principal` via
    :mod:`contextvars` so each request thread or asyncio task sees only its
    own principal.

    Values are normalized on the way in; readers always get a
    :class:`Principal` (or ``None``).
    """

    @staticmethod
    def get_current() -> Principal | None:
        """Return the current principal, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(principal: Any) -> contextvars.Token[Principal | None]:
        """Normalize and set the current principal; return a reset token."""
        return _VAR.set(normalize_principal(principal))

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        """Restore the principal that was current before ``set_current``."""
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current principal from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> Principal:
        """Return the current principal or raise ``UnauthorizedError``."""
        principal = _VAR.get()
        if principal is None:
            raise UnauthorizedError()
        return principal


@contextlib.contextmanager
def principal_scope(principal: Any) -> Iterator[Principal | None]:
    """Run a block with *principal* as the current principal.

    Example::

        with principal_scope(request.session["user"]):
            render_dashboard()
    """
    token = SecurityContext.set_current(principal)
    try:
        yield _VAR.get()
    finally:
        SecurityContext.reset(token)


__all__ = ["SecurityContext", "principal_scope"]
