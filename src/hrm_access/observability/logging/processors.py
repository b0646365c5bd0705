"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class PrincipalProcessor:
    """structlog processor that injects ``principal_id`` from the current
    :class:`~hrm_access.kernel.security.SecurityContext`.

    Events that already carry a ``principal_id`` are left untouched.

    Usage::

        structlog.configure(processors=[PrincipalProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from hrm_access.kernel.security.security_context import SecurityContext

        principal = SecurityContext.get_current()
        if principal is not None and principal.id is not None:
            event_dict.setdefault("principal_id", principal.id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["PrincipalProcessor", "get_logger"]
