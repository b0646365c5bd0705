"""Unit tests for SecurityContext and principal_scope."""

from __future__ import annotations

import asyncio

import pytest

from hrm_access.kernel.errors import UnauthorizedError
from hrm_access.kernel.security import Principal, SecurityContext, principal_scope


class TestSecurityContext:
    def test_get_current_returns_none_when_empty(self) -> None:
        assert SecurityContext.get_current() is None

    def test_set_and_get(self) -> None:
        p = Principal(id="user-42")
        SecurityContext.set_current(p)
        assert SecurityContext.get_current() is p

    def test_set_normalizes_mappings(self) -> None:
        SecurityContext.set_current({"id": 1, "userType": "employee"})
        assert SecurityContext.get_current() == Principal(id=1, user_type="employee")

    def test_clear_removes_principal(self) -> None:
        SecurityContext.set_current(Principal(id=1))
        SecurityContext.clear()
        assert SecurityContext.get_current() is None

    def test_require_raises_when_empty(self) -> None:
        with pytest.raises(UnauthorizedError):
            SecurityContext.require()

    def test_require_returns_principal(self) -> None:
        p = Principal(id=1)
        SecurityContext.set_current(p)
        assert SecurityContext.require() is p

    def test_reset_restores_previous(self) -> None:
        outer = Principal(id="outer")
        SecurityContext.set_current(outer)
        token = SecurityContext.set_current(Principal(id="inner"))
        SecurityContext.reset(token)
        assert SecurityContext.get_current() is outer

    def test_task_isolation(self) -> None:
        """Each asyncio task gets its own context copy."""
        result_a: list[Principal | None] = []
        result_b: list[Principal | None] = []

        pa = Principal(id="task-A")
        pb = Principal(id="task-B")

        async def task_a() -> None:
            SecurityContext.set_current(pa)
            await asyncio.sleep(0)
            result_a.append(SecurityContext.get_current())

        async def task_b() -> None:
            SecurityContext.set_current(pb)
            await asyncio.sleep(0)
            result_b.append(SecurityContext.get_current())

        async def _run() -> None:
            await asyncio.gather(task_a(), task_b())

        asyncio.run(_run())
        assert result_a[0] is pa
        assert result_b[0] is pb


class TestPrincipalScope:
    def test_sets_and_restores(self) -> None:
        with principal_scope({"id": 1}) as current:
            assert current == Principal(id=1)
            assert SecurityContext.get_current() == Principal(id=1)
        assert SecurityContext.get_current() is None

    def test_nested(self) -> None:
        with principal_scope(Principal(id="a")):
            with principal_scope(Principal(id="b")):
                assert SecurityContext.require().id == "b"
            assert SecurityContext.require().id == "a"

    def test_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with principal_scope(Principal(id=1)):
                raise RuntimeError("boom")
        assert SecurityContext.get_current() is None

    def test_none_principal(self) -> None:
        with principal_scope(None) as current:
            assert current is None


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        for module in ("hrm_access", "hrm_access.kernel.security", "hrm_access.config"):
            mod = importlib.import_module(module)
            for name in mod.__all__:
                assert hasattr(mod, name), f"{module}.{name} missing"
