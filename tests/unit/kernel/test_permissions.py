"""Unit tests for the typed permission model."""

from __future__ import annotations

import pytest

from hrm_access.kernel.errors import ValidationError
from hrm_access.kernel.security.permissions import (
    ALL_PERMISSIONS,
    AllPermissions,
    Permission,
    compose_permission,
    grant_to_str,
    parse_permission,
)


class TestPermission:
    def test_frozen(self) -> None:
        p = Permission("hr.view")
        with pytest.raises((AttributeError, TypeError)):
            p.value = "other"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Permission("read employees")) == "read employees"

    def test_equality_by_value(self) -> None:
        assert Permission("hr.view") == Permission("hr.view")
        assert len({Permission("hr.view"), Permission("hr.view")}) == 1


class TestAllPermissions:
    def test_singleton(self) -> None:
        assert AllPermissions() is ALL_PERMISSIONS

    def test_serialises_to_wildcard(self) -> None:
        assert str(ALL_PERMISSIONS) == "*"
        assert grant_to_str(ALL_PERMISSIONS) == "*"

    def test_is_not_a_permission(self) -> None:
        assert not isinstance(ALL_PERMISSIONS, Permission)


class TestParsePermission:
    def test_wildcard(self) -> None:
        assert parse_permission("*") is ALL_PERMISSIONS

    def test_dotted(self) -> None:
        assert parse_permission("hr.view") == Permission("hr.view")

    def test_spaced_convention_kept_verbatim(self) -> None:
        assert parse_permission("read employees") == Permission("read employees")

    def test_strips_whitespace(self) -> None:
        assert parse_permission("  hr.edit ") == Permission("hr.edit")

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_blank_rejected(self, raw: str) -> None:
        with pytest.raises(ValidationError, match="blank"):
            parse_permission(raw)

    @pytest.mark.parametrize("raw", [None, 42, ["hr.view"]])
    def test_non_string_rejected(self, raw: object) -> None:
        with pytest.raises(ValidationError, match="must be a string"):
            parse_permission(raw)


class TestComposePermission:
    def test_resource_then_action(self) -> None:
        assert compose_permission("view", "hr.skills") == "hr.skills.view"
