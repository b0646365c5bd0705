"""Unit tests for config settings & validation."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import ClassVar

import pytest

from hrm_access.config import (
    AccessSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)

_ENV_KEYS = ("HRM_ACCESS_LOG_LEVEL", "HRM_ACCESS_LOG_JSON", "HRM_ACCESS_LOG_DECISIONS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@dataclasses.dataclass(frozen=True)
class TenantSettings(Settings):
    _prefix: ClassVar[str] = "TENANT"

    slug: str
    seats: int = 10


# ---------------------------------------------------------------------------
# AccessSettings
# ---------------------------------------------------------------------------


class TestAccessSettings:
    def test_env_key(self) -> None:
        assert AccessSettings.env_key("log_decisions") == "HRM_ACCESS_LOG_DECISIONS"
        assert TenantSettings.env_key("seats") == "TENANT_SEATS"

    def test_defaults(self) -> None:
        s = AccessSettings()
        assert s.log_level == "INFO"
        assert s.log_json is True
        assert s.log_decisions is False

    def test_level_normalised(self) -> None:
        s = AccessSettings(log_level="debug")
        assert s.log_level == "DEBUG"
        assert s.log_level_number == logging.DEBUG

    def test_invalid_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AccessSettings(log_level="LOUD")
        err = exc_info.value
        assert err.env_key == "HRM_ACCESS_LOG_LEVEL"
        assert err.allowed == ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
        assert err.to_dict()["value"] == "LOUD"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AccessSettings().log_json = False  # type: ignore[misc]


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_absent(self) -> None:
        assert EnvSettingsLoader().load(AccessSettings) == AccessSettings()

    def test_loads_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_ACCESS_LOG_LEVEL", "warning")
        monkeypatch.setenv("HRM_ACCESS_LOG_JSON", "false")
        monkeypatch.setenv("HRM_ACCESS_LOG_DECISIONS", "yes")
        s = EnvSettingsLoader().load(AccessSettings)
        assert s == AccessSettings(log_level="WARNING", log_json=False, log_decisions=True)

    @pytest.mark.parametrize("truthy", ["true", "True", "1", "yes", "on"])
    def test_bool_true(self, monkeypatch: pytest.MonkeyPatch, truthy: str) -> None:
        monkeypatch.setenv("HRM_ACCESS_LOG_DECISIONS", truthy)
        assert EnvSettingsLoader().load(AccessSettings).log_decisions is True

    def test_bool_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_ACCESS_LOG_JSON", "maybe")
        with pytest.raises(InvalidSettingValueError, match="expected a boolean") as exc_info:
            EnvSettingsLoader().load(AccessSettings)
        assert exc_info.value.env_key == "HRM_ACCESS_LOG_JSON"
        assert "off" in exc_info.value.allowed

    def test_invalid_level_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_ACCESS_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(AccessSettings)

    def test_required_field_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TENANT_SLUG", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(TenantSettings)
        assert exc_info.value.env_key == "TENANT_SLUG"
        assert exc_info.value.message == "TENANT_SLUG must be set"

    def test_int_coercion(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TENANT_SLUG", "acme")
        monkeypatch.setenv("TENANT_SEATS", "25")
        assert EnvSettingsLoader().load(TenantSettings) == TenantSettings(slug="acme", seats=25)

    def test_int_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TENANT_SLUG", "acme")
        monkeypatch.setenv("TENANT_SEATS", "many")
        with pytest.raises(InvalidSettingValueError, match="expected an integer"):
            EnvSettingsLoader().load(TenantSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("HRM_ACCESS_LOG_DECISIONS=1\nHRM_ACCESS_LOG_LEVEL=error\n")
        # load_dotenv writes into os.environ; register the keys for cleanup
        monkeypatch.setenv("HRM_ACCESS_LOG_DECISIONS", "")
        monkeypatch.delenv("HRM_ACCESS_LOG_DECISIONS")
        monkeypatch.setenv("HRM_ACCESS_LOG_LEVEL", "")
        monkeypatch.delenv("HRM_ACCESS_LOG_LEVEL")

        s = DotenvSettingsLoader(str(env_file)).load(AccessSettings)
        assert s.log_decisions is True
        assert s.log_level == "ERROR"

    def test_existing_env_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("HRM_ACCESS_LOG_LEVEL=error\n")
        monkeypatch.setenv("HRM_ACCESS_LOG_LEVEL", "debug")

        s = DotenvSettingsLoader(str(env_file)).load(AccessSettings)
        assert s.log_level == "DEBUG"
