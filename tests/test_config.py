from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_CLEANUP_URL, AppSettings


def test_defaults_reproduce_fixed_behavior(settings):
    assert settings.identity_command == ["whoami", "/upn"]
    assert settings.primary_command == ["dsregcmd", "/listaccounts"]
    assert settings.secondary_command == ["dsregcmd", "/status"]
    assert settings.cleanup_url == DEFAULT_CLEANUP_URL
    assert settings.settle_seconds == 10.0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WPJ_GUARD_SETTLE_SECONDS", "0")
    monkeypatch.setenv("WPJ_GUARD_PRIMARY_COMMAND", '["dsregcmd", "/listaccounts", "/debug"]')
    settings = AppSettings(_env_file=None)

    assert settings.settle_seconds == 0
    assert settings.primary_command == ["dsregcmd", "/listaccounts", "/debug"]


def test_negative_settle_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, settle_seconds=-1)


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="LOUD")
