from __future__ import annotations

from typing import Sequence

import pytest

from core.config import AppSettings


class FakeRunner:
    """CommandRunner that answers from a fixed table of outputs."""

    def __init__(self, outputs: dict[tuple[str, ...], str] | None = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: list[tuple[str, ...]] = []

    def run(self, argv: Sequence[str]) -> str:
        key = tuple(argv)
        self.calls.append(key)
        return self.outputs.get(key, "")


IDENTITY = ("whoami", "/upn")
PRIMARY = ("dsregcmd", "/listaccounts")
SECONDARY = ("dsregcmd", "/status")


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in (
        "WPJ_GUARD_IDENTITY_COMMAND",
        "WPJ_GUARD_PRIMARY_COMMAND",
        "WPJ_GUARD_SECONDARY_COMMAND",
        "WPJ_GUARD_CLEANUP_URL",
        "WPJ_GUARD_CLEANUP_EXECUTABLE",
        "WPJ_GUARD_SETTLE_SECONDS",
        "WPJ_GUARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
