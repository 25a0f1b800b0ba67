from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
import cli.main as cli_main
from core.domain.errors import CleanupExecutionError
from core.domain.models import CleanupOutcome, ParsedAccounts, RawDiagnostic
from core.domain.source_kind import SourceKind
from core.services.detection import decide
from core.services.detection_pipeline import DetectionResult, RemediationResult

runner = CliRunner()


def make_result(current: str, accounts: tuple[str, ...], reported: int = 0) -> DetectionResult:
    return DetectionResult(
        current_principal=current,
        raw=RawDiagnostic(text="...", kind=SourceKind.PRIMARY),
        parsed=ParsedAccounts(accounts=accounts, reported_count=reported),
        verdict=decide(current, accounts, reported),
    )


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch, settings):
    monkeypatch.setattr(cli_main, "_load_settings", lambda: settings)


def test_detect_exits_one_when_detected(monkeypatch):
    result = make_result("a@x.com", ("a@x.com", "b@y.com"), 2)
    monkeypatch.setattr(cli_main, "run_detection", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["detect"])

    assert outcome.exit_code == 1
    assert "Current user: a@x.com" in outcome.output
    assert "b@y.com" in outcome.output
    assert "DETECTED" in outcome.output


def test_detect_exits_zero_when_clean(monkeypatch):
    result = make_result("a@x.com", ("a@x.com",), 0)
    monkeypatch.setattr(cli_main, "run_detection", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["detect"])

    assert outcome.exit_code == 0
    assert "NOT DETECTED" in outcome.output


def test_detect_prints_format_mismatch_note(monkeypatch):
    result = make_result("", (), 1)
    monkeypatch.setattr(cli_main, "run_detection", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["detect"])

    assert outcome.exit_code == 0
    assert "<unknown>" in outcome.output
    assert "Note:" in outcome.output


def test_remediate_exit_code_follows_second_pass(monkeypatch):
    cleanup = CleanupOutcome(archive_path=Path("a.zip"), executable=Path("WPJCleanUp.cmd"), return_code=0)
    result = RemediationResult(
        before=make_result("a@x.com", ("a@x.com", "b@y.com")),
        cleanup=cleanup,
        after=make_result("a@x.com", ("a@x.com",)),
    )
    monkeypatch.setattr(cli_main, "run_remediation", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["remediate"])
    assert outcome.exit_code == 0


def test_remediate_still_detected_exits_one(monkeypatch):
    cleanup = CleanupOutcome(archive_path=Path("a.zip"), executable=Path("WPJCleanUp.cmd"), return_code=3)
    result = RemediationResult(
        before=make_result("", ("a@x.com", "b@y.com")),
        cleanup=cleanup,
        after=make_result("", ("a@x.com", "b@y.com")),
        warnings=["Cleanup tool exited with status 3"],
    )
    monkeypatch.setattr(cli_main, "run_remediation", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["remediate"])

    assert outcome.exit_code == 1
    assert "status 3" in outcome.output


def test_remediate_failure_exits_one(monkeypatch):
    def fail(**kwargs):
        raise CleanupExecutionError("WPJCleanUp.cmd not found")

    monkeypatch.setattr(cli_main, "run_remediation", fail)

    outcome = runner.invoke(cli_main.app, ["remediate"])

    assert outcome.exit_code == 1
    assert "Remediation aborted" in outcome.output


def test_doctor_runs(monkeypatch):
    monkeypatch.setattr(doctor.shutil, "which", lambda name: None)
    monkeypatch.setattr(doctor, "_check_http", lambda url, settings: (False, "offline"))

    outcome = runner.invoke(cli_main.app, ["doctor", "run"])

    assert outcome.exit_code == 0
    assert "Doctor" in outcome.output


def test_doctor_http_check(settings):
    transport = httpx.MockTransport(lambda request: httpx.Response(200))
    assert doctor._check_http("https://example.invalid/x.zip", settings, transport=transport) == (True, "HTTP 200")


def test_doctor_http_check_failure(settings):
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    ok, detail = doctor._check_http("https://example.invalid/x.zip", settings, transport=httpx.MockTransport(handler))
    assert ok is False
    assert "offline" in detail


def test_verdict_line_is_printed_last(monkeypatch):
    result = make_result("a@x.com", ("a@x.com", "b@y.com"), 0)
    monkeypatch.setattr(cli_main, "run_detection", lambda **kwargs: result)

    outcome = runner.invoke(cli_main.app, ["detect"])

    printed = [line for line in outcome.output.splitlines() if line.strip()]
    assert printed[-1].startswith("DETECTED: ")
