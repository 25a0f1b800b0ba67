"""Detection and remediation orchestration.

Both command entry points delegate here, so the detector and the remediator
run the exact same detection pass. Side-effects (printing, progress) stay in
the CLI through optional hooks; process and HTTP access come in through the
`CommandRunner` and `CleanupAction` contracts.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from adapters.identity_source import resolve_current_principal
from adapters.registry_source import read_accounts_raw
from core.config import AppSettings
from core.domain.models import CleanupOutcome, ParsedAccounts, RawDiagnostic, Verdict
from core.interfaces.cleanup_action import CleanupAction
from core.interfaces.command_runner import CommandRunner
from core.services.account_parser import parse
from core.services.detection import decide

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    stage: Callable[[str], None] | None = None
    detection_done: Callable[[str, "DetectionResult"], None] | None = None
    cleanup_done: Callable[[CleanupOutcome], None] | None = None


@dataclass
class DetectionResult:
    """Output of one detection pass."""

    current_principal: str
    raw: RawDiagnostic
    parsed: ParsedAccounts
    verdict: Verdict


@dataclass
class RemediationResult:
    """Output of the remediation workflow."""

    before: DetectionResult
    cleanup: CleanupOutcome
    after: DetectionResult
    warnings: list[str] = field(default_factory=list)


def _notify_stage(hooks: PipelineHooks, message: str) -> None:
    logger.info(message)
    if hooks.stage:
        hooks.stage(message)


def run_detection(
    *,
    settings: AppSettings,
    runner: CommandRunner,
) -> DetectionResult:
    current = resolve_current_principal(runner, settings)
    raw = read_accounts_raw(runner, settings)
    parsed = parse(raw)
    verdict = decide(current, parsed.accounts, parsed.reported_count)
    logger.info(
        "Detection pass: source=%s accounts=%d reported=%d verdict=%s",
        raw.kind.value,
        len(parsed.accounts),
        parsed.reported_count,
        verdict.status.value,
    )
    return DetectionResult(current_principal=current, raw=raw, parsed=parsed, verdict=verdict)


def run_remediation(
    *,
    settings: AppSettings,
    runner: CommandRunner,
    cleanup: CleanupAction,
    hooks: PipelineHooks | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RemediationResult:
    """Detect, clean up, settle, detect again.

    `RemediationError` from the cleanup action propagates: a partial
    remediation is never reported as a result.
    """

    hooks = hooks or PipelineHooks()
    warnings: list[str] = []

    before = run_detection(settings=settings, runner=runner)
    if hooks.detection_done:
        hooks.detection_done("before", before)

    _notify_stage(hooks, "Running workplace-join cleanup")
    outcome = cleanup.run()
    if not outcome.succeeded:
        warnings.append(f"Cleanup tool exited with status {outcome.return_code}")
    if hooks.cleanup_done:
        hooks.cleanup_done(outcome)

    if settings.settle_seconds > 0:
        _notify_stage(hooks, f"Waiting {settings.settle_seconds:g}s for registrations to settle")
        sleep(settings.settle_seconds)

    after = run_detection(settings=settings, runner=runner)
    if hooks.detection_done:
        hooks.detection_done("after", after)

    return RemediationResult(before=before, cleanup=outcome, after=after, warnings=warnings)
