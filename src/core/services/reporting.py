"""Report lines and exit-status mapping for a detection pass.

Only plain strings live here; colors and layout belong to the CLI layer.
"""

from __future__ import annotations

from core.domain.models import Verdict, VerdictStatus

UNKNOWN_PRINCIPAL = "<unknown>"

EXIT_NOT_DETECTED = 0
EXIT_DETECTED = 1


def exit_code_for(verdict: Verdict) -> int:
    return EXIT_DETECTED if verdict.status is VerdictStatus.DETECTED else EXIT_NOT_DETECTED


def format_mismatch_note(verdict: Verdict) -> str | None:
    """Warn when the source counts accounts that no grammar could read."""

    if verdict.accounts or verdict.reported_count <= 0:
        return None
    return (
        f"Note: source reports {verdict.reported_count} account(s) but none could be parsed; "
        "the diagnostic output format may have changed."
    )


def verdict_line(verdict: Verdict) -> str:
    label = "DETECTED" if verdict.detected else "NOT DETECTED"
    return f"{label}: {verdict.reason}"


def build_report_lines(verdict: Verdict) -> list[str]:
    lines = [
        f"Current user: {verdict.current_principal or UNKNOWN_PRINCIPAL}",
        f"Parsed accounts: {len(verdict.accounts)}",
    ]
    lines.extend(f"  - {account}" for account in verdict.accounts)
    if verdict.reported_count > 0:
        lines.append(f"Reported account count: {verdict.reported_count}")
    note = format_mismatch_note(verdict)
    if note:
        lines.append(note)
    lines.append(verdict_line(verdict))
    return lines
