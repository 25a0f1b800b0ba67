"""Decision rule for the multiple-workplace-join condition.

Pure function: no I/O, no retries. A single parsed account is trusted over
the source's summary count, so it never yields DETECTED.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import Verdict, VerdictStatus


def decide(current: str | None, accounts: Sequence[str], reported_count: int) -> Verdict:
    current = current or ""
    accounts = tuple(accounts)
    evidence = {
        "current_principal": current,
        "accounts": accounts,
        "reported_count": reported_count,
    }

    if len(accounts) > 1:
        if not current:
            return Verdict(
                status=VerdictStatus.DETECTED,
                reason="More than one account exists and the current identity is unknown.",
                **evidence,
            )
        others = tuple(account for account in accounts if account != current)
        if others:
            return Verdict(
                status=VerdictStatus.DETECTED,
                reason=f"Found account(s) not matching current user {current}: {', '.join(others)}",
                others=others,
                **evidence,
            )
        return Verdict(
            status=VerdictStatus.NOT_DETECTED,
            reason=f"All registered accounts match the current user {current}.",
            **evidence,
        )

    if not accounts and reported_count > 1:
        return Verdict(
            status=VerdictStatus.DETECTED,
            reason=(
                f"Source reports {reported_count} accounts but none were parseable; "
                "treated as detected conservatively."
            ),
            **evidence,
        )

    if accounts:
        reason = f"Only one account is registered ({accounts[0]})."
    else:
        reason = "No workplace-join accounts found."
    return Verdict(status=VerdictStatus.NOT_DETECTED, reason=reason, **evidence)
