"""Account registry reader (`dsregcmd`).

The primary command lists join registrations one account per block. When it
prints nothing (older builds), the legacy status command is used instead and
the text is tagged so the parser applies the legacy grammar.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.models import RawDiagnostic
from core.domain.source_kind import SourceKind
from core.interfaces.command_runner import CommandRunner

logger = logging.getLogger(__name__)


def read_accounts_raw(runner: CommandRunner, settings: AppSettings | None = None) -> RawDiagnostic:
    settings = settings or AppSettings()

    primary = runner.run(settings.primary_command)
    if primary.strip():
        return RawDiagnostic(text=primary, kind=SourceKind.PRIMARY)

    logger.info("Primary source returned no output; falling back to %s", " ".join(settings.secondary_command))
    secondary = runner.run(settings.secondary_command)
    if secondary.strip():
        return RawDiagnostic(text=secondary, kind=SourceKind.SECONDARY)

    logger.warning("No diagnostic source produced output")
    return RawDiagnostic(text="", kind=SourceKind.NONE)
