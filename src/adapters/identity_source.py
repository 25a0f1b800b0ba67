"""Identity resolver: UPN of the interactive user.

Best effort. Any failure means "unknown identity", which the decision rule
handles conservatively.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.interfaces.command_runner import CommandRunner

logger = logging.getLogger(__name__)


def resolve_current_principal(runner: CommandRunner, settings: AppSettings | None = None) -> str:
    settings = settings or AppSettings()
    try:
        output = runner.run(settings.identity_command)
    except Exception as exc:
        logger.debug("Identity query failed: %s", exc)
        return ""

    for line in output.splitlines():
        value = line.strip()
        if value:
            return value

    logger.info("Identity query returned no output; current user is unknown")
    return ""
