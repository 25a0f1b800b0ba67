"""Ejecución de comandos del sistema (subprocess).

Implementa `core.interfaces.command_runner.CommandRunner`: bloquea hasta que
el proceso termina, captura solo stdout y nunca lanza por el código de salida.
No hay timeout explícito; un proceso colgado cuelga la herramienta.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Runner real basado en `subprocess.run`."""

    def __init__(self, *, encoding: str | None = None) -> None:
        self._encoding = encoding

    def run(self, argv: Sequence[str]) -> str:
        try:
            completed = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                encoding=self._encoding,
                errors="replace",
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Could not run %s: %s", " ".join(argv), exc)
            return ""

        if completed.returncode != 0:
            logger.debug("%s exited with status %d", " ".join(argv), completed.returncode)
        return completed.stdout or ""
