"""WPJCleanUp: descarga, extracción y ejecución.

Fase única, sin reintentos:
- Descarga el ZIP oficial a un directorio de trabajo bajo el temp del sistema.
- Lo extrae y busca el ejecutable configurado.
- Lo lanza y espera a que termine.

Cualquier fallo en esos pasos aborta la remediación (`RemediationError`). Un
código de salida distinto de cero del propio ejecutable solo se registra: la
segunda pasada de detección decide el resultado.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
import zipfile
from pathlib import Path
from typing import Callable, Sequence

import httpx

from adapters.http_client import build_client, download_file
from core.config import AppSettings
from core.domain.errors import CleanupDownloadError, CleanupExecutionError, CleanupExtractError
from core.domain.models import CleanupOutcome

logger = logging.getLogger(__name__)

ProcessLauncher = Callable[..., subprocess.CompletedProcess]

_BATCH_SUFFIXES = {".cmd", ".bat"}


def build_launch_argv(executable: Path) -> list[str]:
    """Los scripts batch se lanzan a través de `cmd.exe /c`."""

    if executable.suffix.lower() in _BATCH_SUFFIXES:
        return ["cmd.exe", "/c", str(executable)]
    return [str(executable)]


class WPJCleanupTool:
    """Implementa `core.interfaces.cleanup_action.CleanupAction`."""

    _archive_name = "WPJCleanUp.zip"
    _extract_dir_name = "extracted"

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        temp_root: Path | None = None,
        transport: httpx.BaseTransport | None = None,
        launcher: ProcessLauncher = subprocess.run,
    ) -> None:
        self._settings = settings or AppSettings()
        self._temp_root = temp_root or Path(tempfile.gettempdir())
        self._transport = transport
        self._launcher = launcher

    @property
    def work_dir(self) -> Path:
        return self._temp_root / self._settings.cleanup_workdir_name

    def download(self) -> Path:
        destination = self.work_dir / self._archive_name
        logger.info("Downloading %s", self._settings.cleanup_url)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                download_file(client, self._settings.cleanup_url, destination)
        except httpx.HTTPError as exc:
            raise CleanupDownloadError(f"Download of {self._settings.cleanup_url} failed: {exc}") from exc
        except OSError as exc:
            raise CleanupDownloadError(f"Could not write {destination}: {exc}") from exc
        return destination

    def extract(self, archive: Path) -> Path:
        target = self.work_dir / self._extract_dir_name
        try:
            if target.is_dir():
                shutil.rmtree(target)
            elif target.exists():
                target.unlink()
            with zipfile.ZipFile(archive) as zf:
                zf.extractall(target)
        except (zipfile.BadZipFile, OSError) as exc:
            raise CleanupExtractError(f"Could not extract {archive}: {exc}") from exc
        return target

    def locate_executable(self, extracted: Path) -> Path:
        wanted = self._settings.cleanup_executable.lower()
        matches: Sequence[Path] = sorted(
            p for p in extracted.rglob("*") if p.is_file() and p.name.lower() == wanted
        )
        if not matches:
            raise CleanupExecutionError(
                f"{self._settings.cleanup_executable} not found in {extracted}"
            )
        return matches[0]

    def execute(self, executable: Path) -> int:
        argv = build_launch_argv(executable)
        logger.info("Running %s", " ".join(argv))
        try:
            completed = self._launcher(argv, cwd=str(executable.parent), check=False)
        except (OSError, subprocess.SubprocessError) as exc:
            raise CleanupExecutionError(f"Could not run {executable}: {exc}") from exc

        if completed.returncode != 0:
            logger.warning("%s exited with status %d", executable.name, completed.returncode)
        return completed.returncode

    def run(self) -> CleanupOutcome:
        archive = self.download()
        extracted = self.extract(archive)
        executable = self.locate_executable(extracted)
        return_code = self.execute(executable)
        return CleanupOutcome(archive_path=archive, executable=executable, return_code=return_code)
