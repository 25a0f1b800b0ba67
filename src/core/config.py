"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (procesos/HTTP) lean config de forma consistente.

Los valores por defecto reproducen el comportamiento fijo de la herramienta:
sin configuración, `whoami /upn` + `dsregcmd` + WPJCleanUp oficial.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__

DEFAULT_CLEANUP_URL = (
    "https://download.microsoft.com/download/8/e/f/"
    "8ef13ae0-6aa8-48a2-8697-5b1711134730/WPJCleanUp.zip"
)


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "wpj-guard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "wpj-guard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wpj-guard"
    return Path.home() / ".config" / "wpj-guard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="WPJ_GUARD_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    identity_command: list[str] = Field(
        default_factory=lambda: ["whoami", "/upn"],
        min_length=1,
        description="Comando que imprime el UPN del usuario interactivo.",
    )
    primary_command: list[str] = Field(
        default_factory=lambda: ["dsregcmd", "/listaccounts"],
        min_length=1,
        description="Fuente de diagnóstico principal (una línea user:/username: por cuenta).",
    )
    secondary_command: list[str] = Field(
        default_factory=lambda: ["dsregcmd", "/status"],
        min_length=1,
        description="Fuente legacy, usada solo si la principal no devuelve nada.",
    )

    cleanup_url: str = Field(
        default=DEFAULT_CLEANUP_URL,
        min_length=8,
        description="URL del ZIP de WPJCleanUp.",
    )
    cleanup_executable: str = Field(
        default="WPJCleanUp.cmd",
        min_length=1,
        description="Nombre del ejecutable a lanzar dentro del ZIP extraído.",
    )
    cleanup_workdir_name: str = Field(
        default="wpj-guard-cleanup",
        min_length=1,
        description="Subdirectorio de trabajo bajo el directorio temporal del sistema.",
    )
    settle_seconds: float = Field(
        default=10.0,
        ge=0,
        description="Espera tras la limpieza antes de re-verificar (segundos).",
    )

    http_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout de la descarga (segundos).",
    )
    user_agent: str = Field(
        default=f"wpj-guard/{__version__}",
        min_length=1,
        description="User-Agent para la descarga.",
    )

    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Nivel de logging (stderr).",
    )
