"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (`frozen`): se crean una vez por invocación y el
  veredicto depende solo de su contenido.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.source_kind import SourceKind

_PRINCIPAL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.\S+$")


def is_principal_shaped(value: str) -> bool:
    """`local@domain.tld` sin espacios internos."""

    return bool(_PRINCIPAL_RE.match(value))


class RawDiagnostic(BaseModel):
    """Texto crudo de la fuente de diagnóstico, etiquetado con su origen."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        default="",
        description="Salida estándar completa del comando (puede estar vacía).",
    )
    kind: SourceKind = Field(
        default=SourceKind.NONE,
        description="Comando que produjo el texto; decide la gramática del parser.",
    )

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


class ParsedAccounts(BaseModel):
    """Resultado del parser.

    `accounts` y `reported_count` son señales independientes: la fuente
    imprime ambas y pueden no coincidir.
    """

    model_config = ConfigDict(frozen=True)

    accounts: tuple[str, ...] = Field(
        default=(),
        description="Cuentas en orden de aparición, sin duplicados exactos.",
    )
    reported_count: int = Field(
        default=0,
        ge=0,
        description="Valor de la línea 'Accounts found : N' (0 si no existe).",
    )
    raw_was_empty: bool = Field(
        default=False,
        description="La fuente no devolvió texto; ninguna gramática se aplicó.",
    )

    @field_validator("accounts")
    @classmethod
    def _no_duplicates(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("accounts must not contain duplicates")
        return value


class VerdictStatus(str, Enum):
    DETECTED = "DETECTED"
    NOT_DETECTED = "NOT_DETECTED"


class Verdict(BaseModel):
    """Veredicto de detección junto con la evidencia usada para producirlo."""

    model_config = ConfigDict(frozen=True)

    status: VerdictStatus
    reason: str = Field(
        ...,
        min_length=1,
        description="Explicación legible del veredicto.",
    )
    current_principal: str = Field(
        default="",
        description="UPN del usuario interactivo ('' si desconocido).",
    )
    accounts: tuple[str, ...] = Field(
        default=(),
        description="Cuentas parseadas consideradas.",
    )
    reported_count: int = Field(
        default=0,
        ge=0,
        description="Recuento declarado por la fuente.",
    )
    others: tuple[str, ...] = Field(
        default=(),
        description="Cuentas que no coinciden con el usuario actual (regla 1b).",
    )

    @property
    def detected(self) -> bool:
        return self.status is VerdictStatus.DETECTED


class CleanupOutcome(BaseModel):
    """Resultado de la acción externa de limpieza (WPJCleanUp)."""

    model_config = ConfigDict(frozen=True)

    archive_path: Path = Field(
        ...,
        description="Ruta del ZIP descargado.",
    )
    executable: Path = Field(
        ...,
        description="Ejecutable lanzado dentro del directorio extraído.",
    )
    return_code: int = Field(
        ...,
        description="Código de salida del ejecutable.",
    )

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0
