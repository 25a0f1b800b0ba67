"""Errores de la acción de remediación.

Solo la remediación falla de forma dura: identidad y fuente de diagnóstico
degradan a "desconocido"/"vacío" y nunca lanzan.
"""

from __future__ import annotations


class RemediationError(RuntimeError):
    """Base para fallos de la acción externa de limpieza."""


class CleanupDownloadError(RemediationError):
    """No se pudo descargar el archivo de limpieza."""


class CleanupExtractError(RemediationError):
    """El archivo descargado no es un ZIP válido o no se pudo extraer."""


class CleanupExecutionError(RemediationError):
    """El ejecutable de limpieza no existe en el archivo o no se pudo lanzar."""
