"""Contrato de la acción externa de remediación."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CleanupOutcome


@runtime_checkable
class CleanupAction(Protocol):
    """Acción opaca que elimina los registros de workplace-join.

    Debe bloquear hasta terminar. Los fallos de descarga, extracción o
    lanzamiento se señalan con `core.domain.errors.RemediationError`.
    """

    def run(self) -> CleanupOutcome:
        ...
