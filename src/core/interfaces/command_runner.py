"""Contrato para ejecutar comandos del sistema.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Los tests sustituyen `whoami`/`dsregcmd` por salidas fijas sin tocar el
  sistema.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para consultar un comando externo.

    Reglas de diseño:
    - Solo se devuelve la salida estándar; stderr se descarta.
    - Un código de salida distinto de cero no es un error.
    - Si el comando no puede lanzarse se devuelve "".
    """

    def run(self, argv: Sequence[str]) -> str:
        """Ejecuta `argv`, espera a que termine y devuelve su stdout."""

        ...
