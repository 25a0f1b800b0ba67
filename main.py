"""Entry point de desarrollo (sin instalar el paquete).

Uso desde la raíz del repositorio:
- `python main.py detect`
- `python main.py remediate`
- `python main.py doctor run`

Añade `src/` al path (layout tipo "src") y fuerza UTF-8 en consolas Windows,
donde `dsregcmd` puede devolver nombres fuera de cp1252.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _prepare_console() -> None:
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))
    _prepare_console()

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
