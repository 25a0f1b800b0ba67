"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Detector y remediador comparten el mismo informe.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import CleanupOutcome, Verdict
from core.services.detection_pipeline import DetectionResult
from core.services.reporting import build_report_lines, verdict_line


def configure_logging(level: str) -> None:
    """Logging a stderr con RichHandler; stdout queda para el informe."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def print_banner(console: Console, title: str) -> None:
    body = Text.assemble(Text("wpj-guard", style="bold cyan"), "  ", Text(title, style="dim"))
    console.print(Panel(body, border_style="cyan", padding=(0, 2)))


def print_detection_report(console: Console, result: DetectionResult, *, heading: str | None = None) -> None:
    """Imprime las líneas del informe; solo la línea de veredicto lleva color."""

    verdict = result.verdict
    if heading:
        console.print(Text(heading, style="bold"))
    console.print(Text(f"Source: {result.raw.kind.label()}", style="dim"))

    lines = build_report_lines(verdict)
    for line in lines[:-1]:
        if line.startswith("Note:"):
            console.print(Text(line, style="yellow"))
        else:
            console.print(Text(line))
    console.print(render_verdict(verdict))


def render_verdict(verdict: Verdict) -> Text:
    style = "bold red" if verdict.detected else "bold green"
    return Text(verdict_line(verdict), style=style)


def build_cleanup_table(outcome: CleanupOutcome) -> Table:
    table = Table(title="Workplace-join cleanup")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Details", style="white")
    table.add_row("Archive", str(outcome.archive_path))
    table.add_row("Executable", str(outcome.executable))
    status = "OK" if outcome.succeeded else f"exit {outcome.return_code}"
    table.add_row("Exit status", status)
    return table
