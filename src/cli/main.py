"""CLI de wpj-guard (Typer).

Comandos:
- `detect`: una pasada de detección; sale con 1 si hay cuentas ajenas.
- `remediate`: detección, WPJCleanUp, espera, re-detección.
- `doctor`: diagnóstico del entorno.

`wpj-detect` y `wpj-remediate` son los mismos flujos como scripts sin
argumentos, pensados para plataformas de gestión que solo miran el código
de salida.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.text import Text

from adapters.cleanup_tool import WPJCleanupTool
from adapters.system_commands import SubprocessRunner
from cli import doctor
from cli.ui_components import (
    build_cleanup_table,
    configure_logging,
    print_banner,
    print_detection_report,
)
from core.config import AppSettings
from core.domain.errors import RemediationError
from core.services.detection_pipeline import PipelineHooks, run_detection, run_remediation
from core.services.reporting import EXIT_DETECTED, exit_code_for

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Detect and remediate stray workplace-join accounts.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _load_settings() -> AppSettings:
    settings = AppSettings()
    configure_logging(settings.log_level)
    return settings


@app.command()
def detect() -> None:
    """Report whether accounts other than the current user are workplace-joined."""

    settings = _load_settings()
    print_banner(_console, "detection")
    result = run_detection(settings=settings, runner=SubprocessRunner())
    print_detection_report(_console, result)
    raise typer.Exit(code=exit_code_for(result.verdict))


@app.command()
def remediate() -> None:
    """Remove workplace-join registrations with WPJCleanUp and verify the result."""

    settings = _load_settings()
    print_banner(_console, "remediation")

    hooks = PipelineHooks(
        stage=lambda message: _console.print(Text(message, style="cyan")),
        detection_done=lambda label, result: print_detection_report(
            _console, result, heading=f"Detection ({label} cleanup)"
        ),
        cleanup_done=lambda result: _console.print(build_cleanup_table(result)),
    )
    try:
        outcome = run_remediation(
            settings=settings,
            runner=SubprocessRunner(),
            cleanup=WPJCleanupTool(settings),
            hooks=hooks,
        )
    except RemediationError as exc:
        _console.print(Text(f"Remediation aborted: {exc}", style="bold red"))
        raise typer.Exit(code=EXIT_DETECTED) from exc

    for warning in outcome.warnings:
        _console.print(Text(f"Warning: {warning}", style="yellow"))
    raise typer.Exit(code=exit_code_for(outcome.after.verdict))


def run() -> None:
    app()


detect_app = typer.Typer(add_completion=False)
detect_app.command()(detect)

remediate_app = typer.Typer(add_completion=False)
remediate_app.command()(remediate)


def run_detect() -> None:
    detect_app()


def run_remediate() -> None:
    remediate_app()
