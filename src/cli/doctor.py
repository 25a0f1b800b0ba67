"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
import sys

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_command(argv: list[str]) -> tuple[bool, str]:
    resolved = shutil.which(argv[0])
    if resolved:
        return True, resolved
    return False, f"{argv[0]} not found on PATH"


def _check_http(
    url: str,
    settings: AppSettings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> tuple[bool, str]:
    try:
        with build_client(settings, transport=transport) as client:
            response = client.head(url)
        return response.is_success, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="wpj-guard Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    on_windows = sys.platform.startswith("win")
    table.add_row("Platform", "OK" if on_windows else "WARN", sys.platform)

    commands = (
        ("Identity command", settings.identity_command),
        ("Primary source", settings.primary_command),
        ("Secondary source", settings.secondary_command),
    )
    for label, argv in commands:
        ok, detail = _check_command(argv)
        table.add_row(label, "OK" if ok else "FAIL", f"{' '.join(argv)} -> {detail}")

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings.cleanup_url, settings)
    table.add_row("Cleanup download", "OK" if ok_http else "FAIL", detail_http)

    table.add_row("Settle delay", "OK", f"{settings.settle_seconds:g}s")
    table.add_row("User config", "OK", str(get_user_env_file()))

    _console.print(table)

    if not on_windows:
        _console.print(
            "\n[yellow]Note:[/yellow] dsregcmd and WPJCleanUp only exist on Windows; "
            "detection will report no accounts elsewhere."
        )
