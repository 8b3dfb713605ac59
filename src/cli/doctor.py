"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import RestConnection
from core.config import AppSettings, write_user_env_vars
from core.domain.paths import SESSION_PATH

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Best-effort GET against the session endpoint (any HTTP status counts as reachable)."""

    try:
        with RestConnection(settings) as conn:
            request = conn.resource(SESSION_PATH).request("GET")
            response = conn.send(request)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="vapi-rest Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    if settings.verify_tls:
        table.add_row("TLS verify", "OK", "Certificates are verified")
    else:
        table.add_row("TLS verify", "WARN", "Verification disabled (VAPI_REST_VERIFY_TLS=false)")

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Set the vCenter URL with `vapi-rest doctor configure`."
        )


@app.command()
def configure(
    base_url: str = typer.Option(..., prompt="vCenter base URL", help="Scheme + host, e.g. https://vcenter.local"),
) -> None:
    """Store the base URL in the user config .env."""

    base_url = base_url.strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base_url must start with http:// or https://")

    env_path = write_user_env_vars({"VAPI_REST_BASE_URL": base_url})
    _console.print(f"[green]Saved config to:[/green] {env_path}")
