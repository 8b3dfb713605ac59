"""CLI de vapi-rest (Typer + Rich).

Comandos:
- `paths`: lista el registro de rutas.
- `url`: compone la URL de un recurso.
- `request`: muestra la request completa (headers + body JSON).
- `doctor`: diagnósticos y configuración.
"""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import RestConnection
from adapters.resource import Resource
from cli.doctor import app as doctor_app
from cli.ui_components import build_paths_table, build_request_panel
from core.config import AppSettings
from core.domain.paths import resolve_path

app = typer.Typer(no_args_is_help=True, help="Build vSphere Automation REST requests.")
app.add_typer(doctor_app, name="doctor")

_console = Console()

_TARGET_HELP = "Logical resource name (see `paths`) or a raw path starting with '/'."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _settings(base_url: str | None) -> AppSettings:
    if base_url:
        return AppSettings(base_url=base_url)
    return AppSettings()


def _split_param(raw: str) -> tuple[str, str]:
    if "=" not in raw:
        raise typer.BadParameter(f"expected NAME=VALUE, got {raw!r}", param_hint="--param")
    name, value = raw.split("=", 1)
    return name, value


def _build_resource(
    conn: RestConnection,
    target: str,
    ids: list[str] | None,
    action: str | None,
    params: list[str] | None,
) -> Resource:
    try:
        path = resolve_path(target)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="TARGET") from None

    resource = conn.resource(path)
    for resource_id in ids or []:
        resource.with_id(resource_id)
    # La query se reemplaza en cada llamada: un --param posterior pisa --action.
    if action:
        resource.with_action(action)
    for raw in params or []:
        resource.with_parameter(*_split_param(raw))
    return resource


@app.command()
def paths() -> None:
    """List the known REST paths."""

    _console.print(build_paths_table())


@app.command(name="url")
def url_command(
    target: str = typer.Argument(..., help=_TARGET_HELP),
    ids: list[str] | None = typer.Option(None, "--id", help="Append /id:<ID> (repeatable, in order)."),
    action: str | None = typer.Option(None, "--action", help="Set the query to ~action=<ACTION>."),
    params: list[str] | None = typer.Option(None, "--param", help="Set the query to NAME=VALUE (last one wins)."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override VAPI_REST_BASE_URL."),
) -> None:
    """Print the composed URL for a resource."""

    with RestConnection(_settings(base_url)) as conn:
        resource = _build_resource(conn, target, ids, action, params)
    typer.echo(str(resource))


@app.command()
def request(
    method: str = typer.Argument(..., help="HTTP method (GET, POST, PATCH, DELETE...)."),
    target: str = typer.Argument(..., help=_TARGET_HELP),
    ids: list[str] | None = typer.Option(None, "--id", help="Append /id:<ID> (repeatable, in order)."),
    action: str | None = typer.Option(None, "--action", help="Set the query to ~action=<ACTION>."),
    params: list[str] | None = typer.Option(None, "--param", help="Set the query to NAME=VALUE (last one wins)."),
    body: str | None = typer.Option(None, "--body", help="JSON document sent as the request body."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override VAPI_REST_BASE_URL."),
) -> None:
    """Show the request that would be sent (nothing is dispatched)."""

    with RestConnection(_settings(base_url)) as conn:
        resource = _build_resource(conn, target, ids, action, params)
        if body is None:
            req = resource.request(method.upper())
        else:
            try:
                payload = json.loads(body)
            except json.JSONDecodeError as exc:
                raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--body") from None
            req = resource.request(method.upper(), payload)
    _console.print(build_request_panel(req))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
