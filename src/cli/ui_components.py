"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import httpx
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.paths import PATH, RESOURCE_PATHS
from core.errors import BodyEncodingError


def build_paths_table() -> Table:
    """Tabla con el registro de rutas (nombre lógico -> ruta completa)."""

    table = Table(title="vAPI REST paths")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="magenta")
    for name, path in RESOURCE_PATHS.items():
        table.add_row(name, PATH + path)
    return table


def build_request_panel(request: httpx.Request) -> Panel:
    """Panel con método, URL, headers y body de una request.

    Lee el body: si la serialización falló, se muestra el error diferido.
    """

    body = Text()
    body.append(f"{request.method} ", style="bold")
    body.append(str(request.url) + "\n", style="magenta")
    for key, value in request.headers.items():
        body.append(f"{key}: {value}\n", style="dim")

    try:
        content = request.read()
    except BodyEncodingError as exc:
        body.append(f"\n{exc}", style="red")
        return Panel(body, title="Request", border_style="red")

    if content:
        body.append("\n" + content.decode("utf-8"))
    return Panel(body, title="Request", border_style="cyan")
