"""Builder de URLs/requests para la API REST de vAPI.

Uso típico (un `Resource` nuevo por request lógica):

    req = url(conn, LIBRARY_PATH).with_id("lib-1").with_action("sync").request("POST")

Reglas:
- `with_*` mutan el recurso y devuelven el mismo objeto para encadenar.
- La query no se acumula: `with_action` y `with_parameter` la reemplazan
  (gana la última llamada).
- Un `Resource` no se comparte entre hilos.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote

import httpx

from adapters.body_encoder import encode
from core.domain.paths import PATH
from core.interfaces.connection import CloneURL

logger = logging.getLogger(__name__)

_NO_BODY: Any = object()

# Caracteres que no se escapan en el path (como `url.PathEscape` de Go, más `/`).
_PATH_SAFE = "/:@$&+,;=-._~"

# Token HTTP (RFC 9110).
_METHOD_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class Resource:
    """Envoltorio mutable de una `httpx.URL` con helpers para la API REST."""

    def __init__(self, base: httpx.URL, path: str) -> None:
        # Path sin escapar; se escapa una sola vez al reconstruir la URL.
        self._path = PATH + path
        self._url = base.copy_with(path=quote(self._path, safe=_PATH_SAFE), query=None, fragment=None)

    @property
    def url(self) -> httpx.URL:
        return self._url

    def __str__(self) -> str:
        return str(self._url)

    def __repr__(self) -> str:
        return f"Resource({str(self._url)!r})"

    def with_id(self, id: str) -> Resource:
        """Añade `/id:<id>` al path. El id no se valida, solo se escapa."""

        self._path += "/id:" + id
        self._url = self._url.copy_with(path=quote(self._path, safe=_PATH_SAFE))
        return self

    def with_action(self, action: str) -> Resource:
        """Reemplaza la query por `~action=<action>`."""

        self._url = self._url.copy_with(params={"~action": action})
        return self

    def with_parameter(self, name: str, value: str) -> Resource:
        """Reemplaza la query por un único `name=value`."""

        self._url = self._url.copy_with(params={name: value})
        return self

    def request(self, method: str, body: Any = _NO_BODY) -> httpx.Request:
        """Crea una `httpx.Request` para `method` sobre la URL actual.

        Sin `body` la request va vacía; con `body` (incluido `None`, que viaja
        como `null`) se serializa a JSON. Un error de serialización aparece al
        leer el body, no aquí. Un método que no es token HTTP lanza `ValueError`;
        una URL inválida lanza de inmediato (error de programación).
        """

        if not _METHOD_RE.fullmatch(method):
            raise ValueError(f"invalid HTTP method {method!r}")

        if body is _NO_BODY:
            logger.debug("%s %s", method, self._url)
            return httpx.Request(method, self._url)

        stream = encode(body)
        headers = {"Content-Type": "application/json"}
        if stream.error is None:
            headers["Content-Length"] = str(len(stream))
        logger.debug("%s %s (json body, %d bytes)", method, self._url, len(stream))
        return httpx.Request(method, self._url, headers=headers, content=stream)


def url(connection: CloneURL, path: str) -> Resource:
    """Crea un `Resource` cuyo path es `/rest` + `path` sobre la URL de `connection`."""

    return Resource(connection.url(), path)
