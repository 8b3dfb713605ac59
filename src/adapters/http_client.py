"""Wrapper de httpx para la API REST de vAPI.

Por qué un wrapper:
- Estandariza timeouts, headers y verificación TLS.
- Aporta la URL base (`CloneURL`) al builder de recursos.
- Facilita testeo: se puede inyectar un `httpx.Client` con `MockTransport`.

Fuera de alcance: login/logout, reintentos y parseo de respuestas.
"""

from __future__ import annotations

import logging

import httpx

from adapters.resource import Resource, url
from core.config import AppSettings
from core.domain.paths import SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        verify=settings.verify_tls,
        headers=headers,
    )


class RestConnection:
    """Conexión mínima: URL base + envío de requests ya construidas."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._base_url = httpx.URL(self._settings.base_url)
        self._client = client or build_client(self._settings)

    def url(self) -> httpx.URL:
        return self._base_url

    def resource(self, path: str) -> Resource:
        return url(self, path)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Ejecuta el round trip. No parsea ni reintenta."""

        logger.debug("Sending %s %s", request.method, request.url)
        return self._client.send(request)

    def session_id(self) -> str | None:
        """Valor actual de la cookie de sesión, si el servidor la ha fijado."""

        return self._client.cookies.get(SESSION_COOKIE_NAME)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
