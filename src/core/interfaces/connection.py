"""Contrato de la capa de transporte que aporta la URL base.

Por qué Protocol:
- El builder de recursos solo necesita una URL base; no depende de cómo se
  gestionan sesión, cookies o reintentos.
- Permite usar una conexión real (`RestConnection`) o un stub en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class CloneURL(Protocol):
    """Aporta la URL base (scheme + host + path base)."""

    def url(self) -> httpx.URL:
        """Devuelve la URL base. `httpx.URL` es inmutable: el builder trabaja sobre su copia."""

        ...
