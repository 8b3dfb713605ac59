"""Codificación JSON del body con error diferido.

Por qué diferido:
- `Resource.request` devuelve siempre una request, sin obligar al llamador a
  manejar errores en la cadena de construcción.
- Quien lee el body (el transporte al enviar) ya tiene que manejar errores de
  lectura; un fallo de serialización aparece ahí como `BodyEncodingError`.
"""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Iterator

import httpx
from pydantic import BaseModel

from core.errors import BodyEncodingError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024

# Escape HTML-safe: `<`, `>`, `&` y los separadores de línea U+2028/U+2029.
_GO_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class EncodedBody(httpx.SyncByteStream):
    """Stream de bytes con el JSON ya serializado, o con el error guardado.

    Si la serialización falló, cada `read()` (y cada iteración) lanza
    `BodyEncodingError` encadenado al error original.
    """

    def __init__(self, content: bytes = b"", *, error: Exception | None = None) -> None:
        self._buffer = io.BytesIO(content)
        self._length = len(content)
        self._error = error

    @property
    def error(self) -> Exception | None:
        return self._error

    def __len__(self) -> int:
        return self._length

    def read(self, size: int = -1) -> bytes:
        if self._error is not None:
            raise BodyEncodingError(f"request body is not JSON serializable: {self._error}") from self._error
        return self._buffer.read(size)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self.read(_CHUNK_SIZE)
            if not chunk:
                break
            yield chunk

    def close(self) -> None:
        self._buffer.close()


def encode(body: Any) -> EncodedBody:
    """Serializa `body` a JSON (compacto, con salto de línea final).

    Nunca lanza: un fallo queda guardado en el `EncodedBody` devuelto.
    """

    try:
        payload = _to_jsonable(body) if isinstance(body, BaseModel) else body
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=_to_jsonable)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("Deferring body encoding error for %s: %s", type(body).__name__, exc)
        return EncodedBody(error=exc)
    # Esos caracteres solo pueden aparecer dentro de strings JSON.
    text = text.translate(_GO_ESCAPES)
    return EncodedBody((text + "\n").encode("utf-8"))
