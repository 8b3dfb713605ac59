"""Errores propios del builder de requests.

Solo existe un error recuperable: el fallo de serialización del body, que se
difiere hasta la primera lectura del stream. Los fallos al construir la request
(método o URL mal formados) son errores de programación y se propagan tal cual.
"""

from __future__ import annotations


class VapiRestError(Exception):
    """Base de los errores de este paquete."""


class BodyEncodingError(VapiRestError, ValueError):
    """El body no se pudo serializar a JSON.

    Se lanza al leer el stream, nunca al construirlo. La causa original queda
    en `__cause__`.
    """
