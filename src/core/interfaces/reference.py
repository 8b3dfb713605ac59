"""Contrato de referencia a objetos del inventario.

Por qué Protocol:
- Cualquier objeto capaz de describirse como `ManagedObjectReference` sirve
  para construir payloads (p.ej. `new_association`), sin herencia rígida.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from core.domain.models import ManagedObjectReference


@runtime_checkable
class Reference(Protocol):
    """Contrato mínimo: devolver la referencia genérica del objeto."""

    def reference(self) -> ManagedObjectReference:
        ...
