"""Modelos de transferencia (Pydantic v2).

Por qué Pydantic en el dominio:
- Los nombres de campo en JSON (`id`, `object_id`) difieren de los internos
  (`value`); los alias de Pydantic lo resuelven en el borde de serialización.
- Validación y documentación autocontenida (Field) sin acoplar el Core a I/O.

Nota:
- `AssociatedObject` es solo un formato de cable. En el resto del código se
  trabaja con `ManagedObjectReference` o cualquier `Reference`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.config import ConfigDict

from core.interfaces.reference import Reference


class ManagedObjectReference(BaseModel):
    """Referencia genérica a un objeto del inventario (tipo + id opaco)."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(
        ...,
        min_length=1,
        description="Tipo del managed object (p.ej. 'Datacenter', 'VirtualMachine').",
    )
    value: str = Field(
        ...,
        min_length=1,
        description="Identificador opaco del objeto (p.ej. 'dc-1').",
    )

    def reference(self) -> ManagedObjectReference:
        return self


class AssociatedObject(BaseModel):
    """Misma forma que `ManagedObjectReference`, con `value` serializado como `id`.

    Por qué un modelo aparte:
    - Los endpoints de tagging esperan `{"type": ..., "id": ...}`.
    - La conversión es explícita (`from_reference` / `reference`) en vez de
      reinterpretar un tipo como otro.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(
        ...,
        description="Tipo del managed object.",
    )
    value: str = Field(
        ...,
        alias="id",
        description="Identificador del objeto; en JSON viaja como `id`.",
    )

    @classmethod
    def from_reference(cls, ref: Reference) -> AssociatedObject:
        moref = ref.reference()
        return cls(type=moref.type, value=moref.value)

    def reference(self) -> ManagedObjectReference:
        return ManagedObjectReference(type=self.type, value=self.value)


class Association(BaseModel):
    """Payload de las llamadas de tag-association.

    `object_id` se omite del JSON cuando no está presente (no se emite `null`).
    """

    model_config = ConfigDict(frozen=True)

    object_id: AssociatedObject | None = Field(
        default=None,
        description="Objeto al que se asocia (o desasocia) el tag.",
    )

    @model_serializer(mode="wrap")
    def _omit_missing_object(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if self.object_id is None:
            data.pop("object_id", None)
        return data


def new_association(ref: Reference) -> Association:
    """Crea una `Association` convirtiendo `ref` a `AssociatedObject`."""

    return Association(object_id=AssociatedObject.from_reference(ref))
