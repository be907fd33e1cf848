"""Contrato de hidratación que consumen los servicios.

Por qué Protocol:
- `EntityService` solo necesita `defaults`/`hydrate`/`set_fields`; cualquier
  objeto con esa forma (p.ej. un doble de test) sirve sin herencia.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

E_co = TypeVar("E_co", bound=BaseModel, covariant=True)


@runtime_checkable
class EntityModelProtocol(Protocol[E_co]):
    """Capability pair required by the CRUD layer."""

    def defaults(self) -> dict[str, Any]:
        ...

    def hydrate(self, partial: Mapping[str, Any] | BaseModel | None = None) -> E_co:
        """Turn a partial raw record into a fully populated entity."""

        ...

    def set_fields(self, entity: BaseModel) -> dict[str, Any]:
        ...
