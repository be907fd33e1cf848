"""Hidratación de payloads crudos a entidades tipadas.

Por qué un solo `EntityModel` genérico:
- Es el par de capacidades (defaults + hydrate) del que dependen los
  servicios.
- No hace falta subclasearlo: cada tipo de entidad declara sus defaults y
  su coerción en los propios campos.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel

E = TypeVar("E", bound=BaseModel)


@dataclass(frozen=True)
class EntityModel(Generic[E]):
    """Construye instancias de `entity_type` a partir de registros parciales."""

    entity_type: type[E]

    def defaults(self) -> dict[str, Any]:
        """Valores de una entidad nueva sin guardar (relaciones anidadas incluidas)."""

        return dict(self.entity_type())

    def hydrate(self, partial: Mapping[str, Any] | BaseModel | None = None) -> E:
        """Superpone `partial` sobre los defaults y valida.

        Nota: las relaciones se validan con su propio tipo, así que pasar una
        entidad ya hidratada (o anidada dentro de `partial`) no la altera.
        """

        if partial is None:
            data: Mapping[str, Any] = {}
        elif isinstance(partial, BaseModel):
            data = dict(partial)
        else:
            data = partial
        merged = {**self.defaults(), **data}
        return self.entity_type.model_validate(merged)

    def merge(self, entity: E, changes: Mapping[str, Any]) -> E:
        """Devuelve una entidad nueva con `changes` aplicados sobre `entity`."""

        return self.hydrate({**dict(entity), **changes})

    def set_fields(self, entity: BaseModel) -> dict[str, Any]:
        """Campos de `entity` cuyo valor difiere del default del tipo."""

        defaults = self.defaults()
        return {
            name: value
            for name, value in dict(entity).items()
            if value is not None and value != defaults.get(name)
        }
