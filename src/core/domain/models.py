"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Cada entidad declara sus campos con un default, así que construir una
  entidad vacía (id 0, sin guardar) es siempre válido.
- La coerción de fechas y relaciones vive en los tipos anotados, no en
  subclases con lógica propia: las entidades aportan datos, no comportamiento.

Nota:
- Los nombres de campo coinciden con las claves JSON del backend (snake_case).
- Las entidades son inmutables (`frozen=True`); para cambiar una se
  re-hidrata con `EntityModel.merge`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


def _absent_if_falsy(value: Any) -> Any:
    # "", 0 and None must never become a bogus date.
    if not value:
        return None
    return value


def _empty_if_none(value: Any) -> Any:
    if value is None:
        return {}
    return value


Timestamp = Annotated[datetime | None, BeforeValidator(_absent_if_falsy)]

_ENTITY_CONFIG = ConfigDict(extra="ignore", frozen=True)


class User(BaseModel):
    """Usuario propietario/creador de otras entidades (campo relación)."""

    model_config = _ENTITY_CONFIG

    id: int = Field(default=0, ge=0)
    username: str = ""
    name: str = ""
    email: str = ""
    created: Timestamp = None
    updated: Timestamp = None


UserRelation = Annotated[User, BeforeValidator(_empty_if_none)]


class Merchant(BaseModel):
    """Comercio gestionado desde el backend."""

    model_config = _ENTITY_CONFIG

    id: int = Field(default=0, ge=0)
    title: str = Field(default="", max_length=250)
    legal_representative: str = Field(default="", max_length=250)
    business_address: str = Field(default="", max_length=500)
    business_district: str = Field(default="", max_length=250)
    valid_time: str = Field(default="", max_length=250)
    traffic_conditions: str = ""
    fixed_events: str = ""
    terminal_type: str = Field(default="", max_length=250)
    special_time_periods: str = ""
    custom_filters: str = ""

    owner: UserRelation = Field(default_factory=User)
    created: Timestamp = None
    updated: Timestamp = None


class MerchantMapping(BaseModel):
    """Regla placeholder -> texto/label, acotada a un campo del comercio.

    Nota: `field_name` puede llegar vacío desde el backend; la agregación
    lo agrupa igual, bajo la clave "".
    """

    model_config = _ENTITY_CONFIG

    id: int = Field(default=0, ge=0)
    field_name: str = Field(default="", max_length=100)
    placeholder: str = Field(default="", max_length=100)
    display_text: str = Field(default="", max_length=500)
    label_id: int = 0
    is_active: bool = True
    created: Timestamp = None
    updated: Timestamp = None


class MerchantTag(BaseModel):
    """Etiqueta de clasificación de comercios (las de sistema no se editan)."""

    model_config = _ENTITY_CONFIG

    id: int = Field(default=0, ge=0)
    title: str = Field(default="", max_length=250)
    description: str = ""
    hex_color: str = Field(default="", max_length=7)
    category: str = Field(default="", max_length=100)
    is_system: bool = False
    sort_order: int = 0

    created_by: UserRelation = Field(default_factory=User)
    created: Timestamp = None
    updated: Timestamp = None


class LabelMapping(BaseModel):
    """Entrada de un grupo: placeholder -> texto/label.

    En el wire (`bulk_save`) las claves van en camelCase
    (`displayText`, `labelId`).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    placeholder: str
    display_text: str = ""
    label_id: int = 0


class FieldLabelMappingGroup(BaseModel):
    """Vista agregada: todas las reglas de un mismo campo, en orden."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    field: str
    mappings: list[LabelMapping] = Field(default_factory=list)
