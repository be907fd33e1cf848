"""Mappings de labels por campo: CRUD y vista agrupada por campo.

Por qué agrupar en el cliente:
- El backend guarda una fila por regla de placeholder; la UI trabaja con la
  forma agrupada (`FieldLabelMappingGroup`).
- `group_mappings` convierte una en otra y `MappingAggregator` envuelve los
  endpoints bulk que ya aceptan la forma agrupada.

Nota:
- La agregación es total: un `field_name` vacío forma su propio grupo `""`.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

import httpx

from core.config import AppSettings
from core.domain.hydration import EntityModel
from core.domain.models import FieldLabelMappingGroup, LabelMapping, MerchantMapping
from core.services.endpoints import EndpointSet, resolve_endpoint
from core.services.entity_service import FETCH_ALL, EntityService, require_fields

logger = logging.getLogger(__name__)

MAPPING_BASE = "/merchant-mappings"
MAPPING_ENDPOINTS = EndpointSet.from_base(MAPPING_BASE)
MAPPING_BULK_SAVE = f"{MAPPING_BASE}/bulk_save"

MAPPING_MODEL: EntityModel[MerchantMapping] = EntityModel(MerchantMapping)


def build_mapping_service(
    client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> EntityService[MerchantMapping]:
    return EntityService(
        client,
        MAPPING_MODEL,
        MAPPING_ENDPOINTS,
        settings=settings,
        before_create=require_fields("create", "field_name", "placeholder"),
        before_update=require_fields("update", "field_name", "placeholder"),
    )


def group_mappings(records: Iterable[MerchantMapping]) -> list[FieldLabelMappingGroup]:
    """Agrupa registros por `field_name`.

    Los grupos siguen el orden de primera aparición del campo y las entradas
    el orden de entrada. Placeholders repetidos se añaden, no se fusionan.
    """

    groups: dict[str, FieldLabelMappingGroup] = {}
    for record in records:
        group = groups.get(record.field_name)
        if group is None:
            group = FieldLabelMappingGroup(field=record.field_name)
            groups[record.field_name] = group
        group.mappings.append(
            LabelMapping(
                placeholder=record.placeholder,
                display_text=record.display_text,
                label_id=record.label_id,
            )
        )
    return list(groups.values())


class MappingAggregator:
    """Vista agrupada sobre el recurso merchant-mappings."""

    def __init__(self, service: EntityService[MerchantMapping]) -> None:
        self.service = service

    @classmethod
    def from_client(cls, client: httpx.AsyncClient, settings: AppSettings | None = None) -> "MappingAggregator":
        return cls(build_mapping_service(client, settings))

    async def load_all_mappings(self) -> list[FieldLabelMappingGroup]:
        """Trae todos los registros (todas las páginas) y los agrupa por campo."""

        with self.service.loading.track():
            records = await self.service.get_all(page=FETCH_ALL)
            groups = group_mappings(records)
            logger.info("Loaded %d mapping record(s) into %d field group(s)", len(records), len(groups))
            return groups

    async def bulk_save_mappings(self, field_mapping_groups: Sequence[FieldLabelMappingGroup]) -> Any:
        payload = {
            "fieldMappings": [group.model_dump(mode="json", by_alias=True) for group in field_mapping_groups],
        }
        return await self.service.send("POST", resolve_endpoint(MAPPING_BULK_SAVE, {}), json=payload)

    async def bulk_delete_by_fields(self, fields: Iterable[str]) -> Any:
        path = self.service.endpoints.resolve("bulk_delete")
        return await self.service.send("DELETE", path, json={"fields": list(fields)})
