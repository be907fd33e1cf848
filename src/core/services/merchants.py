"""Recurso merchants: endpoints, hooks y cabeceras de import por defecto.

Nota:
- El backend exige `title`; los hooks lo validan antes de cualquier request.
- El import responde con un sobre `{message, count, merchants}`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.hydration import EntityModel
from core.domain.models import Merchant
from core.services.endpoints import EndpointSet
from core.services.entity_service import EntityService, require_fields

MERCHANT_ENDPOINTS = EndpointSet.from_base("/merchants")

MERCHANT_MODEL: EntityModel[Merchant] = EntityModel(Merchant)

# Cabecera de columna de la hoja -> campo del comercio (`/merchants/import`).
DEFAULT_IMPORT_HEADERS: dict[str, str] = {
    "法人": "legal_representative",
    "经营地址": "business_address",
    "商圈": "business_district",
    "有效时间": "valid_time",
    "交通情况": "traffic_conditions",
    "固定事件": "fixed_events",
    "终端类型": "terminal_type",
    "特殊时段": "special_time_periods",
    "自定义筛选": "custom_filters",
}


def build_merchant_service(
    client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> EntityService[Merchant]:
    return EntityService(
        client,
        MERCHANT_MODEL,
        MERCHANT_ENDPOINTS,
        settings=settings,
        before_create=require_fields("create", "title"),
        before_update=require_fields("update", "title"),
        envelope_key="merchants",
    )
