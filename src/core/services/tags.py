"""Recurso merchant-tags (CRUD simple)."""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.hydration import EntityModel
from core.domain.models import MerchantTag
from core.services.endpoints import EndpointSet
from core.services.entity_service import EntityService, require_fields

TAG_ENDPOINTS = EndpointSet.from_base("/merchant-tags")

TAG_MODEL: EntityModel[MerchantTag] = EntityModel(MerchantTag)


def build_tag_service(
    client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> EntityService[MerchantTag]:
    return EntityService(
        client,
        TAG_MODEL,
        TAG_ENDPOINTS,
        settings=settings,
        before_create=require_fields("create", "title"),
        before_update=require_fields("update", "title"),
    )
