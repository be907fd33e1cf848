from core.services.endpoints import EndpointSet, resolve_endpoint
from core.services.entity_service import FETCH_ALL, EntityService, require_fields
from core.services.loading import LoadingGuard
from core.services.mappings import MappingAggregator, build_mapping_service, group_mappings
from core.services.merchants import DEFAULT_IMPORT_HEADERS, build_merchant_service
from core.services.tags import build_tag_service

__all__ = [
    "DEFAULT_IMPORT_HEADERS",
    "FETCH_ALL",
    "EndpointSet",
    "EntityService",
    "LoadingGuard",
    "MappingAggregator",
    "build_mapping_service",
    "build_merchant_service",
    "build_tag_service",
    "group_mappings",
    "require_fields",
    "resolve_endpoint",
]
