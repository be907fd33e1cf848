"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo entidades y su hidratación.
"""

from core.domain.hydration import EntityModel
from core.domain.models import (
    FieldLabelMappingGroup,
    LabelMapping,
    Merchant,
    MerchantMapping,
    MerchantTag,
    User,
)

__all__ = [
    "EntityModel",
    "FieldLabelMappingGroup",
    "LabelMapping",
    "Merchant",
    "MerchantMapping",
    "MerchantTag",
    "User",
]
