"""Plantillas de endpoints.

Por qué resolver antes del request:
- Una plantilla es un path con placeholders `{name}` (`/merchants/{id}`).
- Si falta un valor se lanza `MissingParameterError` antes de construir el
  request, así nunca sale a la red un path mal formado.

Nota:
- Cada valor se codifica como un único segmento de path (`/` incluido).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Mapping
from urllib.parse import quote

from core.errors import MissingParameterError

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def resolve_endpoint(template: str, params: Mapping[str, Any]) -> str:
    """Sustituye cada `{name}` de `template` por `str(params[name])`."""

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None:
            raise MissingParameterError(name, template)
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_substitute, template)


@dataclass(frozen=True)
class EndpointSet:
    """Plantillas por operación, fijadas al construir el servicio."""

    create: str
    get_all: str
    get: str
    update: str
    delete: str
    bulk_delete: str | None = None
    import_file: str | None = None

    @classmethod
    def from_base(cls, base: str) -> "EndpointSet":
        """Layout REST convencional bajo `base` (p.ej. `/merchants`)."""

        base = "/" + base.strip("/")
        item = f"{base}/{{id}}"
        return cls(
            create=base,
            get_all=base,
            get=item,
            update=item,
            delete=item,
            bulk_delete=f"{base}/bulk_delete",
            import_file=f"{base}/import",
        )

    def resolve(self, operation: str, params: Mapping[str, Any] | None = None) -> str:
        if operation not in _OPERATIONS:
            raise ValueError(f"Unknown endpoint operation: {operation!r}")
        template = getattr(self, operation)
        if template is None:
            raise ValueError(f"No endpoint configured for {operation!r}")
        return resolve_endpoint(template, params or {})


_OPERATIONS = frozenset(f.name for f in fields(EndpointSet))
