"""Cliente CRUD genérico sobre el backend REST.

Por qué genérico:
- `EntityService` se parametriza con un modelo de entidad (hydrate/defaults)
  y un `EndpointSet`; cada recurso concreto se arma con una función fábrica
  (`build_merchant_service`, ...) en vez de una subclase.
- El cliente HTTP se inyecta, así los tests usan un `httpx.MockTransport`.

Limitaciones:
- Sin cancelación: una operación emitida corre hasta resolverse.
- Sin timeout propio; aplica el del `httpx.AsyncClient`.
- `FETCH_ALL` corta en la primera página con menos de `page_size` items.
  Si el backend limita `per_page` por debajo de `page_size`, la primera
  página ya parece "corta" y el resultado queda truncado: `page_size` no
  debe superar el máximo por página del servidor.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import IO, Any, Callable, Generic, Iterable, Mapping, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from core.config import AppSettings
from core.errors import HookRejectionError, NotFoundError, TransportError
from core.interfaces.entity_model import EntityModelProtocol
from core.services.endpoints import EndpointSet
from core.services.loading import LoadingGuard

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)

Hook = Callable[[E], E]

FETCH_ALL = -1
"""Valor de `page` que hace que `get_all` recorra todas las páginas."""

FileSource = Union[Path, bytes, IO[bytes]]


def require_fields(operation: str, *names: str) -> Callable[[Any], Any]:
    """Crea un hook pre-create/pre-update que rechaza campos obligatorios vacíos."""

    def hook(entity: Any) -> Any:
        missing = [name for name in names if not str(getattr(entity, name, "") or "").strip()]
        if missing:
            raise HookRejectionError(operation, f"missing required field(s): {', '.join(missing)}")
        return entity

    return hook


class EntityService(Generic[E]):
    """Operaciones CRUD, bulk e import de un recurso."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        model: EntityModelProtocol[E],
        endpoints: EndpointSet,
        *,
        settings: AppSettings | None = None,
        before_create: Hook[E] | None = None,
        before_update: Hook[E] | None = None,
        envelope_key: str | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self.model = model
        self.endpoints = endpoints
        self.loading = LoadingGuard()
        self.page_size = settings.page_size
        self.envelope_key = envelope_key
        self._client = client
        self._create_method = settings.create_method
        self._update_method = settings.update_method
        self._before_create = before_create
        self._before_update = before_update

    @property
    def is_busy(self) -> bool:
        return self.loading.is_busy

    async def create(self, entity: E) -> E:
        with self.loading.track():
            if self._before_create is not None:
                entity = self._before_create(entity)
            path = self.endpoints.resolve("create", dict(entity))
            data = await self._send(self._create_method, path, json=_body(entity))
            return self._hydrate_record(data)

    async def get_all(
        self,
        query_entity: E | None = None,
        extra_params: Mapping[str, Any] | None = None,
        page: int = 1,
    ) -> list[E]:
        """Lista entidades.

        Con `page=FETCH_ALL` pide las páginas 1, 2, ... una tras otra y para
        en la primera que trae menos de `page_size` items.
        """

        if page != FETCH_ALL and page < 1:
            raise ValueError(f"page must be >= 1 or FETCH_ALL, got {page}")

        with self.loading.track():
            params = self._query_params(query_entity, extra_params)
            path = self.endpoints.resolve("get_all", params)
            if page != FETCH_ALL:
                return await self._fetch_page(path, params, page)

            results: list[E] = []
            current = 1
            while True:
                items = await self._fetch_page(path, params, current)
                results.extend(items)
                if len(items) < self.page_size:
                    break
                current += 1
            logger.info("Fetched %d item(s) from %s across %d page(s)", len(results), path, current)
            return results

    async def get(self, entity_id: int) -> E:
        with self.loading.track():
            path = self.endpoints.resolve("get", {"id": entity_id})
            data = await self._send("GET", path)
            return self._hydrate_record(data)

    async def update(self, entity: E) -> E:
        with self.loading.track():
            if self._before_update is not None:
                entity = self._before_update(entity)
            path = self.endpoints.resolve("update", dict(entity))
            data = await self._send(self._update_method, path, json=_body(entity))
            return self._hydrate_record(data)

    async def delete(self, entity_id: int) -> Any:
        with self.loading.track():
            path = self.endpoints.resolve("delete", {"id": entity_id})
            return await self._send("DELETE", path)

    async def bulk_delete(self, ids: Iterable[int]) -> Any:
        with self.loading.track():
            path = self.endpoints.resolve("bulk_delete")
            ack = await self._send("POST", path, json={"ids": list(ids)})
            logger.info("Bulk delete on %s acknowledged", path)
            return ack

    async def import_from_file(
        self,
        file: FileSource,
        header_mapping: Mapping[str, str],
        *,
        filename: str | None = None,
    ) -> list[E]:
        """Sube una hoja de cálculo e hidrata las entidades que creó el servidor."""

        with self.loading.track():
            path = self.endpoints.resolve("import_file")
            name, content = _read_file(file, filename)
            data = await self._send(
                "PUT",
                path,
                files={"file": (name, content, "application/octet-stream")},
                data={"header_mapping": json.dumps(dict(header_mapping), ensure_ascii=False)},
            )
            items = self._hydrate_list(self._unwrap_list(data))
            logger.info("Imported %d item(s) via %s", len(items), path)
            return items

    async def send(self, method: str, path: str, **kwargs: Any) -> Any:
        """Request crudo bajo el guard de carga; devuelve el body decodificado.

        Lo usan helpers propios de cada recurso (p.ej. los bulk de mappings)
        para compartir guard y mapeo de errores.
        """

        with self.loading.track():
            return await self._send(method, path, **kwargs)

    async def _fetch_page(self, path: str, params: Mapping[str, Any], page: int) -> list[E]:
        query = {**params, "page": page, "per_page": self.page_size}
        data = await self._send("GET", path, params=query)
        return self._hydrate_list(self._unwrap_list(data))

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        payload = _decode(response)
        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(_error_message(payload, response), response.status_code, payload)
        if response.is_error:
            logger.warning("%s %s -> HTTP %s", method, path, response.status_code)
            raise TransportError(_error_message(payload, response), response.status_code, payload)
        return payload

    def _hydrate_record(self, data: Any) -> E:
        # Body vacío, texto o lista: no hay entidad que hidratar.
        if not isinstance(data, Mapping):
            raise TransportError("Expected a JSON object in the response", payload=data)
        try:
            return self.model.hydrate(data)
        except ValidationError as exc:
            logger.warning("Invalid record in response: %s", exc)
            message = f"Invalid record in response: {exc.error_count()} validation error(s)"
            raise TransportError(message, payload=data) from exc

    def _hydrate_list(self, items: list[Any]) -> list[E]:
        return [self._hydrate_record(item) for item in items]

    def _query_params(self, query_entity: E | None, extra_params: Mapping[str, Any] | None) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if query_entity is not None:
            for name, value in self.model.set_fields(query_entity).items():
                if isinstance(value, BaseModel):
                    continue
                params[name] = value.isoformat() if isinstance(value, datetime) else value
        if extra_params:
            params.update(extra_params)
        return params

    def _unwrap_list(self, data: Any) -> list[Any]:
        if data is None:
            return []
        if isinstance(data, dict) and self.envelope_key and isinstance(data.get(self.envelope_key), list):
            return data[self.envelope_key]
        if isinstance(data, list):
            return data
        raise TransportError("Expected a list or an envelope response", payload=data)


def _body(entity: BaseModel) -> dict[str, Any]:
    return entity.model_dump(mode="json")


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(payload: Any, response: httpx.Response) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    return response.reason_phrase or "request failed"


def _read_file(file: FileSource, filename: str | None) -> tuple[str, bytes]:
    if isinstance(file, Path):
        return filename or file.name, file.read_bytes()
    if isinstance(file, (bytes, bytearray)):
        return filename or "upload.xlsx", bytes(file)
    content = file.read()
    return filename or Path(getattr(file, "name", "upload.xlsx")).name, content
