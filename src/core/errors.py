"""Errores de la capa de acceso a datos.

Todos heredan de `DataAccessError` para que la CLI (u otro caller) pueda
capturarlos en un solo punto. Ninguno se reintenta dentro de esta capa.
"""

from __future__ import annotations


class DataAccessError(Exception):
    """Base de todo error lanzado por la capa de acceso a datos."""


class MissingParameterError(DataAccessError):
    """Un placeholder de la plantilla de endpoint no tiene valor."""

    def __init__(self, placeholder: str, template: str):
        self.placeholder = placeholder
        self.template = template
        super().__init__(f"Missing value for '{{{placeholder}}}' in endpoint template '{template}'")


class TransportError(DataAccessError):
    """Fallo de red, status HTTP no exitoso o respuesta inesperada.

    Nota: `status_code` es None cuando el request no obtuvo respuesta
    (conexión rechazada, timeout) o cuando el body no es una entidad válida;
    en ese caso `payload` guarda lo recibido.
    """

    def __init__(self, message: str, status_code: int | None = None, payload: object | None = None):
        self.message = message
        self.status_code = status_code
        self.payload = payload
        prefix = f"HTTP {status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")


class NotFoundError(TransportError):
    """El recurso de `get`/`update`/`delete` no existe en el servidor (HTTP 404)."""


class HookRejectionError(DataAccessError):
    """Un hook pre-create/pre-update rechazó la entidad; no se emite request."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} rejected: {reason}")
