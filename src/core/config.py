"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios lean config de forma consistente.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
WriteMethod = Literal["POST", "PUT", "PATCH"]


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Todas las variables se leen con el prefijo `MERCHANT_CLIENT_`
    (p.ej. `MERCHANT_CLIENT_API_BASE_URL`).
    """

    model_config = SettingsConfigDict(
        env_prefix="MERCHANT_CLIENT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:3456/api/v1",
        min_length=8,
        description="Base URL of the REST backend; endpoint paths are resolved against it.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos), aplicado por el transporte.",
    )
    user_agent: str = Field(
        default="merchant-client/0.1",
        min_length=1,
        description="User-Agent enviado al backend.",
    )

    page_size: int = Field(
        default=50,
        ge=1,
        le=500,
        description=(
            "Items por página pedidos a los endpoints de listado (`per_page`). No debe "
            "superar el máximo por página del servidor: si no, fetch-all corta tras la primera página."
        ),
    )
    create_method: WriteMethod = Field(
        default="POST",
        description="HTTP method used by `create`.",
    )
    update_method: WriteMethod = Field(
        default="PUT",
        description="HTTP method used by `update`.",
    )

    log_level: LogLevel = Field(
        default="INFO",
        description="Nivel del logger raíz.",
    )
    log_level_http: LogLevel = Field(
        default="WARNING",
        description="Nivel para los loggers de httpx/httpcore.",
    )
