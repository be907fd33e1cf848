"""Configuración centralizada de logging.

Por qué stdlib `logging`:
- Cada módulo usa `logging.getLogger(__name__)`; aquí solo se fija el
  handler raíz y los niveles por categoría (p.ej. `httpx`).

Uso:
    from core.logging_config import setup_logging
    setup_logging(settings)   # una vez, al arrancar la CLI
"""

from __future__ import annotations

import logging
import sys

from core.config import AppSettings

# Campo de settings -> loggers que controla.
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
}


def setup_logging(settings: AppSettings | None = None) -> None:
    """Configura el logger raíz y los niveles por categoría según settings."""

    settings = settings or AppSettings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s — %(message)s"))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Logging configured (root=%s)", settings.log_level)


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return logging.INFO
