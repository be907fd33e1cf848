"""Exportación JSON de entidades y grupos.

Por qué JSON:
- El backend no ofrece exportación; el cliente vuelca lo que ya obtuvo.
- Formato estable (claves ordenadas) para poder versionar/diff-ear.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


def export_models_json(*, items: Sequence[BaseModel], output_path: Path, by_alias: bool = False) -> Path:
    """Exporta una lista de modelos a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [item.model_dump(mode="json", by_alias=by_alias) for item in items]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
