"""Guard de estado de carga compartido por todas las operaciones de un servicio."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator


class LoadingGuard:
    """Contador de operaciones en vuelo.

    Nota: las operaciones se solapan en un mismo event loop pero nunca corren
    en paralelo; basta con emparejar incremento y decremento, sin lock.
    """

    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_busy(self) -> bool:
        return self._count > 0

    @contextmanager
    def track(self) -> Iterator[None]:
        """Mantiene el guard tomado durante el bloque `with`."""

        self._count += 1
        try:
            yield
        finally:
            self._count -= 1
