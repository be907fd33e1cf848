"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los modelos concretos.
- Permite invertir dependencias: los servicios dependen de abstracciones.
"""

from core.interfaces.entity_model import EntityModelProtocol

__all__ = ["EntityModelProtocol"]
