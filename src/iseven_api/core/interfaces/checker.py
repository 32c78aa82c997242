"""Contrato de consulta de paridad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el pipeline use el cliente HTTP real o un doble de test sin
  acoplar el Core a `httpx`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iseven_api.core.domain.models import IsEven
from iseven_api.core.services.request_builder import Subject


@runtime_checkable
class ParityChecker(Protocol):
    """Contrato mínimo para consultar la paridad de un número.

    Reglas de diseño:
    - `check` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve `IsEven` o lanza un `IsEvenError` clasificado.
    """

    async def check(self, number: Subject) -> IsEven:
        """Consulta la paridad de `number`."""

        ...


@runtime_checkable
class BlockingParityChecker(Protocol):
    """Variante bloqueante de `ParityChecker` (misma semántica)."""

    def check(self, number: Subject) -> IsEven:
        ...
