"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La API responde con un JSON sin discriminante (éxito vs error); los modelos
  estrictos permiten decidir la variante solo por los campos presentes.
- Los alias mantienen el formato del cable (`ad`, `iseven`, `error`) separado
  de los nombres que usa el código Python. Solo se aceptan los nombres del
  cable al validar; un cuerpo con `advertisement`/`is_even` no es un éxito.

Nota:
- Estos modelos describen *qué* responde la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class IsEven(BaseModel):
    """Respuesta exitosa de la API: paridad del número + anuncio."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
    )

    advertisement: str = Field(
        ...,
        alias="ad",
        description="Texto publicitario que la API adjunta a cada respuesta.",
    )
    is_even: bool = Field(
        ...,
        alias="iseven",
        description="`True` si el número consultado es par.",
    )

    @property
    def is_odd(self) -> bool:
        return not self.is_even

    def __str__(self) -> str:
        return "even" if self.is_even else "odd"


class ErrorResponse(BaseModel):
    """Respuesta de error de la API (`{"error": "..."}`)."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
    )

    message: str = Field(
        ...,
        alias="error",
        description="Mensaje de diagnóstico devuelto por el servidor, sin modificar.",
    )

    def __str__(self) -> str:
        return self.message


class LookupEntry(BaseModel):
    """Resultado de consultar un número: éxito o error clasificado."""

    subject: str = Field(
        ...,
        description="Texto del número tal como se envió a la API.",
    )
    result: IsEven | None = Field(
        default=None,
        description="Respuesta exitosa (ausente si hubo error).",
    )
    error_kind: str | None = Field(
        default=None,
        description="Clase del error clasificado (p.ej. 'InvalidNumberError').",
    )
    error_message: str | None = Field(
        default=None,
        description="Mensaje del error (del servidor o del transporte).",
    )
    status_code: int | None = Field(
        default=None,
        description="Código HTTP observado, si hubo respuesta.",
    )

    @property
    def ok(self) -> bool:
        return self.result is not None


class LookupReport(BaseModel):
    """Agregado de una ejecución de la CLI sobre uno o más números."""

    entries: list[LookupEntry] = Field(
        default_factory=list,
        description="Una entrada por número consultado, en el orden de entrada.",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación del reporte (UTC).",
    )

    @property
    def failed(self) -> list[LookupEntry]:
        return [entry for entry in self.entries if not entry.ok]
