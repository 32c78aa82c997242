"""Jerarquía de errores del cliente isEven.

Se diferencian errores de entrada (400), de rango (401), errores desconocidos
del servidor (cualquier otro código) y fallos de transporte/parseo.

Los errores comparan por estructura (clase + campos): interpretar dos veces
la misma respuesta produce errores iguales.
"""

from __future__ import annotations

from typing import Any

from iseven_api.core.domain.models import ErrorResponse


class IsEvenError(Exception):
    """Error base del cliente isEven."""

    def _fields(self) -> tuple[Any, ...]:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class ServerError(IsEvenError):
    """La API respondió con un payload de error (`{"error": ...}`)."""

    status_code: int | None = None

    def __init__(self, payload: ErrorResponse) -> None:
        super().__init__(payload.message)
        self.payload = payload

    @property
    def message(self) -> str:
        return self.payload.message

    def _fields(self) -> tuple[Any, ...]:
        return (self.payload,)


class InvalidNumberError(ServerError):
    """El servidor rechazó el número como inválido (HTTP 400)."""

    status_code = 400


class NumberOutOfRangeError(ServerError):
    """El número está fuera del rango permitido por la API (HTTP 401).

    La API reutiliza 401 para esto; no es un error de autenticación.
    """

    status_code = 401


class UnknownServerError(ServerError):
    """Error con un código HTTP no contemplado; conserva el código."""

    def __init__(self, payload: ErrorResponse, status_code: int) -> None:
        super().__init__(payload)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.payload.message} (HTTP {self.status_code})"

    def _fields(self) -> tuple[Any, ...]:
        return (self.payload, self.status_code)


class NetworkError(IsEvenError):
    """Fallo de transporte o respuesta ilegible (timeout, conexión, JSON inválido)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"request failed: {cause}")
        self.cause = cause
        self.__cause__ = cause

    def _fields(self) -> tuple[Any, ...]:
        return (type(self.cause), str(self.cause))
