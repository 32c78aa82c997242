"""Interpretación de respuestas de la API isEven.

La API devuelve un JSON sin discriminante:
- éxito: `{"ad": "...", "iseven": true}`
- error: `{"error": "..."}`

Se intenta primero la forma de éxito y luego la de error (unión "untagged",
validada de izquierda a derecha). El código HTTP solo decide la variante de
error cuando el cuerpo no es un éxito.
"""

from __future__ import annotations

import logging
from typing import Annotated, Union

from pydantic import Field, TypeAdapter, ValidationError

from iseven_api.core.domain.errors import (
    InvalidNumberError,
    IsEvenError,
    NetworkError,
    NumberOutOfRangeError,
    ServerError,
    UnknownServerError,
)
from iseven_api.core.domain.models import ErrorResponse, IsEven

logger = logging.getLogger(__name__)

Outcome = Union[IsEven, IsEvenError]

_ENVELOPE = TypeAdapter(
    Annotated[Union[IsEven, ErrorResponse], Field(union_mode="left_to_right")]
)

_STATUS_ERRORS: dict[int, type[ServerError]] = {
    400: InvalidNumberError,
    401: NumberOutOfRangeError,
}


def parse_envelope(raw_body: bytes | str) -> IsEven | ErrorResponse:
    """Decodifica el cuerpo como éxito o error.

    Lanza `pydantic.ValidationError` si el JSON es inválido o no encaja en
    ninguna de las dos formas.
    """

    return _ENVELOPE.validate_json(raw_body)


def classify_error(status_code: int, payload: ErrorResponse) -> ServerError:
    """Tabla código HTTP -> variante de error."""

    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is None:
        return UnknownServerError(payload, status_code)
    return error_cls(payload)


def interpret_response(raw_body: bytes | str, status_code: int) -> Outcome:
    """Convierte (cuerpo, código) en `IsEven` o en un `IsEvenError`.

    Nunca lanza: el error clasificado se devuelve como valor.
    """

    try:
        envelope = parse_envelope(raw_body)
    except ValidationError as exc:
        logger.debug("Unparseable response body (HTTP %s): %r", status_code, raw_body)
        return NetworkError(exc)

    if isinstance(envelope, IsEven):
        if not 200 <= status_code < 300:
            logger.warning(
                "Success-shaped body with HTTP %s; trusting the body", status_code
            )
        return envelope

    return classify_error(status_code, envelope)


def raise_for_outcome(outcome: Outcome) -> IsEven:
    """Devuelve el éxito o lanza el error clasificado."""

    if isinstance(outcome, IsEvenError):
        raise outcome
    return outcome
