"""Construcción de la URL de consulta.

El builder no valida el número: cualquier invalidez se observa en la
respuesta del servidor (400/401).
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import quote

from iseven_api.core.config import API_URL

Subject = int | float | Decimal | str


def render_subject(subject: Subject) -> str:
    """Texto del número tal como se enviará a la API.

    Los floats enteros se envían sin parte decimal (`2.0 -> "2"`).
    """

    if isinstance(subject, float) and subject.is_integer():
        return str(int(subject))
    return str(subject)


def build_request_url(subject: Subject, *, base_url: str = API_URL) -> str:
    """Concatena el endpoint base con el número como un único segmento de path."""

    if not base_url.endswith("/"):
        base_url += "/"
    return base_url + quote(render_subject(subject), safe="")
