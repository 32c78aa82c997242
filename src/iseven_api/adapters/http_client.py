"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para el cliente async y el bloqueante.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from iseven_api.core.config import AppSettings


def _default_headers(
    settings: AppSettings,
    extra_headers: dict[str, str] | None,
) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambos modos se comporten igual.
    - Permite inyectar un transporte alternativo (tests).
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Equivalente bloqueante de `build_async_client`."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )
