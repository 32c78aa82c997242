"""Cliente HTTP de la API isEven.

Dos modos con la misma semántica:
- `IsEvenClient`: async (`httpx.AsyncClient`).
- `BlockingIsEvenClient`: bloqueante (`httpx.Client`).

Una sola petición por llamada, sin reintentos. Los fallos de transporte se
convierten en `NetworkError`; el resto de la clasificación la hace
`core.services.response_interpreter`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from iseven_api.adapters.http_client import build_async_client, build_client
from iseven_api.core.config import AppSettings
from iseven_api.core.domain.errors import NetworkError
from iseven_api.core.domain.models import IsEven
from iseven_api.core.services.request_builder import Subject, build_request_url
from iseven_api.core.services.response_interpreter import (
    Outcome,
    interpret_response,
    raise_for_outcome,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    """Respuesta cruda (sin interpretar) de una consulta."""

    url: str
    status_code: int
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def interpret(self) -> Outcome:
        return interpret_response(self.body, self.status_code)


class IsEvenClient:
    """Cliente async.

    Si se pasa `client`, se reutiliza (pool compartido) y no se cierra aquí;
    si no, se crea uno desde `settings` y se cierra con `aclose()`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self._client

    async def fetch(self, number: Subject) -> ApiResponse:
        """Hace la petición; lanza `NetworkError` si no hay respuesta."""

        url = build_request_url(number, base_url=self._settings.api_base_url)
        logger.debug("GET %s", url)
        try:
            response = await self._http().get(url)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise NetworkError(exc) from exc
        logger.debug("HTTP %s from %s", response.status_code, url)
        return ApiResponse(url=url, status_code=response.status_code, body=response.content)

    async def check_outcome(self, number: Subject) -> Outcome:
        """Como `check`, pero devuelve el error clasificado en vez de lanzarlo."""

        try:
            response = await self.fetch(number)
        except NetworkError as exc:
            return exc
        return response.interpret()

    async def check(self, number: Subject) -> IsEven:
        return raise_for_outcome(await self.check_outcome(number))

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "IsEvenClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class BlockingIsEvenClient:
    """Cliente bloqueante; mismo contrato que `IsEvenClient`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client
        self._owns_client = client is None

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = build_client(self._settings)
        return self._client

    def fetch(self, number: Subject) -> ApiResponse:
        url = build_request_url(number, base_url=self._settings.api_base_url)
        logger.debug("GET %s", url)
        try:
            response = self._http().get(url)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise NetworkError(exc) from exc
        logger.debug("HTTP %s from %s", response.status_code, url)
        return ApiResponse(url=url, status_code=response.status_code, body=response.content)

    def check_outcome(self, number: Subject) -> Outcome:
        try:
            response = self.fetch(number)
        except NetworkError as exc:
            return exc
        return response.interpret()

    def check(self, number: Subject) -> IsEven:
        return raise_for_outcome(self.check_outcome(number))

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BlockingIsEvenClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


async def iseven_get(number: Subject, settings: AppSettings | None = None) -> IsEven:
    """Consulta la paridad de `number` (una petición, cliente efímero).

    Lanza el `IsEvenError` clasificado si la API responde con error o si no
    hay respuesta.
    """

    async with IsEvenClient(settings) as client:
        return await client.check(number)


def iseven_get_blocking(number: Subject, settings: AppSettings | None = None) -> IsEven:
    """Versión bloqueante de `iseven_get`."""

    with BlockingIsEvenClient(settings) as client:
        return client.check(number)
