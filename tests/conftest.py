"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • settings          : AppSettings isolated from .env files
  • fake_api          : request handler emulating the isEven API
  • mock_transport    : httpx.MockTransport wired to fake_api
  • patched_builders  : routes every client built by the library to fake_api
"""

from __future__ import annotations

from typing import Callable
from urllib.parse import unquote

import httpx
import pytest

from iseven_api.adapters import iseven_client
from iseven_api.core.config import AppSettings

AD = "Buy isEven Premium for only $0.99/month"
INVALID = "Invalid number."
OUT_OF_RANGE = "Number out of range. Upgrade to isEven API Premium or Enterprise."

# Rango del plan gratuito de la API.
MIN_NUMBER = 0
MAX_NUMBER = 999_999


def emulate_api(request: httpx.Request) -> httpx.Response:
    """Emulates https://api.isevenapi.xyz/api/iseven/<number>."""

    raw = unquote(request.url.raw_path.decode("ascii").rsplit("/", 1)[-1])
    try:
        value = float(raw)
    except ValueError:
        return httpx.Response(400, json={"error": INVALID})
    if not value.is_integer():
        return httpx.Response(400, json={"error": INVALID})
    if not MIN_NUMBER <= value <= MAX_NUMBER:
        return httpx.Response(401, json={"error": OUT_OF_RANGE})
    return httpx.Response(200, json={"ad": AD, "iseven": int(value) % 2 == 0})


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_api() -> Callable[[httpx.Request], httpx.Response]:
    return emulate_api


@pytest.fixture
def mock_transport(fake_api) -> httpx.MockTransport:
    return httpx.MockTransport(fake_api)


@pytest.fixture
def patched_builders(monkeypatch, mock_transport):
    """Every client created inside `iseven_client` talks to the fake API."""

    def _async(settings=None, **kwargs):
        return httpx.AsyncClient(transport=mock_transport)

    def _blocking(settings=None, **kwargs):
        return httpx.Client(transport=mock_transport)

    monkeypatch.setattr(iseven_client, "build_async_client", _async)
    monkeypatch.setattr(iseven_client, "build_client", _blocking)
    return mock_transport
