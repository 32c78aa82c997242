"""
Unit tests for iseven_api.adapters.iseven_client.

The HTTP layer is replaced by httpx.MockTransport (see conftest.emulate_api);
no test touches the network.
"""

from __future__ import annotations

import httpx
import pytest

from iseven_api.adapters.iseven_client import (
    BlockingIsEvenClient,
    IsEvenClient,
    iseven_get,
    iseven_get_blocking,
)
from iseven_api.core.config import AppSettings
from iseven_api.core.domain.errors import (
    InvalidNumberError,
    IsEvenError,
    NetworkError,
    NumberOutOfRangeError,
    UnknownServerError,
)
from iseven_api.core.domain.models import IsEven
from tests.conftest import AD, INVALID, OUT_OF_RANGE

ODD_NUMS = [1, 3, 5, 9, 5283]
EVEN_NUMS = [0, 2, 8, 10, 88888]
ODD_FLOATS = [1.0, 3.0, 5.0, 9.0, 5283.0]
EVEN_FLOATS = [0.0, 2.0, 8.0, 10.0, 88888.0]
OUT_OF_RANGE_NUMS = [1_000_000, 2_147_483_647, -1]
INVALID_INPUTS = ["abc", "1.0.0", "hello world"]


def _async_client(settings, transport) -> IsEvenClient:
    return IsEvenClient(settings, client=httpx.AsyncClient(transport=transport))


def _blocking_client(settings, transport) -> BlockingIsEvenClient:
    return BlockingIsEvenClient(settings, client=httpx.Client(transport=transport))


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------

class TestIsEvenClient:
    @pytest.mark.asyncio
    async def test_valid_int(self, settings, mock_transport):
        client = _async_client(settings, mock_transport)
        for odd, even in zip(ODD_NUMS, EVEN_NUMS):
            assert (await client.check(odd)).is_odd
            assert (await client.check(even)).is_even

    @pytest.mark.asyncio
    async def test_valid_float(self, settings, mock_transport):
        client = _async_client(settings, mock_transport)
        for odd, even in zip(ODD_FLOATS, EVEN_FLOATS):
            assert not (await client.check(odd)).is_even
            assert (await client.check(even)).is_even

    @pytest.mark.asyncio
    async def test_advertisement(self, settings, mock_transport):
        result = await _async_client(settings, mock_transport).check(42)
        assert result == IsEven(ad=AD, iseven=True)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("number", OUT_OF_RANGE_NUMS)
    async def test_out_of_range(self, settings, mock_transport, number):
        with pytest.raises(NumberOutOfRangeError) as info:
            await _async_client(settings, mock_transport).check(number)
        assert info.value.message == OUT_OF_RANGE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", INVALID_INPUTS)
    async def test_invalid_input(self, settings, mock_transport, text):
        with pytest.raises(InvalidNumberError) as info:
            await _async_client(settings, mock_transport).check(text)
        assert info.value.message == INVALID

    @pytest.mark.asyncio
    async def test_unknown_status(self, settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(503, json={"error": "maintenance"}))
        outcome = await _async_client(settings, transport).check_outcome(2)
        assert isinstance(outcome, UnknownServerError)
        assert outcome.status_code == 503

    @pytest.mark.asyncio
    async def test_connection_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _async_client(settings, httpx.MockTransport(handler))
        with pytest.raises(NetworkError) as info:
            await client.check(2)
        assert isinstance(info.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_returned_as_outcome(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        outcome = await _async_client(settings, httpx.MockTransport(handler)).check_outcome(2)
        assert isinstance(outcome, NetworkError)
        assert isinstance(outcome.cause, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_fetch_returns_raw_response(self, settings, mock_transport):
        response = await _async_client(settings, mock_transport).fetch("abc")
        assert response.status_code == 400
        assert response.url.endswith("/api/iseven/abc")
        assert '"error"' in response.text

    @pytest.mark.asyncio
    async def test_one_request_per_call(self, settings, fake_api):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return fake_api(request)

        client = _async_client(settings, httpx.MockTransport(handler))
        await client.check(4)
        with pytest.raises(IsEvenError):
            await client.check("x")
        assert seen == [
            "https://api.isevenapi.xyz/api/iseven/4",
            "https://api.isevenapi.xyz/api/iseven/x",
        ]

    @pytest.mark.asyncio
    async def test_shared_client_not_closed(self, settings, mock_transport):
        shared = httpx.AsyncClient(transport=mock_transport)
        async with IsEvenClient(settings, client=shared) as client:
            await client.check(2)
        assert not shared.is_closed
        await shared.aclose()

    @pytest.mark.asyncio
    async def test_custom_base_url(self, mock_transport):
        settings = AppSettings(_env_file=None, api_base_url="http://localhost:9999/api/iseven")
        response = await _async_client(settings, mock_transport).fetch(6)
        assert response.url == "http://localhost:9999/api/iseven/6"

    @pytest.mark.asyncio
    async def test_iseven_get(self, patched_builders):
        assert (await iseven_get(42)).is_even
        with pytest.raises(NumberOutOfRangeError):
            await iseven_get(-1)


# ---------------------------------------------------------------------------
# Blocking client
# ---------------------------------------------------------------------------

class TestBlockingIsEvenClient:
    def test_valid_int(self, settings, mock_transport):
        with _blocking_client(settings, mock_transport) as client:
            for odd, even in zip(ODD_NUMS, EVEN_NUMS):
                assert client.check(odd).is_odd
                assert client.check(even).is_even

    @pytest.mark.parametrize("number", OUT_OF_RANGE_NUMS)
    def test_out_of_range(self, settings, mock_transport, number):
        with pytest.raises(NumberOutOfRangeError):
            _blocking_client(settings, mock_transport).check(number)

    @pytest.mark.parametrize("text", INVALID_INPUTS)
    def test_invalid_input(self, settings, mock_transport, text):
        outcome = _blocking_client(settings, mock_transport).check_outcome(text)
        assert isinstance(outcome, InvalidNumberError)

    def test_connection_error(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            _blocking_client(settings, httpx.MockTransport(handler)).check(2)

    def test_malformed_body(self, settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="not json"))
        outcome = _blocking_client(settings, transport).check_outcome(2)
        assert isinstance(outcome, NetworkError)

    def test_owned_client_closed(self, settings, patched_builders):
        client = BlockingIsEvenClient(settings)
        client.check(2)
        http = client._client
        client.close()
        assert http is not None and http.is_closed

    def test_iseven_get_blocking(self, patched_builders):
        assert iseven_get_blocking(41).is_odd


# ---------------------------------------------------------------------------
# Both modes agree
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_async_and_blocking_agree(settings, mock_transport):
    subjects = [0, 7, 2.0, -1, 1_000_000, "abc", "1.0.0"]
    async_client = _async_client(settings, mock_transport)
    blocking_client = _blocking_client(settings, mock_transport)
    for subject in subjects:
        assert await async_client.check_outcome(subject) == blocking_client.check_outcome(subject)
