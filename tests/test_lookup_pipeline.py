"""Unit tests for iseven_api.core.services.lookup_pipeline."""

from __future__ import annotations

import httpx
import pytest

from iseven_api.core.domain.errors import (
    InvalidNumberError,
    NetworkError,
    NumberOutOfRangeError,
)
from iseven_api.core.domain.models import ErrorResponse, IsEven, LookupEntry
from iseven_api.core.interfaces.checker import BlockingParityChecker, ParityChecker
from iseven_api.core.services.lookup_pipeline import (
    PipelineHooks,
    entry_from_error,
    lookup,
    lookup_blocking,
)


def _outcome(number):
    text = str(number)
    if text == "abc":
        return InvalidNumberError(ErrorResponse(error="Invalid number."))
    if text == "-1":
        return NumberOutOfRangeError(ErrorResponse(error="Number out of range."))
    if text == "down":
        return NetworkError(httpx.ConnectError("refused"))
    return IsEven(ad="ad", iseven=int(text) % 2 == 0)


class FakeChecker:
    def __init__(self) -> None:
        self.calls: list[object] = []

    async def check(self, number) -> IsEven:
        self.calls.append(number)
        outcome = _outcome(number)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeBlockingChecker:
    def check(self, number) -> IsEven:
        outcome = _outcome(number)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_fakes_satisfy_protocols():
    assert isinstance(FakeChecker(), ParityChecker)
    assert isinstance(FakeBlockingChecker(), BlockingParityChecker)


@pytest.mark.asyncio
async def test_lookup_keeps_order_and_collects_errors():
    checker = FakeChecker()
    report = await lookup(checker, [2, "abc", 3, -1, "down"])

    assert checker.calls == [2, "abc", 3, -1, "down"]
    assert [e.subject for e in report.entries] == ["2", "abc", "3", "-1", "down"]
    assert report.entries[0].result.is_even
    assert report.entries[2].result.is_odd
    assert [e.error_kind for e in report.failed] == [
        "InvalidNumberError",
        "NumberOutOfRangeError",
        "NetworkError",
    ]


@pytest.mark.asyncio
async def test_lookup_hooks_called_per_entry():
    seen: list[LookupEntry] = []
    await lookup(FakeChecker(), [1, "abc"], hooks=PipelineHooks(entry_done=seen.append))
    assert [e.ok for e in seen] == [True, False]


def test_lookup_blocking_matches_async_semantics():
    report = lookup_blocking(FakeBlockingChecker(), [10, "abc"])
    assert report.entries[0].result == IsEven(ad="ad", iseven=True)
    assert report.entries[1].error_message == "Invalid number."
    assert report.entries[1].status_code == 400


def test_entry_from_error_status_codes():
    out_of_range = entry_from_error(-1, NumberOutOfRangeError(ErrorResponse(error="x")))
    network = entry_from_error(2.0, NetworkError(httpx.ConnectError("refused")))
    assert out_of_range.status_code == 401
    assert network.status_code is None
    assert network.subject == "2"
    assert "refused" in network.error_message
