"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import asyncio
import io
import json

import pytest

from candlefeed.core.logging import configure_logging, get_logger, log_context
from candlefeed.core.models import RawSeries, ResolutionCode
from candlefeed.core.providers import StaticProvider
from candlefeed.core.services.fetcher import MarketDataFetcher


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    stream.seek(0)
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


@pytest.fixture
def buffer():
    stream = io.StringIO()
    configure_logging(console_stream=stream)
    yield stream
    configure_logging()


def test_structured_log_contains_trace_and_context(buffer) -> None:
    with log_context(trace_id="trace-123", provider="finnhub", error_code="BAD_STATUS", request_id="req-42"):
        get_logger(__name__).info("no candles in range", symbol="AAPL")

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["trace_id"] == "trace-123"
    assert record["provider"] == "finnhub"
    assert record["error_code"] == "BAD_STATUS"
    assert record["context"]["request_id"] == "req-42"
    assert record["context"]["symbol"] == "AAPL"


def test_trace_id_propagates_within_context(buffer) -> None:
    log = get_logger(__name__)

    with log_context() as trace_id:
        log.info("first event")
        log.info("second event")

    log.info("outside context")

    records = _read_records(buffer)
    assert len(records) == 3
    assert records[0]["trace_id"] == records[1]["trace_id"] == trace_id
    assert records[2]["trace_id"] != trace_id


def test_level_filters_records() -> None:
    stream = io.StringIO()
    configure_logging("WARNING", console_stream=stream)
    try:
        get_logger(__name__).info("hidden")
        get_logger(__name__).warning("shown")
    finally:
        configure_logging()

    assert [record["message"] for record in _read_records(stream)] == ["shown"]


@pytest.mark.asyncio
async def test_fetch_failure_is_logged_as_json(buffer, immediate_queue) -> None:
    fetcher = MarketDataFetcher(StaticProvider(), immediate_queue)

    assert await fetcher.fetch_candles("AAPL", "D", 0, 10) == []

    records = _read_records(buffer)
    assert len(records) == 1
    assert records[0]["level"] == "ERROR"
    assert records[0]["error_code"] == "MISSING_CREDENTIAL"
    assert records[0]["provider"] == "static"
    assert records[0]["context"]["symbol"] == "AAPL"
    assert records[0]["message"].startswith("Error fetching stock candles")


@pytest.mark.asyncio
async def test_each_fetch_gets_its_own_trace(buffer, immediate_queue) -> None:
    fetcher = MarketDataFetcher(StaticProvider(), immediate_queue)

    await asyncio.gather(
        fetcher.fetch_candles("AAPL", "bogus", 0, 10),
        fetcher.fetch_candles("MSFT", "bogus", 0, 10),
    )
    await fetcher.fetch_symbols()

    records = _read_records(buffer)
    assert len(records) == 3
    trace_ids = [record["trace_id"] for record in records]
    assert len(set(trace_ids)) == 3
    assert {records[0]["context"]["symbol"], records[1]["context"]["symbol"]} == {"AAPL", "MSFT"}
    assert records[2]["context"]["market"] == "US"


@pytest.mark.asyncio
async def test_provider_logs_share_the_fetch_trace(buffer, immediate_queue) -> None:
    class TracingProvider(StaticProvider):
        async def get_bars(self, symbol: str, code: ResolutionCode, start: int, end: int) -> RawSeries:
            get_logger(__name__).info("provider call")
            return await super().get_bars(symbol, code, start, end)

    fetcher = MarketDataFetcher(TracingProvider(), immediate_queue, api_key="key")

    assert await fetcher.fetch_candles("AAPL", "D", 0, 10) == []

    records = _read_records(buffer)
    assert len(records) == 2
    assert records[0]["message"] == "provider call"
    assert records[0]["trace_id"] == records[1]["trace_id"]
    assert records[1]["error_code"] == "BAD_STATUS"
