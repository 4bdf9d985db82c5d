"""Pytest configuration for candlefeed test suite."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar
from unittest.mock import MagicMock

import pytest

from candlefeed.core.models import RawSeries, SymbolRecord

T = TypeVar("T")


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--candlefeed-run-integration",
        action="store_true",
        default=False,
        help="Run candlefeed integration tests that require network access.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker for candlefeed tests."""

    config.addinivalue_line(
        "markers",
        "integration: marks candlefeed tests requiring network or external services",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--candlefeed-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --candlefeed-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


class ImmediateQueue:
    """Queue stand-in that runs every task straight away and counts submissions."""

    def __init__(self) -> None:
        self.submitted = 0

    async def submit(self, task: Callable[[], Awaitable[T]]) -> T:
        self.submitted += 1
        return await task()


@pytest.fixture
def immediate_queue() -> ImmediateQueue:
    return ImmediateQueue()


@pytest.fixture
def log_sink() -> MagicMock:
    """Logger double whose ``bind`` returns itself so calls can be asserted."""

    sink = MagicMock()
    sink.bind.return_value = sink
    return sink


@pytest.fixture
def ok_series() -> RawSeries:
    return RawSeries(
        s="ok",
        t=[1000, 2000, 3000],
        o=[10.0, 11.0, 12.0],
        h=[10.5, 11.5, 12.5],
        l=[9.5, 10.5, 11.5],
        c=[10.2, 11.2, 12.2],
        v=[100.0, 200.0, 300.0],
    )


@pytest.fixture
def symbol_records() -> list[SymbolRecord]:
    return [
        SymbolRecord(
            currency="USD",
            description="APPLE INC",
            displaySymbol="AAPL",
            figi="BBG000B9XRY4",
            mic="XNAS",
            symbol="AAPL",
            type="Common Stock",
        ),
        SymbolRecord(
            currency="USD",
            description="MICROSOFT CORP",
            displaySymbol="MSFT",
            figi="BBG000BPH459",
            mic="XNAS",
            symbol="MSFT",
            type="Common Stock",
        ),
    ]
