"""In-memory provider serving fixed symbol listings and bar series."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from candlefeed.core.exceptions import ProviderError
from candlefeed.core.models import RawSeries, ResolutionCode, ResponseStatus, SymbolRecord


@dataclass(frozen=True)
class BarsCall:
    """Arguments of one recorded ``get_bars`` call."""

    symbol: str
    code: ResolutionCode
    start: int
    end: int


@dataclass
class StaticProvider:
    """Deterministic provider for offline runs and tests.

    ``series`` is keyed by symbol; symbols without an entry answer with a
    ``no_data`` series. ``error`` makes every call fail with that exception.
    """

    symbols: Sequence[SymbolRecord] | SymbolRecord = ()
    series: Mapping[str, RawSeries] = field(default_factory=dict)
    error: Exception | None = None
    provider_name: str = "static"
    symbol_calls: list[str] = field(default_factory=list)
    bar_calls: list[BarsCall] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.provider_name

    async def list_symbols(self, market: str) -> list[SymbolRecord] | SymbolRecord:
        self.symbol_calls.append(market)
        if self.error is not None:
            raise self.error
        if isinstance(self.symbols, SymbolRecord):
            return self.symbols
        return list(self.symbols)

    async def get_bars(self, symbol: str, code: ResolutionCode, start: int, end: int) -> RawSeries:
        self.bar_calls.append(BarsCall(symbol, code, start, end))
        if self.error is not None:
            raise self.error
        return self.series.get(symbol, RawSeries(s=ResponseStatus.NO_DATA.value))

    async def aclose(self) -> None:
        return None


def failing_provider(message: str = "provider unavailable") -> StaticProvider:
    """Build a provider whose every call raises :class:`ProviderError`."""

    return StaticProvider(error=ProviderError(message, provider_name="static"))


__all__ = ["BarsCall", "StaticProvider", "failing_provider"]
