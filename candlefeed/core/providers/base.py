"""Provider interfaces shared by concrete market-data bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from candlefeed.core.models.candles import RawSeries
from candlefeed.core.models.market import ResolutionCode
from candlefeed.core.models.symbols import SymbolRecord


@runtime_checkable
class MarketDataProvider(Protocol):
    """Market-data source offering symbol listings and bar series."""

    @property
    def name(self) -> str: ...

    async def list_symbols(self, market: str) -> list[SymbolRecord] | SymbolRecord:
        """Return the instruments listed on ``market``."""
        ...

    async def get_bars(self, symbol: str, code: ResolutionCode, start: int, end: int) -> RawSeries:
        """Return the raw bar series for ``symbol`` between two epoch-second bounds."""
        ...


@dataclass
class HttpConfig:
    """Configuration for HTTP client behavior."""

    base_url: str
    timeout: float = 30.0
    user_agent: str = "candlefeed/0.1.0"
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate HTTP configuration."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


__all__ = ["HttpConfig", "MarketDataProvider"]
