"""Data models module."""

from candlefeed.core.models.candles import Candle, RawSeries
from candlefeed.core.models.market import ResolutionCode, ResponseStatus
from candlefeed.core.models.symbols import SymbolRecord

__all__ = [
    "Candle",
    "RawSeries",
    "ResolutionCode",
    "ResponseStatus",
    "SymbolRecord",
]
