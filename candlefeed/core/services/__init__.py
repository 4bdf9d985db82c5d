"""Candle and symbol services."""

from candlefeed.core.services.candles import is_excluded, reduce_series
from candlefeed.core.services.fetcher import DEFAULT_SYMBOL_MARKET, MarketDataFetcher
from candlefeed.core.services.intervals import INTERVAL_MAPPING, supported_resolutions, translate_resolution

__all__ = [
    "DEFAULT_SYMBOL_MARKET",
    "INTERVAL_MAPPING",
    "MarketDataFetcher",
    "is_excluded",
    "reduce_series",
    "supported_resolutions",
    "translate_resolution",
]
