"""
Data provider implementations for candlefeed.

``FinnhubProvider`` talks to the Finnhub REST API; ``StaticProvider``
serves canned data for offline use and tests.
"""

from candlefeed.core.providers.base import HttpConfig, MarketDataProvider
from candlefeed.core.providers.finnhub import FINNHUB_BASE_URL, FinnhubProvider
from candlefeed.core.providers.static import BarsCall, StaticProvider, failing_provider

__all__ = [
    "BarsCall",
    "FINNHUB_BASE_URL",
    "FinnhubProvider",
    "HttpConfig",
    "MarketDataProvider",
    "StaticProvider",
    "failing_provider",
]
