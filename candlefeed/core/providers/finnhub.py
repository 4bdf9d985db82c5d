"""
Finnhub data provider implementation.

Thin async binding over the Finnhub REST API: symbol listings per exchange
and OHLCV bar series per resolution. Pacing is left to the queue the calls
are submitted through; this module issues exactly one HTTP request per call
and never retries.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
from pydantic import ValidationError

from candlefeed.core.exceptions import (
    AuthenticationError,
    NetworkError,
    ProviderError,
    RateLimitError,
)
from candlefeed.core.logging import get_logger
from candlefeed.core.models import RawSeries, ResolutionCode, SymbolRecord
from candlefeed.core.providers.base import HttpConfig

logger = get_logger(__name__)

FINNHUB_BASE_URL = "https://finnhub.io/api/v1"


class FinnhubProvider:
    """
    Finnhub market-data provider.

    The API key travels in the ``X-Finnhub-Token`` header. A provider built
    without a key still issues requests; Finnhub answers them with 401.
    """

    def __init__(
        self,
        api_key: str | None = None,
        http_config: HttpConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or None
        self.http_config = http_config or HttpConfig(base_url=FINNHUB_BASE_URL)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._client_loop: asyncio.AbstractEventLoop | None = None

    @property
    def name(self) -> str:
        """Provider name identifier."""
        return "finnhub"

    async def __aenter__(self) -> FinnhubProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        loop = asyncio.get_running_loop()
        if self._client is not None and self._client_loop is not loop:
            # 连接池属于已结束的事件循环, 无法复用
            logger.debug("Event loop changed, rebuilding Finnhub HTTP client")
            self._client = None
        if self._client is None:
            self._client_loop = loop
            headers = {"User-Agent": self.http_config.user_agent, **self.http_config.headers}
            if self.api_key:
                headers["X-Finnhub-Token"] = self.api_key
            self._client = httpx.AsyncClient(
                base_url=self.http_config.base_url,
                timeout=httpx.Timeout(self.http_config.timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client and cleanup resources."""
        if self._client is not None:
            if self._client_loop is asyncio.get_running_loop():
                await self._client.aclose()
            self._client = None
            self._client_loop = None

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        client = self._ensure_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"{type(e).__name__}: {e}", provider_name=self.name, details={"path": path}) from e

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"Finnhub rejected the request credentials ({response.status_code})",
                provider_name=self.name,
                details={"path": path, "status_code": response.status_code},
            )
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Finnhub rate limit exceeded",
                provider_name=self.name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                details={"path": path},
            )
        if response.status_code >= 400:
            raise ProviderError(
                f"Finnhub request failed: {response.status_code}",
                provider_name=self.name,
                details={"path": path, "status_code": response.status_code, "body": response.text[:200]},
            )

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                "Finnhub returned a non-JSON response",
                provider_name=self.name,
                details={"path": path},
            ) from e

    async def list_symbols(self, market: str) -> list[SymbolRecord] | SymbolRecord:
        """Fetch the symbol listing for an exchange (``US`` by default upstream)."""

        payload = await self._get_json("/stock/symbol", {"exchange": market})
        logger.debug(f"Fetched symbol listing for {market}")
        try:
            if isinstance(payload, list):
                return [SymbolRecord.model_validate(item) for item in payload]
            return SymbolRecord.model_validate(payload)
        except ValidationError as e:
            raise ProviderError(
                "Unexpected symbol listing payload",
                provider_name=self.name,
                details={"market": market, "errors": e.error_count()},
            ) from e

    async def get_bars(self, symbol: str, code: ResolutionCode, start: int, end: int) -> RawSeries:
        """Fetch a raw candle series; ``start``/``end`` are epoch seconds."""

        payload = await self._get_json(
            "/stock/candle",
            {"symbol": symbol, "resolution": code.value, "from": start, "to": end},
        )
        try:
            return RawSeries.model_validate(payload)
        except ValidationError as e:
            raise ProviderError(
                "Unexpected candle payload",
                provider_name=self.name,
                details={"symbol": symbol, "resolution": code.value, "errors": e.error_count()},
            ) from e


__all__ = ["FINNHUB_BASE_URL", "FinnhubProvider"]
