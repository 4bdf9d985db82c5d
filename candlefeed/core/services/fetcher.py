"""Symbol and candle fetching through a rate-limited provider.

Both public operations are total: whatever goes wrong (unknown resolution,
missing API key, provider or network failure, a status other than ``ok``,
a malformed series) is logged on the injected logger and the caller gets
an empty list. Nothing is retried. Each invocation logs under its own
trace id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from candlefeed.core.exceptions import CandleFeedError, ErrorCode, InvalidResolutionError, MissingCredentialError
from candlefeed.core.exceptions.messages import ErrorMessageTemplate
from candlefeed.core.logging import get_logger, log_context
from candlefeed.core.models import Candle, RawSeries, SymbolRecord
from candlefeed.core.patterns.rate_limiter import TaskQueue
from candlefeed.core.providers.base import MarketDataProvider
from candlefeed.core.services.candles import reduce_series
from candlefeed.core.services.intervals import translate_resolution

if TYPE_CHECKING:
    from loguru import Logger

DEFAULT_SYMBOL_MARKET = "US"


class MarketDataFetcher:
    """Coordinates resolution checks, queued provider calls and candle reduction."""

    def __init__(
        self,
        provider: MarketDataProvider,
        queue: TaskQueue,
        *,
        api_key: str | None = None,
        symbol_market: str = DEFAULT_SYMBOL_MARKET,
        log: Logger | None = None,
    ) -> None:
        self.provider = provider
        self.queue = queue
        self.symbol_market = symbol_market
        self._api_key = api_key or None
        self._log = log or get_logger(__name__)

    @property
    def has_credentials(self) -> bool:
        return self._api_key is not None

    def _require_credentials(self) -> None:
        if not self.has_credentials:
            raise MissingCredentialError(details={"provider": self.provider.name})

    def _log_failure(self, message: str, error: Exception, **context: object) -> None:
        extra: dict[str, object] = {"provider": self.provider.name}
        if isinstance(error, CandleFeedError):
            extra.update(error.details)
            extra["error_code"] = error.error_code.value
        else:
            extra["error_code"] = ErrorCode.PROVIDER_ERROR.value
        extra.update(context)
        self._log.bind(**extra).error(f"{message}: {type(error).__name__}: {error}")

    async def fetch_symbols(self) -> list[SymbolRecord]:
        """Fetch the symbol listing for the configured market.

        Returns:
            The provider's records (a single record is wrapped in a list), or
            an empty list on any failure.
        """
        with log_context(provider=self.provider.name, market=self.symbol_market):
            try:
                self._require_credentials()
                records = await self.queue.submit(lambda: self.provider.list_symbols(self.symbol_market))
                if isinstance(records, SymbolRecord):
                    return [records]
                return list(records)
            except Exception as e:
                self._log_failure("Error fetching stock symbols", e, market=self.symbol_market)
                return []

    async def fetch_candles(self, symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
        """Fetch candles for ``symbol`` between two epoch-second bounds.

        Args:
            symbol: Instrument symbol, e.g. ``AAPL``
            resolution: Resolution token such as ``5``, ``5m``, ``D`` or ``1W``
            start: Window start in epoch seconds
            end: Window end in epoch seconds

        Returns:
            Candles in provider order, or an empty list when the resolution is
            unknown, the provider reports no data, or anything fails.
        """
        context = {"symbol": symbol, "resolution": resolution, "start": start, "end": end}
        with log_context(provider=self.provider.name, symbol=symbol):
            try:
                code = translate_resolution(resolution)
                if code is None:
                    raise InvalidResolutionError(resolution)
                self._require_credentials()

                series: RawSeries = await self.queue.submit(lambda: self.provider.get_bars(symbol, code, start, end))

                if not series.is_ok:
                    self._log.bind(
                        error_code=ErrorCode.BAD_STATUS.value,
                        provider=self.provider.name,
                        status=series.status,
                        **context,
                    ).info(ErrorMessageTemplate.get_message(ErrorCode.BAD_STATUS, status=series.status))
                    return []

                return reduce_series(series, start, end, log=self._log)
            except Exception as e:
                self._log_failure("Error fetching stock candles", e, **context)
                return []


__all__ = ["DEFAULT_SYMBOL_MARKET", "MarketDataFetcher"]
