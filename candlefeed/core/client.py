"""candlefeed主客户端 - 提供同步和异步接口"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Any

from candlefeed.core.config.settings import CandleFeedConfig, ConfigManager, load_config_from_env
from candlefeed.core.logging import configure_logging
from candlefeed.core.models import Candle, SymbolRecord
from candlefeed.core.patterns.rate_limiter import RateLimitConfig, RateLimitedQueue, TaskQueue
from candlefeed.core.providers.base import HttpConfig, MarketDataProvider
from candlefeed.core.providers.finnhub import FinnhubProvider
from candlefeed.core.services.fetcher import MarketDataFetcher


class CandleFeedClient:
    """candlefeed主客户端 - 提供同步和异步接口"""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        *,
        provider: MarketDataProvider | None = None,
        queue: TaskQueue | None = None,
        config_path: Path | None = None,
        configure_logs: bool = False,
    ) -> None:
        """初始化客户端

        Args:
            config: 可选配置字典, 覆盖配置文件和环境变量
            provider: 自定义数据提供商, 默认使用Finnhub
            queue: 自定义任务队列, 默认使用速率限制队列
            config_path: 配置文件路径
            configure_logs: 是否按配置初始化日志输出

        Raises:
            ConfigurationError: 显式传入的配置无效时. 配置文件和环境变量中的无效值只记录警告
        """
        self.config_manager = ConfigManager(config_path)

        # 环境变量只在构建客户端时读取一次
        env_config = load_config_from_env()
        if env_config:
            self.config_manager.update_config(**env_config)

        if config:
            self.config_manager.update_config(**config)

        self._custom_provider = provider
        self._custom_queue = queue
        self._configure_logs = configure_logs
        self._apply_config()

    @property
    def config(self) -> CandleFeedConfig:
        return self.config_manager.get_config()

    def configure(self, **config: Any) -> None:
        """配置客户端

        支持的配置项:
            provider.api_key: Finnhub API密钥 (str)
            provider.base_url: API地址 (str)
            provider.timeout: 请求超时时间 (float)
            provider.symbol_market: 代码列表市场 (str)
            rate_limit.requests_per_minute: 每分钟请求数 (int)
            rate_limit.concurrent_requests: 并发请求数 (int)
            logging.level: 日志级别 (str)
            logging.file: 日志文件路径 (str)
        """
        self.config_manager.update_config(**config)
        self._apply_config()

    def _apply_config(self) -> None:
        """应用配置到各个组件"""
        config = self.config
        if self._configure_logs:
            configure_logging(
                config.logging.level,
                file_output=config.logging.file is not None,
                file_path=config.logging.file,
            )

        self.provider: MarketDataProvider = self._custom_provider or FinnhubProvider(
            api_key=config.provider.api_key,
            http_config=HttpConfig(base_url=config.provider.base_url, timeout=config.provider.timeout),
        )
        self.queue: TaskQueue = self._custom_queue or RateLimitedQueue(
            RateLimitConfig(
                requests_per_minute=config.rate_limit.requests_per_minute,
                concurrent_requests=config.rate_limit.concurrent_requests,
            )
        )
        self.fetcher = MarketDataFetcher(
            self.provider,
            self.queue,
            api_key=config.provider.api_key,
            symbol_market=config.provider.symbol_market,
        )

    async def fetch_symbols(self) -> list[SymbolRecord]:
        """异步获取代码列表"""
        return await self.fetcher.fetch_symbols()

    async def fetch_candles(self, symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
        """异步获取K线数据

        Args:
            symbol: 股票代码
            resolution: 时间分辨率 (1, 1m, 5, 5m, 15, 15m, 30, 30m, 60, 60m, D, 1D, W, 1W, M, 1M)
            start: 开始时间 (epoch秒)
            end: 结束时间 (epoch秒)

        Returns:
            K线列表, 失败时为空列表
        """
        return await self.fetcher.fetch_candles(symbol, resolution, start, end)

    def get_symbols(self) -> list[SymbolRecord]:
        """同步获取代码列表"""
        return self._run_sync(self.fetch_symbols())

    def get_candles(self, symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
        """同步获取K线数据"""
        return self._run_sync(self.fetch_candles(symbol, resolution, start, end))

    async def aclose(self) -> None:
        """关闭提供商连接"""
        close = getattr(self.provider, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> CandleFeedClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _run_sync(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """运行异步协程的同步包装器"""

        async def run_and_close() -> Any:
            try:
                return await coro
            finally:
                # httpx客户端绑定在事件循环上, 循环结束前关闭
                await self.aclose()

        return asyncio.run(run_and_close())
