"""candlefeed - 历史行情数据获取库

从限速的行情数据提供商获取股票代码列表和K线数据,
并将提供商的并行数组格式转换为统一的K线记录。
"""

from candlefeed.core.client import CandleFeedClient
from candlefeed.core.models import Candle, RawSeries, ResolutionCode, SymbolRecord

# 创建全局客户端实例
_client: CandleFeedClient | None = None


def get_client() -> CandleFeedClient:
    """获取全局candlefeed客户端实例"""
    global _client
    if _client is None:
        _client = CandleFeedClient(configure_logs=True)
    return _client


async def fetch_symbols() -> list[SymbolRecord]:
    """异步获取代码列表

    Examples:
        >>> import asyncio
        >>> import candlefeed
        >>> symbols = asyncio.run(candlefeed.fetch_symbols())
    """
    return await get_client().fetch_symbols()


async def fetch_candles(symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
    """异步获取K线数据

    Args:
        symbol: 股票代码
        resolution: 时间分辨率 (例如 "5", "5m", "D", "1W")
        start: 开始时间 (epoch秒)
        end: 结束时间 (epoch秒)

    Examples:
        >>> import asyncio
        >>> import candlefeed
        >>> candles = asyncio.run(
        ...     candlefeed.fetch_candles("AAPL", "D", 1704067200, 1706745600)
        ... )
    """
    return await get_client().fetch_candles(symbol, resolution, start, end)


def get_symbols() -> list[SymbolRecord]:
    """同步获取代码列表"""
    return get_client().get_symbols()


def get_candles(symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
    """同步获取K线数据"""
    return get_client().get_candles(symbol, resolution, start, end)


def configure(**config: object) -> None:
    """配置全局客户端"""
    get_client().configure(**config)


# 版本信息
__version__ = "0.1.0"

__all__ = [
    "Candle",
    "CandleFeedClient",
    "RawSeries",
    "ResolutionCode",
    "SymbolRecord",
    "configure",
    "fetch_candles",
    "fetch_symbols",
    "get_candles",
    "get_client",
    "get_symbols",
]
