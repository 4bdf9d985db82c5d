"""配置管理模块 - 处理candlefeed客户端的配置"""

import os
import tomllib
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from candlefeed.core.exceptions import ConfigurationError
from candlefeed.core.logging import get_logger
from candlefeed.core.providers.finnhub import FINNHUB_BASE_URL

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".candlefeed" / "config.toml"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _require_positive(value: Any, config_key: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        raise ConfigurationError(f"{config_key} must be a positive number, got {value!r}", config_key=config_key)


@dataclass
class ProviderConfig:
    """提供商配置"""

    api_key: str | None = None
    base_url: str = FINNHUB_BASE_URL
    timeout: float = 30.0
    symbol_market: str = "US"

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("provider.base_url must not be empty", config_key="provider.base_url")
        _require_positive(self.timeout, "provider.timeout")


@dataclass
class RateLimitSettings:
    """速率限制配置"""

    requests_per_minute: int = 60
    concurrent_requests: int = 1

    def __post_init__(self) -> None:
        _require_positive(self.requests_per_minute, "rate_limit.requests_per_minute")
        _require_positive(self.concurrent_requests, "rate_limit.concurrent_requests")


@dataclass
class LoggingConfig:
    """日志配置"""

    level: str = "INFO"
    file: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.level, str) or self.level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown logging level: {self.level!r}", config_key="logging.level")


@dataclass
class CandleFeedConfig:
    """candlefeed主配置"""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    rate_limit: RateLimitSettings = field(default_factory=RateLimitSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "CandleFeedConfig":
        """从字典创建配置"""
        try:
            provider_config = ProviderConfig(**config_dict.get("provider", {}))
            rate_limit_config = RateLimitSettings(**config_dict.get("rate_limit", {}))
            logging_config = LoggingConfig(**config_dict.get("logging", {}))
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration option: {e}") from e

        return cls(provider=provider_config, rate_limit=rate_limit_config, logging=logging_config)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "provider": asdict(self.provider),
            "rate_limit": asdict(self.rate_limit),
            "logging": asdict(self.logging),
        }


class ConfigManager:
    """配置管理器"""

    def __init__(self, config_path: Path | None = None):
        """初始化配置管理器

        Args:
            config_path: 配置文件路径，如果为None则使用默认路径
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config = self._load_config()

    def _load_config(self) -> CandleFeedConfig:
        """加载配置"""
        if not self.config_path.exists():
            return CandleFeedConfig()

        try:
            with open(self.config_path, "rb") as f:
                config_dict = tomllib.load(f)
            return CandleFeedConfig.from_dict(config_dict)
        except (OSError, tomllib.TOMLDecodeError, ConfigurationError) as e:
            # 配置文件有问题时使用默认配置
            logger.bind(error_code="CONFIGURATION_ERROR").warning(
                f"Failed to load config from {self.config_path}: {e}"
            )
            return CandleFeedConfig()

    def get_config(self) -> CandleFeedConfig:
        """获取当前配置"""
        return self.config

    def update_config(self, **updates: Any) -> None:
        """更新配置"""
        config_dict = self.config.to_dict()

        def deep_update(d: dict[str, Any], u: dict[str, Any]) -> dict[str, Any]:
            """深度更新字典"""
            for k, v in u.items():
                if isinstance(v, dict):
                    d[k] = deep_update(d.get(k, {}), v)
                else:
                    d[k] = v
            return d

        deep_update(config_dict, updates)
        self.config = CandleFeedConfig.from_dict(config_dict)


def _env_value(name: str, cast: Callable[[str], Any], validate: Callable[[Any], bool]) -> Any:
    """读取并校验单个环境变量, 无效值记录警告后忽略"""
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        value = cast(raw)
        if not validate(value):
            raise ValueError(raw)
    except ValueError:
        error = ConfigurationError(f"Invalid value for {name}: {raw!r}", config_key=name)
        logger.bind(error_code=error.error_code.value, config_key=name).warning(f"{error.message}, ignoring it")
        return None
    return value


def load_config_from_env() -> dict[str, Any]:
    """从环境变量加载配置"""
    config: dict[str, Any] = {}

    # 提供商配置
    provider_config: dict[str, Any] = {}
    api_key = os.getenv("FINNHUB_API_KEY")
    if api_key:
        provider_config["api_key"] = api_key
    base_url = os.getenv("CANDLEFEED_BASE_URL")
    if base_url:
        provider_config["base_url"] = base_url
    timeout = _env_value("CANDLEFEED_TIMEOUT", float, lambda v: v > 0)
    if timeout is not None:
        provider_config["timeout"] = timeout
    symbol_market = os.getenv("CANDLEFEED_SYMBOL_MARKET")
    if symbol_market:
        provider_config["symbol_market"] = symbol_market

    if provider_config:
        config["provider"] = provider_config

    # 速率限制配置
    requests_per_minute = _env_value("CANDLEFEED_REQUESTS_PER_MINUTE", int, lambda v: v > 0)
    if requests_per_minute is not None:
        config["rate_limit"] = {"requests_per_minute": requests_per_minute}

    # 日志配置
    logging_config: dict[str, Any] = {}
    logging_level = _env_value("CANDLEFEED_LOGGING_LEVEL", str.upper, lambda v: v in LOG_LEVELS)
    if logging_level is not None:
        logging_config["level"] = logging_level
    logging_file = os.getenv("CANDLEFEED_LOGGING_FILE")
    if logging_file is not None:
        logging_config["file"] = logging_file

    if logging_config:
        config["logging"] = logging_config

    return config
