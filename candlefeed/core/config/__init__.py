"""Configuration management module."""

from candlefeed.core.config.settings import (
    CandleFeedConfig,
    ConfigManager,
    LoggingConfig,
    ProviderConfig,
    RateLimitSettings,
    load_config_from_env,
)

__all__ = [
    "CandleFeedConfig",
    "ConfigManager",
    "LoggingConfig",
    "ProviderConfig",
    "RateLimitSettings",
    "load_config_from_env",
]
