"""测试配置管理."""

from __future__ import annotations

from pathlib import Path

import pytest

from candlefeed.core.config import (
    CandleFeedConfig,
    ConfigManager,
    load_config_from_env,
)
from candlefeed.core.exceptions import ConfigurationError
from candlefeed.core.providers import FINNHUB_BASE_URL

ENV_KEYS = [
    "FINNHUB_API_KEY",
    "CANDLEFEED_BASE_URL",
    "CANDLEFEED_TIMEOUT",
    "CANDLEFEED_SYMBOL_MARKET",
    "CANDLEFEED_REQUESTS_PER_MINUTE",
    "CANDLEFEED_LOGGING_LEVEL",
    "CANDLEFEED_LOGGING_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_default_config() -> None:
    config = CandleFeedConfig()

    assert config.provider.api_key is None
    assert config.provider.base_url == FINNHUB_BASE_URL
    assert config.provider.symbol_market == "US"
    assert config.rate_limit.requests_per_minute == 60
    assert config.logging.level == "INFO"


def test_round_trip_through_dict() -> None:
    config = CandleFeedConfig.from_dict({"provider": {"api_key": "abc", "timeout": 5.0}})

    assert CandleFeedConfig.from_dict(config.to_dict()) == config


def test_unknown_option_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        CandleFeedConfig.from_dict({"provider": {"token": "abc"}})


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINNHUB_API_KEY", "env-key")
    monkeypatch.setenv("CANDLEFEED_TIMEOUT", "7.5")
    monkeypatch.setenv("CANDLEFEED_REQUESTS_PER_MINUTE", "30")
    monkeypatch.setenv("CANDLEFEED_LOGGING_LEVEL", "DEBUG")

    env = load_config_from_env()

    assert env == {
        "provider": {"api_key": "env-key", "timeout": 7.5},
        "rate_limit": {"requests_per_minute": 30},
        "logging": {"level": "DEBUG"},
    }


def test_empty_env_key_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FINNHUB_API_KEY", "")

    assert load_config_from_env() == {}


def test_config_manager_loads_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[provider]\napi_key = "file-key"\nsymbol_market = "L"\n\n[rate_limit]\nrequests_per_minute = 5\n')

    config = ConfigManager(path).get_config()

    assert config.provider.api_key == "file-key"
    assert config.provider.symbol_market == "L"
    assert config.rate_limit.requests_per_minute == 5


def test_config_manager_falls_back_on_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[provider\nbroken")

    assert ConfigManager(path).get_config() == CandleFeedConfig()


def test_config_manager_missing_file_uses_defaults(tmp_path: Path) -> None:
    assert ConfigManager(tmp_path / "absent.toml").get_config() == CandleFeedConfig()


def test_update_config_deep_merges(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "absent.toml")

    manager.update_config(provider={"api_key": "k"})
    manager.update_config(provider={"timeout": 3.0})

    assert manager.config.provider.api_key == "k"
    assert manager.config.provider.timeout == 3.0


@pytest.mark.parametrize(
    "config_dict",
    [
        {"provider": {"timeout": -1}},
        {"provider": {"timeout": "fast"}},
        {"provider": {"base_url": ""}},
        {"rate_limit": {"requests_per_minute": 0}},
        {"rate_limit": {"concurrent_requests": -2}},
        {"logging": {"level": "LOUD"}},
    ],
)
def test_out_of_range_values_raise_configuration_error(config_dict: dict) -> None:
    with pytest.raises(ConfigurationError):
        CandleFeedConfig.from_dict(config_dict)


def test_config_manager_falls_back_on_invalid_values(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[provider]\napi_key = "file-key"\ntimeout = -1\n')

    assert ConfigManager(path).get_config() == CandleFeedConfig()


def test_update_config_rejects_invalid_values(tmp_path: Path) -> None:
    manager = ConfigManager(tmp_path / "absent.toml")

    with pytest.raises(ConfigurationError) as exc_info:
        manager.update_config(rate_limit={"requests_per_minute": 0})

    assert exc_info.value.config_key == "rate_limit.requests_per_minute"
    assert manager.config == CandleFeedConfig()


@pytest.mark.parametrize(
    ("name", "raw"),
    [
        ("CANDLEFEED_TIMEOUT", "abc"),
        ("CANDLEFEED_TIMEOUT", "0"),
        ("CANDLEFEED_REQUESTS_PER_MINUTE", "0"),
        ("CANDLEFEED_REQUESTS_PER_MINUTE", "many"),
        ("CANDLEFEED_LOGGING_LEVEL", "LOUD"),
    ],
)
def test_invalid_env_values_are_ignored(monkeypatch: pytest.MonkeyPatch, name: str, raw: str) -> None:
    monkeypatch.setenv("FINNHUB_API_KEY", "env-key")
    monkeypatch.setenv(name, raw)

    assert load_config_from_env() == {"provider": {"api_key": "env-key"}}


def test_env_logging_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CANDLEFEED_LOGGING_LEVEL", "debug")

    assert load_config_from_env() == {"logging": {"level": "DEBUG"}}
