"""Standardised error codes shared across candlefeed layers."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """错误代码枚举."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INVALID_RESOLUTION = "INVALID_RESOLUTION"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    BAD_STATUS = "BAD_STATUS"
    TRANSFORM_FAILURE = "TRANSFORM_FAILURE"


__all__ = ["ErrorCode"]
