"""Exception handling module."""

from candlefeed.core.exceptions.base import (
    AuthenticationError,
    CandleFeedError,
    ConfigurationError,
    InvalidResolutionError,
    MissingCredentialError,
    NetworkError,
    ProviderError,
    RateLimitError,
)
from candlefeed.core.exceptions.codes import ErrorCode
from candlefeed.core.exceptions.messages import ErrorMessageTemplate, format_error_response

__all__ = [
    "CandleFeedError",
    "ConfigurationError",
    "MissingCredentialError",
    "InvalidResolutionError",
    "ProviderError",
    "RateLimitError",
    "AuthenticationError",
    "NetworkError",
    "ErrorCode",
    "ErrorMessageTemplate",
    "format_error_response",
]
