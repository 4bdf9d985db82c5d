"""candlefeed核心异常类."""

from typing import Any

from candlefeed.core.exceptions.codes import ErrorCode
from candlefeed.core.exceptions.messages import ErrorMessageTemplate


class CandleFeedError(Exception):
    """candlefeed基础异常类."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """初始化异常.

        Args:
            message: 错误消息
            error_code: 错误代码
            details: 额外详情
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.error_code.value,
            "message": self.message,
            "details": dict(self.details),
        }


class ConfigurationError(CandleFeedError):
    """配置异常."""

    def __init__(self, message: str, config_key: str | None = None, details: dict[str, Any] | None = None):
        super_details = details or {}
        if config_key:
            super_details["config_key"] = config_key
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, super_details)
        self.config_key = config_key


class MissingCredentialError(CandleFeedError):
    """缺少API密钥异常."""

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(
            message or ErrorMessageTemplate.get_message(ErrorCode.MISSING_CREDENTIAL),
            ErrorCode.MISSING_CREDENTIAL,
            details,
        )


class InvalidResolutionError(CandleFeedError):
    """无效的时间分辨率异常."""

    def __init__(self, resolution: str, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details["resolution"] = resolution
        super().__init__(
            ErrorMessageTemplate.get_message(ErrorCode.INVALID_RESOLUTION, resolution=resolution),
            ErrorCode.INVALID_RESOLUTION,
            super_details,
        )
        self.resolution = resolution


class ProviderError(CandleFeedError):
    """数据提供商相关异常."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: ErrorCode = ErrorCode.PROVIDER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details["provider"] = provider_name
        super().__init__(message, error_code, super_details)
        self.provider_name = provider_name


class RateLimitError(ProviderError):
    """速率限制异常."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        retry_after: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if retry_after is not None:
            super_details["retry_after"] = retry_after
        super().__init__(message, provider_name, ErrorCode.RATE_LIMIT_ERROR, super_details)
        self.retry_after = retry_after


class AuthenticationError(ProviderError):
    """认证异常."""

    def __init__(self, message: str, provider_name: str, details: dict[str, Any] | None = None):
        super().__init__(message, provider_name, ErrorCode.AUTHENTICATION_ERROR, details)


class NetworkError(ProviderError):
    """网络异常."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, provider_name, ErrorCode.NETWORK_ERROR, super_details)
        self.status_code = status_code
