"""标准化错误消息模板."""

from typing import Any

from candlefeed.core.exceptions.codes import ErrorCode


class ErrorMessageTemplate:
    """错误消息模板管理器."""

    _templates: dict[ErrorCode, str] = {
        ErrorCode.GENERAL_ERROR: "An unknown error occurred",
        ErrorCode.CONFIGURATION_ERROR: "Configuration error: {details}",
        ErrorCode.MISSING_CREDENTIAL: (
            "Finnhub API Key is missing. You can get a free one at: https://finnhub.io/. "
            "You can continue without one, but it is recommended to create one regardless"
        ),
        ErrorCode.INVALID_RESOLUTION: "Invalid resolution provided: {resolution}",
        ErrorCode.PROVIDER_ERROR: "Provider {provider} returned an error: {message}",
        ErrorCode.NETWORK_ERROR: "Network error talking to {provider}: {message}",
        ErrorCode.AUTHENTICATION_ERROR: "Provider {provider} rejected the credentials",
        ErrorCode.RATE_LIMIT_ERROR: "Provider {provider} rate limit exceeded",
        ErrorCode.BAD_STATUS: (
            "[data] has returned 0 values for the requested range, this is either a bug "
            "or the requested dataset is out of range: status={status}"
        ),
        ErrorCode.TRANSFORM_FAILURE: "Error reducing data response: {message}",
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode, **kwargs: Any) -> str:
        """获取标准化错误消息.

        Args:
            error_code: 错误代码
            **kwargs: 模板变量

        Returns:
            格式化后的错误消息
        """
        template = cls._templates.get(error_code, cls._templates[ErrorCode.GENERAL_ERROR])
        try:
            return template.format(**kwargs)
        except KeyError:
            # 缺少模板变量时返回带错误代码的通用消息
            return f"{cls._templates[ErrorCode.GENERAL_ERROR]} (code: {error_code.value})"


def format_error_response(error_code: ErrorCode, message: str | None = None, **kwargs: Any) -> dict[str, Any]:
    """格式化错误响应.

    Args:
        error_code: 错误代码
        message: 自定义错误消息(可选)
        **kwargs: 额外的错误详情

    Returns:
        标准化的错误响应字典
    """
    if message is None:
        message = ErrorMessageTemplate.get_message(error_code, **kwargs)

    return {
        "error": {
            "code": error_code.value,
            "message": message,
            "details": kwargs,
        }
    }


__all__ = ["ErrorMessageTemplate", "format_error_response"]
