"""Market-related enums and types."""

from enum import Enum


class ResolutionCode(str, Enum):
    """提供商时间分辨率代码枚举."""

    MINUTE_1 = "1"
    MINUTE_5 = "5"
    MINUTE_15 = "15"
    MINUTE_30 = "30"
    MINUTE_60 = "60"
    DAY_1 = "D"
    WEEK_1 = "W"
    MONTH_1 = "M"


class ResponseStatus(str, Enum):
    """提供商响应状态枚举."""

    OK = "ok"
    NO_DATA = "no_data"
