"""Resolution token translation.

Callers (chart front-ends, the CLI) pass resolution tokens in several
spellings; the provider accepts a small fixed set of codes. Lookup is exact
and case-sensitive: ``"1m"`` is one minute while ``"1M"`` is one month.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from candlefeed.core.models.market import ResolutionCode

# caller token -> provider code
INTERVAL_MAPPING: Mapping[str, ResolutionCode] = MappingProxyType(
    {
        "1m": ResolutionCode.MINUTE_1,
        "1": ResolutionCode.MINUTE_1,
        "5": ResolutionCode.MINUTE_5,
        "5m": ResolutionCode.MINUTE_5,
        "15": ResolutionCode.MINUTE_15,
        "15m": ResolutionCode.MINUTE_15,
        "30": ResolutionCode.MINUTE_30,
        "30m": ResolutionCode.MINUTE_30,
        "60": ResolutionCode.MINUTE_60,
        "60m": ResolutionCode.MINUTE_60,
        "D": ResolutionCode.DAY_1,
        "1D": ResolutionCode.DAY_1,
        "W": ResolutionCode.WEEK_1,
        "1W": ResolutionCode.WEEK_1,
        "M": ResolutionCode.MONTH_1,
        "1M": ResolutionCode.MONTH_1,
    }
)


def translate_resolution(token: str) -> ResolutionCode | None:
    """Return the provider code for ``token``, or ``None`` when it is not recognised."""

    return INTERVAL_MAPPING.get(token)


def supported_resolutions() -> list[str]:
    """List every recognised resolution token."""

    return list(INTERVAL_MAPPING)


__all__ = ["INTERVAL_MAPPING", "supported_resolutions", "translate_resolution"]
