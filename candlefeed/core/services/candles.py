"""Reduction of provider bar series into candle records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from candlefeed.core.exceptions.codes import ErrorCode
from candlefeed.core.logging import get_logger
from candlefeed.core.models.candles import Candle, RawSeries

if TYPE_CHECKING:
    from loguru import Logger

_logger = get_logger(__name__)


def is_excluded(timestamp: int, start: int, end: int) -> bool:
    """Return whether the bar at ``timestamp`` is dropped from the window.

    A bar is dropped only when it is both at or before ``start`` and after
    ``end``, which can only happen when ``end < start``. Every other bar is
    kept, including bars outside ``[start, end]``.
    """

    return timestamp <= start and timestamp > end


def reduce_series(series: RawSeries, start: int, end: int, *, log: Logger | None = None) -> list[Candle]:
    """Convert a parallel-array series into candles, one per retained bar.

    Timestamps are converted from seconds to milliseconds; values are taken
    positionally from the parallel arrays. Malformed series (short arrays,
    null values) yield an empty list rather than an exception.
    """

    log = log or _logger
    try:
        candles: list[Candle] = []
        for index, bar in enumerate(series.t):
            if is_excluded(bar, start, end):
                continue
            candles.append(
                Candle(
                    time=bar * 1000,
                    low=series.l[index],
                    high=series.h[index],
                    open=series.o[index],
                    close=series.c[index],
                    volume=series.v[index],
                )
            )
        return candles
    except Exception as e:
        log.bind(error_code=ErrorCode.TRANSFORM_FAILURE.value, bars=len(series.t)).error(
            f"Error reducing data response: {type(e).__name__}: {e}"
        )
        return []


__all__ = ["is_excluded", "reduce_series"]
