"""Bar series models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .market import ResponseStatus


class RawSeries(BaseModel):
    """Provider-native bar series: a status flag plus parallel value arrays.

    Index ``i`` across ``l``/``h``/``o``/``c``/``v`` describes the bar that
    starts at ``t[i]`` (epoch seconds). Array lengths are not checked here;
    a mismatch surfaces when the series is reduced into candles.
    """

    model_config = ConfigDict(frozen=True)

    s: str
    t: list[int] = Field(default_factory=list)
    l: list[float | None] = Field(default_factory=list)  # noqa: E741
    h: list[float | None] = Field(default_factory=list)
    o: list[float | None] = Field(default_factory=list)
    c: list[float | None] = Field(default_factory=list)
    v: list[float | None] = Field(default_factory=list)

    @property
    def status(self) -> str:
        return self.s

    @property
    def is_ok(self) -> bool:
        """Only an ``ok`` status means the arrays can be trusted."""
        return self.s == ResponseStatus.OK.value

    def __len__(self) -> int:
        return len(self.t)


class Candle(BaseModel):
    """Normalized OHLCV bar with an epoch-millisecond timestamp."""

    model_config = ConfigDict(frozen=True)

    time: int
    low: float
    high: float
    open: float
    close: float
    volume: float
