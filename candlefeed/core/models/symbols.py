"""Instrument metadata returned by symbol listings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SymbolRecord(BaseModel):
    """Symbol listing entry, passed through from the provider untouched.

    Field names follow the provider payload. Unknown fields are kept as
    extras so nothing the provider sends is dropped.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    currency: str | None = None
    description: str | None = None
    displaySymbol: str | None = None
    figi: str | None = None
    mic: str | None = None
    symbol: str | None = None
    type: str | None = None
