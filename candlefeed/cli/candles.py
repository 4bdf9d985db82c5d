"""Candle fetch command."""

from __future__ import annotations

import asyncio

import typer

from candlefeed.core.client import CandleFeedClient
from candlefeed.core.models import Candle
from candlefeed.core.services.intervals import supported_resolutions, translate_resolution

from .utils import prepare_output, warn_missing_credentials

CANDLE_COLUMNS = ["time", "open", "high", "low", "close", "volume"]


def register(app: typer.Typer) -> None:
    """Register the candles command on the root CLI application."""

    app.command("candles")(candles_command)


def get_client() -> CandleFeedClient:
    """Factory hook returning a :class:`CandleFeedClient` instance."""

    return CandleFeedClient()


def candles_command(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Instrument symbol, e.g. AAPL."),
    resolution: str = typer.Option("D", "--resolution", "-r", help="Resolution token (1, 5m, 60, D, 1W, M, ...)."),
    start: int = typer.Option(..., "--start", "--from", help="Window start in epoch seconds."),
    end: int = typer.Option(..., "--end", "--to", help="Window end in epoch seconds."),
) -> None:
    """Fetch candles for SYMBOL between two epoch-second bounds."""

    if translate_resolution(resolution) is None:
        allowed = ", ".join(supported_resolutions())
        raise typer.BadParameter(
            f"Unsupported resolution '{resolution}'. Allowed values: {allowed}",
            param_hint="--resolution",
        )

    client = get_client()
    warn_missing_credentials(client)
    candles = asyncio.run(_fetch(client, symbol, resolution, start, end))

    formatter, stream, stack = prepare_output(ctx)
    try:
        formatter.render([candle.model_dump() for candle in candles], stream=stream, columns=CANDLE_COLUMNS)
    finally:
        stack.close()


async def _fetch(client: CandleFeedClient, symbol: str, resolution: str, start: int, end: int) -> list[Candle]:
    async with client:
        return await client.fetch_candles(symbol, resolution, start, end)
