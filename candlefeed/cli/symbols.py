"""Symbol listing command."""

from __future__ import annotations

import asyncio

import typer

from candlefeed.core.client import CandleFeedClient
from candlefeed.core.models import SymbolRecord

from .utils import prepare_output, warn_missing_credentials

SYMBOL_COLUMNS = ["symbol", "displaySymbol", "description", "currency", "mic", "type"]


def register(app: typer.Typer) -> None:
    """Register the symbols command on the root CLI application."""

    app.command("symbols")(symbols_command)


def get_client() -> CandleFeedClient:
    """Factory hook returning a :class:`CandleFeedClient` instance."""

    return CandleFeedClient()


def symbols_command(
    ctx: typer.Context,
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Show at most N symbols."),
) -> None:
    """List the instruments available on the configured market."""

    client = get_client()
    warn_missing_credentials(client)
    records = asyncio.run(_fetch(client))
    if limit is not None:
        records = records[:limit]

    formatter, stream, stack = prepare_output(ctx)
    try:
        formatter.render([_record_to_row(record) for record in records], stream=stream, columns=SYMBOL_COLUMNS)
    finally:
        stack.close()


async def _fetch(client: CandleFeedClient) -> list[SymbolRecord]:
    async with client:
        return await client.fetch_symbols()


def _record_to_row(record: SymbolRecord) -> dict[str, object]:
    return record.model_dump()
