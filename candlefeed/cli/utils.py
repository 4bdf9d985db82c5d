"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import typer

from candlefeed.core.client import CandleFeedClient
from candlefeed.core.exceptions import ErrorCode, format_error_response

from .constants import VALIDATION_EXIT_CODE
from .formatters import OutputFormatter, create_formatter


@dataclass(slots=True)
class CLIOptions:
    """Resolved options derived from the Typer context."""

    format: str = "table"
    output_path: Path | None = None
    no_color: bool = False


def get_cli_options(ctx: typer.Context) -> CLIOptions:
    """Extract :class:`CLIOptions` from the Typer context object."""

    ctx.ensure_object(dict)
    data = ctx.obj or {}
    return CLIOptions(
        format=str(data.get("format", "table")),
        output_path=data.get("output_path"),
        no_color=bool(data.get("no_color", False)),
    )


def prepare_output(ctx: typer.Context) -> tuple[OutputFormatter, TextIO, ExitStack]:
    """Resolve formatter and writable stream for the current command."""

    options = get_cli_options(ctx)
    formatter = create_formatter(options.format, no_color=options.no_color)

    stack = ExitStack()
    stream: TextIO
    if options.output_path is not None:
        try:
            stream = stack.enter_context(open(options.output_path, "w", encoding="utf-8"))
        except OSError as exc:
            stack.close()
            emit_error(ErrorCode.CONFIGURATION_ERROR, f"Unable to open '{options.output_path}': {exc}")
            raise typer.Exit(code=VALIDATION_EXIT_CODE) from exc
    else:
        stream = sys.stdout

    return formatter, stream, stack


def emit_error(code: ErrorCode, message: str | None = None, **details: object) -> None:
    """Print a structured error payload to stderr."""

    payload = format_error_response(code, message, **details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def warn_missing_credentials(client: CandleFeedClient) -> None:
    """Tell the user up front when no API key is configured."""

    if not client.fetcher.has_credentials:
        emit_error(ErrorCode.MISSING_CREDENTIAL)


__all__ = ["CLIOptions", "emit_error", "get_cli_options", "prepare_output", "warn_missing_credentials"]
