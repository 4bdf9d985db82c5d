"""Main entry point for the candlefeed command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from candlefeed.core.logging import configure_logging

from .candles import register as register_candle_commands
from .formatters import create_formatter
from .symbols import register as register_symbol_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for candlefeed."""

    app = typer.Typer(add_completion=False, help="candlefeed command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            help="Logging level for diagnostics written to stderr.",
            show_default=True,
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            # Validate formatter eagerly for immediate feedback on invalid options
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
            }
        )
        configure_logging(log_level.upper())

    register_candle_commands(app)
    register_symbol_commands(app)
    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    app()
