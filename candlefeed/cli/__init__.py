"""candlefeed command line interface."""

from candlefeed.cli.main import app, create_app

__all__ = ["app", "create_app"]
