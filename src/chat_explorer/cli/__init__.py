"""Command-line entry points."""

from .cli import export_cli, setup_logging

__all__ = ["export_cli", "setup_logging"]
