"""Command line interface package."""

from pickgo.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
