"""Command execution package for CLI."""

from pickgo.ui.cli.commands.cache import CacheCommand
from pickgo.ui.cli.commands.init import InitCommand
from pickgo.ui.cli.commands.templates import TemplatesCommand

__all__ = ["CacheCommand", "InitCommand", "TemplatesCommand"]
