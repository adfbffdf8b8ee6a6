"""Command line argument handling package."""

from pickgo.ui.cli.args.parser import ArgumentParser
from pickgo.ui.cli.args.options import (
    CacheClearArgs,
    CacheInfoArgs,
    CLIArgs,
    InitArgs,
    TemplatesListArgs,
    TemplatesUpdateArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CacheClearArgs",
    "CacheInfoArgs",
    "InitArgs",
    "TemplatesListArgs",
    "TemplatesUpdateArgs",
]
