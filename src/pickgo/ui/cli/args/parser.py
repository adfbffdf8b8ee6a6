"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from pickgo import __version__
from pickgo.config.config import Config
from pickgo.features.templates.domain.models import ArchitectureType
from pickgo.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from pickgo.ui.cli.args.options import (
    CacheClearArgs,
    CacheInfoArgs,
    CLIArgs,
    InitArgs,
    TemplatesListArgs,
    TemplatesUpdateArgs,
)

ARCHITECTURE_CHOICES: list[str] = [arch.value for arch in ArchitectureType]


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pickgo",
            description=(
                "pickgo (Pick Your Go) - Generate Go projects from layered, modular "
                "or hexagonal architecture templates."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        init_parser = subparsers.add_parser(
            "init",
            help="Create a new Go project from an architecture template",
        )
        ArgumentParser._configure_init_parser(init_parser)

        templates_parser = subparsers.add_parser(
            "templates",
            help="Inspect and refresh cached templates",
        )
        templates_actions = templates_parser.add_subparsers(dest="action", required=True)
        list_parser = templates_actions.add_parser(
            "list",
            help="List available templates and whether they are cached",
        )
        ArgumentParser._add_verbosity_flags(list_parser)
        update_parser = templates_actions.add_parser(
            "update",
            help="Download the latest version of templates into the cache",
        )
        _ = update_parser.add_argument(
            "architectures",
            nargs="*",
            choices=ARCHITECTURE_CHOICES,
            metavar="ARCH",
            help="Templates to update (all when omitted)",
        )
        ArgumentParser._add_verbosity_flags(update_parser)

        cache_parser = subparsers.add_parser(
            "cache",
            help="Inspect or clear the template cache",
        )
        cache_actions = cache_parser.add_subparsers(dest="action", required=True)
        info_parser = cache_actions.add_parser(
            "info",
            help="Show cache location, size and template ages",
        )
        ArgumentParser._add_verbosity_flags(info_parser)
        clear_parser = cache_actions.add_parser(
            "clear",
            help="Remove one cached template, or all of them",
        )
        _ = clear_parser.add_argument(
            "architecture",
            nargs="?",
            choices=ARCHITECTURE_CHOICES,
            metavar="ARCH",
            help="Template to remove (all when omitted)",
        )
        ArgumentParser._add_verbosity_flags(clear_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On argparse errors or an unsupported command.
            ConfigurationError: If the configuration file is invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "init":
            return ArgumentParser._process_init(parsed_args, configuration)

        if command == "templates":
            return ArgumentParser._process_templates(parsed_args)

        if command == "cache":
            return ArgumentParser._process_cache(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed progress information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _configure_init_parser(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "-a",
            "--architecture",
            choices=ARCHITECTURE_CHOICES,
            help="Architecture type (layered, modular, hexagonal)",
        )
        _ = parser.add_argument(
            "-n",
            "--name",
            dest="project_name",
            help="Project name",
        )
        _ = parser.add_argument(
            "-m",
            "--module",
            dest="module_path",
            help="Go module path (e.g. github.com/user/project)",
        )
        _ = parser.add_argument(
            "-o",
            "--output",
            dest="output_dir",
            metavar="OUTPUT_DIR",
            help="Output directory (defaults to the configured output directory)",
        )
        _ = parser.add_argument(
            "-u",
            "--author",
            help="Author name",
        )
        _ = parser.add_argument(
            "-d",
            "--description",
            help="Project description",
        )
        _ = parser.add_argument(
            "-y",
            "--yes",
            dest="assume_yes",
            action="store_true",
            help="Skip confirmation prompts",
        )
        ArgumentParser._add_verbosity_flags(parser)

    @staticmethod
    def _process_init(parsed_args: argparse.Namespace, configuration: Config) -> InitArgs:
        architecture = (
            ArchitectureType.from_user_input(parsed_args.architecture)
            if parsed_args.architecture
            else None
        )
        output_dir = Path(parsed_args.output_dir or configuration.default_output_dir)

        return InitArgs(
            command="init",
            architecture=architecture,
            project_name=_clean(parsed_args.project_name),
            module_path=_clean(parsed_args.module_path),
            output_dir=output_dir,
            author=_clean(parsed_args.author) or configuration.default_author,
            description=_clean(parsed_args.description),
            assume_yes=parsed_args.assume_yes,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_templates(parsed_args: argparse.Namespace) -> TemplatesListArgs | TemplatesUpdateArgs:
        if parsed_args.action == "list":
            return TemplatesListArgs(
                command="templates",
                action="list",
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        # Duplicates collapse while keeping the order given.
        architectures = list(
            dict.fromkeys(ArchitectureType.from_user_input(raw) for raw in parsed_args.architectures)
        )
        return TemplatesUpdateArgs(
            command="templates",
            action="update",
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            architectures=architectures,
        )

    @staticmethod
    def _process_cache(parsed_args: argparse.Namespace) -> CacheInfoArgs | CacheClearArgs:
        if parsed_args.action == "info":
            return CacheInfoArgs(
                command="cache",
                action="info",
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        architecture = (
            ArchitectureType.from_user_input(parsed_args.architecture)
            if parsed_args.architecture
            else None
        )
        return CacheClearArgs(
            command="cache",
            action="clear",
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            architecture=architecture,
        )


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


__all__ = ["ArgumentParser"]
