"""Command line interface for pickgo."""

import sys
from typing import final

from pickgo.platform.logging import logger
from pickgo.shared.errors import PickGoError
from pickgo.ui.cli.args import ArgumentParser
from pickgo.ui.cli.args.options import (
    CacheClearArgs,
    CacheInfoArgs,
    CLIArgs,
    InitArgs,
    TemplatesListArgs,
    TemplatesUpdateArgs,
)
from pickgo.ui.cli.commands import CacheCommand, InitCommand, TemplatesCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, InitArgs):
                _ = InitCommand(args).execute()
                return

            if isinstance(args, (TemplatesListArgs, TemplatesUpdateArgs)):
                if not TemplatesCommand(args).execute():
                    sys.exit(1)
                return

            assert isinstance(args, (CacheInfoArgs, CacheClearArgs))
            if not CacheCommand(args).execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PickGoError as e:
            logger.error("%s", str(e))
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
