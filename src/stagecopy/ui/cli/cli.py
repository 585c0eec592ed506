"""Command line interface for stagecopy."""

import sys
from typing import final

from stagecopy.platform.logging import logger
from stagecopy.ui.cli.args import ArgumentParser
from stagecopy.ui.cli.args.options import CLIArgs, CopyArgs, ShellArgs
from stagecopy.ui.cli.commands import CopyCommand, ShellCommand


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

            if isinstance(args, CopyArgs):
                result = CopyCommand(args).execute()
                if result is None:
                    sys.exit(1)
                return

            assert isinstance(args, ShellArgs)
            ShellCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
