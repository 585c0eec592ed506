"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from stagecopy.config.config import Config
from stagecopy.platform.filesystem import absolute_path
from stagecopy.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from stagecopy.ui.cli.args.options import CLIArgs, CopyArgs, ShellArgs


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
            prog="stagecopy",
            description="stagecopy - collect files into a copy list, then paste them in one batch.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        copy_parser = subparsers.add_parser(
            "copy",
            help="Stage the given files or directories and paste them into a target",
        )
        _ = copy_parser.add_argument(
            "sources",
            nargs="+",
            type=str,
            help="Files or directories to copy, in order",
            metavar="SOURCE",
        )
        _ = copy_parser.add_argument(
            "--target",
            type=str,
            required=True,
            help="Existing directory that receives the copies",
            metavar="TARGET_PATH",
        )
        ArgumentParser._add_verbosity_flags(copy_parser)

        shell_parser = subparsers.add_parser(
            "shell",
            help="Browse directories interactively and collect items to paste",
        )
        _ = shell_parser.add_argument(
            "start_path",
            nargs="?",
            default=".",
            type=str,
            help="Directory to start in (defaults to the current directory)",
            metavar="START_DIR",
        )
        _ = shell_parser.add_argument(
            "--no-feedback",
            action="store_true",
            help="Disable the highlight pulse on copied and pasted entries",
        )
        ArgumentParser._add_verbosity_flags(shell_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show each copied item and cursor placement details",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "copy":
            return ArgumentParser._process_copy(parsed_args)

        if command == "shell":
            return ArgumentParser._process_shell(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_copy(parsed_args: argparse.Namespace) -> CopyArgs:
        sources = [absolute_path(raw) for raw in parsed_args.sources]
        missing = [source for source in sources if not source.exists()]
        if missing:
            for source in missing:
                logger.error("Source does not exist: %s", source)
            sys.exit(1)

        target_path = absolute_path(parsed_args.target)
        if not target_path.is_dir():
            logger.error("Target directory does not exist or is not a directory: %s", target_path)
            sys.exit(1)

        return CopyArgs(
            command="copy",
            sources=sources,
            target_path=target_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_shell(parsed_args: argparse.Namespace) -> ShellArgs:
        start_path = absolute_path(parsed_args.start_path)
        if not start_path.is_dir():
            logger.error("Start directory does not exist or is not a directory: %s", start_path)
            sys.exit(1)

        return ShellArgs(
            command="shell",
            start_path=start_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            no_feedback=parsed_args.no_feedback,
        )


__all__ = ["ArgumentParser"]
