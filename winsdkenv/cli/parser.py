"""
winsdkenv CLI argument parser.

This module implements the command-line interface for winsdkenv using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from ..core.exceptions import LaunchError
from ..config.parser import ARCH_CHOICES
from ..core.store import ConfigurationStore, RegistryStore
from ..sdk.locator import VERSION_POLICIES

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("winsdkenv")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Exit code used when the interactive shell cannot be launched
EXIT_LAUNCH_FAILURE = 3

OPERATIONS = ("setenv", "env", "deploy", "list-sdks")


class CLI:
    """winsdkenv command-line interface."""

    def __init__(self, store_factory: Callable[[], ConfigurationStore] = RegistryStore):
        """
        Initialize CLI with argument parser.

        Args:
            store_factory: Callable returning the configuration store queried
                by each operation
        """
        self.store_factory = store_factory
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with the operation flags.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="winsdkenv",
            description="Configure the development environment for the Windows SDK",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"winsdkenv {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./winsdkenv.yaml)",
        )

        # Operations
        operations = parser.add_argument_group("operations")
        group = operations.add_mutually_exclusive_group()
        group.add_argument(
            "--setenv",
            dest="operation",
            action="store_const",
            const="setenv",
            help="Apply INCLUDE/LIB and start an interactive shell (default)",
        )
        group.add_argument(
            "--env",
            dest="operation",
            action="store_const",
            const="env",
            help="Print INCLUDE/LIB as KEY=value lines",
        )
        group.add_argument(
            "--deploy",
            dest="operation",
            action="store_const",
            const="deploy",
            help="Copy the ucrt and Windows SDK module maps into the SDK",
        )
        group.add_argument(
            "--list-sdks",
            dest="operation",
            action="store_const",
            const="list-sdks",
            help="List the detected SDK directory and installed versions",
        )
        parser.set_defaults(operation="setenv")

        # SDK selection
        parser.add_argument(
            "--sdk-version",
            metavar="VERSION",
            help="Use this SDK version instead of applying the version policy",
        )
        parser.add_argument(
            "--version-policy",
            choices=VERSION_POLICIES,
            metavar="POLICY",
            help="How to choose among installed versions (first|latest) [default: first]",
        )
        parser.add_argument(
            "--arch",
            choices=ARCH_CHOICES,
            metavar="ARCH",
            help="Library architecture (x64|x86|arm64|arm|host) [default: x64]",
        )
        parser.add_argument(
            "--shell",
            metavar="PATH",
            help="Shell started by --setenv (default: COMSPEC or SHELL)",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)

        Raises:
            SystemExit: If the interactive shell cannot be launched
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        parsed_args.store_factory = self.store_factory

        try:
            from .utils import resolve_settings

            parsed_args.settings = resolve_settings(parsed_args)
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except LaunchError as e:
            logger.critical(f"Fatal: {e}")
            raise SystemExit(EXIT_LAUNCH_FAILURE)
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate operation handler.

        Args:
            args: Parsed arguments with operation field

        Returns:
            Exit code from operation handler
        """
        command_map = {
            "setenv": "winsdkenv.cli.commands.setenv",
            "env": "winsdkenv.cli.commands.env",
            "deploy": "winsdkenv.cli.commands.deploy",
            "list-sdks": "winsdkenv.cli.commands.list_sdks",
        }

        module_name = command_map.get(args.operation)
        if not module_name:
            logger.error(f"Unknown operation: {args.operation}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
