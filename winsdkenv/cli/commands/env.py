"""
Env command implementation.

Prints the INCLUDE and LIB variables for the selected SDK version.
"""

import logging

from ...sdk.materializer import compute_search_paths, print_environment
from ..utils import select_sdk

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the env command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    root, version = select_sdk(args)
    logger.debug(f"Computing search paths for {root} {version} ({args.settings.arch})")

    print_environment(compute_search_paths(root, version, args.settings.arch))
    return 0
