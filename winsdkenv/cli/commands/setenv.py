"""
Setenv command implementation.

Applies INCLUDE and LIB to the process environment and replaces the process
with an interactive shell.
"""

import logging

from ...sdk.materializer import apply_and_relaunch, compute_search_paths
from ..utils import select_sdk

logger = logging.getLogger(__name__)


def run(args):
    """
    Run the setenv command. Does not return on success.

    Args:
        args: Parsed command-line arguments

    Raises:
        LaunchError: If the shell cannot be launched
    """
    root, version = select_sdk(args)
    logger.debug(f"Using Windows SDK {version} at {root}")

    env_set = compute_search_paths(root, version, args.settings.arch)
    apply_and_relaunch(env_set, shell=args.settings.shell)
