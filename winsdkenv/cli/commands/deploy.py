"""
Deploy command implementation.

Copies the ucrt and Windows SDK module maps from the toolchain's SDKROOT
into the selected SDK version.
"""

import logging

from ...core.process import ProcessEnvironment
from ...sdk.materializer import deploy_module_maps
from ..utils import select_sdk

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the deploy command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        EnvironmentVariableError: If SDKROOT is unset and not configured
        CopyError: If a present module map cannot be copied
    """
    toolchain_root = args.settings.toolchain_root or ProcessEnvironment().get("SDKROOT")
    root, version = select_sdk(args)

    result = deploy_module_maps(toolchain_root, root, version)
    logger.info(
        f"Deployed {len(result.copied)} module map(s), skipped {len(result.skipped)}"
    )
    return 0
