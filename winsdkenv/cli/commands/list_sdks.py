"""
List-SDKs command implementation.

Prints the detected Windows SDK directory and every installed version in
the order the registry enumerates them.
"""

import logging

from ...sdk.locator import list_versions, locate_installation_root

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list-sdks command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    store = args.store_factory()

    root = locate_installation_root(store)
    print(f"Detected Windows 10 SDK Dir: {root}")

    print("Detected Windows 10 SDK Versions:")
    for version in list_versions(store):
        print(f"  - {version}")

    return 0
